# inventario/domain/ledger.py
"""
Livro de lotes de compra de um produto.

Cada produto acumula lotes ``(quantidade, custo_unitario)`` na ordem em que
os preços de compra aparecem. Compras com custo unitário idêntico a um lote
existente são fundidas nele em vez de abrir um lote novo; por isso a ordem
FIFO segue a *primeira ocorrência* de cada preço, e não a data de cada
compra quando um preço se repete de forma não consecutiva.

O consumo FIFO é somente leitura: vendas não removem lotes. Quem precisa de
atribuição sequencial guarda o próprio deslocamento (ver
``inventario.domain.attribution``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

from inventario.domain.errors import (
    InvalidQuantityError,
    check_price,
    check_quantity,
)


@dataclass
class PurchaseLot:
    """Lote de unidades compradas a um mesmo custo unitário."""
    quantity: int
    unit_cost: float

    @property
    def total_cost(self) -> float:
        return self.quantity * self.unit_cost


@dataclass(frozen=True)
class FifoMatch:
    """Resultado de uma consulta FIFO."""
    cost_total: float
    units_unmatched: int = 0

    @property
    def fully_matched(self) -> bool:
        return self.units_unmatched == 0


class LotLedger:
    """Sequência ordenada de ``PurchaseLot`` com fusão por custo e consulta FIFO."""

    def __init__(self, lots: Optional[Iterable[PurchaseLot]] = None):
        self._lots: List[PurchaseLot] = []
        for lot in lots or ():
            self.append_or_merge(lot.quantity, lot.unit_cost)

    def append_or_merge(self, quantity: int, unit_cost: float) -> PurchaseLot:
        """Funde a compra num lote de mesmo custo ou acrescenta um lote no fim.

        Args:
            quantity: Unidades compradas (> 0).
            unit_cost: Custo por unidade (>= 0).

        Returns:
            O lote que recebeu as unidades.
        """
        quantity = check_quantity(quantity)
        unit_cost = check_price(unit_cost)
        for lot in self._lots:
            if lot.unit_cost == unit_cost:
                lot.quantity += quantity
                return lot
        lot = PurchaseLot(quantity, unit_cost)
        self._lots.append(lot)
        return lot

    def consume_fifo(self, start_offset: int, request_quantity: int) -> FifoMatch:
        """Custo FIFO de ``request_quantity`` unidades a partir de ``start_offset``.

        Pula cumulativamente as primeiras ``start_offset`` unidades (já
        consumidas por transações anteriores) e consome de forma gulosa dos
        lotes seguintes até satisfazer o pedido ou esgotar os lotes.

        Args:
            start_offset: Unidades já atribuídas anteriormente (>= 0).
            request_quantity: Unidades a atribuir (>= 0).

        Returns:
            ``FifoMatch`` com o custo casado e as unidades que não
            encontraram lote.
        """
        if start_offset < 0:
            raise InvalidQuantityError(start_offset)
        if request_quantity < 0:
            raise InvalidQuantityError(request_quantity)

        remaining = request_quantity
        skip = start_offset
        cost = 0.0
        for lot in self._lots:
            if remaining == 0:
                break
            if skip >= lot.quantity:
                skip -= lot.quantity
                continue
            available = lot.quantity - skip
            skip = 0
            taken = min(remaining, available)
            cost += taken * lot.unit_cost
            remaining -= taken
        return FifoMatch(cost_total=cost, units_unmatched=remaining)

    @property
    def total_quantity(self) -> int:
        return sum(lot.quantity for lot in self._lots)

    @property
    def total_cost(self) -> float:
        return sum(lot.total_cost for lot in self._lots)

    def as_tuples(self) -> List[Tuple[int, float]]:
        return [(lot.quantity, lot.unit_cost) for lot in self._lots]

    def copy(self) -> "LotLedger":
        return LotLedger(PurchaseLot(lot.quantity, lot.unit_cost) for lot in self._lots)

    def __iter__(self) -> Iterator[PurchaseLot]:
        return iter(self._lots)

    def __len__(self) -> int:
        return len(self._lots)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LotLedger):
            return NotImplemented
        return self.as_tuples() == other.as_tuples()

    def __repr__(self) -> str:
        return f"LotLedger({self.as_tuples()!r})"
