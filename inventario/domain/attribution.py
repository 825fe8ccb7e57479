# inventario/domain/attribution.py
"""
Atribuição de custo FIFO às vendas.

Dois modos sobre o ``LotLedger``:

- agregado: custo de tudo o que já foi vendido de um produto, sempre a
  partir do início dos lotes (``aggregate_cost``);
- sequencial: transação a transação na ordem do log, com um deslocamento
  por produto para que nenhuma unidade de lote seja atribuída a duas
  vendas (``SequentialAttributor``).

Quando o produto não existe mais no catálogo o resultado é um
``AttributionGap`` (linha degradada no relatório), nunca uma exceção.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Iterator, Optional, Union

from inventario.domain.ledger import FifoMatch, LotLedger
from inventario.domain.models import SaleTransaction

PRODUCT_MISSING = "product_missing"

LedgerLookup = Callable[[str], Optional[LotLedger]]


@dataclass(frozen=True)
class AttributionGap:
    """Custo histórico que não pôde ser calculado."""
    product_name: str
    reason: str = PRODUCT_MISSING


@dataclass(frozen=True)
class Attribution:
    """Receita, custo casado e lucro de uma venda (ou de um grupo de vendas)."""
    product_name: str
    quantity: int
    revenue: float
    cost: float
    units_unmatched: int = 0

    @property
    def profit(self) -> float:
        return self.revenue - self.cost

    @property
    def fully_matched(self) -> bool:
        return self.units_unmatched == 0


AttributionResult = Union[Attribution, AttributionGap]


def aggregate_cost(ledger: LotLedger, total_sold: int) -> FifoMatch:
    """Custo FIFO de ``total_sold`` unidades contadas desde o primeiro lote."""
    return ledger.consume_fifo(0, total_sold)


def attribute_aggregate(
    product_name: str,
    total_sold: int,
    revenue: float,
    lookup: LedgerLookup,
) -> AttributionResult:
    """Atribuição agregada de um produto, ou lacuna se ele não existe mais."""
    ledger = lookup(product_name)
    if ledger is None:
        return AttributionGap(product_name)
    match = aggregate_cost(ledger, total_sold)
    return Attribution(
        product_name=product_name,
        quantity=total_sold,
        revenue=revenue,
        cost=match.cost_total,
        units_unmatched=match.units_unmatched,
    )


class SequentialAttributor:
    """Reproduz o log de vendas em ordem, avançando um deslocamento por produto.

    O mapa de deslocamentos vive só nesta instância: cada relatório cria um
    atribuidor novo, de modo que lotes e log nunca guardam estado derivado.
    O livro de lotes de cada produto é copiado na primeira venda vista para
    que todo o replay enxergue o mesmo histórico.
    """

    def __init__(self, lookup: LedgerLookup):
        self._lookup = lookup
        self._offsets: Dict[str, int] = {}
        self._ledgers: Dict[str, LotLedger] = {}

    def offset(self, product_name: str) -> int:
        return self._offsets.get(product_name, 0)

    def _ledger_for(self, product_name: str) -> Optional[LotLedger]:
        if product_name not in self._ledgers:
            ledger = self._lookup(product_name)
            if ledger is None:
                return None
            self._ledgers[product_name] = ledger.copy()
            self._offsets[product_name] = 0
        return self._ledgers[product_name]

    def attribute(self, tx: SaleTransaction) -> AttributionResult:
        """Atribui custo a uma venda e avança o deslocamento do produto.

        O deslocamento avança ``tx.quantity`` mesmo quando os lotes se
        esgotam antes de casar todas as unidades.
        """
        ledger = self._ledger_for(tx.product_name)
        if ledger is None:
            return AttributionGap(tx.product_name)
        start = self._offsets[tx.product_name]
        match = ledger.consume_fifo(start, tx.quantity)
        self._offsets[tx.product_name] = start + tx.quantity
        return Attribution(
            product_name=tx.product_name,
            quantity=tx.quantity,
            revenue=tx.total,
            cost=match.cost_total,
            units_unmatched=match.units_unmatched,
        )

    def attribute_all(self, sales: Iterable[SaleTransaction]) -> Iterator[AttributionResult]:
        for tx in sales:
            yield self.attribute(tx)
