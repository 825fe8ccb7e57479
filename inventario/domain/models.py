# inventario/domain/models.py
"""
Modelos (dataclasses) do domínio.

Observação importante:
- Transações são imutáveis (``frozen``) e guardam uma cópia do preço no
  momento da operação; editar o produto depois não altera o histórico.
- ``Product`` é mutável, mas a fachada ``Inventory`` aplica vendas sobre um
  clone e substitui o registro no catálogo.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import List, Tuple

from inventario.domain.ledger import FifoMatch, LotLedger, PurchaseLot

__all__ = [
    "FifoMatch",
    "LotLedger",
    "Product",
    "PurchaseLot",
    "PurchaseTransaction",
    "SaleTransaction",
]


@dataclass
class Product:
    """Cadastro de produto com seu livro de lotes."""
    name: str
    description: str
    quantity: int
    sale_price: float
    lots: LotLedger = field(default_factory=LotLedger)

    @classmethod
    def new(cls, name: str, description: str, quantity: int, sale_price: float,
            purchase_price: float) -> "Product":
        """Produto recém-comprado: um único lote com toda a quantidade."""
        lots = LotLedger()
        lots.append_or_merge(quantity, purchase_price)
        return cls(name=name, description=description, quantity=quantity,
                   sale_price=float(sale_price), lots=lots)

    def clone(self) -> "Product":
        return replace(self, lots=self.lots.copy())

    @property
    def purchase_prices(self) -> List[Tuple[int, float]]:
        return self.lots.as_tuples()


@dataclass(frozen=True)
class SaleTransaction:
    """Registro de uma venda concluída."""
    product_name: str
    quantity: int
    sale_price: float

    @property
    def total(self) -> float:
        return self.quantity * self.sale_price


@dataclass(frozen=True)
class PurchaseTransaction:
    """Registro de uma compra concluída."""
    product_name: str
    quantity: int
    purchase_price: float

    @property
    def total_cost(self) -> float:
        return self.quantity * self.purchase_price
