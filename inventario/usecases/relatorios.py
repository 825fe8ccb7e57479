# inventario/usecases/relatorios.py
"""
Relatórios do inventário:
- produtos (cadastro, estoque e lotes)
- vendas por produto (lucro no modo agregado)
- histórico de vendas (lucro por transação no modo sequencial)
- compras por produto
- histórico de compras

Todas as funções são leituras puras sobre um ``Inventory`` e devolvem
dataclasses; a formatação fica com os adapters.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from inventario.domain.attribution import (
    Attribution,
    AttributionGap,
    AttributionResult,
    LedgerLookup,
    SequentialAttributor,
    attribute_aggregate,
)
from inventario.domain.ledger import LotLedger
from inventario.usecases.inventory import Inventory
from inventario.infra.logger import log_system_event


# ----------------------
# linhas de relatório
# ----------------------

@dataclass(frozen=True)
class ProductReportLine:
    name: str
    description: str
    quantity: int
    sale_price: float
    lots: List[Tuple[int, float]]


@dataclass(frozen=True)
class _AttributedLine:
    result: AttributionResult

    @property
    def gap(self) -> bool:
        return isinstance(self.result, AttributionGap)

    @property
    def profit(self) -> Optional[float]:
        """Lucro da linha, ou None quando o custo não pôde ser atribuído."""
        if isinstance(self.result, Attribution):
            return self.result.profit
        return None

    @property
    def units_unmatched(self) -> int:
        if isinstance(self.result, Attribution):
            return self.result.units_unmatched
        return 0


@dataclass(frozen=True)
class SalesReportLine(_AttributedLine):
    product_name: str = ""
    quantity: int = 0
    revenue: float = 0.0


@dataclass(frozen=True)
class SalesReport:
    lines: List[SalesReportLine]
    total_profit: float

    @property
    def gaps(self) -> List[SalesReportLine]:
        return [line for line in self.lines if line.gap]


@dataclass(frozen=True)
class SaleHistoryLine(_AttributedLine):
    product_name: str = ""
    quantity: int = 0
    sale_price: float = 0.0


@dataclass(frozen=True)
class PurchaseReportLine:
    product_name: str
    quantity: int
    total_cost: float


@dataclass(frozen=True)
class PurchaseHistoryLine:
    product_name: str
    quantity: int
    purchase_price: float
    total_cost: float


# ----------------------
# util
# ----------------------

def _ledger_lookup(inventory: Inventory) -> LedgerLookup:
    def lookup(name: str) -> Optional[LotLedger]:
        product = inventory.get_product(name)
        return product.lots if product is not None else None
    return lookup


# ----------------------
# 1) Produtos
# ----------------------

def product_report(inventory: Inventory) -> List[ProductReportLine]:
    """Produtos cadastrados, na ordem de cadastro."""
    lines = [
        ProductReportLine(
            name=p.name,
            description=p.description,
            quantity=p.quantity,
            sale_price=p.sale_price,
            lots=p.lots.as_tuples(),
        )
        for p in inventory.products()
    ]
    log_system_event("product_report", {"produtos": len(lines)})
    return lines


# ----------------------
# 2) Vendas por produto
# ----------------------

def sales_report(inventory: Inventory) -> SalesReport:
    """
    Vendas agrupadas por produto (ordem da primeira venda) com lucro FIFO
    agregado: o custo de toda a quantidade vendida é casado desde o
    primeiro lote. Produtos excluídos viram ``AttributionGap`` e não
    entram no lucro total.
    """
    totals: Dict[str, Tuple[int, float]] = {}
    for tx in inventory.sales():
        qty, revenue = totals.get(tx.product_name, (0, 0.0))
        totals[tx.product_name] = (qty + tx.quantity, revenue + tx.total)

    lookup = _ledger_lookup(inventory)
    lines: List[SalesReportLine] = []
    total_profit = 0.0
    for name, (qty, revenue) in totals.items():
        result = attribute_aggregate(name, qty, revenue, lookup)
        line = SalesReportLine(result=result, product_name=name, quantity=qty, revenue=revenue)
        if line.gap:
            log_system_event("sales_report_gap", {"produto": name}, level="warning")
        else:
            total_profit += line.profit
        lines.append(line)

    log_system_event("sales_report", {
        "produtos": len(lines),
        "lacunas": sum(1 for line in lines if line.gap),
        "lucro_total": total_profit,
    })
    return SalesReport(lines=lines, total_profit=total_profit)


# ----------------------
# 3) Histórico de vendas
# ----------------------

def sales_history(inventory: Inventory) -> List[SaleHistoryLine]:
    """Cada venda na ordem do log com lucro FIFO sequencial."""
    attributor = SequentialAttributor(_ledger_lookup(inventory))
    lines: List[SaleHistoryLine] = []
    for tx in inventory.sales():
        result = attributor.attribute(tx)
        lines.append(SaleHistoryLine(
            result=result,
            product_name=tx.product_name,
            quantity=tx.quantity,
            sale_price=tx.sale_price,
        ))

    log_system_event("sales_history", {
        "vendas": len(lines),
        "lacunas": sum(1 for line in lines if line.gap),
    })
    return lines


# ----------------------
# 4) Compras por produto
# ----------------------

def purchase_report(inventory: Inventory) -> List[PurchaseReportLine]:
    """Quantidade e custo totais dos lotes de cada produto existente."""
    lines = [
        PurchaseReportLine(
            product_name=p.name,
            quantity=p.lots.total_quantity,
            total_cost=p.lots.total_cost,
        )
        for p in inventory.products()
    ]
    log_system_event("purchase_report", {"produtos": len(lines)})
    return lines


# ----------------------
# 5) Histórico de compras
# ----------------------

def purchase_history(inventory: Inventory) -> List[PurchaseHistoryLine]:
    lines = [
        PurchaseHistoryLine(
            product_name=tx.product_name,
            quantity=tx.quantity,
            purchase_price=tx.purchase_price,
            total_cost=tx.total_cost,
        )
        for tx in inventory.purchases()
    ]
    log_system_event("purchase_history", {"compras": len(lines)})
    return lines
