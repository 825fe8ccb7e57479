# inventario/adapters/render.py
"""
Renderização (Rich) dos resultados do inventário.

Funções usadas pela TUI e pela CLI para exibir produtos, relatórios e o
resumo do replay em lote. Nenhuma delas altera estado.
"""

from __future__ import annotations

from typing import Any, Dict, List

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich import box

from inventario.domain.models import Product
from inventario.usecases.relatorios import (
    ProductReportLine,
    PurchaseHistoryLine,
    PurchaseReportLine,
    SaleHistoryLine,
    SalesReport,
)

GAP_TEXT = "[bold red]Erro (impossível calcular)[/]"


def fmt_num(val: float) -> str:
    """Formata número no padrão brasileiro (1.234,50)."""
    return f"{val:,.2f}".replace(",", "X").replace(".", ",").replace("X", ".")


def fmt_lots(lots: List[tuple]) -> str:
    return "; ".join(f"{q} × {fmt_num(c)}" for q, c in lots) or "-"


def _profit_cell(line) -> str:
    if line.gap:
        return GAP_TEXT
    text = fmt_num(line.profit)
    if line.units_unmatched:
        text += f" [yellow]({line.units_unmatched} sem lote)[/]"
    return text


def render_product(console: Console, product: Product) -> None:
    table = Table(title="Informações do Produto", box=box.ROUNDED, show_header=False)
    table.add_column("Campo")
    table.add_column("Valor")
    table.add_row("Nome", escape(product.name))
    table.add_row("Descrição", escape(product.description))
    table.add_row("Quantidade em estoque", str(product.quantity))
    table.add_row("Preço de venda", fmt_num(product.sale_price))
    table.add_row("Lotes (qtd × custo)", fmt_lots(product.lots.as_tuples()))
    console.print(table)


def render_product_report(console: Console, lines: List[ProductReportLine]) -> None:
    if not lines:
        console.print(Panel("Nenhum produto cadastrado", title="Relatório de Produtos", border_style="yellow"))
        return
    table = Table(title="Relatório de Produtos", box=box.ROUNDED)
    table.add_column("Produto")
    table.add_column("Descrição")
    table.add_column("Estoque", justify="right")
    table.add_column("Preço de venda", justify="right")
    table.add_column("Lotes (qtd × custo)")
    for line in lines:
        table.add_row(
            escape(line.name),
            escape(line.description),
            str(line.quantity),
            fmt_num(line.sale_price),
            fmt_lots(line.lots),
        )
    console.print(table)


def render_sales_report(console: Console, report: SalesReport) -> None:
    if not report.lines:
        console.print(Panel("Nenhuma venda registrada", title="Relatório de Vendas", border_style="yellow"))
        return
    table = Table(title="Relatório de Vendas por Produto", box=box.ROUNDED)
    table.add_column("Produto")
    table.add_column("Quantidade", justify="right")
    table.add_column("Total vendido", justify="right")
    table.add_column("Lucro", justify="right")
    for line in report.lines:
        table.add_row(escape(line.product_name), str(line.quantity), fmt_num(line.revenue), _profit_cell(line))
    console.print(table)
    console.print(f"[bold]Lucro total:[/bold] {fmt_num(report.total_profit)}")


def render_sales_history(console: Console, lines: List[SaleHistoryLine]) -> None:
    if not lines:
        console.print(Panel("Nenhuma venda registrada", title="Histórico de Vendas", border_style="yellow"))
        return
    table = Table(title="Histórico de Vendas", box=box.ROUNDED)
    table.add_column("#", justify="right")
    table.add_column("Produto")
    table.add_column("Quantidade", justify="right")
    table.add_column("Preço de venda", justify="right")
    table.add_column("Lucro", justify="right")
    for i, line in enumerate(lines, start=1):
        table.add_row(str(i), escape(line.product_name), str(line.quantity),
                      fmt_num(line.sale_price), _profit_cell(line))
    console.print(table)


def render_purchase_report(console: Console, lines: List[PurchaseReportLine]) -> None:
    if not lines:
        console.print(Panel("Nenhum produto cadastrado", title="Relatório de Compras", border_style="yellow"))
        return
    table = Table(title="Relatório de Compras por Produto", box=box.ROUNDED)
    table.add_column("Produto")
    table.add_column("Quantidade", justify="right")
    table.add_column("Custo total", justify="right")
    for line in lines:
        table.add_row(escape(line.product_name), str(line.quantity), fmt_num(line.total_cost))
    console.print(table)


def render_purchase_history(console: Console, lines: List[PurchaseHistoryLine]) -> None:
    if not lines:
        console.print(Panel("Nenhuma compra registrada", title="Histórico de Compras", border_style="yellow"))
        return
    table = Table(title="Histórico de Compras", box=box.ROUNDED)
    table.add_column("#", justify="right")
    table.add_column("Produto")
    table.add_column("Quantidade", justify="right")
    table.add_column("Preço de compra", justify="right")
    table.add_column("Custo total", justify="right")
    for i, line in enumerate(lines, start=1):
        table.add_row(str(i), escape(line.product_name), str(line.quantity),
                      fmt_num(line.purchase_price), fmt_num(line.total_cost))
    console.print(table)


def render_batch_result(console: Console, data: Dict[str, Any]) -> None:
    """Resumo de um processamento em lote."""
    titulo = "Registros em Lote"
    if "tipo" in data:
        titulo = f"{data['tipo']} em Lote"

    panel_content = [
        f"Arquivo: {escape(str(data.get('arquivo', '?')))}",
        f"Total de registros: {data['total']}",
        f"Processados com sucesso: {data.get('sucessos', 0)}",
    ]

    if data.get("erros"):
        panel_content.append(f"Erros: {len(data['erros'])}")

    console.print(Panel("\n".join(panel_content), title=titulo))

    if data.get("erros"):
        erro_table = Table(title="Erros Encontrados")
        erro_table.add_column("Linha")
        erro_table.add_column("Erro")

        for erro in data["erros"]:
            erro_table.add_row(str(erro.get("linha", "?")), escape(erro.get("mensagem", "Erro desconhecido")))

        console.print(erro_table)
