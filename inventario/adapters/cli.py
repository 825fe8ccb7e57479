# inventario/adapters/cli.py
"""
CLI do inventário (Typer).

Comandos principais:
- tui                      -> sessão interativa (padrão quando nenhum comando é dado)
- relatorio <csv|xlsx>     -> replay de uma planilha de movimentos num inventário
                              novo em memória e exibição dos relatórios
- logs                     -> mostra as últimas linhas de um arquivo de log
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

import typer
from rich.console import Console

from inventario.config import DEFAULTS
from inventario.adapters.parsers import InputError
from inventario.adapters.render import (
    render_batch_result,
    render_product_report,
    render_purchase_history,
    render_purchase_report,
    render_sales_history,
    render_sales_report,
)
from inventario.usecases.importar_movimentos import run_movimentos_lote
from inventario.usecases.inventory import Inventory
from inventario.usecases.relatorios import (
    product_report,
    purchase_history,
    purchase_report,
    sales_history,
    sales_report,
)
from inventario.infra import logger


app = typer.Typer(help="Inventário: compras, vendas e lucro por lotes FIFO")
console = Console()


class TipoRelatorio(str, Enum):
    produtos = "produtos"
    vendas = "vendas"
    historico_vendas = "historico-vendas"
    compras = "compras"
    historico_compras = "historico-compras"
    todos = "todos"


class TipoLog(str, Enum):
    transactions = "transactions"
    compras = "compras"
    vendas = "vendas"
    system = "system"


# -----------------------
# sessão interativa
# -----------------------

@app.callback(invoke_without_command=True)
def _default(ctx: typer.Context):
    """Sem subcomando, abre a sessão interativa."""
    if ctx.invoked_subcommand is None:
        cmd_tui()


@app.command("tui")
def cmd_tui():
    """Inicia a interface terminal interativa (pede a senha antes)."""
    from inventario.adapters.tui import main_tui
    try:
        if not main_tui(console=console):
            raise typer.Exit(code=1)
    except KeyboardInterrupt:
        typer.echo("\nSaindo...")
        raise typer.Exit(0)


# -----------------------
# relatórios em lote
# -----------------------

def _print_reports(inventory: Inventory, tipo: TipoRelatorio) -> None:
    todos = tipo == TipoRelatorio.todos
    if todos or tipo == TipoRelatorio.produtos:
        render_product_report(console, product_report(inventory))
    if todos or tipo == TipoRelatorio.vendas:
        render_sales_report(console, sales_report(inventory))
    if todos or tipo == TipoRelatorio.historico_vendas:
        render_sales_history(console, sales_history(inventory))
    if todos or tipo == TipoRelatorio.compras:
        render_purchase_report(console, purchase_report(inventory))
    if todos or tipo == TipoRelatorio.historico_compras:
        render_purchase_history(console, purchase_history(inventory))


@app.command("relatorio")
def cmd_relatorio(
    path: str = typer.Argument(..., help="Planilha de MOVIMENTOS (CSV ou XLSX)"),
    tipo: TipoRelatorio = typer.Option(TipoRelatorio.todos, "--tipo", help="Relatório a exibir"),
):
    """Aplica os movimentos da planilha e exibe o(s) relatório(s)."""
    if not Path(path).exists():
        typer.echo(f"Arquivo não encontrado: {path}")
        raise typer.Exit(code=1)
    inventory = Inventory()
    try:
        info = run_movimentos_lote(path, inventory)
    except InputError as e:
        typer.echo(str(e))
        raise typer.Exit(code=1)
    render_batch_result(console, info)
    _print_reports(inventory, tipo)


# -----------------------
# logs
# -----------------------

@app.command("logs")
def cmd_logs(
    tipo: TipoLog = typer.Option(TipoLog.transactions, "--tipo", help="Arquivo de log"),
    linhas: int = typer.Option(DEFAULTS.log_linhas, "--linhas", help="Quantidade de linhas"),
):
    """Mostra as linhas mais recentes de um log."""
    summary = logger.get_log_summary(tipo.value, lines=linhas)
    if summary is None:
        typer.echo("Logging desabilitado (defina INVENTARIO_LOG=1).")
        return
    typer.echo(summary)


# Entry point opcional:
def main():
    app()


if __name__ == "__main__":
    main()
