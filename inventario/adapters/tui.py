# inventario/adapters/tui.py
"""
TUI (Text User Interface) do inventário usando Rich.

Interface interativa baseada em menus para operações do sistema:
- Gestão de inventário (consultar, editar e excluir produto)
- Vendas
- Compras (produto novo ou reposição)
- Relatórios

Em qualquer prompt, digitar ``x`` aborta a operação corrente (ou sai do
menu). Entradas inválidas são informadas e a operação é abandonada; o
núcleo só recebe operações completas e validadas.
"""

from __future__ import annotations

from typing import Callable, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt
from rich.align import Align

from inventario.config import ESCAPE, SKIP
from inventario.adapters.auth import authorize
from inventario.adapters.parsers import InputError, parse_name, parse_price, parse_quantity
from inventario.adapters.render import (
    fmt_num,
    render_product,
    render_product_report,
    render_purchase_history,
    render_purchase_report,
    render_sales_history,
    render_sales_report,
)
from inventario.domain.errors import InventarioError
from inventario.usecases.inventory import Inventory
from inventario.usecases.relatorios import (
    product_report,
    purchase_history,
    purchase_report,
    sales_history,
    sales_report,
)
from inventario.infra.logger import log_system_event

Ask = Callable[..., str]


class InventarioTUI:
    """Text User Interface para o inventário."""

    def __init__(
        self,
        inventory: Optional[Inventory] = None,
        console: Optional[Console] = None,
        ask: Optional[Ask] = None,
    ):
        self.console = console or Console()
        self.inventory = inventory if inventory is not None else Inventory()
        self._ask = ask or self._rich_ask

    def _rich_ask(self, label: str, password: bool = False) -> str:
        return Prompt.ask(label, console=self.console, password=password)

    def ask(self, label: str) -> Optional[str]:
        """Lê uma resposta; None quando o usuário digitou o escape."""
        answer = (self._ask(f"{label}, ou {ESCAPE} para sair") or "").strip()
        if answer == ESCAPE:
            return None
        return answer

    def login(self) -> bool:
        return authorize(
            lambda: self._ask(f"Senha, ou {ESCAPE} para sair", password=True),
            escape=ESCAPE,
        )

    def run(self) -> None:
        """Inicia a interface principal."""
        self.show_banner()

        while True:
            try:
                choice = self.show_main_menu()
                if choice is None:
                    self.console.print("\n[green]Saindo do sistema...[/green]")
                    break
                elif choice == "1":
                    self.menu_inventario()
                elif choice == "2":
                    self.vender()
                elif choice == "3":
                    self.comprar()
                elif choice == "4":
                    self.menu_relatorios()
                else:
                    self.console.print("[red]Opção inválida![/red]")
            except (KeyboardInterrupt, EOFError):
                self.console.print("\n[red]Saindo...[/red]")
                break

    def show_banner(self) -> None:
        """Exibe banner do sistema."""
        banner = Panel.fit(
            "[bold blue]SISTEMA DE INVENTÁRIO[/bold blue]\n"
            "[cyan]Compras, vendas e lucro por lotes FIFO[/cyan]",
            border_style="blue"
        )
        self.console.print("\n")
        self.console.print(Align.center(banner))
        self.console.print("\n")

    def show_main_menu(self) -> Optional[str]:
        """Exibe menu principal e retorna escolha do usuário."""
        menu = Panel(
            "[bold]MENU PRINCIPAL[/bold]\n\n"
            "[yellow]1.[/yellow] Gestão de Inventário\n"
            "[yellow]2.[/yellow] Vendas\n"
            "[yellow]3.[/yellow] Compras\n"
            "[yellow]4.[/yellow] Relatórios\n"
            f"[yellow]{ESCAPE}.[/yellow] Sair\n",
            title="Opções",
            border_style="green"
        )
        self.console.print(menu)
        return self.ask("Escolha uma opção")

    def menu_inventario(self) -> None:
        """Menu de gestão de inventário."""
        while True:
            menu = Panel(
                "[bold]GESTÃO DE INVENTÁRIO[/bold]\n\n"
                "[yellow]1.[/yellow] Consultar produto\n"
                "[yellow]2.[/yellow] Editar produto\n"
                "[yellow]3.[/yellow] Excluir produto\n"
                f"[yellow]{ESCAPE}.[/yellow] Voltar\n",
                title="Inventário",
                border_style="cyan"
            )
            self.console.print(menu)
            choice = self.ask("Escolha uma opção")

            if choice is None:
                break
            elif choice == "1":
                self.consultar_produto()
            elif choice == "2":
                self.editar_produto()
            elif choice == "3":
                self.excluir_produto()
            else:
                self.console.print("[red]Opção inválida![/red]")

    def menu_relatorios(self) -> None:
        """Menu de relatórios."""
        while True:
            menu = Panel(
                "[bold]RELATÓRIOS[/bold]\n\n"
                "[yellow]1.[/yellow] Relatório de produtos\n"
                "[yellow]2.[/yellow] Relatório de vendas por produto\n"
                "[yellow]3.[/yellow] Histórico de vendas\n"
                "[yellow]4.[/yellow] Relatório de compras por produto\n"
                "[yellow]5.[/yellow] Histórico de compras\n"
                f"[yellow]{ESCAPE}.[/yellow] Voltar\n",
                title="Relatórios",
                border_style="red"
            )
            self.console.print(menu)
            choice = self.ask("Escolha uma opção")

            if choice is None:
                break
            elif choice == "1":
                render_product_report(self.console, product_report(self.inventory))
            elif choice == "2":
                render_sales_report(self.console, sales_report(self.inventory))
            elif choice == "3":
                render_sales_history(self.console, sales_history(self.inventory))
            elif choice == "4":
                render_purchase_report(self.console, purchase_report(self.inventory))
            elif choice == "5":
                render_purchase_history(self.console, purchase_history(self.inventory))
            else:
                self.console.print("[red]Opção inválida![/red]")

    # -----------------------
    # operações
    # -----------------------

    def _erro(self, e: Exception) -> None:
        self.console.print(f"[red]>>> {escape(str(e))}[/red]")

    def consultar_produto(self) -> None:
        """Exibe informações do produto."""
        name = self.ask("Nome do produto a consultar")
        if name is None:
            return
        product = self.inventory.get_product(name)
        if product is None:
            self.console.print(f"[red]>>> Produto indisponível: {escape(name)}[/red]")
            return
        render_product(self.console, product)

    def editar_produto(self) -> None:
        """Edita descrição e/ou preço de venda do produto."""
        name = self.ask("Nome do produto a editar")
        if name is None:
            return
        product = self.inventory.get_product(name)
        if product is None:
            self.console.print(f"[red]>>> Produto indisponível: {escape(name)}[/red]")
            return
        render_product(self.console, product)

        description = self.ask(f"Nova descrição ({SKIP} para manter)")
        if description is None:
            return
        raw_price = self.ask(f"Novo preço de venda ({SKIP} para manter)")
        if raw_price is None:
            return

        try:
            sale_price = None if raw_price == SKIP else parse_price(raw_price, "preço de venda")
            updated = self.inventory.edit_product(
                name,
                description=None if description == SKIP else description,
                sale_price=sale_price,
            )
        except (InputError, InventarioError) as e:
            self._erro(e)
            return
        self.console.print("[green]✓ Produto editado![/green]")
        render_product(self.console, updated)

    def excluir_produto(self) -> None:
        """Remove um produto do sistema."""
        name = self.ask("Nome do produto a excluir")
        if name is None:
            return
        self.inventory.delete_product(name)
        self.console.print(f"[green]>>> Produto excluído se existia: {escape(name)}[/green]")

    def vender(self) -> None:
        """Vende um produto disponível no sistema."""
        name = self.ask("Nome do produto a vender")
        if name is None:
            return
        product = self.inventory.get_product(name)
        if product is None:
            self.console.print(f"[red]>>> Produto indisponível: {escape(name)}[/red]")
            return
        render_product(self.console, product)

        raw_qty = self.ask("Quantidade")
        if raw_qty is None:
            return
        try:
            tx = self.inventory.record_sale(name, parse_quantity(raw_qty))
        except (InputError, InventarioError) as e:
            self._erro(e)
            return
        self.console.print(
            f"[green]>>> Produto vendido: {escape(tx.product_name)}; "
            f"Quantidade: {tx.quantity}; Preço: {fmt_num(tx.sale_price)}; "
            f"Total: {fmt_num(tx.total)}[/green]"
        )

    def comprar(self) -> None:
        """Compra um produto novo ou repõe um existente."""
        raw_name = self.ask("Nome do produto a comprar")
        if raw_name is None:
            return
        try:
            name = parse_name(raw_name)
        except InputError as e:
            self._erro(e)
            return

        description = None
        sale_price = None
        if name in self.inventory:
            self.console.print(f"[yellow]Produto já existe: {escape(name)}[/yellow]")
            if self.ask("Digite qualquer valor para adicionar mais deste produto") is None:
                return
            raw_qty = self.ask("Quantidade")
            if raw_qty is None:
                return
            raw_cost = self.ask("Preço de compra")
            if raw_cost is None:
                return
        else:
            description = self.ask("Descrição do produto")
            if description is None:
                return
            raw_qty = self.ask("Quantidade")
            if raw_qty is None:
                return
            raw_sale = self.ask("Preço de venda")
            if raw_sale is None:
                return
            raw_cost = self.ask("Preço de compra")
            if raw_cost is None:
                return

        try:
            quantity = parse_quantity(raw_qty)
            if description is not None:
                sale_price = parse_price(raw_sale, "preço de venda")
            purchase_price = parse_price(raw_cost, "preço de compra")
            tx = self.inventory.record_purchase(
                name, quantity, purchase_price,
                description=description, sale_price=sale_price,
            )
        except (InputError, InventarioError) as e:
            self._erro(e)
            return
        self.console.print(
            f"[green]>>> Produto adicionado: {escape(tx.product_name)}; "
            f"Quantidade: {tx.quantity}; Preço de compra: {fmt_num(tx.purchase_price)}; "
            f"Custo total: {fmt_num(tx.total_cost)}[/green]"
        )


def main_tui(console: Optional[Console] = None, ask: Optional[Ask] = None) -> bool:
    """Ponto de entrada principal da TUI. Retorna False se o login foi abandonado."""
    tui = InventarioTUI(console=console, ask=ask)
    if not tui.login():
        log_system_event("session_denied")
        return False
    log_system_event("session_start")
    tui.run()
    log_system_event("session_end")
    return True
