"""
Testes da TUI com respostas roteirizadas (sem terminal).
"""

from io import StringIO

import pytest
from rich.console import Console

from inventario import config
from inventario.adapters.tui import InventarioTUI, main_tui
from inventario.usecases.inventory import Inventory


class Roteiro:
    """Substitui o prompt: devolve as respostas em ordem e registra os rótulos."""

    def __init__(self, *answers):
        self.answers = list(answers)
        self.labels = []

    def __call__(self, label, password=False):
        self.labels.append(label)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


def _tui(*answers, inventory=None):
    out = StringIO()
    console = Console(file=out, width=120, color_system=None)
    tui = InventarioTUI(inventory=inventory or Inventory(), console=console, ask=Roteiro(*answers))
    return tui, out


class TestFluxos:
    def test_compra_venda_e_relatorio(self):
        tui, out = _tui(
            "3", "Widget", "peça", "10", "5,00", "2,00",
            "3", "Widget", "s", "5", "3.00",
            "2", "Widget", "12",
            "4", "2", "x",
            "x",
        )
        tui.run()

        p = tui.inventory.get_product("Widget")
        assert p.quantity == 3
        assert p.lots.as_tuples() == [(10, 2.0), (5, 3.0)]

        text = out.getvalue()
        assert "Produto já existe: Widget" in text
        assert "Produto vendido: Widget" in text
        assert "Lucro total:" in text
        assert "34,00" in text
        assert "Saindo do sistema" in text

    def test_escape_aborta_compra_sem_alterar_estado(self):
        tui, _ = _tui("3", "Widget", "peça", "x", "x")
        tui.run()
        assert tui.inventory.products() == []
        assert tui.inventory.purchases() == []

    def test_quantidade_invalida_informa_erro(self):
        inv = Inventory()
        inv.record_purchase("Widget", 2, 1.0, description="", sale_price=3.0)
        tui, out = _tui("2", "Widget", "0", "x", inventory=inv)
        tui.run()
        assert "Quantidade inválida" in out.getvalue()
        assert inv.sales() == []

    def test_venda_acima_do_estoque(self):
        inv = Inventory()
        inv.record_purchase("Widget", 2, 1.0, description="", sale_price=3.0)
        tui, out = _tui("2", "Widget", "3", "x", inventory=inv)
        tui.run()
        assert "Estoque insuficiente" in out.getvalue()
        assert inv.get_product("Widget").quantity == 2

    def test_venda_produto_inexistente(self):
        tui, out = _tui("2", "Nada", "x")
        tui.run()
        assert "Produto indisponível: Nada" in out.getvalue()

    def test_editar_mantem_campos_com_c(self):
        inv = Inventory()
        inv.record_purchase("Widget", 2, 1.0, description="peça", sale_price=3.0)
        tui, _ = _tui("1", "2", "Widget", "c", "4,50", "x", "x", inventory=inv)
        tui.run()
        p = inv.get_product("Widget")
        assert p.description == "peça"
        assert p.sale_price == 4.5

    def test_excluir_produto(self):
        inv = Inventory()
        inv.record_purchase("Widget", 2, 1.0, description="", sale_price=3.0)
        tui, out = _tui("1", "3", "Widget", "x", "x", inventory=inv)
        tui.run()
        assert "Widget" not in inv
        assert "Produto excluído" in out.getvalue()

    def test_fim_da_entrada_encerra(self):
        tui, out = _tui()
        tui.run()
        assert "Saindo" in out.getvalue()

    def test_prompts_oferecem_escape(self):
        tui, _ = _tui("x")
        tui.run()
        assert tui._ask.labels == [f"Escolha uma opção, ou {config.ESCAPE} para sair"]


class TestLogin:
    @pytest.fixture
    def console(self):
        return Console(file=StringIO(), width=120)

    def test_main_tui_login_abandonado(self, console):
        assert main_tui(console=console, ask=Roteiro("errada", "x")) is False

    def test_main_tui_login_e_saida(self, console):
        assert main_tui(console=console, ask=Roteiro(config.SECRET, "x")) is True

    def test_rotulo_da_senha_usa_escape_configurado(self, console, monkeypatch):
        from inventario.adapters import tui as tui_mod
        monkeypatch.setattr(tui_mod, "ESCAPE", "sair")
        roteiro = Roteiro("sair")
        assert main_tui(console=console, ask=roteiro) is False
        assert roteiro.labels == ["Senha, ou sair para sair"]


@pytest.mark.parametrize("submenu", ["1", "4"])
def test_submenu_opcao_invalida(submenu):
    tui, out = _tui(submenu, "9", "x", "x")
    tui.run()
    assert out.getvalue().count("Opção inválida!") == 1
