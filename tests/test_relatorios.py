"""
Testes dos relatórios (produtos, vendas, histórico, compras).
"""

from math import isclose

import pytest

from inventario.domain.attribution import AttributionGap
from inventario.usecases.inventory import Inventory
from inventario.usecases.relatorios import (
    product_report,
    purchase_history,
    purchase_report,
    sales_history,
    sales_report,
)


@pytest.fixture
def inv():
    inv = Inventory()
    inv.record_purchase("Widget", 10, 2.0, description="peça", sale_price=5.0)
    inv.record_purchase("Gadget", 4, 10.0, description="aparelho", sale_price=15.0)
    inv.record_purchase("Widget", 5, 3.0)
    return inv


def test_relatorios_vazios():
    inv = Inventory()
    assert product_report(inv) == []
    rep = sales_report(inv)
    assert rep.lines == []
    assert rep.total_profit == 0.0
    assert sales_history(inv) == []
    assert purchase_report(inv) == []
    assert purchase_history(inv) == []


def test_product_report(inv):
    lines = product_report(inv)
    assert [l.name for l in lines] == ["Widget", "Gadget"]
    assert lines[0].quantity == 15
    assert lines[0].lots == [(10, 2.0), (5, 3.0)]
    assert lines[1].description == "aparelho"


def test_sales_report_agrupa_por_produto(inv):
    inv.record_sale("Gadget", 1)
    inv.record_sale("Widget", 8)
    inv.record_sale("Widget", 4)

    rep = sales_report(inv)
    assert [l.product_name for l in rep.lines] == ["Gadget", "Widget"]

    gadget, widget = rep.lines
    assert gadget.quantity == 1
    assert isclose(gadget.profit, 5.0)
    assert widget.quantity == 12
    assert isclose(widget.revenue, 60.0)
    assert isclose(widget.profit, 34.0)
    assert isclose(rep.total_profit, 39.0)
    assert rep.gaps == []


def test_sales_report_produto_excluido_vira_lacuna(inv):
    inv.record_sale("Widget", 2)
    inv.record_sale("Gadget", 2)
    inv.delete_product("Gadget")

    rep = sales_report(inv)
    widget, gadget = rep.lines
    assert gadget.gap
    assert gadget.profit is None
    assert isinstance(gadget.result, AttributionGap)
    assert isclose(gadget.revenue, 30.0)
    # lacuna não entra no total
    assert isclose(rep.total_profit, widget.profit)
    assert rep.gaps == [gadget]


def test_sales_history_lucro_sequencial(inv):
    inv.record_sale("Widget", 8)
    inv.record_sale("Widget", 4)

    hist = sales_history(inv)
    assert [l.quantity for l in hist] == [8, 4]
    assert isclose(hist[0].result.cost, 16.0)
    assert isclose(hist[1].result.cost, 2 * 2.0 + 2 * 3.0)
    assert isclose(sum(l.profit for l in hist), sales_report(inv).total_profit)


def test_sales_history_uma_lacuna_por_venda_de_produto_excluido(inv):
    inv.record_sale("Gadget", 1)
    inv.record_sale("Widget", 1)
    inv.record_sale("Gadget", 2)
    inv.delete_product("Gadget")

    hist = sales_history(inv)
    assert [l.gap for l in hist] == [True, False, True]
    assert hist[0].sale_price == 15.0


def test_sales_history_usa_preco_do_momento(inv):
    inv.record_sale("Widget", 1)
    inv.edit_product("Widget", sale_price=7.0)
    inv.record_sale("Widget", 1)
    hist = sales_history(inv)
    assert [l.sale_price for l in hist] == [5.0, 7.0]
    assert isclose(hist[1].profit, 7.0 - 2.0)


def test_purchase_report_usa_lotes(inv):
    inv.record_sale("Widget", 3)
    lines = purchase_report(inv)
    widget = lines[0]
    assert widget.product_name == "Widget"
    # vendas não consomem lotes
    assert widget.quantity == 15
    assert isclose(widget.total_cost, 35.0)


def test_purchase_report_ignora_excluidos(inv):
    inv.delete_product("Gadget")
    assert [l.product_name for l in purchase_report(inv)] == ["Widget"]


def test_purchase_history(inv):
    hist = purchase_history(inv)
    assert [(l.product_name, l.quantity, l.purchase_price) for l in hist] == [
        ("Widget", 10, 2.0),
        ("Gadget", 4, 10.0),
        ("Widget", 5, 3.0),
    ]
    assert isclose(hist[2].total_cost, 15.0)
