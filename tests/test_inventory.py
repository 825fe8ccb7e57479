"""
Testes da fachada Inventory: compras, vendas, edição e exclusão.
"""

from math import isclose

import pytest

from inventario.domain.attribution import aggregate_cost
from inventario.domain.errors import (
    InsufficientStockError,
    InvalidPriceError,
    InvalidQuantityError,
    MissingProductDataError,
    NotFoundError,
)
from inventario.usecases.inventory import Inventory


@pytest.fixture
def inv():
    inv = Inventory()
    inv.record_purchase("Widget", 10, 2.00, description="peça", sale_price=5.00)
    return inv


def test_cenario_widget(inv):
    inv.record_purchase("Widget", 5, 3.00)
    tx = inv.record_sale("Widget", 12)

    p = inv.get_product("Widget")
    assert p.quantity == 3
    assert p.lots.as_tuples() == [(10, 2.0), (5, 3.0)]

    cost = aggregate_cost(p.lots, 12).cost_total
    assert isclose(tx.total, 60.0)
    assert isclose(cost, 26.0)
    assert isclose(tx.total - cost, 34.0)


def test_compra_de_produto_novo_registra_transacao(inv):
    compras = inv.purchases()
    assert len(compras) == 1
    assert compras[0].product_name == "Widget"
    assert compras[0].quantity == 10
    assert isclose(compras[0].total_cost, 20.0)


def test_compra_mesmo_preco_funde_lote(inv):
    inv.record_purchase("Widget", 5, 2.00)
    assert inv.get_product("Widget").lots.as_tuples() == [(15, 2.0)]
    assert len(inv.purchases()) == 2


def test_reposicao_ignora_descricao_e_preco_de_venda(inv):
    inv.record_purchase("Widget", 1, 2.00, description="outra", sale_price=99.0)
    p = inv.get_product("Widget")
    assert p.description == "peça"
    assert p.sale_price == 5.0


@pytest.mark.parametrize("description,sale_price", [(None, 5.0), ("peça", None)])
def test_produto_novo_exige_dados(description, sale_price):
    inv = Inventory()
    with pytest.raises(MissingProductDataError):
        inv.record_purchase("Novo", 1, 1.0, description=description, sale_price=sale_price)
    assert "Novo" not in inv
    assert inv.purchases() == []


@pytest.mark.parametrize("qty", [0, -3])
def test_compra_quantidade_invalida_nao_altera_nada(inv, qty):
    with pytest.raises(InvalidQuantityError):
        inv.record_purchase("Widget", qty, 2.0)
    assert inv.get_product("Widget").quantity == 10
    assert len(inv.purchases()) == 1


def test_compra_preco_negativo(inv):
    with pytest.raises(InvalidPriceError):
        inv.record_purchase("Widget", 1, -2.0)
    assert inv.get_product("Widget").lots.as_tuples() == [(10, 2.0)]


def test_venda_produto_inexistente():
    inv = Inventory()
    with pytest.raises(NotFoundError):
        inv.record_sale("Nada", 1)
    assert inv.sales() == []


def test_venda_acima_do_estoque(inv):
    with pytest.raises(InsufficientStockError) as exc:
        inv.record_sale("Widget", 11)
    assert exc.value.requested == 11
    assert exc.value.available == 10
    assert inv.get_product("Widget").quantity == 10
    assert inv.sales() == []


def test_venda_quantidade_zero_rejeitada(inv):
    with pytest.raises(InvalidQuantityError):
        inv.record_sale("Widget", 0)
    assert inv.sales() == []


def test_venda_esgota_estoque(inv):
    inv.record_sale("Widget", 10)
    assert inv.get_product("Widget").quantity == 0
    with pytest.raises(InsufficientStockError):
        inv.record_sale("Widget", 1)


def test_conservacao_de_estoque(inv):
    inv.record_purchase("Widget", 7, 2.5)
    inv.record_sale("Widget", 4)
    inv.record_purchase("Widget", 3, 2.0)
    inv.record_sale("Widget", 6)

    comprado = sum(tx.quantity for tx in inv.purchases())
    vendido = sum(tx.quantity for tx in inv.sales())
    assert inv.get_product("Widget").quantity == comprado - vendido


def test_venda_guarda_preco_do_momento(inv):
    inv.record_sale("Widget", 2)
    inv.edit_product("Widget", sale_price=8.0)
    inv.record_sale("Widget", 1)
    precos = [tx.sale_price for tx in inv.sales()]
    assert precos == [5.0, 8.0]


def test_edicao_parcial(inv):
    p = inv.edit_product("Widget", description="peça nova")
    assert p.description == "peça nova"
    assert p.sale_price == 5.0

    p = inv.edit_product("Widget", sale_price=6.5)
    assert p.description == "peça nova"
    assert p.sale_price == 6.5


def test_edicao_nao_altera_lotes_nem_quantidade(inv):
    inv.edit_product("Widget", description="x", sale_price=1.0)
    p = inv.get_product("Widget")
    assert p.quantity == 10
    assert p.lots.as_tuples() == [(10, 2.0)]


def test_edicao_inexistente(inv):
    with pytest.raises(NotFoundError):
        inv.edit_product("Nada", description="x")


def test_edicao_preco_invalido_mantem_registro(inv):
    with pytest.raises(InvalidPriceError):
        inv.edit_product("Widget", description="nova", sale_price=-1)
    assert inv.get_product("Widget").description == "peça"


def test_exclusao_idempotente_preserva_historico(inv):
    inv.record_sale("Widget", 2)
    assert inv.delete_product("Widget") is True
    assert inv.delete_product("Widget") is False
    assert inv.get_product("Widget") is None
    assert len(inv.sales()) == 1
    assert len(inv.purchases()) == 1


def test_recompra_apos_exclusao_cria_produto_novo(inv):
    inv.delete_product("Widget")
    inv.record_purchase("Widget", 2, 9.0, description="reposta", sale_price=12.0)
    p = inv.get_product("Widget")
    assert p.quantity == 2
    assert p.lots.as_tuples() == [(2, 9.0)]


def test_get_product_devolve_copia(inv):
    p = inv.get_product("Widget")
    p.quantity = 999
    p.lots.append_or_merge(1, 7.0)
    fresh = inv.get_product("Widget")
    assert fresh.quantity == 10
    assert fresh.lots.as_tuples() == [(10, 2.0)]


def test_products_em_ordem_de_cadastro(inv):
    inv.record_purchase("Gadget", 1, 1.0, description="", sale_price=2.0)
    inv.record_purchase("Abacate", 1, 1.0, description="", sale_price=2.0)
    assert [p.name for p in inv.products()] == ["Widget", "Gadget", "Abacate"]
