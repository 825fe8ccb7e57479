import pytest
from inventario.adapters.parsers import InputError, parse_name, parse_price, parse_quantity


@pytest.mark.parametrize(
    "txt,expected",
    [
        ("12", 12),
        (" 3 ", 3),
        ("+7", 7),
        ("5.0", 5),
        (4, 4),
        (6.0, 6),
    ],
)
def test_parse_quantity(txt, expected):
    assert parse_quantity(txt) == expected


@pytest.mark.parametrize("txt", ["0", "-1", "2.5", "abc", "", None, True, 0, 1.5])
def test_parse_quantity_invalida(txt):
    with pytest.raises(InputError):
        parse_quantity(txt)


@pytest.mark.parametrize(
    "txt,expected",
    [
        ("2.50", 2.5),
        ("2,50", 2.5),
        (" 10 ", 10.0),
        ("0", 0.0),
        (",5", 0.5),
        (3, 3.0),
    ],
)
def test_parse_price(txt, expected):
    assert parse_price(txt) == expected


@pytest.mark.parametrize("txt", ["-1", "1,2,3", "R$ 5", "", None, float("nan")])
def test_parse_price_invalido(txt):
    with pytest.raises(InputError):
        parse_price(txt)


def test_parse_price_mensagem_usa_rotulo():
    with pytest.raises(InputError, match="preço de venda"):
        parse_price("x", "preço de venda")


def test_parse_name():
    assert parse_name("  Widget ") == "Widget"
    with pytest.raises(InputError):
        parse_name("   ")
