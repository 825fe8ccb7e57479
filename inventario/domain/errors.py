# inventario/domain/errors.py
"""
Erros de domínio do inventário.

Todas as falhas do núcleo são exceções tipadas derivadas de
``InventarioError``; a camada de interface captura a classe base e
apresenta ``str(erro)`` ao usuário. Lacunas de atribuição de custo em
relatórios NÃO são exceções: ver ``inventario.domain.attribution.AttributionGap``.
"""

from __future__ import annotations

from math import isnan


class InventarioError(Exception):
    """Base de todos os erros do inventário."""


class NotFoundError(InventarioError):
    """Operação referenciou um produto inexistente."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Produto indisponível: {name}")


class DuplicateProductError(InventarioError):
    """Tentativa de criar um produto cujo nome já existe."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Produto já existe: {name}")


class InsufficientStockError(InventarioError):
    """Quantidade vendida maior que a quantidade em estoque."""

    def __init__(self, name: str, requested: int, available: int):
        self.name = name
        self.requested = requested
        self.available = available
        super().__init__(
            f"Estoque insuficiente para {name}: solicitado {requested}, disponível {available}"
        )


class InvalidQuantityError(InventarioError):
    """Quantidade não positiva (ou deslocamento negativo)."""

    def __init__(self, quantity):
        self.quantity = quantity
        super().__init__(f"Quantidade inválida: {quantity}")


class InvalidPriceError(InventarioError):
    """Preço negativo."""

    def __init__(self, price):
        self.price = price
        super().__init__(f"Preço inválido: {price}")


class MissingProductDataError(InventarioError):
    """Produto novo sem descrição ou preço de venda."""

    def __init__(self, name: str, field: str):
        self.name = name
        self.field = field
        super().__init__(f"Produto novo {name} requer o campo: {field}")


def check_quantity(quantity: int) -> int:
    """Valida quantidade inteira positiva."""
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
        raise InvalidQuantityError(quantity)
    return quantity


def check_price(price: float) -> float:
    """Valida preço não negativo e devolve como float."""
    try:
        value = float(price)
    except (TypeError, ValueError):
        raise InvalidPriceError(price) from None
    if value < 0 or isnan(value):
        raise InvalidPriceError(price)
    return value
