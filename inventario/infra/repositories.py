# inventario/infra/repositories.py
"""
Repositórios em memória do inventário.

Classes:
- ProductCatalog
- TransactionLog

Todo o estado vive apenas durante o processo; não há persistência.
"""

from __future__ import annotations

from typing import Dict, Generic, Iterator, List, Optional, TypeVar

from inventario.domain.errors import (
    DuplicateProductError,
    NotFoundError,
    check_price,
    check_quantity,
)
from inventario.domain.models import Product


# -------------------------
# Produto
# -------------------------

class ProductCatalog:
    """Mapa nome -> ``Product`` em ordem de cadastro."""

    def __init__(self):
        self._products: Dict[str, Product] = {}

    def create(self, name: str, description: str, quantity: int,
               sale_price: float, purchase_price: float) -> Product:
        if name in self._products:
            raise DuplicateProductError(name)
        product = Product.new(
            name,
            description,
            check_quantity(quantity),
            check_price(sale_price),
            check_price(purchase_price),
        )
        self._products[name] = product
        return product

    def restock(self, name: str, quantity: int, purchase_price: float) -> Product:
        product = self._products.get(name)
        if product is None:
            raise NotFoundError(name)
        product.lots.append_or_merge(quantity, purchase_price)
        product.quantity += quantity
        return product

    def replace(self, record: Product) -> Product:
        """Sobrescreve o registro inteiro de um produto existente."""
        if record.name not in self._products:
            raise NotFoundError(record.name)
        self._products[record.name] = record
        return record

    def delete(self, name: str) -> bool:
        return self._products.pop(name, None) is not None

    def get(self, name: str) -> Optional[Product]:
        return self._products.get(name)

    def all(self) -> List[Product]:
        return list(self._products.values())

    def __contains__(self, name: object) -> bool:
        return name in self._products

    def __len__(self) -> int:
        return len(self._products)

    def __iter__(self) -> Iterator[Product]:
        return iter(list(self._products.values()))


# -------------------------
# Movimentações: Compra / Venda
# -------------------------

T = TypeVar("T")


class TransactionLog(Generic[T]):
    """Sequência somente-acréscimo de transações."""

    def __init__(self):
        self._records: List[T] = []

    def append(self, record: T) -> T:
        self._records.append(record)
        return record

    def for_product(self, name: str) -> List[T]:
        return [r for r in self._records if r.product_name == name]

    def all(self) -> List[T]:
        return list(self._records)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._records))

    def __len__(self) -> int:
        return len(self._records)
