# inventario/usecases/inventory.py
"""
UC: fachada do inventário (compras, vendas, edição e exclusão de produtos).

Obs.:
- ``Inventory`` é o único dono do catálogo e dos dois logs de transações.
  Crie uma instância por sessão (ou por teste) e passe-a adiante.
- Toda validação acontece antes de qualquer mutação: catálogo e log mudam
  juntos ou não mudam.
- Erros de domínio são registrados no log e relançados para a interface.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from inventario.domain.errors import (
    InsufficientStockError,
    InventarioError,
    MissingProductDataError,
    NotFoundError,
    check_price,
    check_quantity,
)
from inventario.domain.models import Product, PurchaseTransaction, SaleTransaction
from inventario.infra.repositories import ProductCatalog, TransactionLog
from inventario.infra.logger import (
    log_transaction, log_compra, log_venda, log_system_event, print_system
)


def _log_failure(operation: str, data: Dict[str, Any], error: InventarioError) -> None:
    error_msg = str(error)
    log_transaction(operation, data, error=error_msg)
    log_system_event(f"{operation}_error", {"error": error_msg, **data}, level="error")


class Inventory:
    """Estado completo do inventário em memória."""

    def __init__(self):
        self._catalog = ProductCatalog()
        self._sales: TransactionLog[SaleTransaction] = TransactionLog()
        self._purchases: TransactionLog[PurchaseTransaction] = TransactionLog()
        log_system_event("inventory_created")

    # -----------------------
    # movimentações
    # -----------------------

    def record_purchase(
        self,
        name: str,
        quantity: int,
        purchase_price: float,
        description: Optional[str] = None,
        sale_price: Optional[float] = None,
    ) -> PurchaseTransaction:
        """Compra de um produto novo (cadastro) ou reposição de um existente.

        Para produto novo ``description`` e ``sale_price`` são obrigatórios;
        para produto existente são ignorados e o lote é fundido por custo.
        """
        data = {"produto": name, "quantidade": quantity, "preco": purchase_price}
        try:
            quantity = check_quantity(quantity)
            purchase_price = check_price(purchase_price)

            if name in self._catalog:
                self._catalog.restock(name, quantity, purchase_price)
                log_compra("restock", name, quantity, purchase_price)
            else:
                if description is None:
                    raise MissingProductDataError(name, "description")
                if sale_price is None:
                    raise MissingProductDataError(name, "sale_price")
                sale_price = check_price(sale_price)
                self._catalog.create(name, description, quantity, sale_price, purchase_price)
                log_compra("create", name, quantity, purchase_price,
                           descricao=description, preco_venda=sale_price)

            tx = self._purchases.append(PurchaseTransaction(name, quantity, purchase_price))
        except InventarioError as e:
            _log_failure("compra", data, e)
            raise

        print_system(f">> Produto adicionado: {tx}; Custo total: {tx.total_cost}")
        log_transaction("compra", data, result={"custo_total": tx.total_cost})
        return tx

    def record_sale(self, name: str, quantity: int) -> SaleTransaction:
        """Vende ``quantity`` unidades ao preço de venda atual do produto."""
        data = {"produto": name, "quantidade": quantity}
        try:
            product = self._catalog.get(name)
            if product is None:
                raise NotFoundError(name)
            quantity = check_quantity(quantity)
            if quantity > product.quantity:
                raise InsufficientStockError(name, quantity, product.quantity)

            updated = product.clone()
            updated.quantity -= quantity
            self._catalog.replace(updated)
            tx = self._sales.append(SaleTransaction(name, quantity, updated.sale_price))
        except InventarioError as e:
            log_venda("rejected", name, quantity, motivo=str(e))
            _log_failure("venda", data, e)
            raise

        log_venda("insert", name, quantity, tx.sale_price, restante=updated.quantity)
        print_system(f">> Produto vendido: {tx}")
        log_transaction("venda", data, result={"receita": tx.total, "restante": updated.quantity})
        return tx

    # -----------------------
    # cadastro
    # -----------------------

    def edit_product(
        self,
        name: str,
        description: Optional[str] = None,
        sale_price: Optional[float] = None,
    ) -> Product:
        """Atualização parcial: campos omitidos mantêm o valor anterior."""
        data = {"produto": name, "descricao": description, "preco_venda": sale_price}
        try:
            product = self._catalog.get(name)
            if product is None:
                raise NotFoundError(name)
            updated = product.clone()
            if description is not None:
                updated.description = description
            if sale_price is not None:
                updated.sale_price = check_price(sale_price)
            self._catalog.replace(updated)
        except InventarioError as e:
            _log_failure("edicao", data, e)
            raise

        log_transaction("edicao", data, result="success")
        return updated.clone()

    def delete_product(self, name: str) -> bool:
        """Remove o produto se existir; o histórico de transações permanece."""
        removed = self._catalog.delete(name)
        log_transaction("exclusao", {"produto": name}, result={"removido": removed})
        return removed

    # -----------------------
    # consultas (somente leitura)
    # -----------------------

    def get_product(self, name: str) -> Optional[Product]:
        product = self._catalog.get(name)
        return product.clone() if product is not None else None

    def products(self) -> List[Product]:
        return [p.clone() for p in self._catalog]

    def sales(self) -> List[SaleTransaction]:
        return self._sales.all()

    def purchases(self) -> List[PurchaseTransaction]:
        return self._purchases.all()

    def __contains__(self, name: object) -> bool:
        return name in self._catalog
