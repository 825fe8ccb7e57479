# inventario/usecases/importar_movimentos.py
"""
UC: Replay de MOVIMENTOS em lote (planilha CSV/XLSX).

- run_movimentos_lote(path, inventory): lê a planilha com o adapter e
  aplica cada linha, na ordem do arquivo, pela fachada ``Inventory``.

Obs.:
- Linhas inválidas (entrada mal formada ou erro de domínio) não abortam o
  lote: são registradas em ``erros`` com o número da linha e puladas.
- Cada linha válida é uma operação completa; não há estado parcial.
"""

from __future__ import annotations

from typing import Any, Dict, List

from inventario.adapters.movimentos_loader import load_movimentos
from inventario.adapters.parsers import InputError, parse_name, parse_price, parse_quantity
from inventario.domain.errors import InventarioError
from inventario.usecases.inventory import Inventory
from inventario.infra.logger import (
    log_transaction, log_system_event, log_file_operation, print_system
)


def _apply_row(inventory: Inventory, row: Dict[str, Any]) -> None:
    tipo = row.get("tipo")
    name = parse_name(row.get("produto"))
    quantity = parse_quantity(row.get("quantidade"))

    if tipo == "compra":
        purchase_price = parse_price(row.get("preco"), "preço de compra")
        description = None
        sale_price = None
        if name not in inventory:
            description = row.get("descricao") or ""
            sale_price = parse_price(row.get("preco_venda"), "preço de venda")
        inventory.record_purchase(name, quantity, purchase_price,
                                  description=description, sale_price=sale_price)
    elif tipo == "venda":
        inventory.record_sale(name, quantity)
    else:
        raise InputError(f"Tipo de movimento inválido: {tipo}")


def run_movimentos_lote(path: str, inventory: Inventory) -> Dict[str, Any]:
    """Lê a planilha de MOVIMENTOS e aplica todas as linhas no inventário."""
    log_system_event("movimentos_lote_start", {"file_path": path})
    log_file_operation("import", path)

    rows: List[Dict[str, Any]] = load_movimentos(path)
    log_file_operation("import", path, rows_processed=len(rows))

    erros: List[Dict[str, Any]] = []
    sucessos = 0
    for row in rows:
        try:
            _apply_row(inventory, row)
            sucessos += 1
        except (InputError, InventarioError) as e:
            erros.append({"linha": row.get("linha"), "mensagem": str(e)})
            print_system(f">> Linha {row.get('linha')} ignorada: {e}")

    result = {
        "tipo": "Movimentos",
        "arquivo": path,
        "total": len(rows),
        "sucessos": sucessos,
        "erros": erros,
    }

    log_transaction("movimentos_lote", {"file": path, "rows_count": len(rows)},
                    result={"sucessos": sucessos, "erros": len(erros)})
    log_system_event("movimentos_lote_success", {
        "file_path": path,
        "sucessos": sucessos,
        "erros": len(erros),
    })
    return result
