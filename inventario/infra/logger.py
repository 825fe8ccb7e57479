# inventario/infra/logger.py
"""
Logging em arquivo do inventário.

Um arquivo por assunto, todos em ``config.LOGS_DIR``:

- transactions.log : resultado (sucesso/falha) de cada operação da fachada
- compras.log      : cadastros e reposições
- vendas.log       : vendas aceitas e rejeitadas
- system.log       : sessão, relatórios, lacunas de custo e importações

Nada é gravado enquanto ``ENABLE_LOGGING`` e ``ENABLE_OUTPUT`` estiverem
desligados; os arquivos só são abertos na primeira mensagem emitida.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

from inventario import config


ENABLE_LOGGING = config.ENABLE_LOGGING
ENABLE_OUTPUT = config.ENABLE_OUTPUT

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

LOGS_DIR = Path(config.LOGS_DIR)
LOG_FILES = {
    "transactions": LOGS_DIR / "transactions.log",
    "compras": LOGS_DIR / "compras.log",
    "vendas": LOGS_DIR / "vendas.log",
    "system": LOGS_DIR / "system.log",
}


def _enabled() -> bool:
    return ENABLE_LOGGING or ENABLE_OUTPUT


def print_system(*args, **kwargs):
    """Print controlado pelo ENABLE_OUTPUT."""
    if ENABLE_OUTPUT:
        print(*args, **kwargs)


class _LazyDirFileHandler(logging.FileHandler):
    """FileHandler que cria o diretório de logs ao abrir o arquivo."""

    def _open(self):
        Path(self.baseFilename).parent.mkdir(parents=True, exist_ok=True)
        return super()._open()


def setup_logger(name: str, log_file: str, level: int = logging.INFO) -> logging.Logger:
    """
    Cria (ou reconfigura) um logger que escreve só no ``log_file``.

    Args:
        name: Nome do logger
        log_file: Caminho do arquivo de log
        level: Nível mínimo registrado

    Returns:
        Logger sem propagação para o root e com um único handler de arquivo
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handler = _LazyDirFileHandler(log_file, encoding='utf-8', delay=True)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    logger.addHandler(handler)
    return logger


transaction_logger = setup_logger('inventario.transactions', str(LOG_FILES["transactions"]))
compra_logger = setup_logger('inventario.compras', str(LOG_FILES["compras"]))
venda_logger = setup_logger('inventario.vendas', str(LOG_FILES["vendas"]))
system_logger = setup_logger('inventario.system', str(LOG_FILES["system"]))


def log_transaction(operation: str, data: Dict[str, Any], result: Optional[Any] = None, error: Optional[str] = None) -> None:
    """
    Registra o desfecho de uma operação da fachada.

    Args:
        operation: compra, venda, edicao, exclusao, movimentos_lote
        data: Argumentos recebidos
        result: Resumo do resultado quando a operação foi aceita
        error: Mensagem do erro quando foi rejeitada
    """
    if not _enabled():
        return
    if error:
        transaction_logger.error(f"TRANSACTION_FAILED: {operation} - {error} - Data: {data}")
    else:
        transaction_logger.info(f"TRANSACTION_SUCCESS: {operation} - Result: {result} - Data: {data}")


def _log_movimento(logger: logging.Logger, prefix: str, action: str, produto: str,
                   quantidade: int, preco: Optional[float], extra: Dict[str, Any]) -> None:
    if not _enabled():
        return
    log_data = {"produto": produto, "quantidade": quantidade, "preco": preco, **extra}
    logger.info(f"{prefix}_{action.upper()}: {log_data}")


def log_compra(action: str, produto: str, quantidade: int, preco: Optional[float] = None, **kwargs) -> None:
    """Compra aceita: ``create`` (produto novo) ou ``restock`` (lote fundido/acrescentado)."""
    _log_movimento(compra_logger, "COMPRA", action, produto, quantidade, preco, kwargs)


def log_venda(action: str, produto: str, quantidade: int, preco: Optional[float] = None, **kwargs) -> None:
    """Venda ``insert`` (aceita) ou ``rejected`` (com ``motivo``)."""
    _log_movimento(venda_logger, "VENDA", action, produto, quantidade, preco, kwargs)


def log_system_event(event: str, details: Dict[str, Any] = None, level: str = "info") -> None:
    """
    Evento do sistema no system.log.

    Args:
        event: Nome do evento (ex.: session_start, sales_report_gap)
        details: Detalhes adicionais
        level: info, warning ou error
    """
    if not _enabled():
        return
    log_method = getattr(system_logger, level.lower(), system_logger.info)
    log_method(f"SYSTEM_EVENT: {event} - {details or {}}")


def log_file_operation(operation: str, file_path: str, rows_processed: int = 0, **kwargs) -> None:
    """Leitura de planilha de movimentos."""
    if not _enabled():
        return
    log_data = {"file_path": file_path, "rows_processed": rows_processed, **kwargs}
    system_logger.info(f"FILE_{operation.upper()}: {log_data}")


def get_log_summary(log_type: str = "transactions", lines: int = 100) -> Optional[str]:
    """
    Últimas ``lines`` linhas de um dos arquivos de ``LOG_FILES``.

    Returns:
        Texto do log, mensagem de arquivo ausente, ou None com o logging desligado
    """
    if not _enabled():
        return None

    log_file = LOG_FILES.get(log_type)
    if log_file is None or not log_file.exists():
        return f"Log {log_type} não encontrado."

    try:
        with open(log_file, 'r', encoding='utf-8') as f:
            return ''.join(f.readlines()[-lines:])
    except OSError as e:
        return f"Erro ao ler log {log_type}: {e}"
