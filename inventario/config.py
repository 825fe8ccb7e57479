# inventario/config.py
"""
Configurações globais e valores padrão do sistema de inventário.
"""

import os
from dataclasses import dataclass
from pathlib import Path


def _env_flag(name: str, default: bool = False) -> bool:
    val = os.getenv(name)
    if val is None:
        return default
    return val.strip().lower() in {"1", "true", "t", "sim", "s", "y", "yes"}


@dataclass
class DefaultConfig:
    """Valores padrão para parâmetros do sistema."""
    senha: str = "password"      # senha da sessão interativa
    escape: str = "x"            # sentinela para abortar a operação corrente
    pular: str = "c"             # mantém o valor atual na edição de produto
    log_linhas: int = 100        # linhas exibidas por `inventario logs`


# Instância global dos valores padrão
DEFAULTS = DefaultConfig()

# Senha da sessão (pode ser sobrescrita por variável de ambiente)
SECRET = os.getenv("INVENTARIO_SENHA", DEFAULTS.senha)

# Sentinelas da interface de linha
ESCAPE = DEFAULTS.escape
SKIP = DEFAULTS.pular

# Diretório dos arquivos de log
LOGS_DIR = Path(os.getenv("INVENTARIO_LOGS_DIR", Path(__file__).parent / "logs"))

# Liga/desliga logs em arquivo e prints de sistema
ENABLE_LOGGING = _env_flag("INVENTARIO_LOG")
ENABLE_OUTPUT = _env_flag("INVENTARIO_OUTPUT")
