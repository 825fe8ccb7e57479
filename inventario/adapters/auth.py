"""
Autenticação da sessão interativa.

A mais simples possível: uma senha única vinda da configuração
(``INVENTARIO_SENHA``). O núcleo não conhece credenciais; a TUI só é
liberada depois que ``authorize`` devolve ``True``.
"""

from __future__ import annotations

from typing import Callable

from inventario.config import ESCAPE, SECRET
from inventario.infra.logger import log_system_event


def authorize(ask: Callable[[], str], secret: str = SECRET, escape: str = ESCAPE) -> bool:
    """Pede a senha até acertar (True) ou até o usuário digitar o escape (False).

    Args:
        ask: Função que lê uma tentativa de senha (ex.: ``Prompt.ask`` com
            ``password=True``).
        secret: Senha esperada.
        escape: Sentinela para desistir.
    """
    tentativas = 0
    while True:
        password = (ask() or "").strip()
        if password == escape:
            log_system_event("auth_aborted", {"tentativas": tentativas})
            return False
        tentativas += 1
        if password == secret:
            log_system_event("auth_success", {"tentativas": tentativas})
            return True
        log_system_event("auth_failed", {"tentativas": tentativas}, level="warning")
