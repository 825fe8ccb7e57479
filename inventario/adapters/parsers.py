"""
Utilidades de parsing para os valores digitados pelo usuário.

Este módulo converte o texto cru dos prompts (e das células das planilhas
de movimentos) nos argumentos tipados que a fachada ``Inventory`` espera:
nome não vazio, quantidade inteira positiva e preço decimal não negativo.
Valores inválidos levantam ``InputError`` com a mensagem a ser exibida; o
núcleo nunca recebe entrada não validada.
"""

from __future__ import annotations

import re
from math import isnan
from typing import Any, Optional

_INT_RE = re.compile(r"^[+]?\d+$")
_DEC_RE = re.compile(r"^[-+]?\d+(?:[.,]\d+)?$|^[-+]?[.,]\d+$")


class InputError(ValueError):
    """Entrada do usuário inválida (mensagem pronta para exibição)."""


def _clean(txt: Any) -> Optional[str]:
    if txt is None:
        return None
    s = str(txt).strip()
    return s or None


def parse_name(txt: Any) -> str:
    """Nome de produto: texto não vazio, sem espaços nas pontas."""
    s = _clean(txt)
    if s is None:
        raise InputError("Nome inválido: vazio")
    return s


def parse_quantity(txt: Any) -> int:
    """Interpreta uma quantidade inteira positiva.

    Aceita também valores numéricos vindos de planilhas (``5`` ou ``5.0``).
    Zero é rejeitado em todos os pontos de entrada, inclusive vendas.

    Exemplos:
        "12"   → 12
        " 3 "  → 3
        "0"    → InputError
        "2.5"  → InputError
    """
    if isinstance(txt, bool):
        raise InputError(f"Quantidade inválida: {txt}")
    if isinstance(txt, int):
        value = txt
    elif isinstance(txt, float) and txt.is_integer():
        value = int(txt)
    else:
        s = _clean(txt)
        if s is None:
            raise InputError("Quantidade inválida: vazio")
        if s.endswith(".0"):
            s = s[:-2]
        if not _INT_RE.match(s):
            raise InputError(f"Quantidade inválida: {s}")
        value = int(s)
    if value <= 0:
        raise InputError(f"Quantidade inválida: {value}")
    return value


def parse_price(txt: Any, label: str = "preço") -> float:
    """Interpreta um preço decimal não negativo.

    O separador decimal pode ser vírgula ou ponto.

    Exemplos:
        "2.50" → 2.5
        "2,50" → 2.5
        "-1"   → InputError
    """
    if isinstance(txt, bool):
        raise InputError(f"Valor inválido de {label}: {txt}")
    if isinstance(txt, (int, float)):
        value = float(txt)
    else:
        s = _clean(txt)
        if s is None:
            raise InputError(f"Valor inválido de {label}: vazio")
        if not _DEC_RE.match(s):
            raise InputError(f"Valor inválido de {label}: {s}")
        value = float(s.replace(",", "."))
    if isnan(value) or value < 0:
        raise InputError(f"Valor inválido de {label}: {value}")
    return value
