# inventario/adapters/movimentos_loader.py
"""
Loader de planilhas de MOVIMENTOS (compras e vendas) em CSV ou XLSX.

Essas funções:
- leem a planilha usando pandas;
- normalizam cabeçalhos (acentos, variações, sinônimos);
- retornam listas de dicionários na ordem do arquivo, prontas para o
  replay em ``inventario.usecases.importar_movimentos``.

Observações:
- Não convertem quantidade nem preços; os campos ficam como texto e são
  validados por ``inventario.adapters.parsers`` no momento do replay.
- Cabeçalhos sinônimos na mesma planilha (ex.: ``preco`` e ``valor``) viram
  uma só coluna: em cada linha vale o primeiro valor não nulo.
- Planilhas Excel só em ``.xlsx`` (openpyxl); ``.xls`` é rejeitado com
  ``InputError``.
- O tipo do movimento é normalizado para ``compra`` ou ``venda`` quando
  reconhecido; valores desconhecidos são preservados para que o replay
  reporte a linha com erro.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional
import re

import pandas as pd

from inventario.adapters.parsers import InputError


# ---------------------------
# utilitários de normalização
# ---------------------------

def _slug(s: str) -> str:
    """Normaliza cabeçalhos: minúsculas, sem acentos, sem não-alfanumérico."""
    if s is None:
        return ""
    s = str(s).strip().lower()
    # remove acentos básicos
    acentos = dict(zip("áàâãäéèêëíìîïóòôõöúùûüç", "aaaaaeeeeiiiiooooouuuuc"))
    s = "".join(acentos.get(ch, ch) for ch in s)
    # troca não alfanum por espaço
    s = re.sub(r"[^a-z0-9]+", " ", s)
    s = re.sub(r"\s+", " ", s).strip()
    return s


def _safe_get(row, key) -> Optional[str]:
    """Lê um valor da linha do pandas tratando NA e strings vazias."""
    val = row.get(key)
    if val is None or pd.isna(val):
        return None
    s = str(val).strip()
    return s or None


_TIPOS = {
    "compra": "compra",
    "c": "compra",
    "entrada": "compra",
    "purchase": "compra",
    "venda": "venda",
    "v": "venda",
    "saida": "venda",
    "sale": "venda",
}


def _normalize_tipo(val: Optional[str]) -> Optional[str]:
    if val is None:
        return None
    return _TIPOS.get(_slug(val), val)


def _normalize_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Renomeia colunas com base em sinônimos/variações."""
    # mapeamentos por 'slug' para chaves canônicas
    aliases = {
        "tipo": "tipo",
        "operacao": "tipo",
        "movimento": "tipo",

        "produto": "produto",
        "nome": "produto",
        "nome do produto": "produto",

        "quantidade": "quantidade",
        "qtde": "quantidade",
        "qtd": "quantidade",

        "preco": "preco",
        "preco unitario": "preco",
        "valor": "preco",
        "valor unitario": "preco",
        "preco compra": "preco",
        "preco de compra": "preco",

        "descricao": "descricao",

        "preco venda": "preco_venda",
        "preco de venda": "preco_venda",
    }

    new_cols = {}
    for col in df.columns:
        key = _slug(col)
        new_cols[col] = aliases.get(key, key)  # se não houver alias, mantém slug
    df = df.rename(columns=new_cols)
    return _merge_duplicate_columns(df)


def _merge_duplicate_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Funde colunas que viraram a mesma chave (ex.: 'preco' e 'valor').

    Em cada linha vale o primeiro valor não nulo, na ordem das colunas.
    """
    if not df.columns.duplicated().any():
        return df
    merged = {}
    for col in dict.fromkeys(df.columns):
        block = df.loc[:, df.columns == col]
        values = block.iloc[:, 0]
        for i in range(1, block.shape[1]):
            values = values.fillna(block.iloc[:, i])
        merged[col] = values
    return pd.DataFrame(merged, index=df.index)


def _read_table(path: str) -> pd.DataFrame:
    suffix = Path(path).suffix.lower()
    if suffix == ".xlsx":
        return pd.read_excel(path, dtype="string", engine="openpyxl")
    if suffix in {".xls", ".xlsm", ".ods"}:
        raise InputError(f"Formato de planilha não suportado: {suffix} (use .xlsx ou .csv)")
    return pd.read_csv(path, dtype="string", sep=None, engine="python")


# ---------------------------
# loader público
# ---------------------------

def load_movimentos(path: str) -> List[Dict[str, Any]]:
    """Lê CSV/XLSX de MOVIMENTOS e retorna um dict por linha.

    Campos de saída (chaves do dict por linha):
      - linha: número da linha na planilha (cabeçalho = 1)
      - tipo: 'compra' | 'venda' | texto original | None
      - produto: str | None
      - quantidade: str | None
      - preco: str | None  (preço de compra; ignorado em vendas)
      - descricao: str | None  (só para produto novo)
      - preco_venda: str | None  (só para produto novo)
    """
    df = _read_table(path)
    df = _normalize_columns(df)
    out: List[Dict[str, Any]] = []
    for idx, (_, row) in enumerate(df.iterrows()):
        rec = {
            "linha": idx + 2,
            "tipo": _normalize_tipo(_safe_get(row, "tipo")),
            "produto": _safe_get(row, "produto"),
            "quantidade": _safe_get(row, "quantidade"),
            "preco": _safe_get(row, "preco"),
            "descricao": _safe_get(row, "descricao"),
            "preco_venda": _safe_get(row, "preco_venda"),
        }
        out.append(rec)
    return out
