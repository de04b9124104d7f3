# src/fixture_factory/export/frame.py
"""
Exportação tabular de objetos gerados.

Converte uma coleção de objetos gerados por uma factory em um
`pandas.DataFrame`, útil para testes de pipelines que consomem dados
tabulares.

Política de exportação (v1):
    - flatten=True  → mapeamentos aninhados viram colunas com nome pontuado
                      (`preferences.theme`), via `pandas.json_normalize`
    - flatten=False → cada chave raiz vira uma coluna; valores aninhados
                      permanecem como objetos nas células
    - Listas e datas são sempre valores de célula

Invariantes:
    - A ordem das linhas é a ordem dos objetos recebidos
    - Nenhum objeto de entrada é mutado

Limites explícitos:
    - Não infere nem converte dtypes além do que o pandas faz por padrão
    - Não persiste o frame
"""

from __future__ import annotations

from typing import Any, Dict, Iterable

import pandas as pd


def to_frame(records: Iterable[Dict[str, Any]], *, flatten: bool = True) -> pd.DataFrame:
    """
    Constrói um DataFrame a partir de objetos gerados.

    Args:
        records: Objetos gerados (dicts).
        flatten: Se True, achata mapeamentos aninhados em colunas pontuadas.

    Returns:
        pd.DataFrame: Uma linha por objeto.
    """
    rows = list(records)

    if not rows:
        return pd.DataFrame()

    if flatten:
        return pd.json_normalize(rows, sep=".")

    return pd.DataFrame.from_records(rows)
