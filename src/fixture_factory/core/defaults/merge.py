# src/fixture_factory/core/defaults/merge.py
"""
Utilitário canônico de deep-merge de objetos e definições.

Este módulo implementa a política oficial de deep-merge utilizada pelo
fixture_factory tanto para aplicar overrides sobre objetos resolvidos
quanto para derivar definições de traits e associações.

Política de merge (v1):
    - mapeamento + mapeamento → merge recursivo por chave
    - lista, tupla, conjunto  → sobrescrita total (sem merge elemento a elemento)
    - data / hora             → sobrescrita total
    - escalar, None           → sobrescrita direta
    - UNSET                   → mantém o valor base

Princípios fundamentais:
    - O merge é determinístico e puramente funcional
    - Nenhum input é mutado durante o processo
    - `None` é um override explícito; apenas UNSET significa ausência

Invariantes:
    - Chaves não sobrescritas são preservadas
    - As chaves do resultado são a união das chaves de base e override,
      na ordem da base seguida das chaves novas do override
    - Entradas cujo valor final é UNSET são omitidas do resultado

Limites explícitos:
    - Não resolve geradores
    - Não faz cópia profunda de folhas (callables permanecem os mesmos)
    - Não protege contra estruturas cíclicas
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict

from .definition import UNSET, is_mergeable


def deep_merge(base: Any, overrides: Any = UNSET) -> Any:
    """
    Realiza um deep-merge determinístico entre um valor base e overrides.

    Quando `overrides` não é mergeable, ele substitui `base` por inteiro,
    exceto quando é UNSET, caso em que `base` é retornado sem alteração.
    Quando `overrides` é um mapeamento, o resultado é sempre um novo
    dicionário; uma base não mergeable é tratada como mapeamento vazio.

    Args:
        base (Any): Valor base (objeto resolvido ou definição de defaults).
        overrides (Any): Overrides parciais. Omitido equivale a UNSET.

    Returns:
        Any: Novo valor resultante do deep-merge.

    Examples:
        >>> deep_merge({"a": 1, "b": {"c": 2, "d": 3}}, {"b": {"c": 9}})
        {'a': 1, 'b': {'c': 9, 'd': 3}}
        >>> deep_merge({"a": [1, 2]}, {"a": [3]})
        {'a': [3]}
    """
    if not is_mergeable(overrides):
        return base if overrides is UNSET else overrides

    base_map: Mapping = base if is_mergeable(base) else {}
    result: Dict[str, Any] = {}

    for key in (*base_map.keys(), *(k for k in overrides.keys() if k not in base_map)):
        base_value = base_map.get(key, UNSET)

        if key not in overrides:
            value = base_value
        else:
            override_value = overrides[key]
            if is_mergeable(override_value):
                # mapping -> merge recursivo
                value = deep_merge(base_value, override_value)
            elif override_value is UNSET:
                value = base_value
            else:
                value = override_value

        if value is not UNSET:
            result[key] = value

    return result
