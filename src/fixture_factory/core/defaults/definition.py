# src/fixture_factory/core/defaults/definition.py
"""
Tipos canônicos de uma definição de defaults.

Uma definição de defaults é uma árvore que espelha o shape do objeto
gerado. Cada posição da árvore é exatamente uma de três variantes:

    - LITERAL   → valor usado como está (primitivos, None, listas, datas,
                  instâncias de classes)
    - GENERATOR → callable sem argumentos, invocado a cada geração
    - SUBTREE   → mapeamento aninhado, resolvido recursivamente

Componentes principais:
    - UNSET     → sentinela de "nenhum valor / nenhum override"
    - FieldKind → enum das variantes de posição
    - classify  → classifica um valor em uma variante
    - is_mergeable → indica se um valor participa de merge por chave

Invariantes:
    - Listas, tuplas, conjuntos e valores de data nunca são mergeable
    - `None` é um valor explícito, nunca confundido com UNSET

Limites explícitos:
    - Não resolve geradores
    - Não realiza merge
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date, time
from enum import Enum
from typing import Any, Callable, Dict, Union


class _Unset:
    """Sentinela singleton para ausência de valor."""

    _instance = None

    def __new__(cls) -> "_Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()

# `datetime.datetime` é subclasse de `date`
DATE_LIKE_TYPES = (date, time)
ATOMIC_COLLECTION_TYPES = (list, tuple, set, frozenset)

Generator = Callable[[], Any]
Definition = Dict[str, Union[Any, Generator, "Definition"]]


class FieldKind(str, Enum):
    """
    Variantes de uma posição da definição de defaults.

    Os valores são strings para facilitar inspeção e logging.
    """

    LITERAL = "literal"
    GENERATOR = "generator"
    SUBTREE = "subtree"


def is_mergeable(value: Any) -> bool:
    """
    Indica se um valor participa de merge recursivo por chave.

    Um valor é mergeable quando é um mapeamento não nulo. Listas e datas
    não são mapeamentos e portanto são sempre atômicos; a verificação
    explícita abaixo protege contra subclasses exóticas que implementem
    as duas interfaces.
    """
    if value is None or value is UNSET:
        return False
    if isinstance(value, ATOMIC_COLLECTION_TYPES) or isinstance(value, DATE_LIKE_TYPES):
        return False
    return isinstance(value, Mapping)


def classify(value: Any) -> FieldKind:
    if callable(value):
        return FieldKind.GENERATOR
    if is_mergeable(value):
        return FieldKind.SUBTREE
    return FieldKind.LITERAL
