# src/fixture_factory/core/defaults/__init__.py
"""
Camada de defaults do fixture_factory.

Este pacote reúne as funções puras que transformam uma definição de
defaults em um objeto concreto:
    - definition → classificação de posições (LITERAL, GENERATOR, SUBTREE)
    - resolve    → invocação dos geradores, em profundidade
    - merge      → aplicação de overrides parciais via deep-merge

Nenhum módulo deste pacote mantém estado compartilhado.
"""

from .definition import UNSET, FieldKind, classify, is_mergeable
from .merge import deep_merge
from .resolve import resolve_defaults

__all__ = [
    "UNSET",
    "FieldKind",
    "classify",
    "is_mergeable",
    "deep_merge",
    "resolve_defaults",
]
