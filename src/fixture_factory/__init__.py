# src/fixture_factory/__init__.py
"""
fixture_factory — geração declarativa de objetos de teste.

Este pacote raiz define o namespace público do fixture_factory, uma
biblioteca para gerar muitos objetos semelhantes a partir de uma definição
de defaults, diferindo apenas em poucos campos.

Arquitetura em alto nível:
    - core.defaults  → resolução de definições e deep-merge de overrides
    - core.factory   → factories imutáveis, traits, associações e `many`
    - core.sequences → geradores com contador incremental
    - loader         → definições declaradas em YAML / JSON
    - export         → exportação de objetos gerados para pandas

Exemplo:
    >>> users = create_factory({
    ...     "id": create_sequence("user-"),
    ...     "username": "username",
    ...     "preferences": {"a": True, "b": True},
    ... }).trait("renamed", {"username": "x"})
    >>> users({"preferences": {"a": False}})
    {'id': 'user-0', 'username': 'username', 'preferences': {'a': False, 'b': True}}
    >>> users.renamed()["username"]
    'x'
"""

from .core.defaults import UNSET, deep_merge, resolve_defaults
from .core.errors import (
    FactoryError,
    InvalidCountError,
    InvalidDefinitionError,
    InvalidOverridesError,
    ReservedTraitNameError,
    UnknownTraitError,
)
from .core.factory import Factory, Variant, create_factory
from .core.sequences import Sequence, create_sequence
from .loader import load_definition, load_factory

__all__ = [
    "UNSET",
    "deep_merge",
    "resolve_defaults",
    "Factory",
    "Variant",
    "create_factory",
    "Sequence",
    "create_sequence",
    "load_definition",
    "load_factory",
    "FactoryError",
    "InvalidCountError",
    "InvalidDefinitionError",
    "InvalidOverridesError",
    "ReservedTraitNameError",
    "UnknownTraitError",
]
