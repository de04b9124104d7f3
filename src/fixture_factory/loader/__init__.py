# src/fixture_factory/loader/__init__.py
"""
Camada de documentos de definição (YAML / JSON).

Carrega definições de defaults e traits declaradas em arquivos, com a
mesma precedência defaults + local usada em configurações de projeto.
"""

from .documents import load_definition, load_document, load_factory
from .errors import (
    DefinitionNotFoundError,
    InvalidDefinitionError,
    UnsupportedDefinitionFormatError,
)

__all__ = [
    "load_definition",
    "load_document",
    "load_factory",
    "DefinitionNotFoundError",
    "InvalidDefinitionError",
    "UnsupportedDefinitionFormatError",
]
