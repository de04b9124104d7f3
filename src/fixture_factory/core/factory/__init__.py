# src/fixture_factory/core/factory/__init__.py
"""
Composição de factories.

    - factory    → Factory imutável, traits, associações e `create_factory`
    - variant    → Variant, gerador derivado de um trait ou associação
    - generation → fluxo compartilhado de geração (resolve + merge)
"""

from .factory import Factory, create_factory
from .variant import Variant

__all__ = ["Factory", "Variant", "create_factory"]
