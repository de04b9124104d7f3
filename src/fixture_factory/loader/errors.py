# src/fixture_factory/loader/errors.py
"""
Exceções da camada de documentos de definição.

Todas herdam de `FactoryError`; falhas estruturais de carregamento são
tratadas como fatais.

Limites explícitos:
    - Não tenta inferir formato por conteúdo
    - Não cria defaults automaticamente
"""

from fixture_factory.core.errors import FactoryError, InvalidDefinitionError


class DefinitionNotFoundError(FactoryError, FileNotFoundError):
    """
    Exceção levantada quando o documento de defaults não existe.

    O documento de defaults é obrigatório; o documento local é opcional
    e sua ausência é ignorada silenciosamente pelo loader.
    """


class UnsupportedDefinitionFormatError(FactoryError, ValueError):
    """
    Exceção levantada quando a extensão do documento não é suportada.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


__all__ = [
    "DefinitionNotFoundError",
    "InvalidDefinitionError",
    "UnsupportedDefinitionFormatError",
]
