# src/fixture_factory/core/factory/generation.py
"""
Geração de objetos a partir de definições de defaults.

Este módulo concentra o fluxo de geração compartilhado por factories,
traits e variantes especializadas por associação:

    definição → resolve_defaults → deep_merge(overrides) → objeto

Responsabilidades do módulo:
    - Gerar um objeto (`generate`)
    - Gerar N objetos independentes (`generate_many`)
    - Aplicar associações sobre uma definição (`apply_associations`)

Invariantes:
    - `generate_many` valida a quantidade antes de gerar qualquer objeto
    - Uma falha de gerador aborta a chamada inteira; nenhum resultado
      parcial é retornado
    - Definições recebidas nunca são mutadas
"""

from __future__ import annotations

from collections.abc import Mapping
from numbers import Integral
from typing import Any, Callable, Dict, List, Optional

from fixture_factory.core.defaults import UNSET, deep_merge, is_mergeable, resolve_defaults
from fixture_factory.core.errors import (
    InvalidCountError,
    InvalidDefinitionError,
    InvalidOverridesError,
)
from fixture_factory.core.log import get_logger

log = get_logger(__name__)


def _normalize_overrides(overrides: Optional[Mapping]) -> Any:
    if overrides is None or overrides is UNSET:
        return UNSET
    if not is_mergeable(overrides):
        raise InvalidOverridesError(
            f"Overrides devem ser um mapeamento, recebido: {type(overrides).__name__}"
        )
    return overrides


def validate_count(count: Any) -> int:
    # bool é subclasse de int e também é rejeitado
    if isinstance(count, bool) or not isinstance(count, Integral):
        raise InvalidCountError(
            f"Quantidade deve ser um inteiro, recebido: {type(count).__name__}"
        )
    if count < 0:
        raise InvalidCountError(f"Quantidade não pode ser negativa: {count}")
    return int(count)


def generate(definition: Mapping, overrides: Optional[Mapping] = None) -> Dict[str, Any]:
    """Resolve a definição e aplica os overrides sobre o objeto resolvido."""
    patch = _normalize_overrides(overrides)
    return deep_merge(resolve_defaults(definition), patch)


def generate_many(
    definition: Mapping,
    count: int,
    overrides: Optional[Mapping] = None,
) -> List[Dict[str, Any]]:
    """
    Gera `count` objetos independentes, na ordem, com os mesmos overrides.

    O índice de cada objeto não é exposto; variações por índice devem vir
    de uma sequência usada dentro da definição.

    Raises:
        InvalidCountError: Se `count` for negativo ou não inteiro.
        InvalidOverridesError: Se `overrides` não for um mapeamento.
    """
    count = validate_count(count)
    patch = _normalize_overrides(overrides)
    return [deep_merge(resolve_defaults(definition), patch) for _ in range(count)]


def apply_associations(
    definition: Mapping,
    registry: Mapping[str, Callable[[Any], Any]],
    values: Mapping[str, Any],
) -> Dict[str, Any]:
    """
    Aplica associações registradas sobre uma definição de defaults.

    As associações são aplicadas na ordem de iteração de `values`; cada
    saída é mesclada sobre o acumulado, de modo que associações posteriores
    prevalecem em chaves coincidentes. Chaves sem associação registrada são
    ignoradas.

    Raises:
        InvalidDefinitionError: Se uma associação não retornar um mapeamento.
    """
    combined: Any = definition

    for key, value in values.items():
        derive = registry.get(key)
        if derive is None:
            log.debug("factory_association_ignored", association=key)
            continue

        derived = derive(value)
        if not is_mergeable(derived):
            raise InvalidDefinitionError(
                f"Associação '{key}' deve retornar um mapeamento, recebido: {type(derived).__name__}"
            )

        combined = deep_merge(combined, derived)
        log.debug("factory_association_applied", association=key, fields=sorted(map(str, derived)))

    return combined
