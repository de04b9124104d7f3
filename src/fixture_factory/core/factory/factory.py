# src/fixture_factory/core/factory/factory.py
"""
Factory canônica do fixture_factory.

Este módulo define a `Factory`, valor imutável que agrega:
    - uma definição de defaults base
    - um registro de traits (nome → definição derivada)
    - um registro de associações (nome → função de derivação)

Uma factory é:
    - um callable que gera um novo objeto a partir dos defaults
    - um objeto com acessores `.<trait>()` para cada trait registrado
    - um objeto com modificadores imutáveis (`trait`, `associate`, `with_`)
      que retornam novas factories

Política de precedência (v1), da menor para a maior:
    1. definição base
    2. overrides do trait (aplicados no registro do trait)
    3. saída das associações (`with_`)
    4. overrides da chamada

A ordem é a mesma para `factory.with_(...).admin()` e
`factory.admin.with_(...)()`.

Invariantes:
    - Nenhum modificador muta a factory original
    - Traits são calculados uma única vez, no registro, contra a definição
      corrente; traits não herdam uns dos outros
    - Registrar um trait com nome existente sobrescreve-o na nova factory

Limites explícitos:
    - Não constrói instâncias de classes; objetos gerados são `dict`
    - Não mantém estado mutável; geradores do usuário podem manter
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields, replace
from types import MappingProxyType
from typing import Any, Callable, Dict, Optional, Tuple

from fixture_factory.core.defaults import deep_merge, is_mergeable
from fixture_factory.core.errors import (
    InvalidDefinitionError,
    ReservedTraitNameError,
    UnknownTraitError,
)
from fixture_factory.core.log import get_logger

from .generation import apply_associations
from .variant import Variant, collect_association_values

log = get_logger(__name__)


def _empty_traits() -> Mapping[str, Mapping[str, Any]]:
    return MappingProxyType({})


def _snapshot(definition: Any) -> Dict[str, Any]:
    """Copia todos os níveis de mapeamento da definição para novos dicts."""
    if not is_mergeable(definition):
        raise InvalidDefinitionError(
            f"Definição de defaults deve ser um mapeamento, recebido: {type(definition).__name__}"
        )
    return deep_merge({}, definition)


@dataclass(frozen=True, eq=False)
class Factory(Variant):
    """
    Factory imutável de objetos de teste.

    Exemplo:
        >>> users = (
        ...     create_factory({"id": create_sequence("user-"), "admin": False})
        ...     .trait("admin", {"admin": True})
        ... )
        >>> users()
        {'id': 'user-0', 'admin': False}
        >>> users.admin()
        {'id': 'user-1', 'admin': True}
    """

    trait_definitions: Mapping[str, Mapping[str, Any]] = field(default_factory=_empty_traits)

    @property
    def traits(self) -> Tuple[str, ...]:
        """Nomes dos traits registrados, em ordem de registro."""
        return tuple(self.trait_definitions)

    # ------------------------------------------------------------------
    # Modificadores
    # ------------------------------------------------------------------

    def trait(self, name: str, trait_overrides: Mapping[str, Any]) -> "Factory":
        """
        Registra um trait e retorna uma nova factory.

        A definição do trait é `deep_merge(definição corrente, trait_overrides)`,
        calculada agora. Os overrides do trait podem conter geradores.

        Raises:
            ReservedTraitNameError: Se o nome for vazio, privado ou colidir com
                um membro da factory.
            InvalidDefinitionError: Se `trait_overrides` não for um mapeamento.
        """
        _validate_trait_name(name)
        if not is_mergeable(trait_overrides):
            raise InvalidDefinitionError(
                f"Overrides do trait '{name}' devem ser um mapeamento, "
                f"recebido: {type(trait_overrides).__name__}"
            )

        log.debug(
            "factory_trait_registered",
            trait=name,
            overwritten=name in self.trait_definitions,
        )
        traits = dict(self.trait_definitions)
        traits[name] = deep_merge(self.definition, trait_overrides)
        return replace(self, trait_definitions=MappingProxyType(traits))

    def associate(self, key: str, derive: Callable[[Any], Mapping[str, Any]]) -> "Factory":
        """
        Registra uma associação e retorna uma nova factory.

        A associação só tem efeito quando um valor é fornecido via `with_`:
        `derive(valor)` retorna overrides parciais aplicados sobre a definição.

        Example:
            >>> posts = create_factory({"id": 1, "user_id": 0}).associate(
            ...     "user", lambda user: {"user_id": user["id"]}
            ... )
            >>> posts.with_(user={"id": 7})()
            {'id': 1, 'user_id': 7}
        """
        if not isinstance(key, str) or not key:
            raise ValueError("Chave de associação deve ser uma string não vazia")
        if not callable(derive):
            raise TypeError(f"Associação '{key}' deve ser callable")

        log.debug(
            "factory_association_registered",
            association=key,
            overwritten=key in self.associations,
        )
        associations = dict(self.associations)
        associations[key] = derive
        return replace(self, associations=MappingProxyType(associations))

    def with_(self, associations: Optional[Mapping[str, Any]] = None, /, **values: Any) -> "Factory":
        """
        Retorna uma nova factory com as associações aplicadas.

        As associações são aplicadas tanto à definição base quanto a cada
        trait registrado, de modo que `factory.with_(user=u).admin()` também
        reflete a associação.
        """
        collected = collect_association_values(associations, values)
        traits = {
            name: apply_associations(definition, self.associations, collected)
            for name, definition in self.trait_definitions.items()
        }
        return replace(
            self,
            definition=apply_associations(self.definition, self.associations, collected),
            trait_definitions=MappingProxyType(traits),
        )

    # ------------------------------------------------------------------
    # Acesso a traits
    # ------------------------------------------------------------------

    def get_trait(self, name: str) -> Variant:
        """Retorna a variante geradora do trait `name`."""
        # __dict__ direto: evita recursão em __getattr__ antes do __init__
        traits = self.__dict__.get("trait_definitions", {})
        if name not in traits:
            raise UnknownTraitError(f"Trait não registrado: {name!r}")
        return Variant(definition=traits[name], associations=self.associations, name=name)

    def __getattr__(self, name: str) -> Variant:
        if name.startswith("_"):
            raise AttributeError(name)
        return self.get_trait(name)

    def __getitem__(self, name: str) -> Variant:
        return self.get_trait(name)

    def __contains__(self, name: object) -> bool:
        return name in self.trait_definitions

    def __dir__(self):
        return sorted(set(super().__dir__()) | set(self.trait_definitions))

    def __repr__(self) -> str:
        return (
            f"<Factory fields={list(self.definition)} traits={list(self.trait_definitions)} "
            f"associations={list(self.associations)}>"
        )


_RESERVED_NAMES = frozenset(dir(Factory)) | frozenset(f.name for f in fields(Factory))


def _validate_trait_name(name: Any) -> None:
    if not isinstance(name, str) or not name:
        raise ReservedTraitNameError("trait name must be a non-empty string")
    if name.startswith("_"):
        raise ReservedTraitNameError(f"Trait não pode começar com '_': {name!r}")
    if name in _RESERVED_NAMES:
        raise ReservedTraitNameError(f"Trait colide com membro da factory: {name!r}")


def create_factory(definition: Mapping[str, Any]) -> Factory:
    """
    Cria uma factory a partir de uma definição de defaults.

    Cada campo da definição pode ser um literal, um callable sem argumentos
    ou um mapeamento aninhado com a mesma estrutura. A definição é copiada
    (em todos os níveis de mapeamento) no momento da criação; mutações
    posteriores do dicionário original não afetam a factory.

    Args:
        definition (Mapping[str, Any]): Definição de defaults.

    Returns:
        Factory: Nova factory sem traits nem associações.

    Raises:
        InvalidDefinitionError: Se a definição não for um mapeamento.

    Example:
        >>> users = create_factory({
        ...     "id": "user-id",
        ...     "username": "username",
        ...     "preferences": {"a": True, "b": True},
        ... })
        >>> users({"username": "x", "preferences": {"a": False}})
        {'id': 'user-id', 'username': 'x', 'preferences': {'a': False, 'b': True}}
    """
    return Factory(definition=_snapshot(definition))
