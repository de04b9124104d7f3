# src/fixture_factory/core/factory/variant.py
"""
Variante geradora: uma definição de defaults pronta para gerar objetos.

Uma `Variant` é o produto de selecionar um trait ou de especializar uma
factory via associações. Ela gera objetos, mas não registra novos traits
nem associações.

Invariantes:
    - Instâncias são imutáveis (`frozen`)
    - Toda especialização (`with_`) produz uma nova instância
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional

from .generation import apply_associations, generate, generate_many

if TYPE_CHECKING:  # pragma: no cover
    import pandas as pd


def _empty_registry() -> Mapping[str, Callable[[Any], Any]]:
    return MappingProxyType({})


def collect_association_values(
    associations: Optional[Mapping[str, Any]],
    values: Dict[str, Any],
) -> Dict[str, Any]:
    """Une o mapeamento posicional e os kwargs, preservando a ordem de ambos."""
    collected: Dict[str, Any] = dict(associations or {})
    collected.update(values)
    return collected


@dataclass(frozen=True, eq=False)
class Variant:
    """
    Gerador imutável de objetos a partir de uma definição de defaults.

    Campos:
        - definition: definição de defaults efetiva
        - associations: registro de associações (nome → derivação)
        - name: nome do trait de origem, quando houver
    """

    definition: Mapping[str, Any]
    associations: Mapping[str, Callable[[Any], Any]] = field(default_factory=_empty_registry)
    name: Optional[str] = None

    def __call__(self, overrides: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        return generate(self.definition, overrides)

    def many(self, count: int, overrides: Optional[Mapping[str, Any]] = None) -> List[Dict[str, Any]]:
        """
        Gera `count` objetos independentes aplicando os mesmos overrides.

        Example:
            >>> users = create_factory({"id": create_sequence("user-")})
            >>> users.many(2)
            [{'id': 'user-0'}, {'id': 'user-1'}]
        """
        return generate_many(self.definition, count, overrides)

    def with_(self, associations: Optional[Mapping[str, Any]] = None, /, **values: Any) -> "Variant":
        """
        Retorna uma nova variante com as associações informadas aplicadas.

        Aceita um mapeamento posicional e/ou kwargs; chaves sem associação
        registrada são ignoradas.
        """
        collected = collect_association_values(associations, values)
        return replace(
            self,
            definition=apply_associations(self.definition, self.associations, collected),
        )

    def frame(
        self,
        count: int,
        overrides: Optional[Mapping[str, Any]] = None,
        *,
        flatten: bool = True,
    ) -> "pd.DataFrame":
        """Gera `count` objetos e os retorna como um `pandas.DataFrame`."""
        # pandas só é importado quando um frame é de fato pedido
        from fixture_factory.export.frame import to_frame

        return to_frame(self.many(count, overrides), flatten=flatten)

    def __repr__(self) -> str:
        label = f" {self.name!r}" if self.name else ""
        return f"<{type(self).__name__}{label} fields={list(self.definition)}>"
