# src/fixture_factory/core/defaults/resolve.py
"""
Resolução de definições de defaults em objetos concretos.

Este módulo transforma uma definição de defaults (árvore de literais,
geradores e subárvores) em um objeto resolvido, sem nenhum callable
remanescente.

Política de resolução (v1):
    - GENERATOR → chamado uma única vez, sem argumentos; o retorno é usado
                  como está, mesmo quando for um mapeamento
    - SUBTREE   → resolvido recursivamente com a mesma política
    - LITERAL   → usado como está, inclusive listas, datas e instâncias de
                  classes; o mesmo objeto é compartilhado entre resoluções
                  (use um gerador, p.ex. `lambda: ["a"]`, para obter uma
                  lista nova a cada objeto)

Invariantes:
    - O resultado possui exatamente as chaves da definição, em todos os níveis
    - Cada gerador é invocado exatamente uma vez por resolução, na ordem
      das chaves
    - A definição de entrada nunca é mutada

Limites explícitos:
    - Não aplica overrides (responsabilidade de `deep_merge`)
    - Não protege contra definições cíclicas
    - Não captura exceções levantadas pelos geradores
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, Tuple

from fixture_factory.core.errors import InvalidDefinitionError
from fixture_factory.core.log import get_logger

from .definition import FieldKind, classify

log = get_logger(__name__)


def _resolve(definition: Mapping, path: Tuple[str, ...]) -> Dict[str, Any]:
    result: Dict[str, Any] = {}

    for key, value in definition.items():
        kind = classify(value)

        if kind is FieldKind.GENERATOR:
            try:
                result[key] = value()
            except Exception as exc:
                log.debug(
                    "defaults_generator_failed",
                    field=".".join((*path, str(key))),
                    error_type=type(exc).__name__,
                )
                raise
        elif kind is FieldKind.SUBTREE:
            result[key] = _resolve(value, (*path, str(key)))
        else:
            result[key] = value

    return result


def resolve_defaults(definition: Mapping) -> Dict[str, Any]:
    """
    Resolve uma definição de defaults em um novo dicionário concreto.

    A travessia é em profundidade. Uma falha em qualquer gerador interrompe
    a resolução inteira e é propagada sem alteração ao chamador; nenhum
    objeto parcialmente construído é retornado.

    Args:
        definition (Mapping): Definição de defaults.

    Returns:
        Dict[str, Any]: Objeto resolvido.

    Raises:
        InvalidDefinitionError: Se a definição raiz não for um mapeamento.
    """
    if classify(definition) is not FieldKind.SUBTREE:
        raise InvalidDefinitionError(
            f"Definição de defaults deve ser um mapeamento, recebido: {type(definition).__name__}"
        )

    return _resolve(definition, ())
