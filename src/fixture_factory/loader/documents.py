# src/fixture_factory/loader/documents.py
"""
Loader de documentos de definição de defaults.

Definições compostas apenas de literais podem ser declaradas em arquivos
YAML ou JSON e resolvidas da mesma forma que a configuração de um projeto:

    - um documento de defaults (obrigatório)
    - um documento local de overrides (opcional), aplicado via deep-merge

Shape do documento (v1):
    - raiz = definição, ou
    - raiz com a chave `defaults` (definição) e, opcionalmente, `traits`
      (mapeamento nome → overrides do trait)

Exemplo (YAML):
    defaults:
      role: member
      preferences:
        theme: light
    traits:
      admin:
        role: admin

Invariantes:
    - O resultado é sempre um dicionário puro
    - O documento local nunca muta os defaults
    - Traits são registrados na ordem em que aparecem no documento

Limites explícitos:
    - Documentos não expressam geradores; sequências e funções devem ser
      adicionadas em código via `trait`/`associate` ou overrides
    - Não valida semântica de domínio
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Tuple

import yaml  # PyYAML

from fixture_factory.core.defaults import deep_merge
from fixture_factory.core.factory import Factory, create_factory
from fixture_factory.core.log import get_logger

from .errors import (
    DefinitionNotFoundError,
    InvalidDefinitionError,
    UnsupportedDefinitionFormatError,
)

log = get_logger(__name__)

DEFAULTS_KEY = "defaults"
TRAITS_KEY = "traits"


def _parse_yaml(text: str) -> Any:
    return yaml.safe_load(text)


def _parse_json(text: str) -> Any:
    return json.loads(text) if text.strip() else None


_PARSERS: Dict[str, Callable[[str], Any]] = {
    ".yaml": _parse_yaml,
    ".yml": _parse_yaml,
    ".json": _parse_json,
}


def _as_mapping(value: Any, where: str) -> Dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise InvalidDefinitionError(f"{where} deve ser dict, recebido: {type(value).__name__}")
    return value


def _read_document(path: Path) -> Dict[str, Any]:
    """
    Lê um documento de definição e devolve sua raiz como dicionário.

    O parser é escolhido pela extensão do arquivo; um documento vazio
    equivale a uma definição vazia.

    Raises:
        DefinitionNotFoundError: Se o arquivo não existir.
        UnsupportedDefinitionFormatError: Se a extensão não tiver parser.
        InvalidDefinitionError: Se a raiz não for um dicionário.
    """
    parse = _PARSERS.get(path.suffix.lower())
    if parse is None:
        raise UnsupportedDefinitionFormatError(f"Formato não suportado: {path.suffix}")

    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise DefinitionNotFoundError(f"Documento de defaults não encontrado: {path}") from exc

    document = _as_mapping(parse(text), "Raiz do documento")
    log.debug("definition_document_loaded", path=str(path), keys=len(document))
    return document


def load_document(
    *,
    defaults_path: str,
    local_path: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Carrega o documento de defaults e aplica o documento local, se existir.

    Args:
        defaults_path (str): Caminho do documento base.
        local_path (Optional[str]): Caminho opcional de overrides locais.

    Returns:
        Dict[str, Any]: Documento resolvido.
    """
    document = _read_document(Path(defaults_path))

    if local_path is not None:
        local_file = Path(local_path)
        if local_file.exists():
            document = deep_merge(document, _read_document(local_file))
        else:
            log.debug("definition_local_document_missing", path=str(local_file))

    return document


def _split_document(document: Dict[str, Any]) -> Tuple[Dict[str, Any], Dict[str, Any]]:
    if DEFAULTS_KEY not in document:
        return document, {}

    definition = _as_mapping(document[DEFAULTS_KEY], f"'{DEFAULTS_KEY}'")
    traits = _as_mapping(document.get(TRAITS_KEY), f"'{TRAITS_KEY}'")
    return definition, traits


def load_definition(
    *,
    defaults_path: str,
    local_path: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Carrega a definição de defaults de um documento YAML ou JSON.

    Quando o documento possui a chave `defaults`, apenas ela é retornada;
    caso contrário, a raiz inteira é a definição.

    Raises:
        DefinitionNotFoundError: Se o documento de defaults não existir.
        UnsupportedDefinitionFormatError: Se o formato não for suportado.
        InvalidDefinitionError: Se a raiz ou `defaults` não for um dicionário.
    """
    definition, _ = _split_document(
        load_document(defaults_path=defaults_path, local_path=local_path)
    )
    return definition


def load_factory(
    *,
    defaults_path: str,
    local_path: Optional[str] = None,
) -> Factory:
    """
    Cria uma factory a partir de um documento de definição.

    Os traits declarados em `traits` são registrados na ordem do documento,
    cada um contra a definição base.

    Returns:
        Factory: Factory com os traits do documento registrados.
    """
    definition, traits = _split_document(
        load_document(defaults_path=defaults_path, local_path=local_path)
    )

    factory = create_factory(definition)
    for name, overrides in traits.items():
        factory = factory.trait(name, overrides or {})

    return factory
