# tests/conftest.py
"""
Fixtures compartilhados para testes do fixture_factory.

Este módulo define fixtures reutilizáveis que fornecem:
- definições de defaults mínimas e determinísticas
- documentos YAML de definição como strings
- geradores instrumentados para contar invocações

Decisões arquiteturais:
    - Fixtures são mantidas simples e explícitas
    - Cada fixture cria seus próprios geradores; nenhuma sequência é
      compartilhada entre testes

Invariantes:
    - Nenhuma fixture realiza I/O
    - Dados retornados são determinísticos

Limites explícitos:
    - Não substituir testes de integração
"""

import pytest


# =====================================================
# Definições de defaults
# =====================================================

@pytest.fixture
def user_definition() -> dict:
    """
    Definição literal de usuário usada no cenário ponta a ponta.

    Returns:
        dict: Definição sem geradores.
    """
    return {
        "id": "user-id",
        "username": "username",
        "preferences": {"a": True, "b": True},
    }


@pytest.fixture
def call_counter():
    """
    Fixture que retorna uma fábrica de geradores instrumentados.

    Cada gerador criado registra quantas vezes foi invocado em
    `calls[nome]`, permitindo verificar a regra "exatamente uma invocação
    por campo por geração".

    Returns:
        tuple: (make, calls) onde `make(nome, valor)` cria o gerador.
    """
    calls = {}

    def make(name, value):
        calls.setdefault(name, 0)

        def generator():
            calls[name] += 1
            return value

        return generator

    return make, calls


# =====================================================
# Documentos de definição (loader)
# =====================================================

@pytest.fixture
def member_defaults_yaml() -> str:
    """
    Documento YAML com defaults e traits, semelhante ao uso real.

    Usado por:
        - Testes do loader de documentos
        - Testes de overrides locais (defaults + local)
    """
    return """\
defaults:
  role: member
  active: true
  preferences:
    theme: light
    notifications: true
  tags: [basic]
traits:
  admin:
    role: admin
    tags: [basic, staff]
  inactive:
    active: false
"""


@pytest.fixture
def member_local_yaml() -> str:
    """Overrides locais aplicados sobre `member_defaults_yaml`."""
    return """\
defaults:
  preferences:
    theme: dark
"""
