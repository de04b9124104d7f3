# tests/core/factory/test_many.py
"""
Testes de geração múltipla (`many`).

Os testes asseguram que:
- `many(n)` gera exatamente n objetos independentes, na ordem
- overrides são aplicados a todos os objetos
- traits e factories especializadas também suportam `many`
- quantidades inválidas são rejeitadas antes de qualquer geração
"""

import pytest

from fixture_factory import InvalidCountError, create_factory, create_sequence


@pytest.fixture
def user_factory():
    return create_factory({"id": create_sequence(), "username": "default"}).trait(
        "test", {"username": "trait"}
    )


def test_many_generates_objects_in_order(user_factory):
    assert user_factory.many(3) == [
        {"id": 0, "username": "default"},
        {"id": 1, "username": "default"},
        {"id": 2, "username": "default"},
    ]


def test_many_applies_overrides_to_every_object(user_factory):
    assert user_factory.many(2, {"username": "override"}) == [
        {"id": 0, "username": "override"},
        {"id": 1, "username": "override"},
    ]


def test_many_from_trait(user_factory):
    assert user_factory.test.many(2) == [
        {"id": 0, "username": "trait"},
        {"id": 1, "username": "trait"},
    ]


def test_many_from_trait_with_overrides(user_factory):
    assert user_factory.test.many(2, {"username": "override"}) == [
        {"id": 0, "username": "override"},
        {"id": 1, "username": "override"},
    ]


def test_many_zero_returns_empty_list(user_factory):
    assert user_factory.many(0) == []
    assert user_factory()["id"] == 0


def test_many_results_are_independent_objects():
    """
    Verifica a independência dos objetos gerados.

    Invariantes:
        - Mapeamentos aninhados são novos a cada objeto
        - Listas produzidas por geradores são novas a cada objeto
        - Listas literais e instâncias de classes são compartilhadas como estão
    """
    class Account:
        pass

    owner = Account()
    factory = create_factory({"prefs": {"a": True}, "tags": lambda: ["x"], "owners": [owner]})
    first, second = factory.many(2)

    first["prefs"]["a"] = False
    first["tags"].append("y")

    assert second["prefs"] == {"a": True}
    assert second["tags"] == ["x"]
    assert first["owners"][0] is owner
    assert second["owners"] is first["owners"]


def test_many_ids_strictly_increase():
    """Propriedade de consistência: sequências produzem valores crescentes na ordem de chamada."""
    factory = create_factory({"id": create_sequence(lambda i: i * 10)})
    ids = [obj["id"] for obj in factory.many(3)]
    assert ids == sorted(ids)
    assert len(set(ids)) == 3


@pytest.mark.parametrize("count", [-1, 1.5, 2.0, "3", None, True])
def test_invalid_count_fails_before_generating(count, call_counter):
    """
    Verifica a rejeição antecipada de quantidades inválidas.

    Decisões arquiteturais:
        - Nenhum gerador é invocado quando a quantidade é inválida
        - A exceção é um ValueError tipado (`InvalidCountError`)
    """
    make, calls = call_counter
    factory = create_factory({"a": make("a", 1)})

    with pytest.raises(InvalidCountError):
        factory.many(count)
    with pytest.raises(ValueError):
        factory.many(count)

    assert calls == {"a": 0}


def test_generator_failure_aborts_many():
    produced = []

    def gen():
        if len(produced) == 2:
            raise RuntimeError("terceiro objeto falha")
        produced.append(len(produced))
        return produced[-1]

    factory = create_factory({"n": gen})
    with pytest.raises(RuntimeError, match="terceiro"):
        factory.many(5)
    assert produced == [0, 1]
