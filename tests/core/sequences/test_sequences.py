# tests/core/sequences/test_sequences.py
"""
Testes das sequências (geradores com contador incremental próprio).

Os testes asseguram que:
- sem argumentos, a sequência produz inteiros a partir de 0
- com prefixo, produz strings `prefixo + i`
- com função, produz `fn(0), fn(1), ...`
- sequências distintas nunca compartilham contador
"""

import pytest

from fixture_factory.core.sequences import Sequence, create_sequence


def test_default_sequence_yields_integers_from_zero():
    seq = create_sequence()
    assert [seq(), seq(), seq()] == [0, 1, 2]


def test_prefix_sequence_yields_prefixed_strings():
    seq = create_sequence("u-")
    assert [seq(), seq(), seq()] == ["u-0", "u-1", "u-2"]


def test_function_sequence_yields_function_results():
    """
    Verifica que a função recebe o índice corrente, iniciado em 0.

    O retorno da função é usado como está, inclusive quando é um mapeamento.
    """
    doubled = create_sequence(lambda i: i * 2)
    assert [doubled(), doubled(), doubled()] == [0, 2, 4]

    wrapped = create_sequence(lambda i: {"i": i})
    assert [wrapped(), wrapped()] == [{"i": 0}, {"i": 1}]


def test_empty_prefix_behaves_as_integer_sequence():
    seq = create_sequence("")
    assert [seq(), seq()] == [0, 1]


def test_sequences_do_not_share_counters():
    first = create_sequence()
    second = create_sequence()

    assert [first(), first(), first()] == [0, 1, 2]
    assert second() == 0


def test_count_and_reset():
    """
    Verifica a introspecção do contador e o rewind por sequência.

    Invariantes:
        - `count` reflete quantos índices já foram consumidos
        - `reset` afeta apenas a própria sequência
    """
    seq = create_sequence("id-")
    other = create_sequence()
    seq()
    seq()
    other()

    assert seq.count == 2
    seq.reset()
    assert seq.count == 0
    assert seq() == "id-0"
    assert other() == 1


def test_failing_function_still_consumes_its_index():
    def fn(i):
        if i == 0:
            raise RuntimeError("primeiro índice falha")
        return i

    seq = create_sequence(fn)
    with pytest.raises(RuntimeError):
        seq()
    assert seq() == 1


@pytest.mark.parametrize("seed", [0, False, 1.5, 42, [], {}, ["a"], object()])
def test_invalid_seed_is_rejected(seed):
    with pytest.raises(TypeError):
        create_sequence(seed)


def test_sequence_is_a_plain_callable():
    seq = create_sequence()
    assert isinstance(seq, Sequence)
    assert callable(seq)
    assert repr(seq) == "Sequence(count=0)"
