# src/fixture_factory/core/sequences.py
"""
Sequências: geradores com contador incremental próprio.

Uma sequência é um callable sem argumentos que produz valores a partir de
um contador privado, iniciado em 0 e incrementado em 1 a cada chamada.
Sequências são consumidas pela factory como geradores comuns dentro de uma
definição de defaults; a factory não possui conhecimento especial sobre elas.

Formas de criação:
    - create_sequence()            → 0, 1, 2, ...
    - create_sequence("user-")     → "user-0", "user-1", ...
    - create_sequence(lambda i: i) → fn(0), fn(1), fn(2), ...

Invariantes:
    - Duas sequências nunca compartilham contador
    - Não existe contador global de processo

Limites explícitos:
    - Não é thread-safe; chamadas concorrentes podem disputar o contador
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Union


class Sequence:
    """Callable que produz `fn(i)` para i = 0, 1, 2, ..."""

    __slots__ = ("_fn", "_index")

    def __init__(self, fn: Callable[[int], Any]):
        self._fn = fn
        self._index = 0

    def __call__(self) -> Any:
        i = self._index
        self._index += 1
        return self._fn(i)

    @property
    def count(self) -> int:
        """Quantidade de índices já consumidos."""
        return self._index

    def reset(self) -> None:
        self._index = 0

    def __repr__(self) -> str:
        return f"Sequence(count={self._index})"


def create_sequence(seed: Optional[Union[str, Callable[[int], Any]]] = None) -> Sequence:
    """
    Cria uma nova sequência com contador próprio iniciado em 0.

    Args:
        seed: Omitido (ou string vazia) para inteiros, uma string usada como
            prefixo, ou uma função `(i) -> valor`.

    Returns:
        Sequence: Callable sem argumentos.

    Raises:
        TypeError: Se `seed` não for string nem callable.

    Examples:
        >>> seq = create_sequence("user-")
        >>> seq(), seq()
        ('user-0', 'user-1')
    """
    if seed is None or seed == "":
        return Sequence(lambda i: i)

    if isinstance(seed, str):
        prefix = seed
        return Sequence(lambda i: f"{prefix}{i}")

    if not callable(seed):
        raise TypeError(
            f"Seed de sequência deve ser str ou callable, recebido: {type(seed).__name__}"
        )

    return Sequence(seed)
