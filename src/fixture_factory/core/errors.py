# src/fixture_factory/core/errors.py
"""
Exceções canônicas do fixture_factory.

Este módulo define a hierarquia oficial de exceções levantadas pela
resolução de defaults e pela composição de factories.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Cada exceção herda também do builtin equivalente do Python, para que
      o chamador possa capturar `ValueError`, `TypeError` ou
      `AttributeError` sem conhecer esta hierarquia
    - Exceções levantadas por funções geradoras do usuário nunca são
      encapsuladas nem silenciadas

Invariantes:
    - Todas as exceções do pacote herdam de `FactoryError`
    - Nenhuma exceção carrega estado mutável

Limites explícitos:
    - Não representa falhas das funções geradoras do usuário
    - Não realiza fallback ou recovery
"""


class FactoryError(Exception):
    """
    Exceção base do fixture_factory.

    Permite captura genérica de qualquer falha estrutural originada pela
    biblioteca, distinguindo-a de exceções levantadas por geradores do
    usuário durante a resolução.
    """


class InvalidDefinitionError(FactoryError, TypeError):
    """
    Exceção levantada quando uma definição de defaults não é um mapeamento.

    Exemplo:
        - create_factory(["id", "name"])
        - conteúdo raiz de um documento YAML sendo uma lista

    Limites explícitos:
        - Não valida o shape interno da definição
        - Não tenta encapsular estruturas inválidas
    """


class InvalidCountError(FactoryError, ValueError):
    """
    Exceção levantada quando `many` recebe uma quantidade inválida.

    A quantidade deve ser um `int` (não `bool`) maior ou igual a zero.
    A validação ocorre antes de qualquer objeto ser gerado.
    """


class UnknownTraitError(FactoryError, AttributeError, KeyError):
    """Trait acessado nunca foi registrado na factory."""

    def __str__(self) -> str:
        # KeyError.__str__ aplicaria repr() sobre a mensagem
        return str(self.args[0]) if self.args else ""


class ReservedTraitNameError(FactoryError, ValueError):
    """
    Nome de trait inválido ou conflitante com um membro da factory.

    Traits são expostos como atributos (`factory.admin`), portanto um nome
    como `many` ou `trait` tornaria o membro original inacessível.
    """


class InvalidOverridesError(FactoryError, TypeError):
    """
    Overrides de geração não são um mapeamento.

    Overrides são sempre uma árvore parcial do objeto gerado; substituir o
    objeto inteiro por um valor escalar ou lista não é permitido na chamada
    da factory.
    """
