# src/fixture_factory/core/log.py
"""
Logging estruturado do fixture_factory.

Os módulos do pacote emitem eventos structlog (`evento`, `campo=valor`)
sobre loggers da stdlib com o mesmo nome do módulo. Assim, o nível e o
destino dos eventos seguem a configuração de logging da aplicação ou da
suíte de testes hospedeira; o pacote nunca chama `structlog.configure`.
"""

import logging

import structlog


def get_logger(name: str) -> structlog.typing.BindableLogger:
    """Retorna um logger structlog sobre `logging.getLogger(name)`."""
    return structlog.wrap_logger(logging.getLogger(name))
