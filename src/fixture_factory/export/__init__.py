# src/fixture_factory/export/__init__.py
"""Exportação de objetos gerados para formatos tabulares."""

from .frame import to_frame

__all__ = ["to_frame"]
