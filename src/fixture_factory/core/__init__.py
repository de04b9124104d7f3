# src/fixture_factory/core/__init__.py
"""
Core do fixture_factory.

Componentes principais:
    - defaults  → resolução de definições e deep-merge de overrides
    - factory   → composição imutável de factories, traits e associações
    - sequences → geradores com contador incremental próprio
    - errors    → hierarquia de exceções do pacote

O core não realiza I/O, não mantém estado global e não depende de pandas
nem de arquivos de configuração.
"""
