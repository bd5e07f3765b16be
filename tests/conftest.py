import os

import pytest

from pattern_catalog.config import manager as config_manager_module
from pattern_catalog.infrastructure.registry.pattern_registry import PatternRegistry
from pattern_catalog.infrastructure.registry.registration import register_all_patterns


@pytest.fixture
def registry():
    """Fresh registry holding every catalog pattern."""
    return register_all_patterns(PatternRegistry())


@pytest.fixture(autouse=True)
def reset_shared_config_manager():
    """Shared configuration manager must not leak between tests."""
    config_manager_module._config_manager = None
    yield
    config_manager_module._config_manager = None


@pytest.fixture(autouse=True)
def clean_catalog_env(monkeypatch):
    """Remove PATTERN_CATALOG_* variables from the environment."""
    for name in list(os.environ):
        if name.startswith("PATTERN_CATALOG_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def narration(capsys):
    """Run a callable and return the lines it printed."""
    def _run(func, *args, **kwargs):
        capsys.readouterr()
        func(*args, **kwargs)
        return capsys.readouterr().out.splitlines()
    return _run
