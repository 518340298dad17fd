import pytest

from assume import reset_settings, set_deep_equal, set_stack_capture
from assume.registry import restore_registry, snapshot_registry


@pytest.fixture(autouse=True)
def clean_settings():
    """Avoid cross-test leakage of the global configuration and collaborators."""
    reset_settings()
    yield
    set_deep_equal(None)
    set_stack_capture(None)
    reset_settings()


@pytest.fixture(autouse=True)
def clean_registry():
    """Avoid cross-test leakage of predicates, modifiers and linking words."""
    snapshot = snapshot_registry()
    yield
    restore_registry(snapshot)
