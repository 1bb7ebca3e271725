# tests/conftest.py
import pytest
from unitpipe.units.registry import DEFAULT_REGISTRY as _ureg, UnitsRegistry



@pytest.fixture(scope="session")
def ureg():
    return _ureg

@pytest.fixture
def fresh_reg():
    # isolated registry so tests can register/alias without leaking state
    return UnitsRegistry()
