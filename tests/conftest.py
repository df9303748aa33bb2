"""
Pytest configuration and shared fixtures for miner ID extension tests.

This conftest.py:
1. Adds project root to sys.path for imports
2. Provides commonly-used fixtures via pytest's autodiscovery
3. Resets the process-wide default runtime config between tests
"""

import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

# Get the project root (parent of tests/)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

# Add both project root and tests root to sys.path
for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

# =============================================================================
# Import fixtures using importlib (more robust for pytest loading)
# =============================================================================

import importlib

_jobs = importlib.import_module("fixtures.job_fixtures")

make_miner_id_doc = _jobs.make_miner_id_doc
make_mining_candidate = _jobs.make_mining_candidate
make_getinfo = _jobs.make_getinfo
make_fee_spec = _jobs.make_fee_spec
make_job_data = _jobs.make_job_data


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

_MINERID_ENV_VARS = (
    "MINERID_EXTENSIONS",
    "MINERID_LEGACY_FLOAT_WIDENING",
    "MINERID_BATCH_WORKERS",
    "MINERID_LOG_LEVEL",
    "MINERID_LOG_FILE",
    "MINERID_OUTPUT_FORMAT",
)


@pytest.fixture(autouse=True)
def clean_runtime_config(monkeypatch):
    """Isolate tests from MINERID_* env vars and the cached default config."""
    from core.config import set_default_config

    for name in _MINERID_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    set_default_config(None)
    yield
    set_default_config(None)


@pytest.fixture
def miner_id_doc():
    """Provide a miner ID document without extensions."""
    return make_miner_id_doc()


@pytest.fixture
def mining_candidate():
    """Provide a getminingcandidate result."""
    return make_mining_candidate()


@pytest.fixture
def getinfo():
    """Provide a getinfo result."""
    return make_getinfo()


@pytest.fixture
def fee_spec():
    """Provide a two-tier fee schedule."""
    return make_fee_spec()


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
