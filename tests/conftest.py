"""Shared fixtures."""
import io

import pytest

from projecthub.adapters import InMemoryProjectRepository
from projecthub.config import get_settings, load_settings
from projecthub.core.logger import StructuredLogger
from projecthub.providers import AppContext

ENV_KEYS = [
    "DATABASE_URL",
    "SESSION_SECRET",
    "SESSION_MAX_AGE",
    "NODE_ENV",
    "NEXT_PUBLIC_APP_URL",
    "BCRYPT_ROUNDS",
    "RATE_LIMIT_MAX",
    "RATE_LIMIT_WINDOW_MS",
]


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Each test validates the environment afresh."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def valid_env():
    return {
        "DATABASE_URL": "memory://",
        "SESSION_SECRET": "s" * 32,
        "NODE_ENV": "test",
    }


@pytest.fixture
def process_env(monkeypatch, valid_env):
    """Replace the ProjectHub variables in os.environ with ``valid_env``."""
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    for key, value in valid_env.items():
        monkeypatch.setenv(key, value)
    return valid_env


@pytest.fixture
def settings(valid_env):
    return load_settings(valid_env)


@pytest.fixture
def quiet_logger():
    """Development-mode logger writing into buffers."""
    return StructuredLogger(name="test", development=True, stdout=io.StringIO(), stderr=io.StringIO())


@pytest.fixture
def repository():
    return InMemoryProjectRepository()


@pytest.fixture
def context(settings, repository, quiet_logger):
    return AppContext(settings, repository, logger=quiet_logger)
