import os
import sys
from pathlib import Path

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'themeloom'
for p in (SRC_ROOT, TESTS_ROOT):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))

from themeloom.core.config import ENV_PREFIX, load_settings
from helpers.sites import SiteBuilder


@pytest.fixture(autouse=True)
def _clear_themeloom_env(monkeypatch):
    """Developer shells must not leak THEMELOOM_* settings into tests."""
    for key in list(os.environ):
        if key.startswith(ENV_PREFIX):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def settings():
    return load_settings(environ={})


@pytest.fixture
def site(tmp_path) -> SiteBuilder:
    """A site root under tmp_path with helpers to install themes into it."""
    return SiteBuilder(tmp_path / "site")
