import pytest

from alikepack.config import reset_config_cache

_ENV_VARS = (
    "ALIKEKIT_MAX_DEPTH",
    "ALIKEKIT_RENDER_DEPTH",
    "ALIKEKIT_FORMATTING",
    "ALIKEKIT_VERBOSITY",
)


@pytest.fixture(autouse=True)
def _isolated_alikekit_env(monkeypatch: pytest.MonkeyPatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_config_cache()
    yield
    reset_config_cache()
