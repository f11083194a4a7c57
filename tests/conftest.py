from __future__ import annotations

from pathlib import Path

import pytest

from make_data.config import _ENV_TO_CONFIG


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # Empty values are ignored by load_config and keep .env files from leaking across tests.
    for env_key in _ENV_TO_CONFIG:
        monkeypatch.setenv(env_key, "")


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(tmp_path)
    return tmp_path
