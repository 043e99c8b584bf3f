import os
from pathlib import Path

import pytest

from jinja_components.config import ENV_PREFIX


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the user's config file and environment out of config tests."""
    for key in list(os.environ):
        if key.startswith(ENV_PREFIX):
            monkeypatch.delenv(key)
    monkeypatch.setattr(
        "jinja_components.config._load.get_user_config_path",
        lambda: tmp_path / "user-config" / "config.toml",
    )
