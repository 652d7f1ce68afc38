import json
import stat
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path, monkeypatch):
    """Keep config, data and logs inside the test's tmp dir."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    monkeypatch.delenv("EDITOR", raising=False)
    return tmp_path


@pytest.fixture
def editor_script(tmp_path):
    """Build an editor command that runs ``body`` with the draft path as ``$1``."""

    def _make(body: str) -> str:
        script = tmp_path / "fake_editor.sh"
        script.write_text("#!/bin/sh\n" + body)
        script.chmod(script.stat().st_mode | stat.S_IEXEC)
        return f"sh {Path(script)}"

    return _make


@pytest.fixture
def fake_editor(editor_script):
    """Build an editor command that overwrites the draft file with ``payload``."""

    def _make(payload: dict) -> str:
        return editor_script(f"cat > \"$1\" <<'JSON'\n{json.dumps(payload)}\nJSON\n")

    return _make
