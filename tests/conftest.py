from pathlib import Path
from typing import Any, Callable

import pytest
from click.testing import CliRunner

from profanity.config import ScanSettings, get_settings, set_settings


@pytest.fixture(autouse=True)
def default_settings():
    """Give every test fresh default settings and restore the previous ones."""
    original_settings = get_settings()
    set_settings(ScanSettings())

    yield

    set_settings(original_settings)


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[[dict[str, str]], Path]:
    """Write a {relative path: text} mapping under tmp_path and return the root."""

    def _make(files: dict[str, str]) -> Path:
        for relative, text in files.items():
            path = tmp_path / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding="utf-8")
        return tmp_path

    return _make


@pytest.fixture
def cli_runner(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> CliRunner:
    """Runner invoked from inside tmp_path with a wide terminal so rich output never wraps."""
    monkeypatch.chdir(tmp_path)

    class WideCliRunner(CliRunner):
        def invoke(self, cli: Any, args: Any = None, **kwargs: Any):  # type: ignore[override]
            env = dict(kwargs.pop("env", {}) or {})
            env.setdefault("COLUMNS", "200")
            return super().invoke(cli, args=args, env=env, **kwargs)

    return WideCliRunner()
