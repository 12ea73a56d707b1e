"""Tests for ObjSettings — CLI flags, env vars, and TOML source."""

from pathlib import Path

import click
import pytest

from objtasks.config.settings import ObjSettings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("OBJTASKS_CONFIG", raising=False)
    monkeypatch.delenv("OBJTASKS_SELECTOR__STRICT_COMBINATORS", raising=False)
    monkeypatch.delenv("OBJTASKS_OUTPUT__INDENT", raising=False)


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = ObjSettings.from_cli(start=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.selector.strict_combinators is True
        assert settings.output.indent == 2

    def test_frozen(self, tmp_path: Path) -> None:
        settings = ObjSettings.from_cli(start=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_discovered_file(self, tmp_path: Path) -> None:
        toml = tmp_path / "objtasks.toml"
        toml.write_text("[selector]\nstrict_combinators = false\n")
        settings = ObjSettings.from_cli(start=tmp_path)
        assert settings.config_path == toml.resolve()
        assert settings.selector.strict_combinators is False
        assert settings.output.indent == 2  # default preserved

    def test_walks_up(self, tmp_path: Path) -> None:
        (tmp_path / "objtasks.toml").write_text("[output]\nindent = 4\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert ObjSettings.from_cli(start=nested).output.indent == 4

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom.toml"
        custom.write_text("[output]\nindent = 0\n")
        settings = ObjSettings.from_cli(config_path=str(custom))
        assert settings.output.indent == 0
        assert settings.config_path == custom

    def test_missing_explicit_path_ignored(self, tmp_path: Path) -> None:
        settings = ObjSettings.from_cli(config_path=str(tmp_path / "nope.toml"))
        assert settings.config_path is None

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "objtasks.toml").write_text("[selector\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            ObjSettings.from_cli(start=tmp_path)


class TestPriority:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "objtasks.toml").write_text("[output]\nindent = 4\n")
        monkeypatch.setenv("OBJTASKS_OUTPUT__INDENT", "8")
        assert ObjSettings.from_cli(start=tmp_path).output.indent == 8

    def test_cli_flags(self, tmp_path: Path) -> None:
        settings = ObjSettings.from_cli(start=tmp_path, json_output=True, verbose=True)
        assert settings.json_output is True
        assert settings.verbose is True
