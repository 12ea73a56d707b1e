"""Tests for objtasks.toml discovery and loading."""

from pathlib import Path

import pytest

from objtasks.config.discovery import CONFIG_ENV_VAR, find_config, load_config


@pytest.fixture(autouse=True)
def _no_env_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


class TestFindConfig:
    def test_in_start_dir(self, tmp_path: Path) -> None:
        cfg = tmp_path / "objtasks.toml"
        cfg.write_text("")
        assert find_config(tmp_path) == cfg.resolve()

    def test_in_parent(self, tmp_path: Path) -> None:
        cfg = tmp_path / "objtasks.toml"
        cfg.write_text("")
        child = tmp_path / "sub"
        child.mkdir()
        assert find_config(child) == cfg.resolve()

    def test_env_var_wins(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "objtasks.toml").write_text("")
        other = tmp_path / "other.toml"
        other.write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(other))
        assert find_config(tmp_path) == other

    def test_env_var_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "objtasks.toml").write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "gone.toml"))
        assert find_config(tmp_path) is None


class TestLoadConfig:
    def test_defaults_without_file(self, tmp_path: Path) -> None:
        config = load_config(cwd=tmp_path / "nowhere")
        assert config.selector.strict_combinators is True

    def test_sparse_override(self, tmp_path: Path) -> None:
        cfg = tmp_path / "objtasks.toml"
        cfg.write_text("[output]\nindent = 0\n")
        config = load_config(cfg)
        assert config.output.indent == 0
        assert config.selector.strict_combinators is True

    def test_rejects_negative_indent(self, tmp_path: Path) -> None:
        cfg = tmp_path / "objtasks.toml"
        cfg.write_text("[output]\nindent = -1\n")
        with pytest.raises(ValueError):
            load_config(cfg)
