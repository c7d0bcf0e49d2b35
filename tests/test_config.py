"""Tests for TOML config file loading."""

from __future__ import annotations

from pathlib import Path

from incdec.cli import build_parser, load_config, main, resolve_options


class TestLoadConfig:
    def test_missing_config_returns_empty(self, tmp_path: Path) -> None:
        assert load_config(None, tmp_path) == {}

    def test_explicit_path(self, tmp_path: Path) -> None:
        cfg = tmp_path / "custom.toml"
        cfg.write_text("[increment]\namount = 5\n")
        result = load_config(cfg, tmp_path)
        assert result["increment"] == {"amount": 5}

    def test_auto_discover_incdec_toml(self, tmp_path: Path) -> None:
        cfg = tmp_path / "incdec.toml"
        cfg.write_text('[increment]\nseparator = ","\n')
        result = load_config(None, tmp_path)
        assert result["increment"] == {"separator": ","}


class TestConfigMerge:
    def test_config_amount(self, tmp_path: Path) -> None:
        (tmp_path / "incdec.toml").write_text("[increment]\namount = 16\n")
        ns = build_parser().parse_args(["0"])
        assert resolve_options(ns, tmp_path).amount == 16

    def test_cli_overrides_config_amount(self, tmp_path: Path) -> None:
        (tmp_path / "incdec.toml").write_text("[increment]\namount = 16\n")
        ns = build_parser().parse_args(["0", "-a", "2"])
        assert resolve_options(ns, tmp_path).amount == 2

    def test_decrement_applies_to_config_amount(self, tmp_path: Path) -> None:
        (tmp_path / "incdec.toml").write_text("[increment]\namount = 16\n")
        ns = build_parser().parse_args(["0", "--decrement"])
        assert resolve_options(ns, tmp_path).amount == -16

    def test_config_separator(self, tmp_path: Path) -> None:
        (tmp_path / "incdec.toml").write_text('[increment]\nseparator = ","\n')
        ns = build_parser().parse_args(["0"])
        assert resolve_options(ns, tmp_path).separator == ","

    def test_cli_overrides_config_separator(self, tmp_path: Path) -> None:
        (tmp_path / "incdec.toml").write_text('[increment]\nseparator = ","\n')
        ns = build_parser().parse_args(["0", "--separator", "_"])
        assert resolve_options(ns, tmp_path).separator == "_"

    def test_explicit_config_flag(self, tmp_path: Path) -> None:
        cfg = tmp_path / "other.toml"
        cfg.write_text("[increment]\namount = 3\n")
        ns = build_parser().parse_args(["0", "--config", str(cfg)])
        assert resolve_options(ns, tmp_path / "nowhere").amount == 3

    def test_unrelated_sections_ignored(self, tmp_path: Path) -> None:
        (tmp_path / "incdec.toml").write_text('[other]\nkey = "v"\n')
        ns = build_parser().parse_args(["0"])
        assert resolve_options(ns, tmp_path).amount == 1


class TestConfigErrors:
    def test_non_integer_amount(self, tmp_path: Path, monkeypatch, capsys) -> None:
        monkeypatch.chdir(tmp_path)
        (tmp_path / "incdec.toml").write_text('[increment]\namount = "ten"\n')
        assert main(["1"]) == 2
        assert "invalid amount" in capsys.readouterr().err

    def test_boolean_amount(self, tmp_path: Path, monkeypatch, capsys) -> None:
        monkeypatch.chdir(tmp_path)
        (tmp_path / "incdec.toml").write_text("[increment]\namount = true\n")
        assert main(["1"]) == 2

    def test_bad_config_separator(self, tmp_path: Path, monkeypatch, capsys) -> None:
        monkeypatch.chdir(tmp_path)
        (tmp_path / "incdec.toml").write_text('[increment]\nseparator = "-"\n')
        assert main(["1"]) == 2

    def test_malformed_toml(self, tmp_path: Path, monkeypatch, capsys) -> None:
        monkeypatch.chdir(tmp_path)
        (tmp_path / "incdec.toml").write_text("[increment\n")
        assert main(["1"]) == 2
        assert "invalid config" in capsys.readouterr().err
