from pathlib import Path

import pytest

from ledger_reports.config import load_app_config


def test_defaults_when_no_config_file(tmp_path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)

    config = load_app_config()

    assert config.source_dir == (tmp_path / "tmp").resolve()
    assert config.output_dir == (tmp_path / "out").resolve()
    assert config.loader.extension == ".csv"
    assert config.loader.encoding == "utf-8"
    assert config.log_level == "INFO"


def test_paths_resolved_relative_to_config_file(tmp_path) -> None:
    cfg_dir = tmp_path / "conf"
    cfg_dir.mkdir()
    cfg = cfg_dir / "ledger_reports_config.toml"
    cfg.write_text(
        "[paths]\n"
        'source_dir = "ledgers"\n'
        'output_dir = "../reports"\n'
        "\n"
        "[loader]\n"
        'extension = "txt"\n'
        'encoding = "latin-1"\n'
        "\n"
        "[logging]\n"
        'level = "DEBUG"\n',
        encoding="utf-8",
    )

    config = load_app_config(str(cfg))

    assert config.source_dir == (cfg_dir / "ledgers").resolve()
    assert config.output_dir == (tmp_path / "reports").resolve()
    assert config.loader.extension == ".txt"
    assert config.loader.encoding == "latin-1"
    assert config.log_level == "DEBUG"


def test_partial_config_falls_back_to_defaults(tmp_path) -> None:
    cfg = tmp_path / "cfg.toml"
    cfg.write_text('[paths]\noutput_dir = "reports"\n', encoding="utf-8")

    config = load_app_config(str(cfg))

    assert config.source_dir == (tmp_path / "tmp").resolve()
    assert config.output_dir == (tmp_path / "reports").resolve()


def test_explicit_missing_config_raises(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        load_app_config(str(tmp_path / "nope.toml"))


def test_invalid_toml_raises_value_error(tmp_path) -> None:
    cfg = tmp_path / "bad.toml"
    cfg.write_text("[paths\nsource_dir = ", encoding="utf-8")

    with pytest.raises(ValueError):
        load_app_config(str(cfg))


def test_section_must_be_a_table(tmp_path) -> None:
    cfg = tmp_path / "bad.toml"
    cfg.write_text('paths = "tmp"\n', encoding="utf-8")

    with pytest.raises(ValueError):
        load_app_config(str(cfg))


def test_overrides_only_replace_given_values(tmp_path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    config = load_app_config()

    updated = config.with_overrides(output_dir="elsewhere", log_level="")

    assert updated.output_dir == Path("elsewhere").resolve()
    assert updated.source_dir == config.source_dir
    assert updated.log_level == "INFO"
