# Ledger Reports - Ledger ingestion & financial reporting engine
# Copyright (c) 2025 Maxence Bernard (maxencebernardhub)
# Licensed under the MIT License. See LICENSE file for details.

"""
Configuration helpers for Ledger Reports.

This module is responsible for:
- loading the application configuration from a TOML file,
- applying defaults when no configuration file exists,
- exposing typed dataclasses used by the rest of the application.
"""

import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Optional

DEFAULT_CONFIG_FILE = "ledger_reports_config.toml"


@dataclass(frozen=True)
class LoaderConfig:
    """How ledger files are discovered and decoded."""

    extension: str = ".csv"
    encoding: str = "utf-8"


@dataclass(frozen=True)
class AppConfig:
    """
    Application-wide configuration for Ledger Reports.

    This aggregates:
    - the source directory holding the ledger files,
    - the output directory receiving the three reports,
    - the loader options (file extension, text encoding),
    - the logging level used by the CLI.
    """

    source_dir: Path
    output_dir: Path
    loader: LoaderConfig
    log_level: str

    def with_overrides(
        self,
        source_dir: Optional[str] = None,
        output_dir: Optional[str] = None,
        log_level: Optional[str] = None,
    ) -> "AppConfig":
        """Return a copy with the given (non-empty) values replaced."""
        changes: dict[str, Any] = {}
        if source_dir:
            changes["source_dir"] = Path(source_dir).resolve()
        if output_dir:
            changes["output_dir"] = Path(output_dir).resolve()
        if log_level:
            changes["log_level"] = log_level
        return replace(self, **changes)


def default_config(base_dir: Optional[Path] = None) -> AppConfig:
    """Built-in configuration: ``tmp/`` -> ``out/`` relative to ``base_dir``."""
    base = (base_dir or Path.cwd()).resolve()
    return AppConfig(
        source_dir=base / "tmp",
        output_dir=base / "out",
        loader=LoaderConfig(),
        log_level="INFO",
    )


def _load_toml(path: Path) -> dict[str, Any]:
    """
    Load a TOML file and return its content as a dictionary.

    Raises:
        FileNotFoundError: if the file does not exist.
        ValueError: if the TOML content cannot be parsed.
    """
    if not path.is_file():
        raise FileNotFoundError(f"Config file not found: {path}")

    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise ValueError(f"Failed to parse TOML config file: {path}") from exc


def _section(raw: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    section = raw.get(name) or {}
    if not isinstance(section, Mapping):
        raise ValueError(f"Invalid [{name}] section in configuration, expected a table.")
    return section


def load_app_config(config_path: Optional[str] = None) -> AppConfig:
    """
    Load the Ledger Reports configuration from a TOML file.

    Expected sections in the TOML file (all optional)
    -------------------------------------------------
    [paths]
        ``source_dir`` (default "tmp") and ``output_dir`` (default "out").
        Relative paths are resolved against the directory of the TOML file.

    [loader]
        ``extension`` of the ledger files (default ".csv") and their text
        ``encoding`` (default "utf-8").

    [logging]
        ``level`` (default "INFO").

    Parameters
    ----------
    config_path :
        Path to the TOML file. When omitted, ``ledger_reports_config.toml``
        in the current directory is used if it exists, otherwise the
        built-in defaults apply.

    Returns
    -------
    AppConfig
        Parsed and validated configuration.

    Raises
    ------
    FileNotFoundError
        If an explicitly given config file does not exist.
    ValueError
        If the file cannot be parsed or a section has the wrong type.
    """
    if config_path is None:
        config_file = Path(DEFAULT_CONFIG_FILE).resolve()
        if not config_file.is_file():
            return default_config()
    else:
        config_file = Path(config_path).resolve()

    raw = _load_toml(config_file)
    base_dir = config_file.parent
    defaults = default_config(base_dir)

    # 1) Paths
    paths_section = _section(raw, "paths")
    source_raw = paths_section.get("source_dir")
    output_raw = paths_section.get("output_dir")
    source_dir = (base_dir / str(source_raw)).resolve() if source_raw else defaults.source_dir
    output_dir = (base_dir / str(output_raw)).resolve() if output_raw else defaults.output_dir

    # 2) Loader options
    loader_section = _section(raw, "loader")
    extension = str(loader_section.get("extension") or defaults.loader.extension)
    if not extension.startswith("."):
        extension = f".{extension}"
    encoding = str(loader_section.get("encoding") or defaults.loader.encoding)

    # 3) Logging
    logging_section = _section(raw, "logging")
    log_level = str(logging_section.get("level") or defaults.log_level)

    return AppConfig(
        source_dir=source_dir,
        output_dir=output_dir,
        loader=LoaderConfig(extension=extension, encoding=encoding),
        log_level=log_level,
    )
