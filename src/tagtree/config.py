"""
Configuration for tagtree.

All tunable parameters in one place. Loaded from:
1. Defaults (this file)
2. Config file (~/.config/tagtree/config.toml) if exists
3. Environment variables (TAGTREE_*) override file
4. CLI flags override everything
"""

from __future__ import annotations

import contextlib
import logging
import os
import tomllib  # stdlib in 3.11+
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass
class MarkupConfig:
    """Tag names the edits look for or create."""
    table_tag: str = "table"
    bold_tag: str = "b"
    list_item_tag: str = "li"
    list_item_replacement: str = "p"  # what li becomes when its list is unwrapped


@dataclass
class WordsConfig:
    """Word matching for add_tag."""
    punctuation: str = "!.;,?"  # at most one of these may trail a matched word


@dataclass
class IOConfig:
    """Reading documents."""
    encoding: str = "utf-8"
    skip_blank_lines: bool = True


@dataclass
class LoggingConfig:
    level: str = "WARNING"


@dataclass
class Config:
    """Root config with all settings."""
    markup: MarkupConfig = field(default_factory=MarkupConfig)
    words: WordsConfig = field(default_factory=WordsConfig)
    io: IOConfig = field(default_factory=IOConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def get_config_path() -> Path:
    """Get config file path, respecting XDG."""
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "tagtree" / "config.toml"
    return Path.home() / ".config" / "tagtree" / "config.toml"


def load_config() -> Config:
    """Load config from file if exists, else return defaults."""
    config = Config()
    path = get_config_path()

    if path.exists():
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
            config = _apply_toml(config, data)
        except (OSError, tomllib.TOMLDecodeError, TypeError, ValueError) as e:
            logger.warning("Ignoring config file %s: %s", path, e)
            config = Config()

    # env var overrides
    config = _apply_env(config)

    return config


def _apply_toml(config: Config, data: dict) -> Config:
    """Apply toml data to config."""
    if "markup" in data:
        m = data["markup"]
        for key in ("table_tag", "bold_tag", "list_item_tag", "list_item_replacement"):
            if key in m:
                setattr(config.markup, key, str(m[key]))

    if "words" in data:
        w = data["words"]
        if "punctuation" in w:
            config.words.punctuation = str(w["punctuation"])

    if "io" in data:
        io = data["io"]
        if "encoding" in io:
            config.io.encoding = str(io["encoding"])
        if "skip_blank_lines" in io:
            config.io.skip_blank_lines = bool(io["skip_blank_lines"])

    if "logging" in data:
        lg = data["logging"]
        if "level" in lg:
            config.logging.level = str(lg["level"]).upper()

    return config


def _apply_env(config: Config) -> Config:
    """Apply environment variable overrides."""
    env_map: dict[str, tuple[str, str, type]] = {
        "TAGTREE_TABLE_TAG": ("markup", "table_tag", str),
        "TAGTREE_BOLD_TAG": ("markup", "bold_tag", str),
        "TAGTREE_LIST_ITEM_TAG": ("markup", "list_item_tag", str),
        "TAGTREE_LIST_ITEM_REPLACEMENT": ("markup", "list_item_replacement", str),
        "TAGTREE_PUNCTUATION": ("words", "punctuation", str),
        "TAGTREE_ENCODING": ("io", "encoding", str),
        "TAGTREE_SKIP_BLANK_LINES": ("io", "skip_blank_lines", bool),
        "TAGTREE_LOG_LEVEL": ("logging", "level", str),
    }

    for env_key, (section, attr, conv) in env_map.items():
        val = os.environ.get(env_key)
        if val is not None:
            with contextlib.suppress(ValueError, AttributeError):
                # Bool needs special handling: "true", "1", "yes" -> True
                converted = val.lower() in ("true", "1", "yes") if conv is bool else conv(val)
                setattr(getattr(config, section), attr, converted)

    return config


# Module-level config instance, loaded once on first use
_config: Config | None = None


def get_config() -> Config:
    """Get the global config instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config
