"""TOML configuration for the lexer (picolex.toml)."""

from __future__ import annotations

import tomllib
from dataclasses import replace
from pathlib import Path
from typing import Any

from picolex.errors import ConfigError
from picolex.validators import TokenizerOptions, charset, keywords

CONFIG_FILENAME = "picolex.toml"

# [validators] key -> Validators field
_CHARSET_KEYS = {
    "letters": "is_character",
    "digits": "is_number",
    "spaces": "is_space",
    "operators": "is_operator",
    "separators": "is_separator",
    "number_separators": "is_number_separator",
    "strings": "is_string",
}


def load_config(config_path: Path | None, search_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else search_dir / CONFIG_FILENAME

    if not path.is_file():
        return {}

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"invalid TOML: {exc}", path) from exc
    except OSError as exc:
        raise ConfigError(f"cannot read config: {exc.strerror}", path) from exc


def options_from_config(
    config: dict[str, Any],
    base: TokenizerOptions | None = None,
    path: Path | None = None,
) -> TokenizerOptions:
    """Apply a loaded config mapping on top of *base* (defaults when None)."""
    options = base if base is not None else TokenizerOptions()
    validators = options.validators

    cfg_validators = config.get("validators", {})
    if not isinstance(cfg_validators, dict):
        raise ConfigError("expected a table", path, "validators")
    overrides = {}
    for key, field_name in _CHARSET_KEYS.items():
        if key not in cfg_validators:
            continue
        value = cfg_validators[key]
        if not isinstance(value, str):
            raise ConfigError(
                f"expected a string of characters, got {type(value).__name__}",
                path,
                f"validators.{key}",
            )
        overrides[field_name] = charset(value)
    if overrides:
        validators = replace(validators, **overrides)

    cfg_instructions = config.get("instructions", {})
    if not isinstance(cfg_instructions, dict):
        raise ConfigError("expected a table", path, "instructions")
    if "keywords" in cfg_instructions:
        words = cfg_instructions["keywords"]
        if not isinstance(words, list) or not all(isinstance(w, str) for w in words):
            raise ConfigError("expected a list of strings", path, "instructions.keywords")
        case_sensitive = cfg_instructions.get("case_sensitive", True)
        if not isinstance(case_sensitive, bool):
            raise ConfigError("expected a boolean", path, "instructions.case_sensitive")
        validators = replace(validators, is_instruction=keywords(words, case_sensitive))

    insert_eof = config.get("insert_eof", options.insert_eof)
    if not isinstance(insert_eof, bool):
        raise ConfigError("expected a boolean", path, "insert_eof")

    return replace(options, validators=validators, insert_eof=insert_eof)


def load_options(config_path: Path | None = None, search_dir: Path | None = None) -> TokenizerOptions:
    """Load picolex.toml (explicit path or discovered in *search_dir*) as options."""
    if search_dir is None:
        search_dir = Path(".")
    path = config_path if config_path is not None else search_dir / CONFIG_FILENAME
    return options_from_config(load_config(config_path, search_dir), path=path)
