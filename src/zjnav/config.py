"""Configuration for zjnav.

Values are layered: model defaults, then a TOML file, then ZJNAV_* environment
variables. The file is ZJNAV_CONFIG_FILE if set, else ~/.config/zjnav/config.toml.
"""
import logging
import os
import tomllib
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple

import tomli_w
from pydantic import BaseModel, Field, ValidationError, ValidationInfo, field_validator

from .models import ModifierClass

logger = logging.getLogger(__name__)

ENV_PREFIX = "ZJNAV"
DEFAULT_CONFIG_FILE = "~/.config/zjnav/config.toml"

_TRUE = {"true", "1", "yes", "on"}
_FALSE = {"false", "0", "no", "off"}


class ConfigError(Exception):
    """Invalid or unreadable configuration."""


class KeysConfig(BaseModel):
    """Modifier classes used when writing keys into an editor."""

    move_mod: ModifierClass = Field(ModifierClass.CTRL, description="Modifier for focus movement")
    resize_mod: ModifierClass = Field(ModifierClass.ALT, description="Modifier for resizing")

    @field_validator("move_mod", "resize_mod", mode="before")
    @classmethod
    def _parse_modifier(cls, value: Any, info: ValidationInfo) -> ModifierClass:
        if isinstance(value, ModifierClass):
            return value
        mod = ModifierClass.parse(value)
        if mod is None:
            raise ValueError(f"Illegal modifier for {info.field_name}: {value!r}")
        return mod


class EditorsConfig(BaseModel):
    """Programs that handle directional keys themselves."""

    modal: List[str] = Field(default_factory=lambda: ["vim", "nvim"])


class ServerConfig(BaseModel):
    """Daemon settings."""

    host: str = "127.0.0.1"
    port: int = 21591


class Config(BaseModel):
    """Complete zjnav configuration."""

    keys: KeysConfig = Field(default_factory=KeysConfig)
    editors: EditorsConfig = Field(default_factory=EditorsConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)


def parse_modifiers(configuration: Mapping[str, str]) -> Tuple[ModifierClass, ModifierClass]:
    """Read `move_mod` and `resize_mod` from a plain string mapping.

    Missing keys fall back to ctrl for movement and alt for resizing.

    Raises:
        ConfigError: If a value is not ctrl or alt (any case)
    """
    settings = {key: configuration[key] for key in ("move_mod", "resize_mod") if key in configuration}
    try:
        keys = KeysConfig(**settings)
    except ValidationError as e:
        raise ConfigError(str(e)) from e
    return keys.move_mod, keys.resize_mod


def generate_env_var_name(section: str, field: str) -> str:
    """Environment variable that overrides `section.field`."""
    return f"{ENV_PREFIX}_{section.upper()}_{field.upper()}"


def get_all_env_mappings() -> Dict[str, Tuple[str, str]]:
    """Map every overridable environment variable to its (section, field)."""
    mappings = {}
    for section, section_field in Config.model_fields.items():
        section_model = section_field.default_factory
        for field in section_model.model_fields:
            mappings[generate_env_var_name(section, field)] = (section, field)
    return mappings


def _convert_env_value(value: str) -> Any:
    """Convert an environment string to bool, int or leave it as a string."""
    if value.lower() in _TRUE:
        return True
    if value.lower() in _FALSE:
        return False
    try:
        return int(value)
    except ValueError:
        return value


def _is_list_field(section: str, field: str) -> bool:
    section_model = Config.model_fields[section].default_factory
    return isinstance(section_model().model_dump()[field], list)


def load_all_env_overrides() -> Dict[str, Dict[str, Any]]:
    """Collect ZJNAV_* environment overrides as nested section dicts."""
    overrides: Dict[str, Dict[str, Any]] = {}
    for env_var, (section, field) in get_all_env_mappings().items():
        value = os.environ.get(env_var)
        if value is None:
            continue
        if _is_list_field(section, field):
            converted = [item.strip() for item in value.split(",") if item.strip()]
        else:
            converted = _convert_env_value(value)
        overrides.setdefault(section, {})[field] = converted
    return overrides


def _read_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e


def load_config(config_file: Optional[str] = None) -> Config:
    """Load configuration from file and environment.

    Args:
        config_file: Explicit TOML file; a missing file means defaults

    Raises:
        ConfigError: If the file is not valid TOML or a value is invalid
    """
    if config_file is None:
        config_file = os.environ.get(f"{ENV_PREFIX}_CONFIG_FILE", DEFAULT_CONFIG_FILE)

    path = Path(config_file).expanduser()
    data: Dict[str, Any] = {}
    if path.is_file():
        logger.debug(f"Loading config from {path}")
        data = _read_toml(path)

    for section, values in load_all_env_overrides().items():
        data.setdefault(section, {}).update(values)

    try:
        return Config(**data)
    except ValidationError as e:
        raise ConfigError(str(e)) from e


_config: Optional[Config] = None


def get_config() -> Config:
    """Return the process configuration, loading it on first use."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def set_config(config: Optional[Config]) -> None:
    global _config
    _config = config


def dump_config_toml(config: Config) -> str:
    return tomli_w.dumps(config.model_dump(mode="json"))


def _format_env_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, list):
        return ",".join(str(v) for v in value)
    return str(value)


def dump_config_env(config: Config) -> str:
    data = config.model_dump(mode="json")
    lines = []
    for env_var, (section, field) in get_all_env_mappings().items():
        lines.append(f"{env_var}={_format_env_value(data[section][field])}")
    return "\n".join(lines)
