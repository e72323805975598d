"""
Runtime settings for ngconfig.

These settings do not come from workspace files; they describe where the
workspace files live (file names, the app directory under the XDG config
home, the user's home directory) and are read from the environment.
"""

from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _package_dir() -> Path:
    return Path(__file__).resolve().parents[2]


class NgConfigSettings(BaseSettings):
    """
    Settings for locating and reading CLI configuration files.

    Environment Variable Examples:
        NGCONFIG_APP_NAME=angular
        NGCONFIG_HOME_DIR=/home/ci
        NGCONFIG_DEBUG=true
        XDG_CONFIG_HOME=/home/ci/.config   (or NGCONFIG_XDG_CONFIG_HOME)
    """

    model_config = SettingsConfigDict(
        env_prefix='NGCONFIG_',
        case_sensitive=False,
        validate_default=True,
        extra='ignore',
        populate_by_name=True,
        env_file=None,
    )

    app_name: str = Field(
        default='angular',
        description="Directory name used under the XDG config home"
    )

    config_names: list[str] = Field(
        default_factory=lambda: ['angular.json', '.angular.json'],
        description="Project config file names, in lookup order"
    )

    global_file_name: str = Field(
        default='.angular-config.json',
        description="Global (user-level) config file name"
    )

    legacy_file_name: str = Field(
        default='.angular-cli.json',
        description="Deprecated global config file name"
    )

    xdg_config_home: Optional[Path] = Field(
        default=None,
        validation_alias=AliasChoices('xdg_config_home', 'NGCONFIG_XDG_CONFIG_HOME', 'XDG_CONFIG_HOME'),
        description="XDG base config directory override"
    )

    home_dir: Optional[Path] = Field(
        default=None,
        description="Home directory override (defaults to the user's home)"
    )

    install_dir: Path = Field(
        default_factory=_package_dir,
        description="Last-resort starting point for the project config search"
    )

    debug: bool = Field(
        default=False,
        description="Enable debug logging"
    )

    @field_validator('xdg_config_home', 'home_dir', mode='before')
    @classmethod
    def empty_path_is_unset(cls, v: Any) -> Any:
        """Treat empty strings as unset, the way shells treat an empty XDG_CONFIG_HOME."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator('config_names')
    @classmethod
    def validate_config_names(cls, v: list[str]) -> list[str]:
        """Require at least one project config file name."""
        if not v:
            raise ValueError("at least one config file name is required")
        return v


@lru_cache(maxsize=1)
def get_settings() -> NgConfigSettings:
    """Return a cached settings instance.

    Reads the environment on first call. Call ``get_settings.cache_clear()``
    in tests to force a re-read.
    """
    return NgConfigSettings()
