import logging
import tomllib
from pathlib import Path

import tomli_w
import typer
from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from thundery.errors import ConfigError
from thundery.models import Config

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "thundery.toml"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="THUNDERY_", extra="ignore")

    # App
    app_name: str = "thundery"
    log_level: str = "WARNING"

    # Provider
    openweather_base_url: str = "https://api.openweathermap.org/data/2.5"
    openweather_timeout_seconds: float = 5.0


settings = Settings()


def default_config_path() -> Path:
    return Path(typer.get_app_dir(settings.app_name)) / CONFIG_FILE_NAME


def write_config(path: Path, config: Config) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(tomli_w.dumps(config.model_dump()), encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Could not write config file {path}: {exc}") from exc


def load_config(path: Path) -> Config:
    """
    Load the user config from `path`.

    A missing file is created with the defaults. Keys absent from an existing
    file are filled from the defaults and the completed file is written back.
    """
    if not path.exists():
        config = Config()
        write_config(path, config)
        logger.info("Wrote default config to %s", path)
        typer.echo(f"No config detected, config made at {path}.", err=True)
        return config

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Config file {path} is not valid TOML: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Could not read config file {path}: {exc}") from exc

    try:
        config = Config.model_validate(data)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        raise ConfigError(f"Invalid value in config file {path}: {problems}") from exc

    missing = [name for name in Config.model_fields if name not in data]
    if missing:
        logger.info("Config %s is missing %s; filling in defaults", path, ", ".join(missing))
        write_config(path, config)

    return config
