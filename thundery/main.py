import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from thundery.config import default_config_path, load_config, settings
from thundery.errors import ConfigError, ThunderyError
from thundery.presenter import render_report
from thundery.services.openweather import OpenWeatherClient

logger = logging.getLogger(__name__)

app = typer.Typer(add_completion=False, help="Show the current weather for the city in your config file.")


def setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level.upper(), logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    if not verbose:
        logging.getLogger("httpx").setLevel(logging.WARNING)


@app.command()
def main(
    config_path: Optional[Path] = typer.Option(
        None, "--config", "-c", dir_okay=False, help="Config file to use instead of the per-user default."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr."),
):
    setup_logging(verbose)
    path = config_path or default_config_path()

    try:
        config = load_config(path)
        if not config.api_key or not config.city:
            raise ConfigError(f"Set api_key and city in {path} to fetch the weather")

        ow = OpenWeatherClient(
            settings.openweather_base_url,
            config.api_key,
            timeout_seconds=settings.openweather_timeout_seconds,
        )
        snapshot = ow.get_snapshot(config.city, config.units)
    except ThunderyError as exc:
        logger.debug("Aborting", exc_info=exc)
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)

    console = Console(highlight=False, soft_wrap=True, no_color=not config.use_colors)
    for line in render_report(snapshot, config):
        console.print(line)


def run() -> None:
    app()
