"""
Turns a WeatherSnapshot and the user Config into printable lines.

Each line is a rich Text: an ASCII-art icon column on the left and one piece of
information on the right. Styles are only attached when `use_colors` is set.
"""

from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional, Tuple

from rich.text import Text

from thundery.models import Config, WeatherSnapshot

ICON_WIDTH = 15

CLEAR = (
    "",
    "   \\   /",
    "    .-.",
    " ‒ (   ) ‒",
    "    ʻ-ʻ",
    "   /   \\",
)
CLOUD = (
    "",
    "     .--.",
    "  .-(    ).",
    " (___.__)__)",
)
RAIN = CLOUD + ("  ʻ‚ʻ‚ʻ‚ʻ‚ʻ",)
SNOW = CLOUD + ("   * * * *", "  * * * *")
THUNDER = CLOUD + ("    /_  /_", "     /  /")

# condition -> (label, label style, icon)
CONDITIONS: Dict[str, Tuple[str, str, Tuple[str, ...]]] = {
    "Clear": ("clear", "bold yellow", CLEAR),
    "Clouds": ("cloudy", "bold magenta", CLOUD),
    "Rain": ("rainy", "bold blue", RAIN),
    "Snow": ("snowy", "bold magenta", SNOW),
    "Thunderstorm": ("thundery", "bold black", THUNDER),
}
FALLBACK_STYLE = "bold red"

TEMPERATURE_UNITS = {"metric": "°C", "imperial": "°F"}
WIND_UNITS = {"metric": "m/s", "imperial": "mph"}
CLOCK_FORMATS = {"12": "%I:%M %p", "24": "%H:%M"}


def shift_time(moment: datetime, config: Config) -> datetime:
    return moment + timedelta(hours=config.timeplus) - timedelta(hours=config.timeminus)


def format_clock(timestamp: int, config: Config) -> str:
    """Render a unix timestamp as a wall-clock time after applying the hour offsets."""
    moment = shift_time(datetime.fromtimestamp(timestamp, tz=timezone.utc), config)
    return moment.strftime(CLOCK_FORMATS[config.timeformat])


def render_report(
    snapshot: WeatherSnapshot, config: Config, now: Optional[datetime] = None
) -> List[Text]:
    label, label_style, icon = CONDITIONS.get(
        snapshot.condition, (snapshot.condition, FALLBACK_STYLE, CLOUD)
    )

    # row 0 belongs to the city even when it is hidden
    city = f"City: {snapshot.city_name or config.city}" if config.showcityname else ""
    info: List[Tuple[str, str]] = [(city, "bold green")]
    info.append((f"Weather: {label}", label_style))
    info.append(
        (f"Temperature: {snapshot.temperature:.1f}{TEMPERATURE_UNITS[config.units]}", "red")
    )
    info.append((f"Wind speed: {snapshot.wind_speed:.1f} {WIND_UNITS[config.units]}", "cyan"))
    info.append((f"Sunrise: {format_clock(snapshot.sunrise, config)}", "yellow"))
    info.append((f"Sunset: {format_clock(snapshot.sunset, config)}", "blue"))
    if config.showdate:
        # same wall-clock offset as the sun times, so the date matches them
        today = shift_time(now or datetime.now(timezone.utc), config)
        info.append((f"Date: {today.strftime('%x')}", "white"))

    lines: List[Text] = []
    for row in range(max(len(icon), len(info))):
        art = icon[row] if row < len(icon) else ""
        line = Text(art.ljust(ICON_WIDTH))
        if row < len(info) and info[row][0]:
            text, style = info[row]
            line.append(text, style=style if config.use_colors else None)
        line.rstrip()
        lines.append(line)
    return lines
