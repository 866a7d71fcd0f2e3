"""JSON and HTML file export, and JSON import.

Exports need no network: the JSON file is the wrapped schedule pretty-printed,
the HTML file is the rendered card.
"""

import json
from pathlib import Path

from loguru import logger
from pydantic import ValidationError

from hours_admin.export.html_card import DEFAULT_LOGO_SRC, render
from hours_admin.integrations.remote.errors import ImportFormatError
from hours_admin.schedule.types import WeekSchedule

DEFAULT_JSON_FILENAME = "restaurant-working-hours.json"
DEFAULT_HTML_FILENAME = "restaurant-card.html"


def to_pretty_json(schedule: WeekSchedule) -> str:
    return json.dumps(schedule.to_wrapped_payload(), indent=2, ensure_ascii=False)


def export_json(schedule: WeekSchedule, path: Path | str) -> Path:
    """Write the schedule as pretty-printed JSON.

    Args:
        schedule: Schedule to export
        path: Target file; a directory gets DEFAULT_JSON_FILENAME inside it

    Returns:
        Path of the written file
    """
    target = Path(path)
    if target.is_dir():
        target = target / DEFAULT_JSON_FILENAME
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(to_pretty_json(schedule) + "\n", encoding="utf-8")
    logger.info(f"Exported schedule JSON to {target}")
    return target


def import_json(path: Path | str) -> WeekSchedule:
    """Read a schedule from a JSON file (bare or {"workingHours": ...} form).

    Raises:
        ImportFormatError: If the file cannot be read, is not JSON, or is not
            a complete schedule
    """
    source = Path(path)
    try:
        data = json.loads(source.read_text(encoding="utf-8"))
    except OSError as e:
        raise ImportFormatError(f"cannot read {source}: {e}") from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ImportFormatError(f"{source} is not valid JSON: {e}") from e

    try:
        schedule = WeekSchedule.from_payload(data)
    except ValidationError as e:
        raise ImportFormatError(f"{source} is not a valid schedule ({e.error_count()} errors)") from e

    logger.info(f"Imported schedule from {source}")
    return schedule


def export_html(schedule: WeekSchedule, path: Path | str, *, logo_src: str = DEFAULT_LOGO_SRC) -> Path:
    """Write the rendered card; a directory gets DEFAULT_HTML_FILENAME inside it."""
    target = Path(path)
    if target.is_dir():
        target = target / DEFAULT_HTML_FILENAME
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(render(schedule, logo_src=logo_src), encoding="utf-8")
    logger.info(f"Exported card HTML to {target}")
    return target
