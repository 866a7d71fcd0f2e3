"""Export module - HTML card rendering and JSON/HTML files."""

from hours_admin.export.files import (
    DEFAULT_HTML_FILENAME,
    DEFAULT_JSON_FILENAME,
    export_html,
    export_json,
    import_json,
    to_pretty_json,
)
from hours_admin.export.html_card import CLOSED_LABEL, format_hours, render, render_row

__all__ = [
    "CLOSED_LABEL",
    "DEFAULT_HTML_FILENAME",
    "DEFAULT_JSON_FILENAME",
    "export_html",
    "export_json",
    "format_hours",
    "import_json",
    "render",
    "render_row",
    "to_pretty_json",
]
