"""Restaurant hours admin - weekly working-hours card editor.

This package provides:
- The weekly schedule model and its default value
- A JSON-file local store for the schedule and remote endpoint config
- An async client that mirrors the schedule to a remote HTTP endpoint
- A deterministic HTML card renderer and JSON/HTML exports
- An editor session that ties the above together for the CLI
"""

from hours_admin.config.settings import settings
from hours_admin.core.logger import setup_logger

setup_logger(level=settings.log_level, log_file=settings.log_file)
