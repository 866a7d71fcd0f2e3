"""Static HTML rendering of the working-hours card.

render() is a pure function of its arguments: the same schedule always yields
the same string. No timestamps, no generated ids, and the input is never
touched. Rows always follow WEEKDAYS order.
"""

from html import escape

from hours_admin.schedule.types import DAY_NAMES, STATUS_COLORS, DayHours, WeekSchedule

CLOSED_LABEL = "Closed"
DEFAULT_LOGO_SRC = "images/image_001.webp"

_ROW_SEPARATOR = "\n        "

_CARD_STYLE = (
    "height: 100%; width: 100%; border-radius: 20px; opacity: 1; position: relative; overflow: hidden; "
    "background: linear-gradient(135deg, rgb(45, 45, 45) 0%, rgb(55, 55, 55) 50%, rgb(40, 40, 40) 100%); "
    "box-shadow: 0 8px 32px rgba(0, 0, 0, 0.4), inset 0 1px 0 rgba(255, 255, 255, 0.1);"
)
_CONTENT_STYLE = "position: relative; height: 100%; padding: 32px; display: flex; flex-direction: column; justify-content: space-between;"
_HEADING_STYLE = (
    "font-family: 'Forum', serif; font-size: {size}px; font-weight: 400; color: rgb(239, 231, 210); "
    "margin-bottom: 16px; text-align: center; letter-spacing: 2px; text-transform: uppercase;"
)
_ROW_STYLE = (
    "display: flex; justify-content: space-between; align-items: center; padding: 6px 12px; "
    "border-radius: 8px; background: rgba(255, 255, 255, 0.05); border: 1px solid rgba(239, 231, 210, 0.1);"
)
_DAY_STYLE = "font-family: 'Inter', sans-serif; font-size: 13px; font-weight: 500; color: rgba(255, 255, 255, 0.95);"
_HOURS_STYLE = "font-family: 'JetBrains Mono', monospace; font-size: 12px; color: rgb(239, 231, 210); font-weight: 600;"
_CLOSED_STYLE = "font-family: 'JetBrains Mono', monospace; font-size: 12px; color: rgba(239, 231, 210, 0.6); font-weight: 600;"
_MARKER_STYLE = "width: 6px; height: 6px; background-color: {color}; border-radius: 50%; opacity: 0.8;"


def format_hours(hours: DayHours) -> str:
    """Text shown for a day: the time range when open, the closed label otherwise."""
    if hours.is_open:
        return f"{hours.open} — {hours.close}"
    return CLOSED_LABEL


def render_row(day: str, hours: DayHours) -> str:
    """Render one day row of the card."""
    if hours.is_open:
        label = f'<span class="working-hours-time" style="{_HOURS_STYLE}">{escape(format_hours(hours))}</span>'
    else:
        label = f'<span class="working-hours-closed" style="{_CLOSED_STYLE}">{CLOSED_LABEL}</span>'
    marker_style = _MARKER_STYLE.format(color=STATUS_COLORS[hours.status])

    return (
        f'<div class="working-hours-row" data-day="{day}" style="{_ROW_STYLE}">\n'
        f'          <span style="{_DAY_STYLE}">{DAY_NAMES[day]}</span>\n'
        f'          <div style="display: flex; align-items: center; gap: 8px;">\n'
        f"            {label}\n"
        f'            <span class="status-marker" data-status="{hours.status.value}" style="{marker_style}"></span>\n'
        f"          </div>\n"
        f"        </div>"
    )


def render(schedule: WeekSchedule, *, logo_src: str = DEFAULT_LOGO_SRC) -> str:
    """Render the self-contained working-hours card fragment.

    Args:
        schedule: Schedule to render
        logo_src: Image path for the logo at the top of the card

    Returns:
        HTML fragment with inline styles and exactly seven day rows
    """
    rows = _ROW_SEPARATOR.join(render_row(day, hours) for day, hours in schedule.items())

    return f"""<!-- Restaurant Working Hours Card -->
<div class="restaurant-info-card" style="{_CARD_STYLE}">
  <div class="card-content" style="{_CONTENT_STYLE}">
    <!-- Logo Section -->
    <div style="text-align: center; margin-bottom: 20px;">
      <img src="{escape(logo_src)}" alt="Restaurant Logo" style="height: 32px; width: auto; filter: brightness(1.2);" />
    </div>

    <!-- Working Hours -->
    <div style="margin-bottom: 24px;">
      <h3 style="{_HEADING_STYLE.format(size=18)}">Working Hours</h3>
      <div style="display: flex; flex-direction: column; gap: 8px;">
        {rows}
      </div>
    </div>

    <!-- Social Media -->
    <div style="margin-top: auto;">
      <h3 style="{_HEADING_STYLE.format(size=16)}">Follow Us</h3>
      <div style="display: flex; justify-content: center; gap: 12px;">
      </div>
    </div>
  </div>
</div>
"""
