"""Day tabs for the schedule view."""

import pendulum

from config.constants import (
    LOCALE,
    RELATIVE_TAB_LABELS,
    TAB_LABEL_FORMAT,
    TAB_OFFSETS,
)
from core.schedule.models import DateTab
from core.utils.dates import date_key, local_now


def _label(day: pendulum.Date, offset: int) -> str:
    if offset in RELATIVE_TAB_LABELS:
        return RELATIVE_TAB_LABELS[offset]
    return day.format(TAB_LABEL_FORMAT, locale=LOCALE)


def generate_date_tabs(now: pendulum.DateTime | None = None) -> list[DateTab]:
    """Build the six day tabs, yesterday through four days ahead.

    Tabs are anchored to the calendar day of ``now`` in its timezone, so a
    call just before midnight and one just after give different tabs.

    Args:
        now: Reference moment (default: now in the display timezone).

    Returns:
        Tabs labelled "Yesterday", "Today", "Tomorrow" and then
        "Thu, Jun 5" style dates.
    """
    today = (now or local_now()).date()
    tabs = []
    for offset in TAB_OFFSETS:
        day = today.add(days=offset)
        tabs.append(DateTab(label=_label(day, offset), date_string=date_key(day)))
    return tabs
