"""Parsing and formatting of task timestamps.

Deadlines and events carry a single point in time written by the user
as ``DD/MM/YYYY HHMM`` (day first, 24-hour clock, no separator between
hour and minute), e.g. ``21/12/2020 2359``.
"""

import re
from datetime import datetime

from jot.domain.shared.errors import TaskError, date_time_parse
from jot.domain.shared.result import Err, Ok, Result

TIMESTAMP_FORMAT = "%d/%m/%Y %H%M"

# strptime alone accepts single-digit days and months
_TIMESTAMP_SHAPE = re.compile(r"\d{2}/\d{2}/\d{4} \d{4}")


def parse_timestamp(text: str) -> Result[datetime, TaskError]:
    """Parse a ``DD/MM/YYYY HHMM`` string.

    Args:
        text: The time segment of a command, keyword already removed.

    Returns:
        Ok(datetime) on success, Err(TaskError) of kind DATE_TIME_PARSE
        when the text has the wrong shape or names an impossible date.
    """
    if not _TIMESTAMP_SHAPE.fullmatch(text):
        return Err(date_time_parse())
    try:
        return Ok(datetime.strptime(text, TIMESTAMP_FORMAT))
    except ValueError:
        return Err(date_time_parse())


def format_timestamp(at: datetime) -> str:
    """Format a timestamp back into the form users type it in."""
    return at.strftime(TIMESTAMP_FORMAT)
