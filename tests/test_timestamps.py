# tests/test_timestamps.py

from __future__ import annotations

from datetime import datetime

import pytest

from jot.domain.shared import Err, ErrorKind, Ok
from jot.domain.task import format_timestamp, parse_timestamp


def test_parse_day_first_24_hour() -> None:
    assert parse_timestamp("21/12/2020 2359") == Ok(datetime(2020, 12, 21, 23, 59))


def test_format_matches_input_form() -> None:
    assert format_timestamp(datetime(2021, 1, 6, 9, 5)) == "06/01/2021 0905"


@pytest.mark.parametrize(
    "text",
    [
        "31/13/2020 9999",
        "1/1/2021 1200",
        "21/12/2020 23:59",
        "2020-12-21 2359",
        "30/02/2021 1200",
        "21/12/2020",
        "",
    ],
)
def test_malformed_timestamps(text: str) -> None:
    result = parse_timestamp(text)
    assert isinstance(result, Err)
    assert result.error.kind is ErrorKind.DATE_TIME_PARSE
    assert "DD/MM/YYYY HHMM" in result.error.message
