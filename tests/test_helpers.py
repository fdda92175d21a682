from datetime import datetime, timezone

import pytest

from coredb.helpers import must_parse_time, param_placeholders, value_in_set


def test_placeholders_three():
    assert param_placeholders(3) == "?,?,?"


def test_placeholders_zero_is_empty():
    assert param_placeholders(0) == ""


@pytest.mark.parametrize("count", [1, 2, 7, 50])
def test_placeholders_invariant(count):
    parts = param_placeholders(count).split(",")
    assert len(parts) == count
    assert set(parts) == {"?"}


def test_value_in_set_ignores_case():
    branches = ["orchard", "vivo", "sentosa", "changi"]
    assert value_in_set(branches, "VIVO") is True
    assert value_in_set(branches, "Sentosa") is True


def test_value_in_set_missing():
    assert value_in_set(["orchard", "vivo"], "changi") is False
    assert value_in_set([], "vivo") is False
    assert value_in_set(["orchard"], "") is False


def test_parse_time_with_fraction():
    t = must_parse_time("2019-01-01 00:00:01.000000")
    assert t == datetime(2019, 1, 1, 0, 0, 1, tzinfo=timezone.utc)


def test_parse_time_microseconds():
    t = must_parse_time("2023-01-19 03:14:07.999999")
    assert (t.year, t.month, t.day) == (2023, 1, 19)
    assert (t.hour, t.minute, t.second) == (3, 14, 7)
    assert t.microsecond == 999999
    assert t.tzinfo == timezone.utc


def test_parse_time_without_fraction():
    t = must_parse_time("2019-01-01 00:00:01")
    assert t == datetime(2019, 1, 1, 0, 0, 1, tzinfo=timezone.utc)


def test_parse_time_truncates_nanoseconds():
    t = must_parse_time("2023-01-19 03:14:07.123456789")
    assert t.microsecond == 123456


@pytest.mark.parametrize(
    "text",
    ["not a time", "2019-13-01 00:00:00", "2019-01-01T00:00:01", "2019-01-01 00:00:01."],
)
def test_parse_time_rejects(text):
    with pytest.raises(ValueError, match="fail to parse timestr"):
        must_parse_time(text)