import re

import pytest

from gfckit.timetext import timetext

_PATTERN = re.compile(r"^(\d\d):(\d\d)\.(\d\d)$")


def _parse(text):
    match = _PATTERN.match(text)
    assert match is not None, text
    minutes, seconds, centis = (int(g) for g in match.groups())
    return minutes * 60000 + seconds * 1000 + centis * 10


def test_zero():
    assert timetext(0) == "00:00.00"


def test_worked_example():
    assert timetext(61230) == "01:01.23"


@pytest.mark.parametrize("t", [0, 9, 10, 999, 1000, 59999, 60000, 3599990, 5999999])
def test_shape_and_round_trip(t):
    text = timetext(t)
    assert len(text) == 8
    assert _parse(text) == t - t % 10


@pytest.mark.parametrize("t", [0, 12345, 987654])
def test_minutes_wrap_at_hundred(t):
    assert timetext(t + 6_000_000) == timetext(t)


def test_sub_centisecond_ignored():
    assert timetext(1239) == timetext(1230)


def test_small_negative_truncates_to_zero():
    assert timetext(-5) == timetext(0)


def test_seconds_field_never_reaches_sixty():
    for t in range(0, 200000, 997):
        seconds = int(timetext(t)[3:5])
        assert 0 <= seconds < 60