from datetime import time
import pytest
from utils.datetime import format_slot_time


@pytest.mark.parametrize("slot_time, expected", [
    (time(9, 0), "09:00"),
    (time(9, 15), "09:15"),
    (time(0, 0), "00:00"),
    (time(23, 30), "23:30"),
])
def test_24_hour_format(slot_time, expected):
    assert format_slot_time(slot_time, "24h") == expected


@pytest.mark.parametrize("slot_time, expected", [
    (time(9, 0), "9 AM"),
    (time(9, 15), "9:15 AM"),
    (time(12, 0), "12 PM"),
    (time(0, 0), "12 AM"),
    (time(17, 5), "5:05 PM"),
])
def test_12_hour_format(slot_time, expected):
    assert format_slot_time(slot_time, "12h") == expected


def test_unknown_format():
    with pytest.raises(ValueError):
        format_slot_time(time(9, 0), "iso")
