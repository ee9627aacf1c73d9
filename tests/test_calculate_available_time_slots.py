from datetime import datetime, timezone
from zoneinfo import ZoneInfo
from models.calendar.calendar_event import CalendarEvent
from utils.availability import calculate_available_time_slots


TIMEZONE = "America/Vancouver"
ZONE = ZoneInfo(TIMEZONE)


def event(label: str, start: str, end: str, day: str = "2025-01-15") -> CalendarEvent:
    return CalendarEvent(
        start=datetime.fromisoformat(f"{day}T{start}").replace(tzinfo=ZONE),
        end=datetime.fromisoformat(f"{day}T{end}").replace(tzinfo=ZONE),
        label=label
    )


def test_busy_hour_inside_window():
    # Arrange
    events = [
        event("Available", "09:00", "12:00"),
        event("Jane Doe - Bridal Makeup", "10:00", "11:00"),
    ]

    # Act
    time_slots = calculate_available_time_slots(events, TIMEZONE)

    # Assert
    assert time_slots == ["09:00", "11:00"]


def test_overlapping_windows_are_unioned():
    # Arrange
    events = [
        event("Available", "09:00", "11:00"),
        event("Available", "10:00", "13:00"),
    ]

    # Act
    time_slots = calculate_available_time_slots(events, TIMEZONE)

    # Assert
    assert time_slots == ["09:00", "10:00", "11:00", "12:00"]


def test_slots_follow_window_start_minute():
    # Arrange
    events = [event("Available", "09:15", "11:15")]

    # Act
    time_slots = calculate_available_time_slots(events, TIMEZONE)

    # Assert
    assert time_slots == ["09:15", "10:15"]


def test_no_events():
    assert calculate_available_time_slots([], TIMEZONE) == []


def test_only_busy_events():
    # Arrange
    events = [event("Blocked", "09:00", "17:00")]

    # Act
    time_slots = calculate_available_time_slots(events, TIMEZONE)

    # Assert
    assert time_slots == []


def test_window_ending_before_it_starts_gives_no_slots():
    # Arrange
    events = [
        event("Available", "12:00", "09:00"),
        event("Available", "14:00", "14:00"),
    ]

    # Act
    time_slots = calculate_available_time_slots(events, TIMEZONE)

    # Assert
    assert time_slots == []


def test_disjoint_busy_interval_keeps_every_slot():
    # Arrange
    events = [
        event("Available", "09:00", "13:00"),
        event("Lunch", "13:00", "14:00"),
    ]

    # Act
    time_slots = calculate_available_time_slots(events, TIMEZONE)

    # Assert
    assert time_slots == ["09:00", "10:00", "11:00", "12:00"]


def test_busy_interval_applies_to_every_window():
    # Arrange
    events = [
        event("Available", "09:00", "11:00"),
        event("Available", "10:00", "12:00"),
        event("Appointment", "10:00", "10:30"),
    ]

    # Act
    time_slots = calculate_available_time_slots(events, TIMEZONE)

    # Assert
    assert time_slots == ["09:00", "11:00"]


def test_busy_interval_starting_mid_slot_does_not_block_it():
    # Arrange
    events = [
        event("Available", "09:00", "12:00"),
        event("Appointment", "09:30", "10:30"),
    ]

    # Act
    time_slots = calculate_available_time_slots(events, TIMEZONE)

    # Assert
    assert time_slots == ["09:00", "11:00"]


def test_label_must_match_exactly():
    # Arrange
    events = [event("available", "09:00", "11:00")]

    # Act
    time_slots = calculate_available_time_slots(events, TIMEZONE)

    # Assert
    assert time_slots == []


def test_twelve_hour_slots_sort_by_time():
    # Arrange
    events = [event("Available", "08:00", "14:00")]

    # Act
    time_slots = calculate_available_time_slots(events, TIMEZONE, "12h")

    # Assert
    assert time_slots == ["8 AM", "9 AM", "10 AM", "11 AM", "12 PM", "1 PM"]


def test_utc_events_are_aligned_to_local_hours():
    # Arrange
    events = [
        CalendarEvent(
            start=datetime(2025, 1, 15, 17, 0, tzinfo=timezone.utc),
            end=datetime(2025, 1, 15, 20, 0, tzinfo=timezone.utc),
            label="Available"
        ),
        CalendarEvent(
            start=datetime(2025, 1, 15, 18, 0, tzinfo=timezone.utc),
            end=datetime(2025, 1, 15, 19, 0, tzinfo=timezone.utc),
            label="Booked"
        ),
    ]

    # Act
    time_slots = calculate_available_time_slots(events, TIMEZONE)

    # Assert
    assert time_slots == ["09:00", "11:00"]


def test_output_is_strictly_ascending():
    # Arrange
    events = [
        event("Available", "15:00", "18:00"),
        event("Available", "08:30", "10:30"),
        event("Available", "09:00", "12:00"),
    ]

    # Act
    time_slots = calculate_available_time_slots(events, TIMEZONE)

    # Assert
    assert time_slots == sorted(set(time_slots))
    assert time_slots == [
        "08:30", "09:00", "09:30", "10:00", "11:00", "15:00", "16:00", "17:00"
    ]
