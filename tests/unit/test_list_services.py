from datetime import datetime

from eventify.core.services import exclude_registered, filter_by_category, sort_by_start_time, upcoming
from eventify.models.event import Event


def _event(event_id, start, category="Music"):
    return Event(id=event_id, title=f"Event {event_id}", category=category, start_time=start, image_url="")


NOW = datetime(2026, 1, 1, 12, 0)


def test_upcoming_drops_started_events():
    events = [
        _event("1", datetime(2025, 12, 31)),
        _event("2", NOW),  # starts right now: not upcoming
        _event("3", datetime(2026, 2, 1)),
    ]
    assert [e.id for e in upcoming(events, NOW)] == ["3"]


def test_exclude_registered_matches_by_id():
    events = [_event("1", NOW), _event("2", NOW), _event("3", NOW)]
    registered = [_event("2", datetime(2030, 1, 1), category="Other")]
    assert [e.id for e in exclude_registered(events, registered)] == ["1", "3"]


def test_exclude_registered_accepts_generators():
    events = [_event("1", NOW), _event("2", NOW)]
    registered = (e for e in [_event("1", NOW)])
    assert [e.id for e in exclude_registered(events, registered)] == ["2"]


def test_filter_by_category_is_exact():
    events = [_event("1", NOW, "Music"), _event("2", NOW, "music"), _event("3", NOW, "Sport")]
    assert [e.id for e in filter_by_category(events, "Music")] == ["1"]


def test_sort_by_start_time_is_stable_and_ascending():
    events = [
        _event("late", datetime(2026, 3, 1)),
        _event("a", datetime(2026, 2, 1)),
        _event("b", datetime(2026, 2, 1)),
    ]
    assert [e.id for e in sort_by_start_time(events)] == ["a", "b", "late"]
