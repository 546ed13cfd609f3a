"""Tests for the daily refresh orchestration."""
import json
import random
from datetime import date, datetime

import pytest

from groove_app.models import SprintSession
from groove_app.refresh import SPRINT_NOTIFICATION_ID, DailyRefresh
from groove_app.storage import load_last_scheduled_date, load_scheduled_exercises, save_sprint_sessions
from tests.conftest import FixedClock


def _sprints(*days):
    return [SprintSession(date=day) for day in days]


@pytest.fixture
def quiet_sprints(store):
    """Sprint days for March and April that never fall on a tested day."""
    save_sprint_sessions(store, _sprints(
        date(2024, 3, 12), date(2024, 3, 25), date(2024, 4, 8), date(2024, 4, 22),
    ))


@pytest.fixture
def refresh(store, notifier, clock, quiet_sprints):
    return DailyRefresh(store, notifier, clock=clock, rng=random.Random(11))


class TestRefresh:
    """Test cases for once-a-day scheduling."""

    def test_first_refresh_schedules_rest_day_strength(self, refresh, store, notifier):
        scheduled = refresh.refresh()

        assert len(scheduled) == 6
        assert notifier.calls[0] == ("cancel_all",)
        assert len(notifier.named("schedule_at")) == 6
        strength_ids = {e.id for e in refresh.catalog.strength()}
        assert {s.exercise_id for s in scheduled} <= strength_ids
        assert load_scheduled_exercises(store) == scheduled
        assert load_last_scheduled_date(store) == datetime(2024, 3, 4, 6, 0)

    def test_second_refresh_same_day_is_a_no_op(self, refresh, notifier, clock):
        first = refresh.refresh()
        notifier.calls.clear()
        clock.advance(hours=3)

        assert refresh.refresh() == first
        assert notifier.calls == []

    def test_new_day_reschedules_with_sport_day_mobility(self, refresh, notifier, clock):
        refresh.refresh()
        notifier.calls.clear()
        clock.advance(days=1)

        scheduled = refresh.refresh()

        assert notifier.calls[0] == ("cancel_all",)
        mobility_ids = {e.id for e in refresh.catalog.mobility()}
        assert scheduled
        assert {s.exercise_id for s in scheduled} <= mobility_ids

    def test_force_reschedules(self, refresh, notifier):
        refresh.refresh()
        notifier.calls.clear()

        refresh.refresh(force=True)
        assert notifier.calls[0] == ("cancel_all",)

    def test_late_refresh_schedules_only_future_slots(self, refresh, clock):
        clock.now = datetime(2024, 3, 4, 19, 0)
        scheduled = refresh.refresh()

        assert all(s.scheduled_time > clock.now for s in scheduled)
        assert all(s.scheduled_time.hour == 19 for s in scheduled)

    def test_notifications_disabled(self, refresh, notifier, store):
        refresh.settings.notifications_enabled = False
        refresh.save_settings()

        assert refresh.refresh() == []
        assert notifier.calls == []
        assert load_last_scheduled_date(store) is not None

    def test_reschedule_and_shuffle(self, refresh, notifier):
        refresh.refresh()
        for exercise in refresh.catalog.strength():
            refresh.catalog.mark_performed(exercise.id, datetime(2024, 3, 3, 9, 0))
        notifier.calls.clear()

        refresh.shuffle()

        assert notifier.calls[0] == ("cancel_all",)
        assert all(e.last_performed_date is None for e in refresh.catalog.strength())

        notifier.calls.clear()
        refresh.reschedule()
        assert notifier.calls[0] == ("cancel_all",)


class TestSnooze:
    """Test cases for snoozing a scheduled snack."""

    def test_snooze_replaces_the_entry(self, refresh, store, notifier, clock):
        scheduled = refresh.refresh()
        target = scheduled[2]
        notifier.calls.clear()

        snoozed = refresh.snooze(target.notification_id, 60)

        assert notifier.calls[0] == ("cancel", target.notification_id)
        assert snoozed.notification_id == target.notification_id + 100
        assert snoozed.scheduled_time == datetime(2024, 3, 4, 7, 0)

        saved = load_scheduled_exercises(store)
        assert saved[2] == snoozed
        assert len(saved) == len(scheduled)

    def test_unknown_notification(self, refresh, notifier):
        refresh.refresh()
        assert refresh.snooze(555, 30) is None


class TestProgress:
    """Test cases for recording snacks through the refresh."""

    def test_complete_session(self, refresh, action_log):
        exercise = refresh.complete_session("air_squat", 4, True)

        assert exercise.current_reps == 6
        entries = [json.loads(line) for line in action_log.read_text().splitlines()]
        assert entries[-1]["action"] == "complete_session"
        assert entries[-1]["details"]["current_reps"] == 6

    def test_complete_unknown_exercise(self, refresh):
        assert refresh.complete_session("moonwalk", 4, True) is None

    def test_completed_today_is_still_eligible_tomorrow_is_not(self, refresh, clock):
        refresh.complete_session("air_squat", 4, True)
        assert "air_squat" in {e.id for e in refresh.available_exercises()}

        # Wednesday is another rest day
        clock.now = datetime(2024, 3, 6, 8, 0)
        refresh.mark_as_performed("dips")
        clock.now = datetime(2024, 3, 7, 8, 0)
        refresh.settings.set_sport_day(4, False)
        assert "dips" not in {e.id for e in refresh.available_exercises()}


class TestSprintReminders:
    """Test cases for sprint day alerts."""

    def test_reminder_scheduled_for_nine(self, store, notifier, clock):
        save_sprint_sessions(store, _sprints(
            date(2024, 3, 4), date(2024, 3, 20), date(2024, 4, 8), date(2024, 4, 22),
        ))
        refresh = DailyRefresh(store, notifier, clock=clock, rng=random.Random(1))

        refresh.refresh()

        alerts = [c for c in notifier.named("schedule_at") if c[1] == SPRINT_NOTIFICATION_ID]
        assert len(alerts) == 1
        assert alerts[0][4] == datetime(2024, 3, 4, 9, 0)
        assert alerts[0][5] == "sprint_2024-03-04"

    def test_reminder_shown_now_after_nine(self, store, notifier, clock):
        save_sprint_sessions(store, _sprints(
            date(2024, 3, 4), date(2024, 3, 20), date(2024, 4, 8), date(2024, 4, 22),
        ))
        clock.now = datetime(2024, 3, 4, 10, 30)
        refresh = DailyRefresh(store, notifier, clock=clock, rng=random.Random(1))

        refresh.refresh()

        assert notifier.named("show_now")[0][1] == SPRINT_NOTIFICATION_ID

    def test_no_reminder_on_other_days(self, refresh, notifier):
        refresh.refresh()
        assert not notifier.named("show_now")
        assert all(c[1] != SPRINT_NOTIFICATION_ID for c in notifier.named("schedule_at"))

    def test_completing_cancels_the_reminder(self, store, notifier, clock):
        save_sprint_sessions(store, _sprints(
            date(2024, 3, 4), date(2024, 3, 20), date(2024, 4, 8), date(2024, 4, 22),
        ))
        refresh = DailyRefresh(store, notifier, clock=clock, rng=random.Random(1))
        refresh.refresh()
        notifier.calls.clear()

        completed = refresh.complete_todays_sprint()

        assert completed.completed
        assert notifier.calls == [("cancel", SPRINT_NOTIFICATION_ID)]

        notifier.calls.clear()
        refresh.refresh(force=True)
        assert not [c for c in notifier.named("schedule_at") if c[1] == SPRINT_NOTIFICATION_ID]

    def test_complete_without_sprint_today(self, refresh, notifier):
        assert refresh.complete_todays_sprint() is None
        assert notifier.calls == []

    def test_refresh_fills_in_missing_months(self, store, notifier):
        refresh = DailyRefresh(store, notifier, clock=FixedClock(datetime(2024, 12, 30, 8, 0)), rng=random.Random(4))
        refresh.refresh()

        months = {(s.date.year, s.date.month) for s in refresh.sprints.all()}
        assert months == {(2024, 12), (2025, 1)}


class TestSummary:
    def test_today_summary(self, refresh):
        refresh.refresh()
        refresh.walks.add_seconds_to_todays_walk(900, date(2024, 3, 4))

        summary = refresh.today_summary()

        assert summary["date"] == "2024-03-04"
        assert summary["day_type"] == "Rest Day (Strength)"
        assert len(summary["scheduled"]) == 6
        assert summary["walk_seconds"] == 900
        assert summary["walk_streak"] == 1
        assert summary["todays_sprint"] is None
        assert summary["next_sprint"]["date"] == "2024-03-12"
