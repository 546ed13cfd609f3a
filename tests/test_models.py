"""Unit tests for the data models and their JSON shape."""
from datetime import date, datetime, time

from groove_app.models import (
    AppSettings,
    DailyWalk,
    Exercise,
    ExerciseType,
    ScheduledExercise,
    SprintSession,
)


def _exercise(**overrides):
    fields = dict(
        id="air_squat",
        name="Standard Air Squat",
        type=ExerciseType.STRENGTH,
        current_reps=4,
        description="Basic knee/hip flexion.",
        related_stretch="Quad stretch.",
    )
    fields.update(overrides)
    return Exercise(**fields)


class TestExercise:
    """Test cases for Exercise."""

    def test_round_trip(self):
        exercise = _exercise(
            is_timed=True,
            is_bilateral=True,
            is_enabled=False,
            last_performed_date=datetime(2024, 3, 3, 14, 5, 9),
        )
        restored = Exercise.from_dict(exercise.to_dict())

        assert restored.to_dict() == exercise.to_dict()
        assert restored.last_performed_date == exercise.last_performed_date
        assert restored.type is ExerciseType.STRENGTH

    def test_equality_is_by_id(self):
        assert _exercise(current_reps=4) == _exercise(current_reps=40, name="Renamed")
        assert _exercise() != _exercise(id="dips")
        assert len({_exercise(), _exercise(current_reps=9)}) == 1

    def test_missing_optional_fields_default(self):
        exercise = Exercise.from_dict({
            "id": "custom",
            "name": "Custom",
            "type": "mobility",
            "currentReps": 5,
        })

        assert exercise.description == ""
        assert exercise.related_stretch == ""
        assert exercise.is_enabled is True
        assert exercise.is_timed is False
        assert exercise.is_bilateral is False
        assert exercise.last_performed_date is None

    def test_null_optional_fields_use_defaults(self):
        exercise = Exercise.from_dict({
            "id": "custom",
            "name": "Custom",
            "type": "strength",
            "currentReps": 5,
            "isEnabled": None,
            "isTimed": None,
            "isBilateral": None,
            "description": None,
            "relatedStretch": None,
        })

        assert exercise.is_enabled is True
        assert exercise.is_timed is False
        assert exercise.is_bilateral is False
        assert exercise.description == ""

    def test_unknown_type_falls_back_to_strength(self):
        exercise = Exercise.from_dict({"id": "x", "name": "X", "type": "cardio", "currentReps": 3})
        assert exercise.type is ExerciseType.STRENGTH

    def test_performed_yesterday(self):
        exercise = _exercise(last_performed_date=datetime(2024, 3, 3, 23, 59))
        assert exercise.was_performed_yesterday(date(2024, 3, 4))
        assert not exercise.was_performed_today(date(2024, 3, 4))
        assert not _exercise().was_performed_yesterday(date(2024, 3, 4))

    def test_json_uses_null_for_absent_date(self):
        assert _exercise().to_dict()["lastPerformedDate"] is None


class TestAppSettings:
    """Test cases for AppSettings."""

    def test_defaults(self):
        settings = AppSettings()

        assert settings.sport_days == {1: False, 2: True, 3: False, 4: True, 5: False, 6: True, 7: False}
        assert settings.active_window_start == time(7, 0)
        assert settings.active_window_end == time(20, 0)
        assert settings.snacks_per_day == 6
        assert settings.notifications_enabled is True
        assert settings.has_seen_onboarding is False

    def test_round_trip(self):
        settings = AppSettings(
            sport_days={1: True, 2: False, 3: True, 4: False, 5: True, 6: False, 7: True},
            active_window_start=time(8, 15),
            active_window_end=time(18, 45),
            snacks_per_day=3,
            notifications_enabled=False,
            has_seen_onboarding=True,
        )
        restored = AppSettings.from_dict(settings.to_dict())
        assert restored == settings

    def test_sport_days_serialized_with_string_keys(self):
        data = AppSettings().to_dict()
        assert sorted(data["sportDays"]) == ["1", "2", "3", "4", "5", "6", "7"]
        assert data["sportDays"]["2"] is True

    def test_missing_weekdays_are_filled(self):
        settings = AppSettings.from_dict({"sportDays": {"1": True}})
        assert len(settings.sport_days) == 7
        assert settings.sport_days[1] is True
        assert settings.sport_days[2] is True

    def test_null_values_use_defaults_and_keep_the_rest(self):
        all_sport = {str(day): True for day in range(1, 8)}
        settings = AppSettings.from_dict({
            "sportDays": all_sport,
            "snacksPerDay": None,
            "activeWindowStartHour": None,
            "activeWindowStartMinute": None,
            "activeWindowEndHour": 18,
            "activeWindowEndMinute": None,
            "notificationsEnabled": None,
            "hasSeenOnboarding": None,
        })

        assert all(settings.sport_days.values())
        assert settings.snacks_per_day == 6
        assert settings.active_window_start == time(7, 0)
        assert settings.active_window_end == time(18, 0)
        assert settings.notifications_enabled is True
        assert settings.has_seen_onboarding is False

    def test_null_sport_day_entry_keeps_its_default(self):
        settings = AppSettings.from_dict({"sportDays": {"1": True, "2": None}})
        assert settings.sport_days[1] is True
        assert settings.sport_days[2] is True

    def test_snacks_per_day_is_clamped(self):
        assert AppSettings(snacks_per_day=0).snacks_per_day == 1
        assert AppSettings.from_dict({"snacksPerDay": 40}).snacks_per_day == 12

        settings = AppSettings()
        settings.set_snacks_per_day(-3)
        assert settings.snacks_per_day == 1

    def test_day_type(self):
        settings = AppSettings()
        assert settings.is_today_sport_day(date(2024, 3, 5))  # Tuesday
        assert not settings.is_today_sport_day(date(2024, 3, 4))  # Monday
        assert settings.day_type_label(date(2024, 3, 4)) == "Rest Day (Strength)"

    def test_toggle_sport_day(self):
        settings = AppSettings()
        settings.toggle_sport_day(1)
        assert settings.is_sport_day(1)
        settings.set_sport_day(9, True)
        assert 9 not in settings.sport_days

    def test_window_duration(self):
        settings = AppSettings(active_window_start=time(9, 0), active_window_end=time(10, 30))
        assert settings.active_window_duration_minutes == 90


class TestScheduledExercise:
    """Test cases for ScheduledExercise."""

    def test_round_trip(self):
        scheduled = ScheduledExercise(
            exercise_id="dips",
            exercise_name="Dips",
            scheduled_time=datetime(2024, 3, 4, 14, 30),
            notification_id=3,
            is_snoozed=True,
            original_time=datetime(2024, 3, 4, 13, 0),
        )
        assert ScheduledExercise.from_dict(scheduled.to_dict()) == scheduled

    def test_formatted_time(self):
        def at(hour, minute):
            return ScheduledExercise("a", "A", datetime(2024, 3, 4, hour, minute), 0).formatted_time

        assert at(14, 30) == "2:30 PM"
        assert at(0, 5) == "12:05 AM"
        assert at(12, 0) == "12:00 PM"
        assert at(9, 7) == "9:07 AM"

    def test_snooze_keeps_first_original_time(self):
        first = ScheduledExercise("a", "A", datetime(2024, 3, 4, 10, 0), 2)

        once = first.snoozed(datetime(2024, 3, 4, 10, 1), 30, 102)
        twice = once.snoozed(datetime(2024, 3, 4, 10, 40), 60, 202)

        assert once.is_snoozed
        assert once.scheduled_time == datetime(2024, 3, 4, 10, 31)
        assert twice.original_time == datetime(2024, 3, 4, 10, 0)
        assert twice.scheduled_time == datetime(2024, 3, 4, 11, 40)

    def test_upcoming_and_past(self):
        scheduled = ScheduledExercise("a", "A", datetime(2024, 3, 4, 10, 0), 0)
        assert scheduled.is_upcoming(datetime(2024, 3, 4, 9, 30))
        assert not scheduled.is_upcoming(datetime(2024, 3, 4, 8, 0))
        assert scheduled.is_past(datetime(2024, 3, 4, 10, 1))


class TestDailyWalk:
    """Test cases for DailyWalk."""

    def test_round_trip(self):
        walk = DailyWalk(date=date(2024, 3, 4), total_seconds=1800, notes="park loop")
        assert DailyWalk.from_dict(walk.to_dict()) == walk

    def test_completed_means_some_time_walked(self):
        assert DailyWalk(date=date(2024, 3, 4), total_seconds=1).completed
        assert not DailyWalk(date=date(2024, 3, 4)).completed

    def test_loads_older_completed_shape(self):
        walk = DailyWalk.from_dict({
            "date": "2024-03-04T00:00:00.000",
            "completed": True,
            "durationMinutes": 20,
            "notes": None,
        })
        assert walk.date == date(2024, 3, 4)
        assert walk.total_seconds == 1200

        missed = DailyWalk.from_dict({"date": "2024-03-05T00:00:00.000", "completed": False})
        assert missed.total_seconds == 0


class TestSprintSession:
    """Test cases for SprintSession."""

    def test_round_trip(self):
        sprint = SprintSession(date=date(2024, 3, 9), completed=True, completed_at=datetime(2024, 3, 9, 7, 45))
        assert SprintSession.from_dict(sprint.to_dict()) == sprint

    def test_round_trip_incomplete(self):
        sprint = SprintSession(date=date(2024, 3, 21))
        data = sprint.to_dict()
        assert data["completedAt"] is None
        assert SprintSession.from_dict(data) == sprint

    def test_relative_day_checks(self):
        sprint = SprintSession(date=date(2024, 3, 9))
        assert sprint.is_today(date(2024, 3, 9))
        assert sprint.is_past(date(2024, 3, 10))
        assert sprint.is_future(date(2024, 3, 8))
