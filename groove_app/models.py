"""
Data models for the groove app.

Every entity converts to and from the camelCase JSON shape the store keeps,
so records written by older versions of the app stay loadable.
"""

from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta
from enum import Enum
from typing import Dict, List, Optional

MIN_REPS = 1
MIN_SNACKS_PER_DAY = 1
MAX_SNACKS_PER_DAY = 12


def parse_datetime(value) -> Optional[datetime]:
    if value is None:
        return None
    return datetime.fromisoformat(value)


def parse_date(value) -> date:
    # Accepts both "2024-03-01" and the older "2024-03-01T00:00:00.000"
    return datetime.fromisoformat(value).date()


def clamp_snacks(count: int) -> int:
    return max(MIN_SNACKS_PER_DAY, min(MAX_SNACKS_PER_DAY, int(count)))


def _value(data: dict, key: str, default):
    # a stored null counts as missing
    value = data.get(key)
    return default if value is None else value


class ExerciseType(str, Enum):
    STRENGTH = "strength"
    MOBILITY = "mobility"

    @property
    def display_name(self):
        return self.value.capitalize()

    @classmethod
    def from_json(cls, value):
        for member in cls:
            if member.value == value:
                return member
        return cls.STRENGTH


@dataclass(eq=False)
class Exercise:
    """
    A bodyweight exercise and its progression state.

    For timed exercises `current_reps` holds seconds. Two exercises are the
    same exercise when their ids match, whatever their progress.
    """

    id: str
    name: str
    type: ExerciseType
    current_reps: int
    description: str = ""
    is_timed: bool = False
    is_bilateral: bool = False
    is_enabled: bool = True
    related_stretch: str = ""
    last_performed_date: Optional[datetime] = None

    def __eq__(self, other):
        if not isinstance(other, Exercise):
            return NotImplemented
        return self.id == other.id

    def __hash__(self):
        return hash(self.id)

    def was_performed_on(self, day: date) -> bool:
        if self.last_performed_date is None:
            return False
        return self.last_performed_date.date() == day

    def was_performed_yesterday(self, today: date) -> bool:
        return self.was_performed_on(today - timedelta(days=1))

    def was_performed_today(self, today: date) -> bool:
        return self.was_performed_on(today)

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "type": self.type.value,
            "currentReps": self.current_reps,
            "isTimed": self.is_timed,
            "isBilateral": self.is_bilateral,
            "isEnabled": self.is_enabled,
            "relatedStretch": self.related_stretch,
            "lastPerformedDate": self.last_performed_date.isoformat() if self.last_performed_date else None,
        }

    @classmethod
    def from_dict(cls, data: dict):
        return cls(
            id=data["id"],
            name=data["name"],
            description=data.get("description") or "",
            type=ExerciseType.from_json(data.get("type")),
            current_reps=max(MIN_REPS, int(data["currentReps"])),
            is_timed=bool(_value(data, "isTimed", False)),
            is_bilateral=bool(_value(data, "isBilateral", False)),
            is_enabled=bool(_value(data, "isEnabled", True)),
            related_stretch=data.get("relatedStretch") or "",
            last_performed_date=parse_datetime(data.get("lastPerformedDate")),
        )


def default_sport_days():
    # Tue/Thu/Sat are sport days, everything else is a rest day
    return {day: day in (2, 4, 6) for day in range(1, 8)}


@dataclass
class AppSettings:
    sport_days: Dict[int, bool] = field(default_factory=default_sport_days)
    active_window_start: time = time(7, 0)
    active_window_end: time = time(20, 0)
    snacks_per_day: int = 6
    notifications_enabled: bool = True
    has_seen_onboarding: bool = False

    def __post_init__(self):
        days = default_sport_days()
        days.update({int(k): bool(v) for k, v in self.sport_days.items() if 1 <= int(k) <= 7})
        self.sport_days = days
        self.snacks_per_day = clamp_snacks(self.snacks_per_day)

    def is_sport_day(self, weekday: int) -> bool:
        return self.sport_days.get(weekday, False)

    def is_today_sport_day(self, today: date) -> bool:
        return self.is_sport_day(today.isoweekday())

    def day_type_label(self, today: date) -> str:
        if self.is_today_sport_day(today):
            return f"Sport Day ({ExerciseType.MOBILITY.display_name})"
        return f"Rest Day ({ExerciseType.STRENGTH.display_name})"

    def set_sport_day(self, weekday: int, is_sport_day: bool):
        if weekday in self.sport_days:
            self.sport_days[weekday] = bool(is_sport_day)

    def toggle_sport_day(self, weekday: int):
        self.set_sport_day(weekday, not self.is_sport_day(weekday))

    def set_snacks_per_day(self, count: int):
        self.snacks_per_day = clamp_snacks(count)

    def set_active_window(self, start: time, end: time):
        self.active_window_start = start
        self.active_window_end = end

    @property
    def active_window_duration_minutes(self):
        start = self.active_window_start.hour * 60 + self.active_window_start.minute
        end = self.active_window_end.hour * 60 + self.active_window_end.minute
        return end - start

    def to_dict(self):
        return {
            "sportDays": {str(day): value for day, value in sorted(self.sport_days.items())},
            "activeWindowStartHour": self.active_window_start.hour,
            "activeWindowStartMinute": self.active_window_start.minute,
            "activeWindowEndHour": self.active_window_end.hour,
            "activeWindowEndMinute": self.active_window_end.minute,
            "snacksPerDay": self.snacks_per_day,
            "notificationsEnabled": self.notifications_enabled,
            "hasSeenOnboarding": self.has_seen_onboarding,
        }

    @classmethod
    def from_dict(cls, data: dict):
        sport_days = data.get("sportDays") or {}
        return cls(
            sport_days={int(k): bool(v) for k, v in sport_days.items() if v is not None},
            active_window_start=time(
                int(_value(data, "activeWindowStartHour", 7)),
                int(_value(data, "activeWindowStartMinute", 0)),
            ),
            active_window_end=time(
                int(_value(data, "activeWindowEndHour", 20)),
                int(_value(data, "activeWindowEndMinute", 0)),
            ),
            snacks_per_day=_value(data, "snacksPerDay", 6),
            notifications_enabled=bool(_value(data, "notificationsEnabled", True)),
            has_seen_onboarding=bool(_value(data, "hasSeenOnboarding", False)),
        )


@dataclass
class ScheduledExercise:
    exercise_id: str
    exercise_name: str
    scheduled_time: datetime
    notification_id: int
    is_snoozed: bool = False
    original_time: Optional[datetime] = None

    @property
    def formatted_time(self):
        hour = self.scheduled_time.hour
        period = "PM" if hour >= 12 else "AM"
        display_hour = hour - 12 if hour > 12 else (12 if hour == 0 else hour)
        return f"{display_hour}:{self.scheduled_time.minute:02d} {period}"

    def is_past(self, now: datetime) -> bool:
        return self.scheduled_time < now

    def is_upcoming(self, now: datetime) -> bool:
        minutes = (self.scheduled_time - now).total_seconds() // 60
        return 0 < minutes <= 60

    def snoozed(self, now: datetime, minutes: int, notification_id: int):
        return ScheduledExercise(
            exercise_id=self.exercise_id,
            exercise_name=self.exercise_name,
            scheduled_time=now + timedelta(minutes=minutes),
            notification_id=notification_id,
            is_snoozed=True,
            original_time=self.original_time or self.scheduled_time,
        )

    def to_dict(self):
        return {
            "exerciseId": self.exercise_id,
            "exerciseName": self.exercise_name,
            "scheduledTime": self.scheduled_time.isoformat(),
            "notificationId": self.notification_id,
            "isSnoozed": self.is_snoozed,
            "originalTime": self.original_time.isoformat() if self.original_time else None,
        }

    @classmethod
    def from_dict(cls, data: dict):
        return cls(
            exercise_id=data["exerciseId"],
            exercise_name=data["exerciseName"],
            scheduled_time=parse_datetime(data["scheduledTime"]),
            notification_id=int(data["notificationId"]),
            is_snoozed=bool(data.get("isSnoozed", False)),
            original_time=parse_datetime(data.get("originalTime")),
        )


@dataclass
class DailyWalk:
    date: date
    total_seconds: int = 0
    notes: Optional[str] = None

    @property
    def completed(self):
        return self.total_seconds > 0

    def add_seconds(self, seconds: int):
        return DailyWalk(date=self.date, total_seconds=self.total_seconds + max(0, seconds), notes=self.notes)

    def to_dict(self):
        return {
            "date": self.date.isoformat(),
            "totalSeconds": self.total_seconds,
            "notes": self.notes,
        }

    @classmethod
    def from_dict(cls, data: dict):
        if "totalSeconds" in data:
            total = int(data["totalSeconds"] or 0)
        elif data.get("completed"):
            # older records only stored a completed flag and optional minutes
            total = int(data.get("durationMinutes") or 30) * 60
        else:
            total = 0
        return cls(date=parse_date(data["date"]), total_seconds=max(0, total), notes=data.get("notes"))


@dataclass
class WalkStatistics:
    total_days: int = 0
    completed_days: int = 0
    total_seconds: int = 0
    current_streak: int = 0
    longest_streak: int = 0
    period_start: Optional[date] = None
    period_end: Optional[date] = None

    @property
    def completion_rate(self):
        return self.completed_days / self.total_days * 100 if self.total_days else 0.0

    @property
    def average_seconds(self):
        return self.total_seconds / self.completed_days if self.completed_days else 0.0

    @classmethod
    def from_walks(cls, walks: List[DailyWalk], today: date, period_start=None, period_end=None):
        if not walks:
            return cls(period_start=period_start, period_end=period_end)

        completed = [w for w in walks if w.completed]
        completed_dates = {w.date for w in completed}

        current = 0
        check = today
        while check in completed_dates:
            current += 1
            check -= timedelta(days=1)

        longest = 0
        run = 0
        previous = None
        for walk in sorted(walks, key=lambda w: w.date):
            if walk.completed:
                if previous is not None and walk.date - previous == timedelta(days=1):
                    run += 1
                else:
                    run = 1
                previous = walk.date
            else:
                run = 0
                previous = None
            longest = max(longest, run)

        return cls(
            total_days=len(walks),
            completed_days=len(completed),
            total_seconds=sum(w.total_seconds for w in completed),
            current_streak=current,
            longest_streak=longest,
            period_start=period_start,
            period_end=period_end,
        )

    def to_dict(self):
        return {
            "totalDays": self.total_days,
            "completedDays": self.completed_days,
            "totalSeconds": self.total_seconds,
            "averageSeconds": round(self.average_seconds, 1),
            "completionRate": round(self.completion_rate, 1),
            "currentStreak": self.current_streak,
            "longestStreak": self.longest_streak,
            "periodStart": self.period_start.isoformat() if self.period_start else None,
            "periodEnd": self.period_end.isoformat() if self.period_end else None,
        }


@dataclass
class SprintSession:
    date: date
    completed: bool = False
    completed_at: Optional[datetime] = None

    def is_today(self, today: date) -> bool:
        return self.date == today

    def is_past(self, today: date) -> bool:
        return self.date < today

    def is_future(self, today: date) -> bool:
        return self.date > today

    def mark_completed(self, now: datetime):
        return SprintSession(date=self.date, completed=True, completed_at=now)

    def to_dict(self):
        return {
            "date": self.date.isoformat(),
            "completed": self.completed,
            "completedAt": self.completed_at.isoformat() if self.completed_at else None,
        }

    @classmethod
    def from_dict(cls, data: dict):
        return cls(
            date=parse_date(data["date"]),
            completed=bool(data.get("completed", False)),
            completed_at=parse_datetime(data.get("completedAt")),
        )


@dataclass
class SprintStatistics:
    total_scheduled: int = 0
    total_completed: int = 0
    current_streak: int = 0
    longest_streak: int = 0

    @property
    def completion_rate(self):
        return self.total_completed / self.total_scheduled * 100 if self.total_scheduled else 0.0

    @classmethod
    def from_sprints(cls, sprints: List[SprintSession], today: date):
        # Future sprints haven't had their chance yet
        considered = sorted((s for s in sprints if s.date <= today), key=lambda s: s.date, reverse=True)
        if not considered:
            return cls()

        current = 0
        for sprint in considered:
            if sprint.completed:
                current += 1
            elif sprint.is_past(today):
                break

        longest = 0
        run = 0
        for sprint in reversed(considered):
            run = run + 1 if sprint.completed else 0
            longest = max(longest, run)

        return cls(
            total_scheduled=len(considered),
            total_completed=sum(1 for s in considered if s.completed),
            current_streak=current,
            longest_streak=longest,
        )

    def to_dict(self):
        return {
            "totalScheduled": self.total_scheduled,
            "totalCompleted": self.total_completed,
            "completionRate": round(self.completion_rate, 1),
            "currentStreak": self.current_streak,
            "longestStreak": self.longest_streak,
        }
