import random
from datetime import datetime, timedelta

from groove_core import log_action
from .models import ExerciseType, ScheduledExercise, clamp_snacks

MIN_GAP_MINUTES = 30
MAX_ATTEMPTS = 100
SNOOZE_ID_OFFSET = 100
SNOOZE_OPTIONS = (30, 60, 90)


def day_exercise_type(settings, today):
    return ExerciseType.MOBILITY if settings.is_today_sport_day(today) else ExerciseType.STRENGTH


def available_exercises_for_today(exercises: list, settings, today):
    """
    Exercises eligible for today's snacks.

    Sport days get mobility work, rest days get strength work. Anything done
    yesterday sits out, unless that would leave nothing to schedule.
    """
    exercise_type = day_exercise_type(settings, today)
    pool = [e for e in exercises if e.type == exercise_type and e.is_enabled]

    fresh = [e for e in pool if not e.was_performed_yesterday(today)]
    return fresh or pool


def _too_close(candidate, existing, min_gap_minutes):
    for other in existing:
        if abs((candidate - other).total_seconds()) // 60 < min_gap_minutes:
            return True
    return False


def generate_times(window_start: datetime, window_end: datetime, count: int, rng=None):
    """
    Spread `count` alert times over [window_start, window_end).

    Times are at least MIN_GAP_MINUTES apart when the window allows it. A
    slot that can't find a gap after MAX_ATTEMPTS draws keeps its last draw.
    """
    rng = rng or random.Random()
    duration = int((window_end - window_start).total_seconds() // 60)
    if duration <= 0 or count <= 0:
        return []

    times = []
    if duration < MIN_GAP_MINUTES * count:
        interval = duration // count
        for i in range(count):
            times.append(window_start + timedelta(minutes=interval * i + interval // 2))
    else:
        for _ in range(count):
            attempts = 0
            while True:
                candidate = window_start + timedelta(minutes=rng.randrange(duration))
                attempts += 1
                if not _too_close(candidate, times, MIN_GAP_MINUTES) or attempts >= MAX_ATTEMPTS:
                    break
            times.append(candidate)

    times.sort()
    return times


def select_exercises_for_day(available: list, count: int, rng=None):
    """Cycle a shuffled pool up to `count`, then shuffle the result again."""
    if not available:
        return []
    rng = rng or random.Random()

    shuffled = list(available)
    rng.shuffle(shuffled)

    chosen = [shuffled[i % len(shuffled)] for i in range(count)]
    rng.shuffle(chosen)
    return chosen


def todays_window(settings, now: datetime):
    start = datetime.combine(now.date(), settings.active_window_start)
    end = datetime.combine(now.date(), settings.active_window_end)
    return start, end


def build_schedule(available: list, settings, now: datetime, rng=None):
    rng = rng or random.Random()
    start, end = todays_window(settings, now)

    times = generate_times(start, end, clamp_snacks(settings.snacks_per_day), rng)
    future_times = [t for t in times if t > now]
    exercises = select_exercises_for_day(available, len(future_times), rng)

    return [
        ScheduledExercise(
            exercise_id=exercise.id,
            exercise_name=exercise.name,
            scheduled_time=when,
            notification_id=i,
        )
        for i, (exercise, when) in enumerate(zip(exercises, future_times))
    ]


def notification_body(exercise):
    stretch = exercise.related_stretch.split(".")[0]
    amount = f"{exercise.current_reps}s" if exercise.is_timed else f"{exercise.current_reps} reps"
    return f"{amount} • {stretch}" if stretch else amount


class ScheduleEngine:
    """Turns the eligible pool into today's alerts and hands them to the notifier."""

    def __init__(self, notifier):
        self.notifier = notifier

    def _request(self, notification_id, exercise, when):
        self.notifier.schedule_at(
            notification_id,
            exercise.name,
            notification_body(exercise),
            when,
            exercise.id,
        )

    def schedule_daily(self, available: list, settings, now: datetime, rng=None):
        if not settings.notifications_enabled or not available:
            return []

        self.notifier.cancel_all()

        scheduled = build_schedule(available, settings, now, rng)
        by_id = {e.id: e for e in available}
        for entry in scheduled:
            self._request(entry.notification_id, by_id[entry.exercise_id], entry.scheduled_time)

        log_action("schedule_generated", {
            "count": len(scheduled),
            "times": [s.scheduled_time.strftime("%H:%M") for s in scheduled],
        })
        return scheduled

    def snooze(self, scheduled: ScheduledExercise, exercise, minutes: int, now: datetime):
        self.notifier.cancel(scheduled.notification_id)

        # snoozed alerts stay in 100..199 however often they are pushed back
        new_id = scheduled.notification_id % SNOOZE_ID_OFFSET + SNOOZE_ID_OFFSET
        snoozed = scheduled.snoozed(now, minutes, new_id)
        self._request(new_id, exercise, snoozed.scheduled_time)
        return snoozed
