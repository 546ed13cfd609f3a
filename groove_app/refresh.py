from datetime import datetime, time

from groove_core import log_action
from .catalog import ExerciseCatalog
from .generate import ScheduleEngine, available_exercises_for_today, day_exercise_type
from .progression import ExerciseNotFound, ProgressionEngine
from .sprints import SprintScheduler
from .storage import (
    load_last_scheduled_date,
    load_or_create_settings,
    load_scheduled_exercises,
    save_last_scheduled_date,
    save_scheduled_exercises,
    save_settings,
)
from .walks import WalkTracker

SPRINT_NOTIFICATION_ID = 900
SPRINT_REMINDER_TIME = time(9, 0)


def sprint_payload(sprint):
    return f"sprint_{sprint.date.isoformat()}"


class DailyRefresh:
    """
    Wires catalog, scheduling, progression, sprints and walks to one store.

    Call `refresh()` whenever the app comes to the foreground; it only
    rebuilds the snack schedule once per calendar day.
    """

    def __init__(self, store, notifier, clock=datetime.now, rng=None):
        self.store = store
        self.notifier = notifier
        self.clock = clock
        self.rng = rng
        self.catalog = ExerciseCatalog(store).load()
        self.settings = load_or_create_settings(store)
        self.engine = ScheduleEngine(notifier)
        self.progression = ProgressionEngine(self.catalog)
        self.sprints = SprintScheduler(store)
        self.walks = WalkTracker(store)

    def today(self):
        return self.clock().date()

    def save_settings(self):
        save_settings(self.store, self.settings)

    # Snack schedule

    def needs_scheduling_today(self):
        last = load_last_scheduled_date(self.store)
        return last is None or last.date() != self.today()

    def available_exercises(self):
        return available_exercises_for_today(self.catalog.all(), self.settings, self.today())

    def todays_schedule(self):
        return load_scheduled_exercises(self.store)

    def _schedule_today(self):
        now = self.clock()
        scheduled = self.engine.schedule_daily(self.available_exercises(), self.settings, now, self.rng)
        save_scheduled_exercises(self.store, scheduled)
        save_last_scheduled_date(self.store, now)
        return scheduled

    def refresh(self, force=False):
        scheduled = None
        if force or self.needs_scheduling_today():
            scheduled = self._schedule_today()
        self.refresh_sprints()
        return scheduled if scheduled is not None else self.todays_schedule()

    def reschedule(self):
        log_action("reschedule")
        scheduled = self._schedule_today()
        # cancel_all above also dropped today's sprint reminder
        self.refresh_sprints()
        return scheduled

    def shuffle(self):
        self.catalog.reset_last_performed(day_exercise_type(self.settings, self.today()))
        log_action("shuffle")
        scheduled = self._schedule_today()
        self.refresh_sprints()
        return scheduled

    def snooze(self, notification_id: int, minutes: int):
        scheduled = self.todays_schedule()
        for i, entry in enumerate(scheduled):
            if entry.notification_id != notification_id:
                continue
            exercise = self.catalog.by_id(entry.exercise_id)
            if exercise is None:
                return None
            snoozed = self.engine.snooze(entry, exercise, minutes, self.clock())
            scheduled[i] = snoozed
            save_scheduled_exercises(self.store, scheduled)
            log_action("snooze", {"exercise": exercise.id, "minutes": minutes})
            return snoozed
        return None

    # Progression

    def complete_session(self, exercise_id: str, actual_reps: int, was_easy: bool):
        try:
            exercise = self.progression.complete_session(exercise_id, actual_reps, was_easy, self.clock())
        except ExerciseNotFound:
            log_action("complete_session_unknown", {"exercise": exercise_id})
            return None
        log_action("complete_session", {
            "exercise": exercise.id,
            "reps": actual_reps,
            "easy": was_easy,
            "current_reps": exercise.current_reps,
        })
        return exercise

    def mark_as_performed(self, exercise_id: str):
        return self.progression.mark_as_performed(exercise_id, self.clock())

    # Sprints

    def refresh_sprints(self):
        today = self.today()
        self.sprints.ensure_scheduled(today, self.rng)
        sprint = self.sprints.todays_sprint(today)
        if sprint is not None and not sprint.completed and self.settings.notifications_enabled:
            self._notify_sprint(sprint)
        return sprint

    def _notify_sprint(self, sprint):
        now = self.clock()
        title = "Sprint Day!"
        body = "Today is your sprint session. Get ready to run!"
        reminder = datetime.combine(sprint.date, SPRINT_REMINDER_TIME)
        if now > reminder:
            self.notifier.show_now(SPRINT_NOTIFICATION_ID, title, body, sprint_payload(sprint))
        else:
            self.notifier.schedule_at(SPRINT_NOTIFICATION_ID, title, body, reminder, sprint_payload(sprint))

    def complete_todays_sprint(self):
        completed = self.sprints.complete_todays_sprint(self.clock())
        if completed is not None:
            self.notifier.cancel(SPRINT_NOTIFICATION_ID)
            log_action("sprint_completed", {"date": completed.date.isoformat()})
        return completed

    # Summary

    def today_summary(self):
        today = self.today()
        walk = self.walks.todays_walk(today)
        todays_sprint = self.sprints.todays_sprint(today)
        next_sprint = self.sprints.next_sprint(today)
        return {
            "date": today.isoformat(),
            "day_type": self.settings.day_type_label(today),
            "scheduled": [s.to_dict() for s in self.todays_schedule()],
            "walk_seconds": walk.total_seconds if walk else 0,
            "walk_streak": self.walks.statistics(today).current_streak,
            "todays_sprint": todays_sprint.to_dict() if todays_sprint else None,
            "next_sprint": next_sprint.to_dict() if next_sprint else None,
        }
