import calendar
import random
from datetime import date, datetime

from .models import SprintSession, SprintStatistics
from .storage import load_sprint_sessions, save_sprint_sessions

SPRINTS_PER_MONTH = 2
MIN_DAYS_BETWEEN_SPRINTS = 7


def generate_sprint_days_for_month(year: int, month: int, rng=None):
    """
    Two sprint dates for the month, at least a week apart.

    The first lands in the first half of the month. When the month is too
    short for a full week after it, the second falls on the last day.
    """
    rng = rng or random.Random()
    days_in_month = calendar.monthrange(year, month)[1]

    first_half_end = days_in_month // 2
    first = rng.randint(1, first_half_end)

    earliest_second = first + MIN_DAYS_BETWEEN_SPRINTS
    if earliest_second <= days_in_month:
        second = rng.randint(earliest_second, days_in_month)
    else:
        second = days_in_month

    return [date(year, month, first), date(year, month, second)]


def needs_scheduling_for_month(sprints, year: int, month: int):
    in_month = [s for s in sprints if s.date.year == year and s.date.month == month]
    return len(in_month) < SPRINTS_PER_MONTH


def next_month(day: date):
    if day.month == 12:
        return day.year + 1, 1
    return day.year, day.month + 1


class SprintScheduler:
    """Sprint sessions keyed by date, persisted under `sprint_sessions`."""

    def __init__(self, store):
        self.store = store
        self._sessions = {s.date: s for s in load_sprint_sessions(store)}

    def save(self):
        save_sprint_sessions(self.store, self.all())

    def all(self):
        return sorted(self._sessions.values(), key=lambda s: s.date)

    def _top_up_month(self, year, month, rng):
        if not needs_scheduling_for_month(self._sessions.values(), year, month):
            return False
        added = False
        for day in generate_sprint_days_for_month(year, month, rng):
            if day not in self._sessions:
                self._sessions[day] = SprintSession(date=day)
                added = True
        return added

    def ensure_scheduled(self, today: date, rng=None):
        """Make sure this month and next month both have their sprint days."""
        added = self._top_up_month(today.year, today.month, rng)
        added = self._top_up_month(*next_month(today), rng) or added
        if added:
            self.save()
        return self.all()

    def upcoming(self, today: date):
        return [s for s in self.all() if s.date >= today]

    def past(self, today: date):
        return sorted((s for s in self._sessions.values() if s.date < today), key=lambda s: s.date, reverse=True)

    def todays_sprint(self, today: date):
        return self._sessions.get(today)

    def next_sprint(self, today: date):
        upcoming = self.upcoming(today)
        for sprint in upcoming:
            if not sprint.completed:
                return sprint
        return upcoming[0] if upcoming else None

    def complete_todays_sprint(self, now: datetime):
        sprint = self._sessions.get(now.date())
        if sprint is None:
            return None
        completed = sprint.mark_completed(now)
        self._sessions[now.date()] = completed
        self.save()
        return completed

    def statistics(self, today: date):
        return SprintStatistics.from_sprints(self.all(), today)
