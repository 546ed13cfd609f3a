import calendar
import threading
from datetime import date, datetime, timedelta

from .models import DailyWalk, WalkStatistics
from .storage import load_daily_walks, save_daily_walks


def format_walk_time(total_seconds: int):
    hours, rest = divmod(max(0, int(total_seconds)), 3600)
    minutes, seconds = divmod(rest, 60)
    if hours:
        return f"{hours:02d}:{minutes:02d}:{seconds:02d}"
    return f"{minutes:02d}:{seconds:02d}"


class WalkTracker:
    """Daily walk totals keyed by date, persisted under `daily_walks`."""

    def __init__(self, store):
        self.store = store
        self._walks = {}
        self.reload()

    def reload(self):
        self._walks = {}
        for walk in load_daily_walks(self.store):
            # merge duplicates from older data into one record per day
            existing = self._walks.get(walk.date)
            self._walks[walk.date] = existing.add_seconds(walk.total_seconds) if existing else walk

    def save(self):
        save_daily_walks(self.store, self.all())

    def all(self):
        return sorted(self._walks.values(), key=lambda w: w.date)

    def todays_walk(self, today: date):
        return self._walks.get(today)

    def add_seconds_to_todays_walk(self, seconds: int, today: date):
        # a timer can run for a long time; pick up anything saved meanwhile
        self.reload()
        existing = self._walks.get(today)
        if existing is None:
            walk = DailyWalk(date=today, total_seconds=max(0, int(seconds)))
        else:
            walk = existing.add_seconds(int(seconds))
        self._walks[today] = walk
        self.save()
        return walk

    def log_todays_walk(self, today: date, total_seconds: int = 0, notes=None):
        self.reload()
        walk = DailyWalk(date=today, total_seconds=max(0, int(total_seconds)), notes=notes)
        self._walks[today] = walk
        self.save()
        return walk

    def walks_in_range(self, start, end):
        if isinstance(start, datetime):
            start = start.date()
        if isinstance(end, datetime):
            end = end.date()
        return [w for w in self.all() if start <= w.date <= end]

    def this_weeks_walks(self, today: date):
        monday = today - timedelta(days=today.isoweekday() - 1)
        return self.walks_in_range(monday, monday + timedelta(days=6))

    def this_months_walks(self, today: date):
        last_day = calendar.monthrange(today.year, today.month)[1]
        return self.walks_in_range(today.replace(day=1), today.replace(day=last_day))

    def this_years_walks(self, today: date):
        return self.walks_in_range(date(today.year, 1, 1), date(today.year, 12, 31))

    def statistics(self, today: date, period="all"):
        if period == "week":
            start = today - timedelta(days=today.isoweekday() - 1)
            end = start + timedelta(days=6)
        elif period == "month":
            start = today.replace(day=1)
            end = today.replace(day=calendar.monthrange(today.year, today.month)[1])
        elif period == "year":
            start, end = date(today.year, 1, 1), date(today.year, 12, 31)
        else:
            return WalkStatistics.from_walks(self.all(), today)
        return WalkStatistics.from_walks(self.walks_in_range(start, end), today, start, end)


class WalkTimer:
    """
    A running walk.

    A background thread bumps `ticks` once per second for display. What gets
    saved on stop is wall-clock time since start, so missed ticks don't
    shorten the walk.
    """

    def __init__(self, tracker: WalkTracker, clock=datetime.now, tick_seconds=1.0, on_tick=None):
        self.tracker = tracker
        self.clock = clock
        self.tick_seconds = tick_seconds
        self.on_tick = on_tick
        self.started_at = None
        self.ticks = 0
        self._stop_event = threading.Event()
        self._thread = None

    @property
    def is_running(self):
        return self.started_at is not None

    def elapsed_seconds(self):
        if self.started_at is None:
            return 0
        return max(0, int((self.clock() - self.started_at).total_seconds()))

    def _run(self):
        while not self._stop_event.wait(self.tick_seconds):
            self.ticks += 1
            if self.on_tick:
                self.on_tick(self.ticks)

    def start(self):
        if self.is_running:
            return False
        self.started_at = self.clock()
        self.ticks = 0
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()
        return True

    def stop(self):
        """Stop the timer and save the walk. Returns today's updated record."""
        if not self.is_running:
            return None
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout=self.tick_seconds * 2)
            self._thread = None

        elapsed = self.elapsed_seconds()
        self.started_at = None
        return self.tracker.add_seconds_to_todays_walk(elapsed, self.clock().date())

    def dispose(self):
        return self.stop()
