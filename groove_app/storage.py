import os
import json
from datetime import datetime

from groove_core import log_action
from .models import AppSettings, DailyWalk, Exercise, ScheduledExercise, SprintSession

EXERCISES_KEY = "exercises"
SETTINGS_KEY = "app_settings"
LAST_SCHEDULED_DATE_KEY = "last_scheduled_date"
SCHEDULED_EXERCISES_KEY = "scheduled_exercises"
DAILY_WALKS_KEY = "daily_walks"
SPRINT_SESSIONS_KEY = "sprint_sessions"

ALL_KEYS = (
    EXERCISES_KEY,
    SETTINGS_KEY,
    LAST_SCHEDULED_DATE_KEY,
    SCHEDULED_EXERCISES_KEY,
    DAILY_WALKS_KEY,
    SPRINT_SESSIONS_KEY,
)


class JsonFileStore:
    """
    Key-value store keeping one JSON blob per key under `data_dir`.

    `get` returns None both for a missing key and for a file that can't be
    read, so callers treat either as a first run.
    """

    def __init__(self, data_dir: str):
        self.data_dir = data_dir
        os.makedirs(data_dir, exist_ok=True)

    def _path(self, key: str):
        return os.path.join(self.data_dir, f"{key}.json")

    def get(self, key: str):
        path = self._path(key)
        if not os.path.exists(path):
            return None
        try:
            with open(path, "r", encoding="utf-8") as f:
                return f.read()
        except OSError as e:
            log_action("storage_read_failed", {"key": key, "error": str(e)})
            return None

    def set(self, key: str, value: str):
        path = self._path(key)
        tmp_path = path + ".tmp"
        with open(tmp_path, "w", encoding="utf-8") as f:
            f.write(value)
        os.replace(tmp_path, path)

    def remove(self, key: str):
        try:
            os.remove(self._path(key))
        except FileNotFoundError:
            pass

    def clear(self):
        for key in ALL_KEYS:
            self.remove(key)


def load_json(store, key: str, fallback=None):
    raw = store.get(key)
    if raw is None:
        return fallback
    try:
        return json.loads(raw)
    except ValueError as e:
        log_action("storage_parse_failed", {"key": key, "error": str(e)})
        return fallback


def save_json(store, key: str, data):
    store.set(key, json.dumps(data, indent=2))


def _load_list(store, key: str, model):
    """Decode a stored list of records, or None if absent or unreadable."""
    data = load_json(store, key)
    if data is None:
        return None
    try:
        return [model.from_dict(item) for item in data]
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        log_action("storage_parse_failed", {"key": key, "error": str(e)})
        return None


def _save_list(store, key: str, records):
    save_json(store, key, [r.to_dict() for r in records])


def load_exercises(store):
    return _load_list(store, EXERCISES_KEY, Exercise)


def save_exercises(store, exercises):
    _save_list(store, EXERCISES_KEY, exercises)


def load_settings(store):
    data = load_json(store, SETTINGS_KEY)
    if data is None:
        return None
    try:
        return AppSettings.from_dict(data)
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        log_action("storage_parse_failed", {"key": SETTINGS_KEY, "error": str(e)})
        return None


def save_settings(store, settings: AppSettings):
    save_json(store, SETTINGS_KEY, settings.to_dict())


def load_or_create_settings(store):
    settings = load_settings(store)
    if settings is None:
        settings = AppSettings()
        save_settings(store, settings)
    return settings


def load_last_scheduled_date(store):
    raw = load_json(store, LAST_SCHEDULED_DATE_KEY)
    if raw is None:
        return None
    try:
        return datetime.fromisoformat(raw)
    except (TypeError, ValueError):
        return None


def save_last_scheduled_date(store, when: datetime):
    save_json(store, LAST_SCHEDULED_DATE_KEY, when.isoformat())


def load_scheduled_exercises(store):
    return _load_list(store, SCHEDULED_EXERCISES_KEY, ScheduledExercise) or []


def save_scheduled_exercises(store, scheduled):
    _save_list(store, SCHEDULED_EXERCISES_KEY, scheduled)


def load_daily_walks(store):
    return _load_list(store, DAILY_WALKS_KEY, DailyWalk) or []


def save_daily_walks(store, walks):
    _save_list(store, DAILY_WALKS_KEY, walks)


def load_sprint_sessions(store):
    return _load_list(store, SPRINT_SESSIONS_KEY, SprintSession) or []


def save_sprint_sessions(store, sprints):
    _save_list(store, SPRINT_SESSIONS_KEY, sprints)
