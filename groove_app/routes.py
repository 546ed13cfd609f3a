from datetime import datetime, time

from flask import current_app, jsonify, request

from . import groove_bp
from .generate import SNOOZE_OPTIONS
from .models import Exercise
from .notifier import LogNotifier, WebhookNotifier
from .refresh import DailyRefresh
from .storage import JsonFileStore
from .walks import WalkTimer, WalkTracker, format_walk_time
from groove_core import log_action


def _store():
    return JsonFileStore(current_app.config["GROOVE_DATA_DIR"])


def _notifier():
    base = current_app.config.get("GROOVE_NOTIFY_BASE")
    if base:
        return WebhookNotifier(base, current_app.config.get("GROOVE_NOTIFY_TIMEOUT", 1.5))
    return LogNotifier()


def _clock():
    return current_app.config.get("GROOVE_CLOCK") or datetime.now


def _services():
    return DailyRefresh(_store(), _notifier(), clock=_clock())


def _walk_timer():
    # one running walk per app process
    timer = current_app.extensions.get("groove_walk_timer")
    if timer is None:
        timer = WalkTimer(WalkTracker(_store()), clock=_clock())
        current_app.extensions["groove_walk_timer"] = timer
    return timer


def _payload():
    data = request.get_json(force=True, silent=True)
    return data if isinstance(data, dict) else {}


def _error(message, status=400):
    return jsonify({"ok": False, "error": message}), status


def _parse_time(value):
    hour, minute = str(value).split(":")
    return time(int(hour), int(minute))


def _schedule_json(scheduled):
    return [dict(s.to_dict(), formattedTime=s.formatted_time) for s in scheduled]


@groove_bp.route("/today", methods=["GET"])
def today():
    services = _services()
    services.refresh()
    log_action("groove_today_view")
    summary = services.today_summary()
    summary["scheduled"] = _schedule_json(services.todays_schedule())
    summary["walk_display"] = format_walk_time(summary["walk_seconds"])
    return jsonify(summary)


@groove_bp.route("/reschedule", methods=["POST"])
def reschedule():
    scheduled = _services().reschedule()
    return jsonify({"ok": True, "scheduled": _schedule_json(scheduled)})


@groove_bp.route("/shuffle", methods=["POST"])
def shuffle():
    scheduled = _services().shuffle()
    return jsonify({"ok": True, "scheduled": _schedule_json(scheduled)})


@groove_bp.route("/snooze", methods=["POST"])
def snooze():
    data = _payload()
    try:
        notification_id = int(data["notification_id"])
        minutes = int(data.get("minutes", SNOOZE_OPTIONS[0]))
    except (KeyError, TypeError, ValueError):
        return _error("invalid_snooze")
    if minutes <= 0:
        return _error("invalid_snooze")

    snoozed = _services().snooze(notification_id, minutes)
    if snoozed is None:
        return _error("not_found", 404)
    return jsonify({"ok": True, "scheduled": snoozed.to_dict()})


@groove_bp.route("/complete", methods=["POST"])
def complete():
    data = _payload()
    try:
        exercise_id = str(data["exercise_id"])
        reps = int(data["reps"])
    except (KeyError, TypeError, ValueError):
        return _error("invalid_session")

    exercise = _services().complete_session(exercise_id, reps, bool(data.get("easy", False)))
    if exercise is None:
        return _error("not_found", 404)
    return jsonify({"ok": True, "exercise": exercise.to_dict()})


@groove_bp.route("/performed", methods=["POST"])
def performed():
    exercise_id = str(_payload().get("exercise_id") or "")
    exercise = _services().mark_as_performed(exercise_id)
    if exercise is None:
        return _error("not_found", 404)
    log_action("exercise_marked_performed", {"exercise": exercise_id})
    return jsonify({"ok": True, "exercise": exercise.to_dict()})


# Exercise management

@groove_bp.route("/exercises", methods=["GET", "POST"])
def exercises():
    catalog = _services().catalog

    if request.method == "POST":
        try:
            exercise = Exercise.from_dict(_payload())
        except (KeyError, TypeError, ValueError):
            return _error("invalid_exercise")
        if catalog.add(exercise) is None:
            return _error("duplicate_id", 409)
        log_action("exercise_added", {"exercise": exercise.id})
        return jsonify({"ok": True, "exercise": exercise.to_dict()}), 201

    return jsonify([e.to_dict() for e in catalog.all()])


@groove_bp.route("/exercises/<exercise_id>", methods=["POST", "DELETE"])
def exercise_detail(exercise_id):
    catalog = _services().catalog

    if request.method == "DELETE":
        if catalog.remove(exercise_id) is None:
            return _error("not_found", 404)
        log_action("exercise_removed", {"exercise": exercise_id})
        return jsonify({"ok": True})

    if catalog.by_id(exercise_id) is None:
        return _error("not_found", 404)

    data = _payload()
    try:
        if "enabled" in data:
            if not isinstance(data["enabled"], bool):
                return _error("invalid_exercise")
            catalog.set_enabled(exercise_id, data["enabled"])
        if "reps" in data:
            catalog.adjust_reps(exercise_id, int(data["reps"]))
    except (TypeError, ValueError):
        return _error("invalid_exercise")

    log_action("exercise_updated", {"exercise": exercise_id, "changes": data})
    return jsonify({"ok": True, "exercise": catalog.by_id(exercise_id).to_dict()})


@groove_bp.route("/exercises/reset", methods=["POST"])
def exercises_reset():
    catalog = _services().catalog
    catalog.reset_to_defaults()
    log_action("exercises_reset")
    return jsonify({"ok": True, "count": len(catalog.all())})


# Settings

@groove_bp.route("/settings", methods=["GET", "POST"])
def settings():
    services = _services()
    current = services.settings

    if request.method == "POST":
        data = _payload()
        try:
            for weekday, is_sport in (data.get("sport_days") or {}).items():
                current.set_sport_day(int(weekday), bool(is_sport))
            if "window_start" in data or "window_end" in data:
                start = _parse_time(data.get("window_start", current.active_window_start.strftime("%H:%M")))
                end = _parse_time(data.get("window_end", current.active_window_end.strftime("%H:%M")))
                current.set_active_window(start, end)
            if "snacks_per_day" in data:
                current.set_snacks_per_day(int(data["snacks_per_day"]))
        except (AttributeError, TypeError, ValueError):
            return _error("invalid_settings")

        if "notifications_enabled" in data:
            current.notifications_enabled = bool(data["notifications_enabled"])
        if "has_seen_onboarding" in data:
            current.has_seen_onboarding = bool(data["has_seen_onboarding"])

        services.save_settings()
        log_action("settings_updated", {"settings": current.to_dict()})

    return jsonify(current.to_dict())


# Walks

@groove_bp.route("/walk/start", methods=["POST"])
def walk_start():
    timer = _walk_timer()
    if not timer.start():
        return _error("already_running", 409)
    log_action("walk_started")
    return jsonify({"ok": True, "started_at": timer.started_at.isoformat()})


@groove_bp.route("/walk/stop", methods=["POST"])
def walk_stop():
    timer = _walk_timer()
    walk = timer.stop()
    if walk is None:
        return _error("not_running", 409)
    log_action("walk_stopped", {"total_seconds": walk.total_seconds})
    return jsonify({"ok": True, "walk": walk.to_dict(), "display": format_walk_time(walk.total_seconds)})


@groove_bp.route("/walk/stats", methods=["GET"])
def walk_stats():
    period = request.args.get("period", "all").lower()
    if period not in ("week", "month", "year", "all"):
        period = "all"

    services = _services()
    stats = services.walks.statistics(services.today(), period)
    log_action("walk_stats_view", {"period": period})
    return jsonify(dict(stats.to_dict(), period=period))


# Sprints

@groove_bp.route("/sprints", methods=["GET"])
def sprints():
    services = _services()
    services.refresh_sprints()
    today = services.today()
    return jsonify({
        "upcoming": [s.to_dict() for s in services.sprints.upcoming(today)],
        "past": [s.to_dict() for s in services.sprints.past(today)],
        "statistics": services.sprints.statistics(today).to_dict(),
    })


@groove_bp.route("/sprints/complete", methods=["POST"])
def sprints_complete():
    completed = _services().complete_todays_sprint()
    if completed is None:
        return _error("no_sprint_today", 404)
    return jsonify({"ok": True, "sprint": completed.to_dict()})
