import os
import json
from datetime import datetime

from flask import has_request_context, request

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
LOG_FILE = os.environ.get("GROOVE_LOG_FILE", os.path.join(BASE_DIR, "logs.jsonl"))
DATA_DIR = os.environ.get("GROOVE_DATA_DIR", os.path.join(BASE_DIR, "groove_app", "data"))


def log_action(action, details=None):
    """Append a single log entry to logs.jsonl."""
    entry = {
        "timestamp": datetime.now().strftime("%d/%m/%Y %H:%M"),
        "action": action,
        "details": details or {},
    }

    if has_request_context():
        entry["ip"] = request.remote_addr
        entry["path"] = request.path
        entry["user_agent"] = request.headers.get("User-Agent", "")

    try:
        with open(LOG_FILE, "a") as f:
            f.write(json.dumps(entry, default=str) + "\n")
    except OSError:
        # Don't break the app if logging fails
        pass


def load_logs(limit=200):
    """Load the last `limit` log entries, newest first."""
    if not os.path.exists(LOG_FILE):
        return []

    try:
        with open(LOG_FILE, "r") as f:
            lines = f.readlines()
    except OSError:
        return []

    entries = []
    for line in lines[-limit:]:
        line = line.strip()
        if not line:
            continue
        try:
            entries.append(json.loads(line))
        except json.JSONDecodeError:
            continue

    entries.reverse()  # newest first
    return entries
