#!/usr/bin/env python3
import os

from flask import Flask, redirect, url_for, jsonify, request

from groove_app import groove_bp
from groove_core import DATA_DIR, load_logs, log_action

app = Flask(__name__)
app.register_blueprint(groove_bp, url_prefix="/groove")


# ───────────── Config ─────────────
app.config["SECRET_KEY"] = os.environ.get("FLASK_SECRET_KEY", "change-me-to-something-random")
app.config["GROOVE_DATA_DIR"] = DATA_DIR

# Push gateway that delivers the snack alerts; unset = only log them
app.config["GROOVE_NOTIFY_BASE"] = os.environ.get("GROOVE_NOTIFY_BASE")
app.config["GROOVE_NOTIFY_TIMEOUT"] = float(os.environ.get("GROOVE_NOTIFY_TIMEOUT", "1.5"))

HOST = os.environ.get("GROOVE_HOST", "127.0.0.1")
PORT = int(os.environ.get("GROOVE_PORT", "8000"))


# ───────────── Routes ─────────────
@app.route("/")
def index():
    return redirect(url_for("groove.today"))


@app.route("/logs")
def view_logs():
    """Recent action-log entries, newest first."""
    try:
        limit = int(request.args.get("limit", 200))
    except ValueError:
        limit = 200
    log_action("view_logs")
    return jsonify(load_logs(limit=max(1, limit)))


if __name__ == "__main__":
    app.run(host=HOST, port=PORT, debug=True)
