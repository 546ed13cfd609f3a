from flask import Blueprint

groove_bp = Blueprint("groove", __name__)

from . import routes  # noqa
