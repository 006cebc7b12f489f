from flask import Blueprint

user_profile_bp = Blueprint('user_profile', __name__)

from . import routes  # noqa: E402,F401
