from flask import Blueprint

vocabulary_bp = Blueprint('vocabulary', __name__)

from . import routes  # noqa: E402,F401
