# File: wordbloom_app/modules/AI/__init__.py
from flask import Blueprint

ai_bp = Blueprint('AI', __name__)

from . import routes, events  # noqa: E402,F401
