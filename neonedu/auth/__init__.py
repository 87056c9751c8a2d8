"""
Authentication blueprint
"""
from flask import Blueprint

auth_bp = Blueprint('auth', __name__)

from neonedu.auth import routes  # noqa: E402,F401
