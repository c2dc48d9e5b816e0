"""
Media Blueprint - Demo video uploads and playback
Handles: Video upload, video serving
"""

from flask import Blueprint

media_bp = Blueprint('media', __name__, url_prefix='')

from . import routes
