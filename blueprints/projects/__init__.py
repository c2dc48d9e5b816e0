"""
Projects Blueprint - Project records API
Handles: Listing, creating, updating and deleting portfolio projects
"""

from flask import Blueprint

projects_bp = Blueprint('projects', __name__, url_prefix='')

from . import routes
