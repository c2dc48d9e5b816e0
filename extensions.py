"""
Extensions Module - Centralized initialization of storage components
Each app gets its own VideoStorage and ProjectStore, registered on
app.extensions; the proxies below resolve them through current_app.
"""

from flask import current_app
from werkzeug.local import LocalProxy
from utils.uploads import VideoStorage
from utils.data import ProjectStore


def init_app(app):
    """Build storage bound to this app's config and register it"""
    videos = VideoStorage.from_app(app)
    app.extensions['video_storage'] = videos
    app.extensions['project_store'] = ProjectStore.from_app(app, videos=videos)


video_storage = LocalProxy(lambda: current_app.extensions['video_storage'])
project_store = LocalProxy(lambda: current_app.extensions['project_store'])

__all__ = ['init_app', 'video_storage', 'project_store']
