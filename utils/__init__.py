"""
Utils Package - Centralized utility modules initialization
"""

from .errors import (
    PortfolioError,
    ValidationError,
    NotFoundError,
    StorageError,
    StorageReadError,
    StorageWriteError
)
from .helpers import (
    allowed_video,
    utc_timestamp,
    generate_project_id,
    generate_video_filename,
    is_safe_filename,
    is_http_url
)
from .uploads import VideoStorage, MAX_VIDEO_SIZE
from .data import ProjectStore

__all__ = [
    # Errors
    'PortfolioError',
    'ValidationError',
    'NotFoundError',
    'StorageError',
    'StorageReadError',
    'StorageWriteError',

    # Helpers
    'allowed_video',
    'utc_timestamp',
    'generate_project_id',
    'generate_video_filename',
    'is_safe_filename',
    'is_http_url',

    # Storage
    'VideoStorage',
    'MAX_VIDEO_SIZE',
    'ProjectStore'
]
