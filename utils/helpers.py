"""
Helpers Module - Utility functions for common operations
"""

import os
import re
import secrets
import time
from datetime import datetime, timezone
from urllib.parse import urlparse

VIDEO_EXTENSION = re.compile(r"\.[A-Za-z0-9]{1,10}")


def allowed_video(mimetype):
    """Check if the declared media type is a video container"""
    return bool(mimetype) and mimetype.lower().startswith('video/')


def utc_timestamp():
    """Current UTC time as ISO-8601 with millisecond precision, e.g. 2024-05-01T09:30:00.123Z"""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def generate_project_id(existing_ids=()):
    """Generate a project id not present in existing_ids"""
    while True:
        new_id = f"{int(time.time() * 1000)}-{secrets.token_hex(3)}"
        if new_id not in existing_ids:
            return new_id


def generate_video_filename(original_name, field='video'):
    """
    Build a collision-resistant storage name: <field>-<millis>-<random>.<ext>
    Only the extension of the client-supplied name is kept.
    """
    _, ext = os.path.splitext(original_name or '')
    if not VIDEO_EXTENSION.fullmatch(ext):
        ext = ''
    unique_suffix = f"{int(time.time() * 1000)}-{secrets.randbelow(10 ** 9)}"
    return f"{field}-{unique_suffix}{ext.lower()}"


def is_safe_filename(filename):
    """Reject names that could escape the upload directory"""
    if not filename or not isinstance(filename, str):
        return False
    if '/' in filename or '\\' in filename or '\x00' in filename:
        return False
    if '..' in filename or filename.startswith('.'):
        return False
    return True


def is_http_url(value):
    """Check that value is an absolute http(s) URL"""
    try:
        parsed = urlparse(value)
    except ValueError:
        return False
    return parsed.scheme in ('http', 'https') and bool(parsed.netloc)
