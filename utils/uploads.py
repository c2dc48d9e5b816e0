"""
Uploads Module - Video storage on local disk
VideoStorage is the sole owner of the upload directory: the project store
asks it for existence checks and deletions, never touching files itself.
"""

import logging
import os
from .errors import ValidationError, NotFoundError, StorageWriteError
from .helpers import allowed_video, generate_video_filename, is_safe_filename

MAX_VIDEO_SIZE = 50 * 1024 * 1024  # 50MB
CHUNK_SIZE = 64 * 1024

NOT_A_VIDEO = 'Only video files are allowed!'
TOO_LARGE = 'File too large. Maximum size is 50MB.'


class VideoStorage:
    """Stores uploaded videos under generated names in a single directory"""

    def __init__(self, upload_folder=None, max_size=MAX_VIDEO_SIZE, logger=None):
        self.upload_folder = upload_folder
        self.max_size = max_size
        self.logger = logger or logging.getLogger(__name__)
        if upload_folder:
            os.makedirs(upload_folder, exist_ok=True)

    @classmethod
    def from_app(cls, app):
        """Storage configured from a Flask app; creates the folder if needed"""
        storage = cls(
            upload_folder=os.path.abspath(app.config['UPLOAD_FOLDER']),
            max_size=app.config.get('MAX_VIDEO_SIZE', MAX_VIDEO_SIZE),
            logger=app.logger)
        app.logger.info(f"✓ Uploads directory: {storage.upload_folder}")
        return storage

    def _path(self, filename):
        if not is_safe_filename(filename):
            raise ValidationError('Invalid video filename')
        return os.path.join(self.upload_folder, filename)

    def accept(self, stream, mimetype, original_name, declared_size=None, field='video'):
        """
        Validate and store one uploaded video

        Args:
            stream: Readable binary stream with the file contents
            mimetype (str): Media type declared by the client
            original_name (str): Client-side filename, for display only
            declared_size (int, optional): Size declared by the client
            field (str): Form field name, used as the stored name prefix

        Returns:
            dict: {'filename': stored name, 'originalName': client name}

        Raises:
            ValidationError: Not a video, or larger than max_size
            StorageWriteError: The file could not be written
        """
        if not allowed_video(mimetype):
            raise ValidationError(NOT_A_VIDEO)
        if declared_size and declared_size > self.max_size:
            raise ValidationError(TOO_LARGE)

        filename = generate_video_filename(original_name, field=field)
        path = self._path(filename)
        written = 0
        try:
            with open(path, 'xb') as destination:
                while True:
                    chunk = stream.read(CHUNK_SIZE)
                    if not chunk:
                        break
                    written += len(chunk)
                    if written > self.max_size:
                        raise ValidationError(TOO_LARGE)
                    destination.write(chunk)
        except ValidationError:
            self._discard(path)
            raise
        except FileExistsError:
            raise StorageWriteError(f'Upload failed: {filename} already exists')
        except OSError as e:
            self._discard(path)
            self.logger.error(f"Error writing video {filename}: {str(e)}")
            raise StorageWriteError(f'Upload failed: {e.strerror or str(e)}')

        self.logger.info(f"Stored video {filename} ({written} bytes) from '{original_name}'")
        return {'filename': filename, 'originalName': original_name}

    def accept_file(self, file_storage, field='video'):
        """Store a werkzeug FileStorage taken from request.files"""
        original_name = file_storage.filename or ''
        return self.accept(
            file_storage.stream,
            file_storage.mimetype,
            original_name,
            declared_size=file_storage.content_length or None,
            field=field)

    def _discard(self, path):
        try:
            os.remove(path)
        except FileNotFoundError:
            pass
        except OSError as e:
            self.logger.warning(f"Could not remove partial upload {path}: {str(e)}")

    def exists(self, filename):
        try:
            return os.path.isfile(self._path(filename))
        except ValidationError:
            return False

    def remove(self, filename):
        """
        Delete a stored video. A missing file is not an error.

        Returns:
            bool: True if a file was deleted
        """
        path = self._path(filename)
        try:
            os.remove(path)
        except FileNotFoundError:
            return False
        except OSError as e:
            self.logger.error(f"Error removing video {filename}: {str(e)}")
            raise StorageWriteError(f'Failed to remove video {filename}: {e.strerror or str(e)}')
        self.logger.info(f"Removed video {filename}")
        return True

    def fetch(self, filename):
        """Absolute path of a stored video, for streaming to the client"""
        path = self._path(filename)
        if not os.path.isfile(path):
            raise NotFoundError('Video not found')
        return path
