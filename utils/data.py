"""
Data Management Module - Handles loading and saving project records
The whole collection lives in one human-readable JSON array file and is
rewritten on every mutation. Mutations are serialized by an in-process lock.
"""

import json
import logging
import os
import tempfile
import threading
import models
from .errors import ValidationError, NotFoundError, StorageReadError, StorageWriteError
from .helpers import generate_project_id, utc_timestamp


class ProjectStore:
    """JSON-file backed project collection"""

    def __init__(self, data_file=None, videos=None, logger=None):
        self.data_file = data_file
        self.videos = videos
        self.logger = logger or logging.getLogger(__name__)
        self._lock = threading.Lock()

    @classmethod
    def from_app(cls, app, videos=None):
        """Store configured from a Flask app, with an empty collection file created if needed"""
        store = cls(
            data_file=os.path.abspath(app.config['DATA_FILE']),
            videos=videos,
            logger=app.logger)
        store.ensure_file()
        app.logger.info(f"✓ Projects file: {store.data_file}")
        return store

    def ensure_file(self):
        """Create the data directory and an empty JSON array if the file is missing"""
        os.makedirs(os.path.dirname(self.data_file) or '.', exist_ok=True)
        if not os.path.exists(self.data_file):
            self.save_projects([], 'Failed to create projects file')

    def load_projects(self):
        """
        Read the full collection from disk

        Returns:
            list: Project records in stored order

        Raises:
            StorageReadError: File missing, unreadable, or not a JSON array of objects
        """
        try:
            with open(self.data_file, 'r', encoding='utf-8') as file:
                projects = json.load(file)
        except (OSError, ValueError) as e:
            self.logger.error(f"Error reading projects from {self.data_file}: {str(e)}")
            raise StorageReadError('Failed to read projects')

        if not isinstance(projects, list):
            self.logger.error(f"Projects file {self.data_file} does not hold a JSON array")
            raise StorageReadError('Failed to read projects')
        if not all(isinstance(project, dict) for project in projects):
            self.logger.error(f"Projects file {self.data_file} holds entries that are not objects")
            raise StorageReadError('Failed to read projects')
        return projects

    def save_projects(self, projects, error_message='Failed to save projects'):
        """Atomically replace the collection file"""
        directory = os.path.dirname(self.data_file) or '.'
        tmp_path = None
        try:
            fd, tmp_path = tempfile.mkstemp(prefix='.projects-', suffix='.json', dir=directory)
            with os.fdopen(fd, 'w', encoding='utf-8') as file:
                json.dump(projects, file, ensure_ascii=False, indent=2)
                file.write('\n')
            os.replace(tmp_path, self.data_file)
        except OSError as e:
            self.logger.error(f"Error saving projects to {self.data_file}: {str(e)}")
            if tmp_path and os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise StorageWriteError(error_message)

    def list_all(self):
        with self._lock:
            return self.load_projects()

    @staticmethod
    def _find(projects, project_id):
        for index, project in enumerate(projects):
            if project.get('id') == project_id:
                return index, project
        raise NotFoundError('Project not found')

    def _check_video(self, filename):
        if filename and self.videos is not None and not self.videos.exists(filename):
            raise ValidationError(f"Video '{filename}' has not been uploaded")

    def create(self, payload):
        """Validate, append and persist a new project. Returns the stored record."""
        fields = models.clean_project_fields(payload)
        self._check_video(fields.get('videoFilename'))

        with self._lock:
            projects = self.load_projects()
            existing_ids = {p.get('id') for p in projects}
            project = models.build_project(generate_project_id(existing_ids), fields, utc_timestamp())
            projects.append(project)
            self.save_projects(projects, 'Failed to add project')

        self.logger.info(f"Project created: {project['id']} ({project['title']})")
        return project

    def update(self, project_id, payload):
        """Shallow-merge allowed fields into an existing project. Returns the updated record."""
        fields = models.clean_project_fields(payload, partial=True, project_id=project_id)

        with self._lock:
            projects = self.load_projects()
            _, project = self._find(projects, project_id)
            new_video = fields.get('videoFilename')
            if new_video and new_video != project.get('videoFilename'):
                self._check_video(new_video)
            models.merge_project(project, fields, utc_timestamp())
            self.save_projects(projects, 'Failed to update project')

        self.logger.info(f"Project updated: {project_id} (fields: {', '.join(sorted(fields)) or 'none'})")
        return project

    def delete(self, project_id):
        """
        Remove a project and its video

        The record delete stands even if the video cannot be removed;
        that failure is logged and reported in the result.

        Returns:
            dict: {'id', 'video_removed' (bool), 'video_error' (str or None)}
        """
        with self._lock:
            projects = self.load_projects()
            index, project = self._find(projects, project_id)
            del projects[index]
            self.save_projects(projects, 'Failed to delete project')

            result = {'id': project_id, 'video_removed': False, 'video_error': None}
            video = project.get('videoFilename')
            if video and self.videos is not None:
                try:
                    result['video_removed'] = self.videos.remove(video)
                except (ValidationError, StorageWriteError) as e:
                    self.logger.warning(f"Project {project_id} deleted but video {video} was not removed: {e.message}")
                    result['video_error'] = e.message

        self.logger.info(f"Project deleted: {project_id}")
        return result
