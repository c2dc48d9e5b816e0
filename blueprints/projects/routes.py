"""
Projects Routes - Project records API
Handles: Listing, creating, updating and deleting portfolio projects
"""

from flask import request, jsonify, current_app
from extensions import project_store
from utils.errors import ValidationError
from . import projects_bp


def _json_body():
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise ValidationError('Request body must be a JSON object')
    return payload


@projects_bp.route('/projects', methods=['GET'])
def list_projects():
    """All projects in stored order"""
    return jsonify(project_store.list_all())


@projects_bp.route('/projects', methods=['POST'])
def add_project():
    """Add new project"""
    project = project_store.create(_json_body())
    return jsonify({'message': 'Project added successfully', 'project': project})


@projects_bp.route('/projects/<project_id>', methods=['PUT'])
def update_project(project_id):
    """Merge submitted fields into an existing project"""
    project = project_store.update(project_id, _json_body())
    return jsonify({'message': 'Project updated successfully', 'project': project})


@projects_bp.route('/projects/<project_id>', methods=['DELETE'])
def delete_project(project_id):
    """Delete project and its demo video"""
    result = project_store.delete(project_id)
    response = {'message': 'Project deleted successfully'}
    if result['video_error']:
        current_app.logger.warning(f"Video cleanup failed for project {project_id}: {result['video_error']}")
        response['warning'] = result['video_error']
    return jsonify(response)
