"""
Media Routes - Demo video uploads and playback
Handles: Video upload, video serving
"""

import mimetypes
from flask import request, jsonify, send_file, current_app
from extensions import video_storage
from utils.errors import ValidationError
from . import media_bp


@media_bp.route('/upload', methods=['POST'])
def upload_video():
    """Store one uploaded video and return its generated filename"""
    field = current_app.config.get('VIDEO_FIELD', 'video')
    file = request.files.get(field)
    if not file or not file.filename:
        raise ValidationError('No video file uploaded')

    stored = video_storage.accept_file(file, field=field)
    return jsonify({
        'message': 'Video uploaded successfully',
        'filename': stored['filename'],
        'originalName': stored['originalName']
    })


@media_bp.route('/videos/<filename>')
def serve_video(filename):
    """Stream a stored video"""
    path = video_storage.fetch(filename)
    mimetype = mimetypes.guess_type(filename)[0] or 'application/octet-stream'
    return send_file(path, mimetype=mimetype, conditional=True)
