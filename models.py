"""
Project model - Field allow-list and payload cleaning for project records

Records are plain dicts persisted as JSON. Keys use the camelCase names
the frontend consumes.
"""

from utils.errors import ValidationError
from utils.helpers import is_http_url, is_safe_filename

EDITABLE_FIELDS = (
    'title',
    'description',
    'technologies',
    'githubLink',
    'liveDemoLink',
    'videoFilename',
)
REQUIRED_FIELDS = ('title', 'description', 'githubLink')
OPTIONAL_FIELDS = ('liveDemoLink', 'videoFilename')
READ_ONLY_FIELDS = ('id', 'createdAt', 'updatedAt')


def _clean_string(name, value):
    if not isinstance(value, str):
        raise ValidationError(f"'{name}' must be a string")
    return value.strip()


def _clean_technologies(value):
    if not isinstance(value, list) or not all(isinstance(t, str) for t in value):
        raise ValidationError("'technologies' must be a list of strings")
    return [tech.strip() for tech in value if tech.strip()]


def _clean_field(name, value):
    """Validate a single editable field. Returns None for an unset optional field."""
    if name in OPTIONAL_FIELDS and (value is None or value == ''):
        return None

    if name == 'technologies':
        return _clean_technologies(value)

    value = _clean_string(name, value)

    if name == 'title' and not value:
        raise ValidationError("'title' must not be empty")
    if name in ('githubLink', 'liveDemoLink') and value and not is_http_url(value):
        raise ValidationError(f"'{name}' must be an http(s) URL")
    if name == 'videoFilename' and not is_safe_filename(value):
        raise ValidationError("'videoFilename' is not a valid filename")
    if name == 'githubLink' and not value:
        raise ValidationError("'githubLink' must not be empty")
    return value


def clean_project_fields(payload, partial=False, project_id=None):
    """
    Validate a client payload against the project field allow-list

    Args:
        payload (dict): Decoded JSON body
        partial (bool): True for updates, where every field is optional
        project_id (str, optional): Path id on update; an equal 'id' in the body is ignored

    Returns:
        dict: Cleaned fields. Optional fields mapped to None are to be unset.

    Raises:
        ValidationError: Unknown, read-only, missing or malformed fields
    """
    if not isinstance(payload, dict):
        raise ValidationError('Request body must be a JSON object')

    payload = dict(payload)
    if 'id' in payload and (payload['id'] is None or (partial and payload['id'] == project_id)):
        payload.pop('id')

    read_only = sorted(k for k in payload if k in READ_ONLY_FIELDS)
    if read_only:
        raise ValidationError(f"Read-only fields cannot be set: {', '.join(read_only)}")

    unknown = sorted(k for k in payload if k not in EDITABLE_FIELDS)
    if unknown:
        raise ValidationError(f"Unknown fields: {', '.join(unknown)}")

    if not partial:
        missing = [k for k in REQUIRED_FIELDS if k not in payload]
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")

    cleaned = {name: _clean_field(name, value) for name, value in payload.items()}

    if not partial:
        cleaned.setdefault('technologies', [])
        cleaned = {k: v for k, v in cleaned.items() if v is not None}
    return cleaned


def build_project(project_id, fields, created_at):
    """Assemble a new record in display order"""
    project = {'id': project_id}
    for name in EDITABLE_FIELDS:
        if name in fields:
            project[name] = fields[name]
    project['createdAt'] = created_at
    return project


def merge_project(project, fields, updated_at):
    """Shallow-merge cleaned fields into an existing record in place"""
    for name, value in fields.items():
        if value is None:
            project.pop(name, None)
        else:
            project[name] = value
    project['updatedAt'] = updated_at
    return project
