"""
Portfolio Backend - Main Application Entry Point
Application Factory Pattern: project records API plus demo video storage

This module initializes the Flask application with storage extensions,
configuration and middleware. All route handling is delegated to blueprints.
Serve with `gunicorn "app:create_app()"` or run this file directly.
"""

import os
from flask import Flask, jsonify
from config import get_config
import extensions
from utils.errors import PortfolioError, StorageError
from utils.uploads import TOO_LARGE

from blueprints.projects import projects_bp
from blueprints.media import media_bp


def create_app(config_name=None, overrides=None):
    """
    Application Factory Pattern
    Creates and configures Flask application instance

    Args:
        config_name (str): Configuration environment name (optional)
        overrides (dict): Config values applied after the config object (optional)

    Returns:
        Flask: Configured Flask application instance
    """

    app = Flask(__name__)

    # Load configuration
    app.config.from_object(get_config(config_name))
    if overrides:
        app.config.update(overrides)

    app.logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))
    app.json.ensure_ascii = app.config.get('JSON_AS_ASCII', False)

    # Initialize extensions with app
    initialize_extensions(app)

    # Register blueprints
    register_blueprints(app)

    # Register error handlers
    register_error_handlers(app)

    # Register request/response hooks
    register_hooks(app)

    # Health check route
    @app.route('/health')
    def health_check():
        return {'status': 'OK', 'message': 'Portfolio backend is running'}, 200

    return app


def initialize_extensions(app):
    """Bind storage extensions to the app instance"""
    extensions.init_app(app)


def register_blueprints(app):
    """Register all application blueprints"""
    app.register_blueprint(projects_bp)
    app.register_blueprint(media_bp)


def register_error_handlers(app):
    """Register JSON error handlers"""

    @app.errorhandler(PortfolioError)
    def portfolio_error(e):
        if isinstance(e, StorageError):
            app.logger.error(f"Storage Error: {e.message}")
        else:
            app.logger.warning(f"{e.__class__.__name__}: {e.message}")
        return jsonify(e.to_dict()), e.status_code

    @app.errorhandler(404)
    def not_found(e):
        return jsonify({'error': 'Not found'}), 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        return jsonify({'error': 'Method not allowed'}), 405

    @app.errorhandler(413)
    def file_too_large(e):
        app.logger.warning("Rejected request body above MAX_CONTENT_LENGTH")
        return jsonify({'error': TOO_LARGE}), 400

    @app.errorhandler(500)
    def internal_server_error(e):
        app.logger.error(f"Server Error: {str(e)}")
        return jsonify({'error': 'Internal server error'}), 500


def register_hooks(app):
    """Register request/response hooks"""

    @app.after_request
    def add_cors_headers(response):
        """Allow the frontend, served from another origin, to call the API"""
        response.headers['Access-Control-Allow-Origin'] = app.config.get('CORS_ORIGINS', '*')
        response.headers['Access-Control-Allow-Methods'] = 'GET, POST, PUT, DELETE, OPTIONS'
        response.headers['Access-Control-Allow-Headers'] = 'Content-Type'
        response.headers['X-Content-Type-Options'] = 'nosniff'
        return response


if __name__ == '__main__':
    # Get environment
    env = os.environ.get('FLASK_ENV', 'development')

    # Create app
    app = create_app(env)

    # Run development server
    app.run(
        host='0.0.0.0',
        port=int(os.environ.get('PORT', 5000)),
        debug=(env == 'development')
    )
