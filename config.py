import os

class Config:
    """Base configuration"""

    # Storage Settings
    DATA_FILE = os.environ.get('PORTFOLIO_DATA_FILE', os.path.join('data', 'projects.json'))
    UPLOAD_FOLDER = os.environ.get('PORTFOLIO_UPLOAD_FOLDER', os.path.join('uploads', 'videos'))

    # Upload Settings
    VIDEO_FIELD = 'video'
    MAX_VIDEO_SIZE = 50 * 1024 * 1024  # 50MB
    # Leave room for multipart boundaries and headers around the video itself
    MAX_CONTENT_LENGTH = MAX_VIDEO_SIZE + 1024 * 1024

    # CORS Settings
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*')

    # JSON Settings
    JSON_AS_ASCII = False

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False


class TestingConfig(Config):
    """Testing configuration"""
    DEBUG = True
    TESTING = True
    # Tests override these with tmp_path locations
    DATA_FILE = os.path.join('instance', 'test-data', 'projects.json')
    UPLOAD_FOLDER = os.path.join('instance', 'test-uploads')


# Select configuration based on environment
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}

def get_config(config_name=None):
    """Get configuration by name, or based on FLASK_ENV"""
    env = config_name or os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
