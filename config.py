import os
from datetime import timedelta
from dotenv import load_dotenv

load_dotenv()

class Config:
    """Base configuration"""
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

    # JWT Configuration
    # Tokens are issued by the external identity provider; the subject is
    # the provider's user id. Set JWT_PUBLIC_KEY for RS256 verification.
    JWT_SECRET_KEY = os.getenv('JWT_SECRET_KEY', 'jwt-secret-key-change-in-production')
    JWT_PUBLIC_KEY = os.getenv('JWT_PUBLIC_KEY')
    JWT_ALGORITHM = os.getenv('JWT_ALGORITHM', 'HS256')
    JWT_DECODE_AUDIENCE = os.getenv('JWT_DECODE_AUDIENCE')
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(hours=1)
    JWT_TOKEN_LOCATION = ['headers']
    JWT_HEADER_NAME = 'Authorization'
    JWT_HEADER_TYPE = 'Bearer'

    # Identity of the single admin account allowed on /api/admin
    ADMIN_USER_ID = os.getenv('ADMIN_USER_ID')

    # Booking calendar
    ALLOW_SAME_DAY_TURNOVER = os.getenv('ALLOW_SAME_DAY_TURNOVER', 'True') == 'True'
    CALENDAR_HORIZON_DAYS = int(os.getenv('CALENDAR_HORIZON_DAYS', 365))

    # File Upload Configuration
    MAX_CONTENT_LENGTH = 16 * 1024 * 1024  # 16MB max request size
    MAX_IMAGE_SIZE = 1024 * 1024  # 1MB per image
    UPLOAD_FOLDER = 'uploads'
    ALLOWED_EXTENSIONS = {'png', 'jpg', 'jpeg', 'gif', 'webp'}

    AWS_ACCESS_KEY_ID = os.getenv('AWS_ACCESS_KEY_ID')
    AWS_SECRET_ACCESS_KEY = os.getenv('AWS_SECRET_ACCESS_KEY')
    S3_BUCKET_NAME = os.getenv('S3_BUCKET_NAME')
    AWS_REGION = os.getenv('AWS_REGION', 'us-east-1')

    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_pre_ping': True,
        'pool_recycle': 280,
    }

    RATELIMIT_ENABLED = True
    RATELIMIT_STORAGE_URI = os.getenv('RATELIMIT_STORAGE_URI', 'memory://')

    CORS_ORIGINS = [
        os.getenv('FRONTEND_URL', 'http://localhost:3000'),
        'http://localhost:5001',
        'http://127.0.0.1:5001',
    ]


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False
    SQLALCHEMY_DATABASE_URI = os.getenv('SQLALCHEMY_DATABASE_URI', 'sqlite:///homeaway.db')
    SQLALCHEMY_ECHO = True
    LOG_LEVEL = 'DEBUG'


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False
    SQLALCHEMY_DATABASE_URI = os.getenv('SQLALCHEMY_DATABASE_URI')
    SQLALCHEMY_ECHO = False

    # Stronger session security for production
    SESSION_COOKIE_SECURE = True
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'


class TestingConfig(Config):
    """Testing configuration"""
    DEBUG = True
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SQLALCHEMY_ENGINE_OPTIONS = {}
    SQLALCHEMY_ECHO = False
    JWT_SECRET_KEY = 'testing-jwt-secret-key-with-enough-length'
    JWT_PUBLIC_KEY = None
    JWT_ALGORITHM = 'HS256'
    JWT_DECODE_AUDIENCE = None
    ADMIN_USER_ID = 'user_admin'
    ALLOW_SAME_DAY_TURNOVER = True
    RATELIMIT_ENABLED = False
    AWS_ACCESS_KEY_ID = None
    S3_BUCKET_NAME = None


# Configuration dictionary
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
