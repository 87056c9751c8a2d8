"""
Configuration settings for the Neon Edu site
"""
import os
from dotenv import load_dotenv

load_dotenv()


def _as_bool(value, default=False):
    if value is None:
        return default
    return str(value).strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    """Base configuration"""
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    SQLALCHEMY_DATABASE_URI = os.getenv('DATABASE_URL', 'sqlite:///neonedu.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # First admin account, created on a fresh database
    ADMIN_USERNAME = os.getenv('ADMIN_USERNAME', 'admin')
    ADMIN_PASSWORD = os.getenv('ADMIN_PASSWORD', 'admin123')
    ADMIN_EMAIL = os.getenv('ADMIN_EMAIL', 'admin@neonedu.com')

    # Media CDN (Cloudinary)
    CLOUDINARY_CLOUD_NAME = os.getenv('CLOUDINARY_CLOUD_NAME', 'demo')
    CLOUDINARY_API_KEY = os.getenv('CLOUDINARY_API_KEY', 'demo')
    CLOUDINARY_API_SECRET = os.getenv('CLOUDINARY_API_SECRET', 'demo')

    # Upload limits
    UPLOAD_MAX_BYTES = int(os.getenv('UPLOAD_MAX_BYTES', 2 * 1024 * 1024))  # 2MB
    UPLOAD_TIMEOUT = int(os.getenv('UPLOAD_TIMEOUT', 90))  # seconds
    UPLOAD_DEFAULT_FOLDER = os.getenv('UPLOAD_DEFAULT_FOLDER', 'neonedu')
    # Multipart bodies carry form overhead on top of the image itself
    MAX_CONTENT_LENGTH = UPLOAD_MAX_BYTES + 512 * 1024

    # Public page
    PUBLIC_FETCH_TIMEOUT = float(os.getenv('PUBLIC_FETCH_TIMEOUT', 8))  # seconds
    PUBLIC_FETCH_WORKERS = int(os.getenv('PUBLIC_FETCH_WORKERS', 5))
    FALLBACK_COUNTRY = os.getenv('FALLBACK_COUNTRY', 'China')
    COURSE_PLACEHOLDER_LINK = os.getenv('COURSE_PLACEHOLDER_LINK', 'https://neonedu.mn/courses')

    # Visitor inquiries, relayed through the EmailJS REST API
    EMAILJS_SERVICE_ID = os.getenv('EMAILJS_SERVICE_ID', '')
    EMAILJS_TEMPLATE_ID = os.getenv('EMAILJS_TEMPLATE_ID', '')
    EMAILJS_PUBLIC_KEY = os.getenv('EMAILJS_PUBLIC_KEY', '')
    EMAILJS_PRIVATE_KEY = os.getenv('EMAILJS_PRIVATE_KEY', '')
    INQUIRY_RECIPIENT = os.getenv('INQUIRY_RECIPIENT', 'neon.edu.mn@gmail.com')
    INQUIRY_TIMEOUT = int(os.getenv('INQUIRY_TIMEOUT', 15))  # seconds

    # Display model cache (Redis)
    CACHE_ENABLED = _as_bool(os.getenv('CACHE_ENABLED'), default=True)
    CACHE_TTL = int(os.getenv('CACHE_TTL', 300))
    REDIS_HOST = os.getenv('REDIS_HOST', 'localhost')
    REDIS_PORT = int(os.getenv('REDIS_PORT', 6379))
    REDIS_DB = int(os.getenv('REDIS_DB', 0))


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    SQLALCHEMY_DATABASE_URI = os.getenv('DATABASE_URL')


class TestingConfig(Config):
    """Testing configuration"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    WTF_CSRF_ENABLED = False
    CACHE_ENABLED = False
    # One worker keeps the in-memory SQLite connection single-threaded
    PUBLIC_FETCH_WORKERS = 1
    ADMIN_PASSWORD = 'test-password'
    CLOUDINARY_CLOUD_NAME = 'test-cloud'
    CLOUDINARY_API_KEY = 'test-key'
    CLOUDINARY_API_SECRET = 'test-secret'
    EMAILJS_SERVICE_ID = 'test-service'
    EMAILJS_TEMPLATE_ID = 'test-template'
    EMAILJS_PUBLIC_KEY = 'test-public-key'
    EMAILJS_PRIVATE_KEY = 'test-private-key'


config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
