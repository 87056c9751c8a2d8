"""
Neon Edu - Application Factory
"""
import os
from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager
from flask_migrate import Migrate
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Initialize extensions
db = SQLAlchemy()
login_manager = LoginManager()
migrate = Migrate()


def create_app(config_name=None):
    """Create and configure the Flask application"""
    from neonedu.config import config
    from neonedu.services.cache_service import cache_service

    app = Flask(__name__)

    config_name = config_name or os.getenv('FLASK_CONFIG', 'default')
    app.config.from_object(config[config_name])

    # Connection pooling only makes sense for the hosted Postgres database
    database_uri = app.config.get('SQLALCHEMY_DATABASE_URI') or ''
    if database_uri and not database_uri.startswith('sqlite'):
        app.config['SQLALCHEMY_ENGINE_OPTIONS'] = {
            'pool_size': 5,
            'pool_recycle': 1800,
            'pool_pre_ping': True,
            'max_overflow': 10,
            'pool_timeout': 30
        }

    # Initialize extensions with app
    db.init_app(app)
    login_manager.init_app(app)
    migrate.init_app(app, db)
    cache_service.init_app(app)

    # Configure login manager
    login_manager.login_view = 'auth.login'
    login_manager.login_message = 'Please log in to access the admin panel.'

    # Auto-initialize database on first run
    with app.app_context():
        _auto_initialize_database(app)

    # Register blueprints
    from neonedu.auth import auth_bp
    from neonedu.admin import admin_bp
    from neonedu.api import api_bp
    from neonedu.public import public_bp

    app.register_blueprint(auth_bp, url_prefix='/auth')
    app.register_blueprint(admin_bp, url_prefix='/admin')
    app.register_blueprint(api_bp, url_prefix='/api')
    app.register_blueprint(public_bp)

    return app


def _auto_initialize_database(app):
    """Create tables and the first admin account on a fresh database"""
    try:
        from neonedu import models  # noqa: F401  (registers every table)
        from neonedu.models.user import User
        from sqlalchemy import inspect

        inspector = inspect(db.engine)
        tables = inspector.get_table_names()

        if 'users' not in tables:
            print("[Setup] New installation detected - creating database tables...", flush=True)
            db.create_all()

        if User.query.count() == 0:
            username = app.config['ADMIN_USERNAME']
            print(f"[Setup] Creating admin user '{username}'...", flush=True)
            admin = User(
                username=username,
                email=app.config['ADMIN_EMAIL'],
                role='admin'
            )
            admin.set_password(app.config['ADMIN_PASSWORD'])
            db.session.add(admin)
            db.session.commit()

            if app.config['ADMIN_PASSWORD'] == 'admin123':
                print("[Setup] WARNING: default admin password in use, set ADMIN_PASSWORD in production!", flush=True)

    except Exception as e:
        db.session.rollback()
        print(f"[Setup] Auto-initialization skipped: {str(e)}", flush=True)


@login_manager.user_loader
def load_user(user_id):
    """Load user by ID for Flask-Login"""
    from neonedu.models.user import User
    return db.session.get(User, int(user_id))
