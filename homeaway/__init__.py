"""
Flask Application Factory
"""

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException
from config import config
from extensions import db, migrate, jwt, cors, limiter
import os


def create_app(config_name=None):
    """Application factory pattern"""

    if config_name is None:
        config_name = os.getenv('FLASK_ENV', 'development')

    app = Flask(__name__)

    # Load configuration
    app.config.from_object(config[config_name])
    app.logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)
    cors.init_app(app, resources={
        r"/api/*": {
            "origins": app.config['CORS_ORIGINS'],
            "methods": ["GET", "POST", "PUT", "DELETE", "OPTIONS"],
            "allow_headers": ["Content-Type", "Authorization"]
        }
    })
    limiter.init_app(app)

    # Register blueprints
    register_blueprints(app)

    # Register error handlers
    register_error_handlers(app)

    # Create database tables
    with app.app_context():
        db.create_all()

    app.logger.info(f'HomeAway API started with {config_name} configuration')

    return app


def register_blueprints(app):
    """Register Flask blueprints"""
    from homeaway.api import (
        profiles_bp,
        properties_bp,
        rentals_bp,
        favorites_bp,
        reviews_bp,
        bookings_bp,
        admin_bp,
    )

    # API v1
    app.register_blueprint(profiles_bp, url_prefix='/api/profiles')
    app.register_blueprint(properties_bp, url_prefix='/api/properties')
    app.register_blueprint(rentals_bp, url_prefix='/api/rentals')
    app.register_blueprint(favorites_bp, url_prefix='/api/favorites')
    app.register_blueprint(reviews_bp, url_prefix='/api/reviews')
    app.register_blueprint(bookings_bp, url_prefix='/api/bookings')
    app.register_blueprint(admin_bp, url_prefix='/api/admin')

    # Health check endpoint
    @app.route('/health')
    def health_check():
        return jsonify({'status': 'healthy', 'message': 'API is running'}), 200

    @app.route('/')
    def index():
        return jsonify({
            'message': 'Welcome to HomeAway API',
            'version': '1.0.0',
            'endpoints': {
                'profiles': '/api/profiles',
                'properties': '/api/properties',
                'rentals': '/api/rentals',
                'favorites': '/api/favorites',
                'reviews': '/api/reviews',
                'bookings': '/api/bookings',
                'admin': '/api/admin'
            }
        }), 200


def register_error_handlers(app):
    """Register error handlers"""

    @app.errorhandler(400)
    def bad_request(error):
        return jsonify({'error': 'Bad Request', 'message': str(error)}), 400

    @app.errorhandler(401)
    def unauthorized(error):
        return jsonify({'error': 'Unauthorized', 'message': 'Authentication required'}), 401

    @app.errorhandler(403)
    def forbidden(error):
        return jsonify({'error': 'Forbidden', 'message': 'Insufficient permissions'}), 403

    @app.errorhandler(404)
    def not_found(error):
        return jsonify({'error': 'Not Found', 'message': 'Resource not found'}), 404

    @app.errorhandler(429)
    def rate_limited(error):
        return jsonify({'error': 'Too Many Requests', 'message': str(error.description)}), 429

    @app.errorhandler(500)
    def internal_error(error):
        db.session.rollback()
        return jsonify({'error': 'Internal Server Error', 'message': 'An unexpected error occurred'}), 500

    @app.errorhandler(Exception)
    def handle_exception(error):
        if isinstance(error, HTTPException):
            return jsonify({'error': error.name, 'message': error.description}), error.code
        db.session.rollback()
        app.logger.exception(f'Unhandled exception: {str(error)}')
        return jsonify({'error': 'Internal Server Error', 'message': 'An unexpected error occurred'}), 500
