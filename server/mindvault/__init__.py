# server/mindvault/__init__.py

import uuid
import logging
from datetime import datetime

from flask import Flask, g, jsonify, request
from flask_cors import CORS
from sqlalchemy import text
from werkzeug.exceptions import HTTPException

from mindvault.config import DEV_SECRET_KEY, get_config
from mindvault.errors import MindVaultError
from mindvault.extensions import db, migrate, bcrypt
from mindvault.utils.responses import ApiResponse

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


def create_app(config=None):
    """Create and configure the Flask application"""
    app = Flask(__name__)
    app.config.from_object(get_config(config))

    if app.config.get("FLASK_ENV") == "production" and app.config.get("SECRET_KEY") == DEV_SECRET_KEY:
        raise RuntimeError("SECRET_KEY must be set in production")

    app.api_response = ApiResponse()

    initialize_extensions(app)

    with app.app_context():
        initialize_database(app)

    register_middleware(app)
    register_blueprints(app)
    register_error_handlers(app)
    register_root_endpoints(app)

    logger.info(f"Application initialized in {app.config.get('FLASK_ENV', 'production')} mode")

    return app


def initialize_extensions(app):
    """Initialize Flask extensions"""
    db.init_app(app)
    migrate.init_app(app, db)
    bcrypt.init_app(app)

    cors_origins = list(dict.fromkeys(app.config.get("CORS_ORIGINS", [])))

    CORS(app,
         resources={r"/*": {"origins": cors_origins}},
         supports_credentials=True,
         allow_headers=['Content-Type', 'Authorization', 'X-Requested-With'],
         methods=['GET', 'POST', 'PUT', 'DELETE', 'OPTIONS'],
         expose_headers=['Content-Type', 'Authorization'],
         max_age=3600)

    logger.info(f"CORS initialized with origins: {cors_origins}")


def initialize_database(app):
    """Create missing tables when auto-creation is enabled"""
    # Register models with SQLAlchemy before create_all
    from mindvault import models  # noqa: F401

    if not app.config.get("AUTO_CREATE_TABLES", True):
        return

    try:
        db.create_all()
        logger.info("Database tables created/verified")
    except Exception as e:
        logger.error(f"Database initialization error: {e}", exc_info=True)
        if app.config.get("FLASK_ENV") == "production":
            raise


def register_middleware(app):
    """Register application middleware"""

    @app.before_request
    def assign_request_id():
        g.request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))

        if app.config.get("FLASK_ENV") == "development":
            logger.debug(f"{request.method} {request.path} from {request.remote_addr}")

    @app.after_request
    def after_request(response):
        """Add security headers to all responses"""
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['X-Frame-Options'] = 'DENY'
        response.headers['Referrer-Policy'] = 'strict-origin-when-cross-origin'

        if app.config.get("FLASK_ENV") == "production" and request.is_secure:
            response.headers['Strict-Transport-Security'] = 'max-age=31536000; includeSubDomains'

        request_id = getattr(g, "request_id", None)
        if request_id:
            response.headers['X-Request-ID'] = request_id

        return response

    @app.teardown_request
    def rollback_on_error(error):
        if error is not None:
            db.session.rollback()


def register_blueprints(app):
    """Register all application blueprints"""
    from mindvault.routes import auth_bp, content_bp, folders_bp, sharing_bp

    app.register_blueprint(auth_bp, url_prefix=API_PREFIX)
    app.register_blueprint(content_bp, url_prefix=f"{API_PREFIX}/content")
    app.register_blueprint(folders_bp, url_prefix=f"{API_PREFIX}/folders")
    app.register_blueprint(sharing_bp, url_prefix=f"{API_PREFIX}/brain")

    logger.info(f"API blueprints registered at {API_PREFIX}")


def register_error_handlers(app):
    """Register error handlers for the application"""

    @app.errorhandler(MindVaultError)
    def handle_domain_error(error):
        if error.status_code in (401, 403):
            logger.warning(f"Auth rejected on {request.path}: {error.code}")
        return app.api_response.error(error.message, error.status_code, error.code)

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        messages = {
            400: "Invalid request",
            404: "The requested resource was not found",
            405: f"The {request.method} method is not allowed for this endpoint",
        }
        message = messages.get(error.code, error.description or "Request failed")
        return app.api_response.error(message, error.code)

    @app.errorhandler(Exception)
    def unhandled_exception(error):
        logger.error(f"Unhandled exception: {error}", exc_info=True)
        db.session.rollback()

        # Don't expose internal errors in production
        if app.config.get("FLASK_ENV") == "production":
            return app.api_response.error("An unexpected error occurred", 500, "SERVER_ERROR")

        return app.api_response.error(str(error), 500, type(error).__name__)


def register_root_endpoints(app):
    """Register root-level endpoints"""

    def service_info():
        return {
            "service": app.config.get("SERVICE_NAME"),
            "version": app.config.get("SERVICE_VERSION"),
            "timestamp": datetime.utcnow().isoformat() + "Z",
        }

    @app.route("/")
    def index():
        """Root endpoint - API information"""
        info = service_info()
        info.update({
            "status": "online",
            "environment": app.config.get("FLASK_ENV", "production"),
        })
        return app.api_response.success(info, "MindVault backend is running.")

    @app.route("/health")
    def health_check():
        """Health check endpoint for monitoring"""
        health_status = service_info()
        health_status.update({"status": "healthy", "checks": {}})

        try:
            start_time = datetime.utcnow()
            db.session.execute(text("SELECT 1"))
            response_time = (datetime.utcnow() - start_time).total_seconds() * 1000
            health_status["checks"]["database"] = {
                "status": "healthy",
                "response_time_ms": round(response_time, 2)
            }
        except Exception as e:
            logger.error(f"Database health check failed: {e}")
            db.session.rollback()
            health_status["checks"]["database"] = {"status": "unhealthy"}
            health_status["status"] = "degraded"

        status_code = 200 if health_status["status"] == "healthy" else 503
        return jsonify(health_status), status_code

    @app.route("/ping")
    def ping():
        return app.api_response.success({
            "pong": True,
            "timestamp": datetime.utcnow().isoformat() + "Z"
        })
