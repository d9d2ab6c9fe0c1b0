"""
User Resource Service
Main Flask Application Entry Point
"""

from flask import Flask, jsonify, request
from flask_cors import CORS
from config import Config
from middleware.error_handler import register_error_handlers
from middleware.logging_middleware import setup_logging
import logging

# Initialize Flask app
app = Flask(__name__)
app.config.from_object(Config)

# Setup CORS
CORS(app, resources={
    r"/api/*": {
        "origins": Config.CORS_ORIGINS,
        "methods": ["GET", "POST", "OPTIONS"],
        "allow_headers": ["Content-Type"]
    }
})

# Setup logging
setup_logging(app)
logger = logging.getLogger(__name__)

# Setup middleware
register_error_handlers(app)

# Import and register blueprints
from routes.users import users_bp
from routes.docs import docs_bp

app.register_blueprint(users_bp, url_prefix='/api/users')
app.register_blueprint(docs_bp, url_prefix='/api/docs')


@app.route('/')
def index():
    """Root endpoint"""
    return jsonify({
        'service': Config.SERVICE_NAME,
        'version': Config.VERSION,
        'endpoints': {
            'users': '/api/users'
        },
        'docs': '/api/docs',
        'health': '/health'
    }), 200


@app.route('/health')
def health_check():
    """Health check endpoint"""
    return jsonify({
        'status': 'healthy',
        'service': Config.SERVICE_NAME,
        'version': Config.VERSION
    }), 200


@app.before_request
def before_request():
    """Log all incoming requests"""
    logger.info(f"{request.method} {request.path} from {request.remote_addr}")


@app.after_request
def after_request(response):
    """Add custom headers to all responses"""
    response.headers['X-Service'] = Config.SERVICE_NAME
    response.headers['X-Version'] = Config.VERSION
    return response


logger.info("User Resource Service ready")
logger.info("  GET    /api/users")
logger.info("  POST   /api/users")


if __name__ == '__main__':
    logger.info(f">> Starting server on http://{Config.bind_address()}")
    logger.info(f">> API Documentation: http://localhost:{Config.PORT}/api/docs")
    logger.info(f">> Health Check: http://localhost:{Config.PORT}/health")

    app.run(
        host=Config.HOST,
        port=Config.PORT,
        debug=Config.DEBUG
    )
