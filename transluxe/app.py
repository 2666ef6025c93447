"""
TransLuxe Application
=====================
Flask application factory and main entry point.
"""
import atexit
from flask import Flask
from flask_cors import CORS

from transluxe.config import config
from transluxe.api.routes import (
    create_translation_blueprint,
    create_meta_blueprint,
    create_logs_blueprint
)
from transluxe.services.session import TranslatorSession
from transluxe.utils.logging import get_logger, log_event


def create_app(testing: bool = False, session: TranslatorSession = None) -> Flask:
    """
    Application factory for Flask app.

    Args:
        testing: If True, configure for testing
        session: Translator session to serve; a new one is created if omitted

    Returns:
        Configured Flask application
    """
    app = Flask(__name__)

    app.config.update(
        SECRET_KEY=config.server.secret_key,
        TESTING=testing
    )
    app.json.sort_keys = False

    # CORS configuration
    cors_origins = config.server.cors_origins
    if testing:
        cors_origins = ['*']

    CORS(
        app,
        resources={r"/api/*": {"origins": cors_origins}},
        supports_credentials=True
    )

    if session is None:
        session = TranslatorSession()
        atexit.register(session.stop)
    session.start()
    app.extensions['transluxe_session'] = session

    app.register_blueprint(create_translation_blueprint())
    app.register_blueprint(create_meta_blueprint())
    app.register_blueprint(create_logs_blueprint())

    # Error handlers
    @app.errorhandler(400)
    def bad_request(e):
        return {'error': 'Bad request', 'details': str(e)}, 400

    @app.errorhandler(404)
    def not_found(e):
        return {'error': 'Resource not found'}, 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        return {'error': 'Method not allowed'}, 405

    @app.errorhandler(500)
    def internal_error(e):
        logger = get_logger().api_logger
        logger.error(f"Internal error: {e}")
        return {'error': 'Internal server error'}, 500

    log_event(f"Application initialized for {config.server.host}:{config.server.port}", 'INFO', 'APP')

    return app


def run_server():
    """Run the Flask development server."""
    app = create_app()

    print(f"""
  TransLuxe live translator
  Server:  http://{config.server.host}:{config.server.port}
  Backend: {config.backend.base_url}
  Debug:   {'Enabled' if config.server.debug else 'Disabled'}
    """)

    app.run(
        host=config.server.host,
        port=config.server.port,
        debug=config.server.debug,
        use_reloader=False,
        threaded=True
    )


if __name__ == '__main__':
    run_server()
