"""
API Routes
==========
Flask blueprints for all API endpoints.
"""
import json
import time
from flask import Blueprint, request, jsonify, Response, current_app

from transluxe import __version__
from transluxe.config import SUPPORTED_LANGUAGES
from transluxe.models.schemas import InputUpdateRequest, HealthStatus
from transluxe.services.session import TranslatorSession
from transluxe.utils.logging import get_logger, log_buffer


def get_session() -> TranslatorSession:
    """The translator session attached by the application factory."""
    return current_app.extensions['transluxe_session']


def create_translation_blueprint() -> Blueprint:
    """Create live translation routes blueprint."""
    bp = Blueprint('translation', __name__, url_prefix='/api')
    logger = get_logger().api_logger

    @bp.route('/state', methods=['GET'])
    def get_state():
        """Current presentation state."""
        return jsonify(get_session().snapshot().to_dict())

    @bp.route('/input', methods=['POST'])
    def update_input():
        """Write text and/or language selection; translation follows after the debounce."""
        data = request.get_json(silent=True)
        if data is not None and not isinstance(data, dict):
            return jsonify({'error': 'Expected a JSON object'}), 400

        update = InputUpdateRequest.from_json(data)
        errors = update.validate()
        if errors:
            return jsonify({'error': '; '.join(errors)}), 400

        state = get_session().update_input(update.text, update.source_lang, update.target_lang)
        logger.debug(f"Input updated: {len(state.input_text)} chars "
                     f"{state.source_lang}->{state.target_lang}")
        return jsonify(state.to_dict())

    @bp.route('/copy', methods=['POST'])
    def copy_translation():
        """Copy the current translation to the clipboard."""
        text = get_session().copy()
        return jsonify({'copied': True, 'text': text})

    @bp.route('/speak', methods=['POST'])
    def speak_translation():
        """Speak the current translation in the target language."""
        spoken = get_session().speak()
        return jsonify({'spoken': spoken}), 202

    @bp.route('/state/stream')
    def stream_state():
        """Stream state changes using Server-Sent Events."""
        session = get_session()

        def generate():
            last_version = -1
            while session.running:
                try:
                    version, state = session.versioned_snapshot()
                except RuntimeError:
                    # Session stopped between the check and the call
                    return
                if version != last_version:
                    last_version = version
                    yield f"data: {json.dumps(state.to_dict())}\n\n"
                time.sleep(0.1)

        return Response(
            generate(),
            mimetype='text/event-stream',
            headers={
                'Cache-Control': 'no-cache',
                'Connection': 'keep-alive'
            }
        )

    return bp


def create_meta_blueprint() -> Blueprint:
    """Create language list and health routes blueprint."""
    bp = Blueprint('meta', __name__, url_prefix='/api')

    @bp.route('/languages', methods=['GET'])
    def list_languages():
        """List supported languages."""
        return jsonify({'languages': SUPPORTED_LANGUAGES})

    @bp.route('/health', methods=['GET'])
    def health_check():
        """Check backend reachability."""
        backend_healthy = get_session().client.is_healthy()
        health = HealthStatus(
            status='healthy' if backend_healthy else 'degraded',
            backend_connected=backend_healthy,
            version=__version__
        )
        return jsonify(health.to_dict())

    return bp


def create_logs_blueprint() -> Blueprint:
    """Create logs routes blueprint for the frontend console panel."""
    bp = Blueprint('logs', __name__)

    @bp.route('/logs', methods=['GET'])
    def get_logs():
        """Get buffered events, optionally for one translation request."""
        sequence_id = request.args.get('sequence', type=int)
        since_id = request.args.get('since', 0, type=int)
        if sequence_id is not None:
            logs = log_buffer.get_for_request(sequence_id)
        elif since_id > 0:
            logs = log_buffer.get_since(since_id)
        else:
            logs = log_buffer.get_all()
        return jsonify({'logs': logs})

    @bp.route('/logs/clear', methods=['POST'])
    def clear_logs():
        """Clear the log buffer."""
        log_buffer.clear()
        return jsonify({'message': 'Logs cleared'})

    return bp
