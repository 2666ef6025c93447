"""
Integration Tests for Flask API
===============================
Drives a real translator session (event loop thread, debounce, fencing)
through the HTTP endpoints with a fake translation backend.
"""
import pytest
import sys
import os
import json

os.environ.setdefault('VERBOSE_DEBUG', 'false')

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from transluxe.config.constants import FailureReason, ERROR_MESSAGE
from transluxe.models.translation import Failure, Success
from transluxe.services.session import TranslatorSession
from tests.fakes import GatedClient, poll_until


@pytest.fixture
def backend():
    return GatedClient(results={
        "hello": Success("مرحبا"),
        "broken": Failure(FailureReason.NETWORK_ERROR, "500 Server Error"),
    })


@pytest.fixture
def session(backend):
    session = TranslatorSession(client=backend, debounce_seconds=0.05, copy_ack_seconds=0.2)
    yield session
    session.stop()


@pytest.fixture
def client(session):
    """Create test client for Flask app."""
    from transluxe.app import create_app

    app = create_app(testing=True, session=session)

    with app.test_client() as client:
        yield client


def get_state(client):
    return json.loads(client.get('/api/state').data)


def wait_for_translation(client, expected):
    return poll_until(lambda: get_state(client)['translated_text'] == expected and get_state(client))


class TestStateEndpoint:
    """Test state reads."""

    def test_initial_state(self, client):
        response = client.get('/api/state')
        assert response.status_code == 200
        data = json.loads(response.data)
        assert data['input_text'] == ""
        assert data['translated_text'] == ""
        assert data['source_lang'] == "en"
        assert data['target_lang'] == "ar"
        assert data['is_loading'] is False
        assert data['last_error'] is None


class TestInputEndpoint:
    """Test input writes and the resulting translation."""

    def test_typing_translates_after_debounce(self, client, backend):
        response = client.post('/api/input', json={'text': 'hello'})
        assert response.status_code == 200
        assert json.loads(response.data)['input_text'] == 'hello'

        state = wait_for_translation(client, "مرحبا")
        assert state['is_loading'] is False
        assert backend.calls == [("hello", "en", "ar")]

    def test_backend_failure_reported(self, client):
        client.post('/api/input', json={'text': 'broken'})
        state = wait_for_translation(client, ERROR_MESSAGE)
        assert state['last_error'] == 'network_error'
        assert state['is_loading'] is False

    def test_language_change(self, client, backend):
        client.post('/api/input', json={'text': 'bonjour', 'source_lang': 'fr', 'target_lang': 'de'})
        wait_for_translation(client, "[de] bonjour")
        assert backend.calls[-1] == ("bonjour", "fr", "de")

    def test_clearing_text_clears_translation(self, client):
        client.post('/api/input', json={'text': 'hello'})
        wait_for_translation(client, "مرحبا")

        client.post('/api/input', json={'text': '   '})
        state = wait_for_translation(client, "")
        assert state['is_loading'] is False

    def test_unknown_language_rejected(self, client):
        response = client.post('/api/input', json={'target_lang': 'xx'})
        assert response.status_code == 400
        assert 'Unsupported language' in json.loads(response.data)['error']

    def test_non_string_text_rejected(self, client):
        response = client.post('/api/input', json={'text': 42})
        assert response.status_code == 400

    def test_empty_body_rejected(self, client):
        response = client.post('/api/input', json={})
        assert response.status_code == 400

    def test_non_object_body_rejected(self, client):
        response = client.post('/api/input', json=["hello"])
        assert response.status_code == 400

    def test_text_too_long_rejected(self, client):
        from transluxe.config import config

        response = client.post('/api/input', json={'text': 'a' * (config.pipeline.max_text_length + 1)})
        assert response.status_code == 400


class TestStateStream:
    """Test the Server-Sent Events state stream."""

    def test_first_event_holds_state(self, client):
        client.post('/api/input', json={'text': 'hello'})
        wait_for_translation(client, "مرحبا")

        response = client.get('/api/state/stream')
        assert response.status_code == 200
        assert response.mimetype == 'text/event-stream'

        chunk = next(response.iter_encoded()).decode('utf-8')
        response.close()

        assert chunk.startswith('data: ')
        assert chunk.endswith('\n\n')
        state = json.loads(chunk[len('data: '):])
        assert state['input_text'] == 'hello'
        assert state['translated_text'] == "مرحبا"
        assert state['is_loading'] is False

    def test_stream_ends_when_session_stops_mid_read(self, client, session, monkeypatch):
        def stopped():
            raise RuntimeError("Translator session is not running")

        monkeypatch.setattr(session, 'versioned_snapshot', stopped)
        response = client.get('/api/state/stream')
        assert response.get_data() == b''


class TestActions:
    """Test copy and speak endpoints."""

    def test_copy(self, client, session):
        client.post('/api/input', json={'text': 'hello'})
        wait_for_translation(client, "مرحبا")

        response = client.post('/api/copy')
        assert response.status_code == 200
        assert json.loads(response.data) == {'copied': True, 'text': "مرحبا"}
        assert session.clipboard.text == "مرحبا"
        assert get_state(client)['is_copied'] is True

        poll_until(lambda: get_state(client)['is_copied'] is False)

    def test_speak(self, client, session):
        client.post('/api/input', json={'text': 'hello'})
        wait_for_translation(client, "مرحبا")

        response = client.post('/api/speak')
        assert response.status_code == 202
        assert json.loads(response.data)['spoken'] is True
        poll_until(lambda: session.speech.utterances)
        assert session.speech.utterances == [("مرحبا", "ar")]

    def test_speak_without_translation(self, client):
        response = client.post('/api/speak')
        assert json.loads(response.data)['spoken'] is False


class TestMetaEndpoints:
    """Test languages, health and logs."""

    def test_languages_list(self, client):
        response = client.get('/api/languages')
        assert response.status_code == 200
        data = json.loads(response.data)
        assert set(data['languages']) == {'en', 'es', 'fr', 'de', 'ar'}

    def test_health(self, client, backend):
        data = json.loads(client.get('/api/health').data)
        assert data['status'] == 'healthy'
        assert data['backend'] == 'connected'

        backend.healthy = False
        data = json.loads(client.get('/api/health').data)
        assert data['status'] == 'degraded'

    def test_logs_endpoint_exists(self, client):
        response = client.get('/logs')
        assert response.status_code == 200
        assert 'logs' in json.loads(response.data)

    def test_logs_clear(self, client):
        response = client.post('/logs/clear')
        assert response.status_code == 200

    def test_logs_filtered_by_request(self, client):
        client.post('/logs/clear')
        client.post('/api/input', json={'text': 'hello'})
        wait_for_translation(client, "مرحبا")

        def request_logs():
            return json.loads(client.get('/logs?sequence=1').data)['logs']

        logs = poll_until(lambda: any(e['message'].startswith('Translated') for e in request_logs()) and request_logs())
        assert all(entry['sequence_id'] == 1 for entry in logs)
        assert any(entry['message'].startswith('Translated en->ar') for entry in logs)

    def test_unknown_route(self, client):
        response = client.get('/api/nope')
        assert response.status_code == 404


class TestSessionLifecycle:
    """Test start/stop of the translator session."""

    def test_stop_closes_client(self, backend):
        session = TranslatorSession(client=backend, debounce_seconds=0.05).start()
        session.update_input(text="pending")
        session.stop()
        assert backend.closed is True
        assert not session.running
        assert backend.calls == []

    def test_stop_after_loop_thread_died(self, backend):
        session = TranslatorSession(client=backend).start()
        session.loop.call_soon_threadsafe(session.loop.stop)
        poll_until(lambda: not session.running)

        session.stop()

        assert backend.closed is True
        assert not session.running

    def test_stop_twice(self, backend):
        session = TranslatorSession(client=backend).start()
        session.stop()
        session.stop()
        assert not session.running

    def test_calls_require_running_session(self, backend):
        session = TranslatorSession(client=backend)
        with pytest.raises(RuntimeError):
            session.snapshot()


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
