"""
Lingva API Client
=================
Client for the Lingva translation backend.
"""
from urllib.parse import quote

import requests

from transluxe.config import config, FailureReason, SOFT_FAILURE_MESSAGE
from transluxe.models.translation import TranslationResult, Success, Failure
from transluxe.utils.logging import get_logger


class LingvaClient:
    """Client for Lingva API interactions. One attempt per call, no retries."""

    def __init__(self, base_url: str = None, timeout: float = None):
        self.base_url = (base_url or config.backend.base_url).rstrip('/')
        self.timeout = timeout if timeout is not None else config.backend.timeout
        self.logger = get_logger().translation_logger

        # Set up session with connection pooling
        self.session = requests.Session()
        adapter = requests.adapters.HTTPAdapter(
            max_retries=0,
            pool_connections=config.backend.pool_size,
            pool_maxsize=config.backend.pool_size
        )
        self.session.mount('http://', adapter)
        self.session.mount('https://', adapter)

    @property
    def api_url(self) -> str:
        return f"{self.base_url}/api/v1"

    def build_url(self, text: str, source_lang: str, target_lang: str) -> str:
        """Build the request URL; the text is percent-encoded as one path segment."""
        return f"{self.api_url}/{source_lang}/{target_lang}/{quote(text, safe='')}"

    def is_healthy(self) -> bool:
        """Check if the backend is reachable."""
        try:
            response = self.session.get(
                self.base_url,
                timeout=config.backend.health_check_timeout
            )
            return response.ok
        except requests.RequestException as e:
            self.logger.warning(f"Backend health check failed: {e}")
            return False

    def translate(self, text: str, source_lang: str, target_lang: str) -> TranslationResult:
        """
        Translate text with a single GET request.

        Args:
            text: Text to translate
            source_lang: Source language code
            target_lang: Target language code

        Returns:
            Success with the translation (or the soft-failure text when the
            backend omits it), or Failure with the reason
        """
        url = self.build_url(text, source_lang, target_lang)

        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.Timeout:
            self.logger.error(f"Translation request timed out ({source_lang}->{target_lang})")
            return Failure(FailureReason.NETWORK_ERROR, "Request timed out")
        except requests.RequestException as e:
            self.logger.error(f"Translation request failed: {e}")
            return Failure(FailureReason.NETWORK_ERROR, str(e))

        try:
            data = response.json()
        except ValueError as e:
            self.logger.error(f"Invalid JSON response: {e}")
            return Failure(FailureReason.BAD_RESPONSE, f"Invalid JSON response: {e}")

        if not isinstance(data, dict):
            self.logger.error(f"Unexpected response shape: {type(data).__name__}")
            return Failure(FailureReason.BAD_RESPONSE, "Response is not a JSON object")

        # null counts as absent
        translation = data.get('translation')
        if translation is not None and not isinstance(translation, str):
            self.logger.error(f"translation field is {type(translation).__name__}, not a string")
            return Failure(FailureReason.BAD_RESPONSE, "translation field is not a string")
        if not translation:
            self.logger.warning(f"Backend returned no translation ({source_lang}->{target_lang})")
            return Success(SOFT_FAILURE_MESSAGE)

        return Success(translation)

    def close(self):
        """Close the session."""
        self.session.close()
