from app.core.config import settings
from app.core.exceptions import UpstreamError
from app.models import Translation
from app.services.translation_service import create_translation, validate_triple
from app.utils.validation import require_present
from sqlmodel import Session
import requests
import logging
from typing import Optional

logger = logging.getLogger(__name__)


def normalize_language_code(lang_code: str) -> str:
    """
    Reduce a provider-specific language code to our 2-letter lowercase form.
    E.g. 'EN-GB' -> 'en', 'pt-BR' -> 'pt', 'zh-TW' -> 'zh'.
    """
    return lang_code.strip().lower()[:2]


class MachineTranslationClient:
    """Client for the Google Cloud Translation API."""

    # Mapping from our internal language codes to Google Translate API codes
    LANGUAGE_CODE_MAPPING = {
        'jp': 'ja',  # Japanese: our code 'jp' -> Google API code 'ja'
    }

    def __init__(self, api_key: Optional[str] = None, timeout: Optional[float] = None):
        """Initialize the translation client."""
        self.api_key = api_key if api_key is not None else settings.google_translate_api_key
        self.timeout = timeout if timeout is not None else settings.machine_translation_timeout
        self.base_url = "https://translation.googleapis.com/language/translate/v2"

        logger.info(f"MachineTranslationClient initialized. API key present: {bool(self.api_key)}")
        if not self.api_key:
            logger.warning("Google Translate API key not configured. Machine translation will fail.")

    def _map_language_code(self, lang_code: str) -> str:
        """
        Map internal language code to Google Translate API language code.

        Args:
            lang_code: Internal language code (e.g., 'jp')

        Returns:
            Google Translate API language code (e.g., 'ja')
        """
        return self.LANGUAGE_CODE_MAPPING.get(lang_code.lower(), lang_code.lower())

    def translate_text(
        self,
        text: str,
        target_language: str,
        source_language: Optional[str] = None
    ) -> str:
        """
        Translate text from source language to target language.

        Args:
            text: Text to translate
            target_language: Target language code (e.g., 'fr', 'es', 'de')
            source_language: Source language code (e.g., 'en'). If None, auto-detect.

        Returns:
            Translated text

        Raises:
            UpstreamError: If the provider is not configured, unreachable, or rejects the request
        """
        # Re-check API key from settings in case it was loaded after initialization
        if not self.api_key:
            self.api_key = settings.google_translate_api_key

        if not self.api_key:
            raise UpstreamError("Machine translation provider is not configured")

        mapped_target = self._map_language_code(target_language)
        mapped_source = self._map_language_code(source_language) if source_language else None

        params = {
            'key': self.api_key,
            'q': text,
            'target': mapped_target,
            'format': 'text'
        }
        if mapped_source:
            params['source'] = mapped_source

        logger.debug(f"Translation request: '{text}' from '{mapped_source or 'auto'}' to '{mapped_target}'")

        try:
            response = requests.post(self.base_url, params=params, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.RequestException as e:
            error_msg = f"Translation API request failed: {str(e)}"
            if getattr(e, 'response', None) is not None:
                try:
                    error_msg += f" - {e.response.json()}"
                except ValueError:
                    error_msg += f" - Status: {e.response.status_code}"
            logger.error(error_msg)
            raise UpstreamError(error_msg, field="language", value=target_language) from e
        except ValueError as e:
            logger.error(f"Translation API returned invalid JSON: {e}")
            raise UpstreamError("Translation API returned an invalid response") from e

        try:
            translated_text = data['data']['translations'][0]['translatedText']
        except (KeyError, IndexError, TypeError) as e:
            logger.error(f"Unexpected API response format: {data}")
            raise UpstreamError(f"Unexpected API response format: {data}") from e

        logger.info(f"Translated '{text}' from {source_language or 'auto'} to {target_language}")
        return translated_text


def translate_and_store(
    session: Session,
    group: str,
    key: str,
    value: str,
    target_language: str,
    source_language: Optional[str] = None,
    client: Optional[MachineTranslationClient] = None
) -> Translation:
    """
    Machine-translate a value and store it as a new translation row.

    The row goes through the normal create path, so a target language that
    already has a value for (group, key) fails with ConflictError just like a
    manual duplicate.

    Raises:
        ValidationError: If the value or triple is invalid
        UpstreamError: If the provider fails
        ConflictError: If the target triple already exists
    """
    value = require_present("value", value)
    group, key, language = validate_triple(group, key, normalize_language_code(target_language))
    client = client or machine_translation_client

    translated = client.translate_text(
        text=value,
        target_language=target_language,
        source_language=source_language
    )
    return create_translation(
        session,
        group=group,
        key=key,
        language=language,
        value=translated
    )


# Create a singleton instance
machine_translation_client = MachineTranslationClient()
