"""
Extraction client for the poster analyzer.

Sends exactly one schema-constrained request to the generative model and
returns its raw text. The model itself is treated as an opaque collaborator:

    collaborator(system_instructions, user_content, schema) -> reply

where `reply.text` is expected to hold a JSON document. Any collaborator
with that shape can be injected; GeminiCollaborator is the default.
"""

import logging
from typing import Any, Awaitable, Callable, Optional

import google.generativeai as genai
from google.api_core import exceptions as google_exceptions

from .config import DEFAULT_GEMINI_MODEL
from .errors import (
    EmptyResponseError,
    ExtractionError,
    MissingCredentialError,
    ModelUnavailableError,
    RateLimitedError,
    TransportFailureError,
)
from .prompts import POSTER_RESPONSE_SCHEMA, SYSTEM_INSTRUCTIONS, build_user_content

logger = logging.getLogger(__name__)

Collaborator = Callable[[str, str, dict], Awaitable[Any]]


class GeminiCollaborator:
    """Calls Gemini with a JSON response schema."""

    def __init__(self, api_key: str, model_name: str = DEFAULT_GEMINI_MODEL):
        genai.configure(api_key=api_key)
        self.model_name = model_name

    async def __call__(self, system_instructions: str, user_content: str, schema: dict):
        model = genai.GenerativeModel(
            self.model_name,
            system_instruction=system_instructions,
            generation_config=genai.GenerationConfig(
                response_mime_type='application/json',
                response_schema=schema,
            ),
        )
        return await model.generate_content_async(user_content)


def _status_code(exc: Exception) -> Optional[int]:
    """Best-effort HTTP status of a collaborator exception."""
    code = getattr(exc, 'code', None)
    if isinstance(code, int):
        return code
    response = getattr(exc, 'response', None)
    status = getattr(response, 'status_code', None)
    if isinstance(status, int):
        return status
    return None


def classify_collaborator_error(exc: Exception) -> ExtractionError:
    """
    Map a collaborator exception onto the extraction error taxonomy.

    429 (status or message) -> RateLimited
    404 -> ModelUnavailable
    anything else -> TransportFailure
    """
    message = str(exc) or exc.__class__.__name__
    status = _status_code(exc)

    if isinstance(exc, google_exceptions.ResourceExhausted) or status == 429 or '429' in message:
        return RateLimitedError(f'Rate limited by the extraction model: {message}')

    if isinstance(exc, google_exceptions.NotFound) or status == 404:
        return ModelUnavailableError(f'Extraction model unavailable: {message}')

    return TransportFailureError(f'Extraction request failed: {message}')


def _reply_text(reply: Any) -> Optional[str]:
    """Read reply.text. Gemini raises ValueError when a reply has no text parts."""
    if reply is None:
        return None
    try:
        text = getattr(reply, 'text', None)
    except ValueError:
        return None
    return text if isinstance(text, str) else None


class ExtractionClient:
    """One extraction round trip per call; no retries."""

    def __init__(
        self,
        api_key: Optional[str],
        model_name: str = DEFAULT_GEMINI_MODEL,
        collaborator: Optional[Collaborator] = None,
    ):
        self.api_key = api_key
        self.model_name = model_name
        self._collaborator = collaborator

    def _get_collaborator(self) -> Collaborator:
        if self._collaborator is None:
            self._collaborator = GeminiCollaborator(self.api_key, self.model_name)
        return self._collaborator

    async def extract(self, url: str, content: str) -> str:
        """
        Ask the model for poster data about `url`.

        Args:
            url: The page being analyzed
            content: Retrieved page text, possibly ''

        Returns:
            Raw response text, expected to contain JSON

        Raises:
            MissingCredentialError: no API key configured (raised before any request)
            RateLimitedError, ModelUnavailableError, TransportFailureError: collaborator failed
            EmptyResponseError: the call succeeded but returned no text
        """
        if not self.api_key:
            raise MissingCredentialError('Gemini API key is missing')

        collaborator = self._get_collaborator()
        user_content = build_user_content(url, content)

        try:
            reply = await collaborator(SYSTEM_INSTRUCTIONS, user_content, POSTER_RESPONSE_SCHEMA)
        except ExtractionError:
            raise
        except Exception as e:
            error = classify_collaborator_error(e)
            logger.error("Extraction failed for %s (%s): %s", url, error.kind, e)
            raise error from e

        text = _reply_text(reply)
        if text is None or not text.strip():
            raise EmptyResponseError('The extraction model returned an empty response')

        return text
