"""
Error taxonomy for the poster analyzer.

Every failure of the extraction round trip is raised as one ExtractionError
subclass. Errors carry a message and never any partial poster data.

Error fields:
    stage: where the pipeline stopped (configuration, extraction, parsing, validation)
    kind: the tag of the error variant
    message: human-readable description
    hint: what the caller can do about it
    recoverable: True if retrying the same request later may succeed
"""

from typing import Optional


class PosterKitError(Exception):
    """Base exception for the poster analyzer."""


class ExtractionError(PosterKitError):
    """A failed extraction. Subclasses set kind, stage, hint and recoverable."""

    kind = 'ExtractionError'
    stage = 'extraction'
    recoverable = False
    default_hint: Optional[str] = None

    def __init__(self, message: str, hint: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.hint = hint if hint is not None else self.default_hint

    def to_dict(self) -> dict:
        return {
            'stage': self.stage,
            'kind': self.kind,
            'message': self.message,
            'hint': self.hint,
            'recoverable': self.recoverable,
        }

    def __str__(self) -> str:
        if self.hint:
            return f"{self.message} ({self.hint})"
        return self.message


class MissingCredentialError(ExtractionError):
    kind = 'MissingCredential'
    stage = 'configuration'
    default_hint = 'Set GEMINI_API_KEY in the environment'


class TransportFailureError(ExtractionError):
    kind = 'TransportFailure'
    recoverable = True
    default_hint = 'Check network connectivity and try again'


class RateLimitedError(ExtractionError):
    kind = 'RateLimited'
    recoverable = True
    default_hint = 'API quota exhausted, wait a moment and try again'


class ModelUnavailableError(ExtractionError):
    kind = 'ModelUnavailable'
    default_hint = 'The configured model is unavailable, check GEMINI_MODEL'


class EmptyResponseError(ExtractionError):
    kind = 'EmptyResponse'
    recoverable = True
    default_hint = 'The model returned nothing, try again'


class MalformedJsonError(ExtractionError):
    kind = 'MalformedJson'
    stage = 'parsing'
    recoverable = True
    default_hint = 'The model response was not valid JSON, try again'


class SchemaViolationError(ExtractionError):
    kind = 'SchemaViolation'
    stage = 'validation'
    recoverable = True
    default_hint = 'The model response did not match the poster schema, try again'

    def __init__(self, field: str, message: str, hint: Optional[str] = None):
        super().__init__(message, hint)
        self.field = field

    def to_dict(self) -> dict:
        data = super().to_dict()
        data['field'] = self.field
        return data


EXTRACTION_ERROR_KINDS = (
    MissingCredentialError,
    TransportFailureError,
    RateLimitedError,
    ModelUnavailableError,
    EmptyResponseError,
    MalformedJsonError,
    SchemaViolationError,
)
