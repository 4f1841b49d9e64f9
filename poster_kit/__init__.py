"""Poster analyzer: turns resource page URLs into marketing-poster data."""

from .models import PosterRecord, TitleParts, RetrievalAttempt

from .errors import (
    PosterKitError,
    ExtractionError,
    MissingCredentialError,
    TransportFailureError,
    RateLimitedError,
    ModelUnavailableError,
    EmptyResponseError,
    MalformedJsonError,
    SchemaViolationError,
)

from .config import PosterConfig

from .content_utils import sanitize_html, truncate_content

from .title_utils import split_title

from .response_utils import (
    REQUIRED_POSTER_FIELDS,
    extract_json,
    validate_poster_fields,
    parse_and_validate,
)

from .image_utils import (
    MAX_CAPTURED_IMAGES,
    CapturedImageSet,
    image_bytes_to_data_url,
    image_source_at,
    is_local_reference,
    merge_captured,
    resolve_display_source,
)

from .retrieval import PageRetriever
from .extraction import ExtractionClient, GeminiCollaborator
from .pipeline import PosterPipeline, analyze

__all__ = [
    # Models
    'PosterRecord',
    'TitleParts',
    'RetrievalAttempt',
    # Errors
    'PosterKitError',
    'ExtractionError',
    'MissingCredentialError',
    'TransportFailureError',
    'RateLimitedError',
    'ModelUnavailableError',
    'EmptyResponseError',
    'MalformedJsonError',
    'SchemaViolationError',
    # Config
    'PosterConfig',
    # Content
    'sanitize_html',
    'truncate_content',
    # Titles
    'split_title',
    # Responses
    'REQUIRED_POSTER_FIELDS',
    'extract_json',
    'validate_poster_fields',
    'parse_and_validate',
    # Images
    'MAX_CAPTURED_IMAGES',
    'CapturedImageSet',
    'image_bytes_to_data_url',
    'image_source_at',
    'is_local_reference',
    'merge_captured',
    'resolve_display_source',
    # Pipeline
    'PageRetriever',
    'ExtractionClient',
    'GeminiCollaborator',
    'PosterPipeline',
    'analyze',
]
