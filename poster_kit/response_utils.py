"""
Response parsing and validation for the poster analyzer.

Turns the model's raw text into a PosterRecord. The model is asked for bare
JSON but sometimes wraps it in a ```json fence, so a fenced block is tried
first. Parsing does not attempt partial recovery: the record is either
complete and well-typed, or an error names what is wrong.
"""

import json
import re

from .errors import MalformedJsonError, SchemaViolationError
from .models import PosterRecord

STRING_FIELDS = ['name', 'tag', 'shortDescription', 'price', 'summary']
LIST_FIELDS = ['features', 'imageUrls']
REQUIRED_POSTER_FIELDS = STRING_FIELDS + LIST_FIELDS

JSON_FENCE_PATTERN = re.compile(r'```json\s*([\s\S]*?)\s*```')


def extract_json(raw: str):
    """
    Parse the JSON payload of a model response.

    Raises:
        MalformedJsonError: if the fenced block (or the whole text) is not JSON
    """
    match = JSON_FENCE_PATTERN.search(raw or '')
    payload = match.group(1) if match else (raw or '')

    try:
        return json.loads(payload)
    # JSONDecodeError is a ValueError; deeply nested input overflows the decoder
    except (ValueError, TypeError, RecursionError) as e:
        raise MalformedJsonError(f'Failed to parse the model response as JSON: {e}') from e


def validate_poster_fields(data) -> PosterRecord:
    """
    Check that all seven poster fields are present and correctly typed.

    Raises:
        SchemaViolationError: naming the first missing or mistyped field
    """
    if not isinstance(data, dict):
        raise SchemaViolationError('<root>', f'Expected a JSON object, got {type(data).__name__}')

    for field in REQUIRED_POSTER_FIELDS:
        if field not in data:
            raise SchemaViolationError(field, f'Missing required field: {field}')

    for field in STRING_FIELDS:
        if not isinstance(data[field], str):
            raise SchemaViolationError(
                field, f"Field '{field}' must be a string, got {type(data[field]).__name__}"
            )

    for field in LIST_FIELDS:
        value = data[field]
        if not isinstance(value, list):
            raise SchemaViolationError(
                field, f"Field '{field}' must be a list of strings, got {type(value).__name__}"
            )
        for index, item in enumerate(value):
            if not isinstance(item, str):
                raise SchemaViolationError(
                    field, f"Field '{field}[{index}]' must be a string, got {type(item).__name__}"
                )

    return PosterRecord.from_dict(data)


def parse_and_validate(raw: str) -> PosterRecord:
    """Parse raw model text into a validated PosterRecord."""
    return validate_poster_fields(extract_json(raw))
