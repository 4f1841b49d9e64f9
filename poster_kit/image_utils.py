"""
Image reference utilities for the poster analyzer.

Posters show at most three images. Remote images are routed through an
image proxy so the rendered poster can be exported without cross-origin
failures; local references (uploads, pastes) are used as-is.
"""

import base64
import re
from typing import Iterable, Iterator, List, Sequence
from urllib.parse import quote

MAX_CAPTURED_IMAGES = 3

IMAGE_PROXY_URL = 'https://images.weserv.nl/'
DEFAULT_IMAGE_QUALITY = 90
PLACEHOLDER_IMAGE_URL = 'https://via.placeholder.com/800x450/1e293b/94a3b8?text=No+Image'

LOCAL_REFERENCE_PREFIXES = ('blob:', 'data:')
SCHEME_PATTERN = re.compile(r'^https?://', re.I)

# Same unreserved set as JavaScript's encodeURIComponent
_URI_COMPONENT_SAFE = "-_.!~*'()"


def is_local_reference(ref: str) -> bool:
    return bool(ref) and ref.startswith(LOCAL_REFERENCE_PREFIXES)


def resolve_display_source(ref: str, quality: int = DEFAULT_IMAGE_QUALITY) -> str:
    """
    Return a renderable source for an image reference.

    Examples:
        >>> resolve_display_source('https://rustsb.com/attachments/123/')
        'https://images.weserv.nl/?url=rustsb.com%2Fattachments%2F123%2F&q=90'

        >>> resolve_display_source('data:image/png;base64,AAAA')
        'data:image/png;base64,AAAA'
    """
    if is_local_reference(ref):
        return ref

    stripped = SCHEME_PATTERN.sub('', ref or '')
    return f"{IMAGE_PROXY_URL}?url={quote(stripped, safe=_URI_COMPONENT_SAFE)}&q={quality}"


def image_source_at(refs: Sequence[str], index: int) -> str:
    """Renderable source for poster slot `index`, or a placeholder if the slot is empty."""
    if index < 0 or index >= len(refs) or not refs[index]:
        return PLACEHOLDER_IMAGE_URL
    return resolve_display_source(refs[index])


def merge_captured(existing: Iterable[str], incoming: Iterable[str], cap: int = MAX_CAPTURED_IMAGES) -> List[str]:
    """Append incoming after existing, keeping the first `cap` in arrival order."""
    return (list(existing) + list(incoming))[:cap]


def image_bytes_to_data_url(data: bytes, mime_type: str = 'image/png') -> str:
    """Turn uploaded or pasted image bytes into a local data: reference."""
    encoded = base64.b64encode(data).decode('ascii')
    return f"data:{mime_type};base64,{encoded}"


class CapturedImageSet:
    """
    Images attached to the current poster, capped at MAX_CAPTURED_IMAGES.

    Seeded from the extracted imageUrls, then grown by uploads and pastes
    until cleared. Once full, further captures are dropped.
    """

    def __init__(self, refs: Iterable[str] = ()):
        self._refs: List[str] = merge_captured([], refs)

    def seed(self, image_urls: Iterable[str]) -> None:
        """Replace the set with a fresh extraction's images."""
        self._refs = merge_captured([], image_urls)

    def add(self, *refs: str) -> List[str]:
        """Append captured references. Returns the references that were kept."""
        before = len(self._refs)
        self._refs = merge_captured(self._refs, refs)
        return self._refs[before:]

    def clear(self) -> None:
        self._refs = []

    @property
    def is_full(self) -> bool:
        return len(self._refs) >= MAX_CAPTURED_IMAGES

    def display_sources(self) -> List[str]:
        return [resolve_display_source(ref) for ref in self._refs]

    def to_list(self) -> List[str]:
        return list(self._refs)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._refs))

    def __len__(self) -> int:
        return len(self._refs)
