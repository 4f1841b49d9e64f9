"""
Data models for the poster analyzer.

PosterRecord is the only value that leaves the pipeline. The other records
are derived or ephemeral and never persisted.
"""

from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True)
class PosterRecord:
    """Validated marketing-poster data for a single page."""
    name: str
    tag: str
    short_description: str
    price: str
    summary: str
    features: Tuple[str, ...] = ()
    image_urls: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: dict) -> 'PosterRecord':
        """Build a record from wire-format keys. Expects already validated data."""
        return cls(
            name=data['name'],
            tag=data['tag'],
            short_description=data['shortDescription'],
            price=data['price'],
            summary=data['summary'],
            features=tuple(data['features']),
            image_urls=tuple(data['imageUrls']),
        )

    def to_dict(self) -> dict:
        """Serialize using the wire-format keys of the extraction schema."""
        return {
            'name': self.name,
            'tag': self.tag,
            'shortDescription': self.short_description,
            'price': self.price,
            'summary': self.summary,
            'features': list(self.features),
            'imageUrls': list(self.image_urls),
        }


@dataclass(frozen=True)
class TitleParts:
    """A poster title split into its English/code part and its display part."""
    eng_name: str
    cn_name: str

    def to_dict(self) -> Dict[str, str]:
        return {'engName': self.eng_name, 'cnName': self.cn_name}


@dataclass
class RetrievalAttempt:
    strategy_id: str
    success: bool
    raw_length: int = 0
