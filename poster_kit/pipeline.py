"""
Poster analysis pipeline.

    PageRetriever(url) -> content
    ExtractionClient(url, content) -> raw text
    parse_and_validate(raw) -> PosterRecord

One run per request, stateless between runs. Retrieval degrades to empty
content; every other failure surfaces as an ExtractionError.
"""

import logging
import time
from typing import Optional

from .config import PosterConfig
from .extraction import ExtractionClient
from .models import PosterRecord
from .response_utils import parse_and_validate
from .retrieval import PageRetriever

logger = logging.getLogger(__name__)


class PosterPipeline:
    """Turns a resource page URL into a PosterRecord."""

    def __init__(
        self,
        config: Optional[PosterConfig] = None,
        retriever: Optional[PageRetriever] = None,
        extraction_client: Optional[ExtractionClient] = None,
    ):
        self.config = config or PosterConfig.from_env()
        self.retriever = retriever or PageRetriever.from_config(self.config)
        self.extraction_client = extraction_client or ExtractionClient(
            self.config.api_key, self.config.model_name
        )

    async def analyze(self, url: str) -> PosterRecord:
        started = time.monotonic()

        content = await self.retriever.retrieve(url)
        if not content:
            logger.warning("No page content for %s, extracting from URL only", url)

        raw = await self.extraction_client.extract(url, content)
        record = parse_and_validate(raw)

        logger.info(
            "Analyzed %s in %.2fs: %r (%d features, %d images)",
            url, time.monotonic() - started, record.name,
            len(record.features), len(record.image_urls),
        )
        return record

    def close(self):
        self.retriever.close()


async def analyze(url: str, config: Optional[PosterConfig] = None) -> PosterRecord:
    """Run the pipeline once for `url`."""
    pipeline = PosterPipeline(config)
    try:
        return await pipeline.analyze(url)
    finally:
        pipeline.close()
