"""
Poster Analyzer Cloud Function

Turns a plugin/resource page URL into poster data for the poster renderer.

Responsibilities:
- Retrieve page content (raw HTML proxy, then markdown proxy)
- Extract poster fields with Gemini
- Validate the extracted record
- Split the title and resolve image sources for rendering

Does NOT:
- Render or export the poster (the frontend's job)
- Retry failed extractions (the caller's job)
- Cache pages or results
"""

import asyncio
import json
import logging
import os
import sys
from datetime import datetime
from urllib.parse import urlparse

import functions_framework

# Add shared package to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))
from poster_kit import (
    MAX_CAPTURED_IMAGES,
    ExtractionError,
    PosterConfig,
    PosterPipeline,
    image_source_at,
    split_title,
)

logging.basicConfig(level=os.environ.get('LOG_LEVEL', 'INFO'))
logger = logging.getLogger('poster_analyzer')

# Configuration, read once per instance
CONFIG = PosterConfig.from_env()

CORS_HEADERS = {'Access-Control-Allow-Origin': '*'}


def build_pipeline() -> PosterPipeline:
    return PosterPipeline(CONFIG)


def build_poster_payload(url: str, record) -> dict:
    """Render-ready payload: the record plus its split title and image sources."""
    title = split_title(record.name)
    images = [image_source_at(record.image_urls, i) for i in range(min(len(record.image_urls), MAX_CAPTURED_IMAGES))]

    return {
        'url': url,
        'domain': urlparse(url).netloc.replace('www.', ''),
        'poster': record.to_dict(),
        'title': title.to_dict(),
        'images': images,
        'processed_at': datetime.utcnow().isoformat() + 'Z',
    }


@functions_framework.http
def analyze_poster(request):
    """
    Main Cloud Function entry point.

    Expected JSON input:
    {
        "url": "https://rustsb.com/resources/example.123/"
    }
    """
    # Handle CORS
    if request.method == 'OPTIONS':
        headers = {
            'Access-Control-Allow-Origin': '*',
            'Access-Control-Allow-Methods': 'POST',
            'Access-Control-Allow-Headers': 'Content-Type',
            'Access-Control-Max-Age': '3600'
        }
        return ('', 204, headers)

    headers = dict(CORS_HEADERS)

    try:
        request_json = request.get_json(silent=True)

        if not isinstance(request_json, dict) or not request_json.get('url'):
            return (json.dumps({
                'error': 'Missing required field: url'
            }), 400, headers)

        if not isinstance(request_json['url'], str) or not request_json['url'].strip():
            return (json.dumps({
                'error': 'Field url must be a non-empty string'
            }), 400, headers)

        url = request_json['url'].strip()
        domain = urlparse(url).netloc.replace('www.', '')

        pipeline = build_pipeline()
        try:
            record = asyncio.run(pipeline.analyze(url))
        except ExtractionError as e:
            logger.error("Poster analysis failed for %s: %s", url, e)
            # Return 200 with error in body; the caller decides whether to retry
            return (json.dumps({
                'url': url,
                'domain': domain,
                'error': e.to_dict()
            }, ensure_ascii=False), 200, headers)
        finally:
            pipeline.close()

        return (json.dumps(build_poster_payload(url, record), ensure_ascii=False), 200, headers)

    except Exception as e:
        logger.exception("Unhandled error in analyze_poster")
        return (json.dumps({
            'error': {
                'stage': 'processing',
                'message': str(e),
                'recoverable': False
            }
        }), 500, headers)
