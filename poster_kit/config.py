"""
Configuration for the poster analyzer.

Values are read from the environment once, when the pipeline is built, and
passed down explicitly. Nothing below reads the environment at call time.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_GEMINI_MODEL = 'gemini-2.0-flash'

# Strategy A keeps page chrome and sidebars, where price and metadata live
DEFAULT_HTML_PROXY_URL = 'https://api.allorigins.win/raw?url='
# Strategy B returns a denser readability/markdown rendering
DEFAULT_MARKDOWN_PROXY_URL = 'https://r.jina.ai/'

HTML_CHAR_BUDGET = 150_000
MARKDOWN_CHAR_BUDGET = 50_000
FETCH_TIMEOUT = 30


@dataclass(frozen=True)
class PosterConfig:
    api_key: Optional[str] = None
    model_name: str = DEFAULT_GEMINI_MODEL
    html_proxy_url: str = DEFAULT_HTML_PROXY_URL
    markdown_proxy_url: str = DEFAULT_MARKDOWN_PROXY_URL
    html_char_budget: int = HTML_CHAR_BUDGET
    markdown_char_budget: int = MARKDOWN_CHAR_BUDGET
    fetch_timeout: int = FETCH_TIMEOUT

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'PosterConfig':
        """
        Build a config from environment variables.

        Recognized variables:
            GEMINI_API_KEY: credential for the extraction model (required to extract)
            GEMINI_MODEL: model name (default gemini-2.0-flash)
            POSTER_HTML_PROXY_URL: raw-HTML proxy prefix
            POSTER_MARKDOWN_PROXY_URL: markdown proxy prefix
            POSTER_FETCH_TIMEOUT: per-request fetch timeout in seconds
        """
        env = os.environ if environ is None else environ

        timeout = env.get('POSTER_FETCH_TIMEOUT')
        try:
            fetch_timeout = int(timeout) if timeout else FETCH_TIMEOUT
        except ValueError:
            fetch_timeout = FETCH_TIMEOUT

        return cls(
            api_key=env.get('GEMINI_API_KEY') or None,
            model_name=env.get('GEMINI_MODEL') or DEFAULT_GEMINI_MODEL,
            html_proxy_url=env.get('POSTER_HTML_PROXY_URL') or DEFAULT_HTML_PROXY_URL,
            markdown_proxy_url=env.get('POSTER_MARKDOWN_PROXY_URL') or DEFAULT_MARKDOWN_PROXY_URL,
            fetch_timeout=fetch_timeout,
        )
