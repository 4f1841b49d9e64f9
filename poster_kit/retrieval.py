"""
Page retrieval for the poster analyzer.

A page is fetched through an ordered chain of proxies, stopping at the first
one that answers with an OK status:

1. html-proxy: raw HTML, sanitized, large budget. Sidebars often carry the
   price and metadata that readability extraction drops.
2. markdown-proxy: readability/markdown rendering, smaller budget.

Retrieval never raises. When every strategy fails the result is '' and the
extraction still runs with the URL alone.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple
from urllib.parse import quote

import requests

from .config import PosterConfig
from .content_utils import sanitize_html, truncate_content
from .models import RetrievalAttempt

logger = logging.getLogger(__name__)

USER_AGENT = 'Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36'


@dataclass(frozen=True)
class RetrievalStrategy:
    strategy_id: str
    build_url: Callable[[str], str]
    char_budget: int
    sanitize: bool = False


def html_proxy_strategy(proxy_url: str, char_budget: int) -> RetrievalStrategy:
    return RetrievalStrategy(
        strategy_id='html-proxy',
        build_url=lambda url: f"{proxy_url}{quote(url, safe='')}",
        char_budget=char_budget,
        sanitize=True,
    )


def markdown_proxy_strategy(proxy_url: str, char_budget: int) -> RetrievalStrategy:
    return RetrievalStrategy(
        strategy_id='markdown-proxy',
        build_url=lambda url: f"{proxy_url}{url}",
        char_budget=char_budget,
    )


def default_strategies(config: PosterConfig) -> List[RetrievalStrategy]:
    return [
        html_proxy_strategy(config.html_proxy_url, config.html_char_budget),
        markdown_proxy_strategy(config.markdown_proxy_url, config.markdown_char_budget),
    ]


class PageRetriever:
    """Fetches page text through the fallback chain."""

    def __init__(
        self,
        strategies: Optional[List[RetrievalStrategy]] = None,
        timeout: int = 30,
        session: Optional[requests.Session] = None,
    ):
        self.strategies = strategies if strategies is not None else default_strategies(PosterConfig())
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_config(cls, config: PosterConfig) -> 'PageRetriever':
        return cls(strategies=default_strategies(config), timeout=config.fetch_timeout)

    def close(self):
        """Release pooled connections held by the HTTP session."""
        self.session.close()

    async def retrieve(self, url: str) -> str:
        """
        Return bounded page text for `url`, or '' if every strategy failed.

        Strategies are awaited one at a time, never raced.
        """
        for strategy in self.strategies:
            try:
                text, attempt = await asyncio.to_thread(self._attempt, strategy, url)
            except Exception as e:
                logger.warning("Retrieval via %s raised: %s", strategy.strategy_id, e)
                continue

            if attempt.success:
                logger.info(
                    "Retrieved %s via %s (%d raw chars, %d kept)",
                    url, attempt.strategy_id, attempt.raw_length, len(text),
                )
                return text

            logger.warning("Retrieval via %s failed for %s", attempt.strategy_id, url)

        logger.warning("All retrieval strategies failed for %s, continuing without content", url)
        return ''

    def _attempt(self, strategy: RetrievalStrategy, url: str) -> Tuple[str, RetrievalAttempt]:
        """Run one strategy. Returns (text, attempt); text is '' on failure."""
        html, error = self._fetch(strategy.build_url(url))
        if error:
            logger.debug("%s: %s", strategy.strategy_id, error)
            return '', RetrievalAttempt(strategy.strategy_id, success=False)

        raw_length = len(html)
        if strategy.sanitize:
            html = sanitize_html(html)
        text = truncate_content(html, strategy.char_budget)
        return text, RetrievalAttempt(strategy.strategy_id, success=True, raw_length=raw_length)

    def _fetch(self, proxy_request_url: str) -> tuple:
        """Fetch a proxy URL. Returns (body, error)."""
        try:
            headers = {
                'User-Agent': USER_AGENT,
                'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,text/plain;q=0.8,*/*;q=0.5',
                'Accept-Language': 'zh-CN,zh;q=0.9,en-US;q=0.8,en;q=0.5',
            }

            response = self.session.get(proxy_request_url, headers=headers, timeout=self.timeout, allow_redirects=True)
            if not response.ok:
                return None, f'HTTP error: {response.status_code}'

            return response.text, None

        except requests.exceptions.Timeout:
            return None, 'Request timed out'
        except requests.exceptions.RequestException as e:
            return None, f'Request failed: {str(e)}'
