"""
Page content utilities for the poster analyzer.

Raw pages are large. Scripts, styles, comments and inline SVG carry nothing
the extraction model needs, so they are stripped before the page is
truncated to the request budget. All other markup is kept; the model
tolerates residual tags.

The result is BeautifulSoup's re-serialization of the parsed tree, not the
input with spans cut out. Content and structure survive, but the text is
normalized: entities are decoded (&nbsp; becomes U+00A0), void tags are
written self-closed (<br/>), attribute values are quoted and unclosed tags
are closed at the end of their parent.
"""

from bs4 import BeautifulSoup, Comment

# Removal order matters for nested content (e.g. a comment inside a script)
STRIPPED_ELEMENTS = ['script', 'style']


def sanitize_html(html: str) -> str:
    """
    Remove script, style, comment and svg content from an HTML document.

    Args:
        html: Raw page markup

    Returns:
        The markup without non-content elements ('' for empty input)
    """
    if not html:
        return ''

    soup = BeautifulSoup(html, 'html.parser')

    for tag_name in STRIPPED_ELEMENTS:
        for element in soup.find_all(tag_name):
            element.decompose()

    for comment in soup.find_all(string=lambda text: isinstance(text, Comment)):
        comment.extract()

    for element in soup.find_all('svg'):
        element.decompose()

    return str(soup)


def truncate_content(text: str, budget: int) -> str:
    """Bound text to its first `budget` characters."""
    if not text:
        return ''
    if budget <= 0:
        return ''
    return text[:budget]
