"""
Title processing utilities for the poster analyzer.

Poster names usually carry two parts: an English/code name (the plugin
identifier) and a primary display name, often Chinese. Common shapes:
1. 【XMServerUpdateLog·服务器更新日志】
2. XMServerUpdateLog - 服务器更新日志
3. XMServerUpdateLog-服务器更新日志
Anything else is shown whole as the display name.
"""

import re

from .models import TitleParts

MIDDLE_DOT = '·'

# Outer 【】 brackets are optional; the lead never starts with the bracket itself
BRACKETED_PATTERN = re.compile(r'^【?([^【]+?)\s*' + MIDDLE_DOT + r'\s*(.+?)】?$')
SPACED_SEPARATOR = ' - '
BARE_HYPHEN_PATTERN = re.compile(r'^([A-Za-z0-9\s]+?)\s*-\s*(.+)$')


def split_title(raw_name: str) -> TitleParts:
    """
    Split a poster name into (eng_name, cn_name).

    The first matching rule wins: middle-dot pair, then " - ", then a
    leading alphanumeric run followed by a bare hyphen. Without any
    separator the whole trimmed name becomes cn_name.

    Examples:
        >>> split_title('【XMLog·更新日志】')
        TitleParts(eng_name='XMLog', cn_name='更新日志')

        >>> split_title('Kits - 礼包 - 高级')
        TitleParts(eng_name='Kits', cn_name='礼包 - 高级')

        >>> split_title('服务器更新日志')
        TitleParts(eng_name='', cn_name='服务器更新日志')
    """
    raw = (raw_name or '').strip()

    match = BRACKETED_PATTERN.match(raw)
    if match:
        return TitleParts(eng_name=match.group(1).strip(), cn_name=match.group(2).strip())

    if SPACED_SEPARATOR in raw:
        first, rest = raw.split(SPACED_SEPARATOR, 1)
        return TitleParts(eng_name=first.strip(), cn_name=rest.strip())

    match = BARE_HYPHEN_PATTERN.match(raw)
    if match:
        return TitleParts(eng_name=match.group(1).strip(), cn_name=match.group(2).strip())

    return TitleParts(eng_name='', cn_name=raw)
