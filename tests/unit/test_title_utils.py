"""
Unit tests for split_title().
"""

import pytest

from poster_kit import TitleParts, split_title


class TestMiddleDotTitles:
    """Rule 1: 【lead·trail】 with optional brackets."""

    def test_bracketed(self):
        assert split_title("【XMServerUpdateLog·服务器更新日志】") == TitleParts("XMServerUpdateLog", "服务器更新日志")

    def test_unbracketed_with_spaces(self):
        assert split_title("XMServerUpdateLog · 服务器更新日志") == TitleParts("XMServerUpdateLog", "服务器更新日志")

    def test_whitespace_trimmed(self):
        result = split_title("  【 Kits  ·  礼包系统 】  ")
        assert result.eng_name == "Kits"
        assert result.cn_name == "礼包系统"

    @pytest.mark.parametrize("eng,cn", [
        ("BetterChat", "聊天增强"),
        ("Raid Protection", "抄家保护"),
        ("NTeleportation", "传送"),
    ])
    def test_dot_pairs(self, eng, cn):
        assert split_title(f"{eng} · {cn}") == TitleParts(eng, cn)
        assert split_title(f"【{eng}·{cn}】") == TitleParts(eng, cn)

    def test_middle_dot_wins_over_hyphen(self):
        result = split_title("Kits · 礼包 - 高级版")
        assert result == TitleParts("Kits", "礼包 - 高级版")

    @pytest.mark.parametrize("name", ["【·Y】", "【·服务器更新日志】"])
    def test_bracket_never_becomes_eng_name(self, name):
        # No lead text before the dot: falls through to the whole-name rule
        assert split_title(name) == TitleParts("", name)


class TestSpacedHyphenTitles:
    """Rule 2: split on the first " - "."""

    def test_simple_split(self):
        assert split_title("BetterChat - 聊天增强") == TitleParts("BetterChat", "聊天增强")

    def test_rest_is_rejoined(self):
        assert split_title("Kits - 礼包 - 高级版") == TitleParts("Kits", "礼包 - 高级版")

    def test_non_alphanumeric_lead(self):
        assert split_title("Kits+ v2.0 - 礼包") == TitleParts("Kits+ v2.0", "礼包")


class TestBareHyphenTitles:
    """Rule 3: leading alphanumeric run followed by a bare hyphen."""

    def test_no_spaces(self):
        assert split_title("XMLog-更新日志") == TitleParts("XMLog", "更新日志")

    def test_space_before_hyphen_only(self):
        assert split_title("Better Chat -聊天增强") == TitleParts("Better Chat", "聊天增强")

    def test_non_alphanumeric_lead_not_split(self):
        assert split_title("更新-日志") == TitleParts("", "更新-日志")


class TestUnseparatedTitles:
    """Rule 4: the whole name becomes the display name."""

    def test_chinese_only(self):
        assert split_title("服务器更新日志") == TitleParts("", "服务器更新日志")

    def test_english_only(self):
        assert split_title("  BetterChat  ") == TitleParts("", "BetterChat")

    def test_empty(self):
        assert split_title("") == TitleParts("", "")

    def test_whitespace_only(self):
        assert split_title("   ") == TitleParts("", "")

    def test_none(self):
        assert split_title(None) == TitleParts("", "")

    @pytest.mark.parametrize("name", ["服务器更新日志", "BetterChat", "【礼包】", "Rust插件"])
    def test_idempotent(self, name):
        first = split_title(name)
        assert split_title(first.cn_name) == first


class TestTitlePartsSerialization:

    def test_to_dict_uses_wire_names(self):
        assert split_title("A · B").to_dict() == {"engName": "A", "cnName": "B"}
