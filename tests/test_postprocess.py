"""체인지로그 후처리 테스트"""

import pytest

from app.domain.changelog.postprocess import post_process_changelog


class TestPostProcessChangelog:
    """post_process_changelog 함수 테스트"""

    def test_prepends_heading(self):
        """헤더가 없으면 버전 헤더 추가"""
        result = post_process_changelog("- Did a thing", "1.2.0")

        assert result == "## 1.2.0\n\n- Did a thing"

    def test_keeps_existing_heading(self):
        """이미 헤더가 있으면 유지"""
        result = post_process_changelog("## v1\n\n- x", "1.2.0")

        assert result == "## v1\n\n- x"

    def test_trims_whitespace(self):
        """앞뒤 공백 제거"""
        assert post_process_changelog("\n\n  ## 1.0\n- x  \n\n", "1.0") == "## 1.0\n- x"

    def test_normalizes_line_endings(self):
        """CRLF, CR을 LF로 통일"""
        result = post_process_changelog("## 1.0\r\n- a\r- b", "1.0")

        assert result == "## 1.0\n- a\n- b"

    def test_collapses_blank_lines(self):
        """3줄 이상 줄바꿈을 빈 줄 하나로"""
        result = post_process_changelog("## 1.0\n\n\n\n\n- a\r\n\r\n\r\n- b", "1.0")

        assert result == "## 1.0\n\n- a\n\n- b"

    @pytest.mark.parametrize(
        "line,expected",
        [
            ("• Did a thing", "- Did a thing"),
            ("· Did a thing", "- Did a thing"),
            ("  •\tNested", "  - Nested"),
        ],
    )
    def test_normalizes_bullet_glyphs(self, line, expected):
        """비표준 글머리표를 '- '로 변환"""
        result = post_process_changelog(f"## 1.0\n{line}", "1.0")

        assert result.split("\n")[1] == expected

    def test_mid_line_glyph_is_kept(self):
        """줄 중간의 '·'는 유지"""
        result = post_process_changelog("## 1.0\n- a · b", "1.0")

        assert result == "## 1.0\n- a · b"

    @pytest.mark.parametrize(
        "raw",
        [
            "",
            "   ",
            "plain text",
            "## 1.0\n\n\n\n• a\r\n· b",
            "\r\n\r\n• first\n\n\n\n",
            "•",
            "• \n• x",
            "# Title\r\r\r\rbody",
        ],
    )
    def test_idempotent(self, raw):
        """두 번 적용해도 결과가 같음"""
        once = post_process_changelog(raw, "1.0.0")

        assert post_process_changelog(once, "1.0.0") == once
