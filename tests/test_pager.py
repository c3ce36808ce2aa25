"""Tests for the TextPager module."""

import pytest
from delve.core.pager import TextPager


class TestTextPager:
    """Tests for TextPager."""

    @pytest.fixture
    def pager(self):
        """A pager with a small page for testing."""
        return TextPager(page_lines=3, width=20)

    def test_short_text_single_page(self, pager):
        """Short text is one page."""
        assert pager.paginate("Hello world") == ["Hello world"]

    def test_empty_text_no_pages(self, pager):
        """Empty or blank text gives no pages."""
        assert pager.paginate("") == []
        assert pager.paginate("  \n\n ") == []

    def test_lines_grouped_into_pages(self, pager):
        """Lines are grouped page_lines at a time."""
        text = "\n".join(f"line {i}" for i in range(7))
        pages = pager.paginate(text)
        assert len(pages) == 3
        assert pages[0] == "line 0\nline 1\nline 2"
        assert pages[2] == "line 6"

    def test_crlf_text(self, pager):
        """CRLF line endings do not leave carriage returns."""
        assert pager.paginate("a\r\nb\r\n") == ["a\nb"]

    def test_long_line_wrapped_at_word(self, pager):
        """Long lines wrap at the last space in range."""
        pages = pager.paginate("the quick brown fox jumps over the lazy dog")
        rows = pages[0].split("\n")
        assert all(len(row) <= 20 for row in rows)
        assert rows[0] == "the quick brown fox"

    def test_long_word_split_hard(self, pager):
        """Words longer than the width are split at the width."""
        rows = pager.paginate("A" * 45)[0].split("\n")
        assert rows == ["A" * 20, "A" * 20, "A" * 5]

    def test_blank_lines_kept(self, pager):
        """Empty lines inside the text stay."""
        assert pager.paginate("a\n\nb") == ["a\n\nb"]

    def test_invalid_size(self):
        """Non-positive sizes are rejected."""
        with pytest.raises(ValueError):
            TextPager(page_lines=0).paginate("text")
