"""Text pager for splitting documents into terminal-sized pages."""

from dataclasses import dataclass


@dataclass
class TextPager:
    """Splits text into pages of at most `page_lines` lines of `width` columns."""

    page_lines: int = 24
    width: int = 80

    def paginate(self, text: str) -> list[str]:
        """
        Split text into pages.

        Long lines are wrapped, preferring word boundaries.

        Args:
            text: The document to page.

        Returns:
            List of pages, each a newline-joined block of lines.
        """
        if self.page_lines < 1 or self.width < 1:
            raise ValueError("page_lines and width must be positive")

        text = text.rstrip()
        if not text:
            return []

        rows = []
        for line in text.splitlines():
            rows.extend(self._wrap(line.expandtabs()))

        return [
            "\n".join(rows[start:start + self.page_lines])
            for start in range(0, len(rows), self.page_lines)
        ]

    def _wrap(self, line: str) -> list[str]:
        """Wrap one line into rows no wider than `width`."""
        if len(line) <= self.width:
            return [line.rstrip()]

        rows = []
        remaining = line
        while len(remaining) > self.width:
            split_point = self._find_split_point(remaining, self.width)
            rows.append(remaining[:split_point].rstrip())
            remaining = remaining[split_point:].lstrip()
        if remaining:
            rows.append(remaining)
        return rows

    def _find_split_point(self, text: str, max_len: int) -> int:
        """
        Find the best point to split text at or before max_len.

        Prefers the last space in the second half; otherwise splits hard.
        """
        last_space = text[:max_len].rfind(" ")
        if last_space > max_len // 2:
            return last_space + 1
        return max_len
