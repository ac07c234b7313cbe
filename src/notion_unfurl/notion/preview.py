"""Bounded preview text from rendered document markdown."""

# The rendered markdown opens with a title line and a blank separator
_SKIPPED_LINES = 2


def build_preview_text(markdown: str, max_lines: int = 25, max_chars: int = 1000) -> str:
    """Return the preview body for an unfurl attachment.

    Drops the title and separator lines, keeps the next ``max_lines`` lines
    (blank ones included) and truncates to ``max_chars`` code points.
    """
    lines = markdown.split("\n")[_SKIPPED_LINES : _SKIPPED_LINES + max_lines]
    return "\n".join(lines)[:max_chars]
