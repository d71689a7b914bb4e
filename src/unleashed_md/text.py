"""Extract plain text from parsed documents.

Used for search indexing, previews and accessibility text, where styles
are irrelevant but line structure is kept.

Example:
    >>> from unleashed_md import parse_markup, extract_text
    >>> extract_text(parse_markup("**Hello**\\n[World](home)"))
    'Hello\\nWorld'
"""

from unleashed_md.nodes import Document


def extract_text(document: Document, *, line_break: str = "\n") -> str:
    """Concatenate the text segments, inserting breaks at their gaps.

    Breaks after the last segment are kept. Link targets are not part of
    the visible text and never appear.

    Args:
        document: Parsed Document
        line_break: String inserted for each break

    Returns:
        Plain text of the document.
    """
    parts: list[str] = []
    breaks = iter(sorted(b.pos for b in document.breaks))
    next_break = next(breaks, None)
    for gap in range(len(document.text) + 1):
        while next_break is not None and next_break == gap:
            parts.append(line_break)
            next_break = next(breaks, None)
        if gap < len(document.text):
            parts.append(document.text[gap])
    return "".join(parts)
