from __future__ import annotations

# ASCII whitespace only; other Unicode spaces are kept
WHITESPACE = " \t\n\r\v\f"


def trim(text: str) -> str:
    """Remove leading and trailing whitespace; all-whitespace input gives ''."""
    return text.strip(WHITESPACE)
