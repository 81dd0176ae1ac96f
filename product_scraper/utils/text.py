"""Text helpers shared by the extractors and the orchestrator."""
import re
from typing import Optional

_WHITESPACE_RE = re.compile(r"\s+")


def normalize_whitespace(value: Optional[str]) -> str:
    """Collapse every whitespace run (newlines included) to one space and trim."""
    if not value:
        return ""
    return _WHITESPACE_RE.sub(" ", value).strip()
