import re

_CRANE_NUMBER = re.compile(r"(?:CRANE\s*|TC\s*)(\d+)")


def normalize_crane_id(crane_id: str | None) -> str:
    """
    Canonical crane id.

    ``"crane 1"``, ``"Crane1"``, ``" tc 1 "`` and ``"TC1"`` all become
    ``"TC1"``. Ids that do not name a numbered crane are upper-cased and
    trimmed only.
    """
    if not crane_id:
        return ""
    normalized = crane_id.strip().upper()
    match = _CRANE_NUMBER.search(normalized)
    if match:
        return f"TC{match.group(1)}"
    return normalized
