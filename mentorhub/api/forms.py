from typing import Optional


def parse_id(value: Optional[str]) -> Optional[int]:
    """Form ids arrive as strings; anything that is not a positive int is None."""
    try:
        parsed = int(str(value).strip())
    except (TypeError, ValueError):
        return None
    return parsed if parsed > 0 else None
