from typing import Any, Dict, List, Optional

from utils.errors import ValidationError

POST_FIELDS = ("title", "author", "content")
COMMENT_FIELDS = ("author", "content")


def _require(payload: Optional[Dict[str, Any]], fields: tuple) -> None:
    payload = payload or {}
    # empty strings count as missing
    if not all(payload.get(field) for field in fields):
        raise ValidationError(f"Missing required fields: {', '.join(fields)}")


def validate_post(payload: Optional[Dict[str, Any]]) -> None:
    """Check that a post payload carries a title, author and content"""
    _require(payload, POST_FIELDS)


def validate_comment(payload: Optional[Dict[str, Any]]) -> None:
    """Check that a comment payload carries an author and content"""
    _require(payload, COMMENT_FIELDS)


def coerce_tags(value: Any) -> List[str]:
    """
    Convert incoming tags into a list of strings.
    Anything that is not a list/tuple of strings becomes an empty list instead of being rejected.
    """
    if isinstance(value, (list, tuple)) and all(isinstance(tag, str) for tag in value):
        return list(value)
    return []
