"""Accept / Content-Type selection with a JSON-preference policy."""

from collections.abc import Sequence

DEFAULT_CONTENT_TYPE = "application/json"

JSON_MEDIA_TYPES: frozenset[str] = frozenset(["application/json", "application/vnd.api+json"])


def media_type(mime: str) -> str:
    """Return the lower-cased media type of ``mime`` with parameters removed."""
    return mime.split(";", 1)[0].strip().lower()


def is_json_mime(mime: str | None) -> bool:
    """Check whether ``mime`` names a JSON media type.

    Parameters such as ``; charset=UTF8`` are ignored and the comparison is
    case-insensitive, but the media type must match exactly, so
    ``application/jsonp`` is not JSON.
    """
    if not mime:
        return False
    return media_type(mime) in JSON_MEDIA_TYPES


def _first_json(candidates: Sequence[str]) -> str | None:
    for candidate in candidates:
        if media_type(candidate) == "application/json":
            return candidate
    return None


def select_header_accept(candidates: Sequence[str] | None) -> str | None:
    """Pick the ``Accept`` header value for a request.

    Returns the JSON candidate exactly as given if there is one, otherwise all
    candidates joined with ``,``. ``None`` means no Accept header is sent.
    """
    if not candidates:
        return None
    return _first_json(candidates) or ",".join(candidates)


def select_header_content_type(candidates: Sequence[str] | None) -> str:
    """Pick the ``Content-Type`` header value for a request body.

    Defaults to ``application/json``; otherwise prefers the JSON candidate and
    falls back to the first one.
    """
    if not candidates:
        return DEFAULT_CONTENT_TYPE
    return _first_json(candidates) or candidates[0]
