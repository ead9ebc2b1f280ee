"""RFC 7807 Problem Details models."""

import json
from dataclasses import dataclass
from typing import Any

from openapi_client_runtime.negotiation import is_json_mime, media_type
from openapi_client_runtime.transport.base import ApiResponse

PROBLEM_JSON = "application/problem+json"

STANDARD_FIELDS = frozenset(["type", "title", "status", "detail", "instance"])


@dataclass
class ProblemDetail:
    """RFC 7807 Problem Details object.

    See: https://datatracker.ietf.org/doc/html/rfc7807
    """

    type: str | None = None  # URI reference identifying the problem type
    title: str | None = None  # Short, human-readable summary
    status: int | None = None  # HTTP status code
    detail: str | None = None  # Human-readable explanation
    instance: str | None = None  # URI reference identifying specific occurrence

    # Extension members (additional fields from API)
    extensions: dict[str, Any] | None = None

    @classmethod
    def from_response(cls, response: ApiResponse) -> "ProblemDetail | None":
        """Parse problem details from an error response.

        ``application/problem+json`` bodies are always parsed. Plain JSON
        bodies are accepted only if they carry at least one standard member.
        Anything else yields None.
        """
        content_type = response.content_type or ""
        is_problem = media_type(content_type) == PROBLEM_JSON
        if not is_problem and not is_json_mime(content_type):
            return None

        try:
            data = json.loads(response.body)
        except (ValueError, TypeError):
            return None
        if not isinstance(data, dict):
            return None
        if not is_problem and not STANDARD_FIELDS.intersection(data):
            return None

        extensions = {k: v for k, v in data.items() if k not in STANDARD_FIELDS}
        return cls(
            type=data.get("type"),
            title=data.get("title"),
            status=data.get("status"),
            detail=data.get("detail"),
            instance=data.get("instance"),
            extensions=extensions or None,
        )

    def to_exception_message(self) -> str:
        """Convert problem details to exception message."""
        lines = []

        if self.title:
            lines.append(self.title)
        elif self.detail:
            lines.append(self.detail)

        if self.title and self.detail and self.title != self.detail:
            lines.append(self.detail)

        if self.type:
            lines.append(f"Problem Type: {self.type}")

        if self.instance:
            lines.append(f"Instance: {self.instance}")

        if self.extensions:
            lines.append("Extension fields:")
            for key, value in self.extensions.items():
                lines.append(f"  - {key}: {value}")

        return "\n".join(lines) if lines else "Unknown API error"
