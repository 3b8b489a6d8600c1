"""NetSuite REST error document models."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class ErrorDetailEntry:
    """One entry of the ``o:errorDetails`` array."""

    detail: str | None = None
    error_code: str | None = None  # o:errorCode
    error_path: str | None = None  # o:errorPath

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ErrorDetailEntry":
        return cls(
            detail=data.get("detail"),
            error_code=data.get("o:errorCode"),
            error_path=data.get("o:errorPath"),
        )


@dataclass
class NetSuiteErrorDetail:
    """Error body returned by the NetSuite REST API.

    NetSuite follows RFC 7807 and adds ``o:errorCode`` and ``o:errorDetails``.
    See: https://datatracker.ietf.org/doc/html/rfc7807
    """

    type: str | None = None
    title: str | None = None
    status: int | None = None
    detail: str | None = None
    error_code: str | None = None  # o:errorCode
    error_details: list[ErrorDetailEntry] = field(default_factory=list)

    @classmethod
    def from_body(cls, body: Any) -> "NetSuiteErrorDetail | None":
        """Parse an error body, or return None if it is not an error document.

        Args:
            body: Decoded response body (any JSON value)

        Returns:
            NetSuiteErrorDetail or None if the body has none of the known fields
        """
        if not isinstance(body, dict):
            return None

        known_fields = {"type", "title", "status", "detail", "o:errorCode", "o:errorDetails"}
        if not any(name in body for name in known_fields):
            return None

        raw_details = body.get("o:errorDetails") or []
        entries = [ErrorDetailEntry.from_dict(item) for item in raw_details if isinstance(item, dict)]

        return cls(
            type=body.get("type"),
            title=body.get("title"),
            status=body.get("status"),
            detail=body.get("detail"),
            error_code=body.get("o:errorCode"),
            error_details=entries,
        )

    def to_exception_message(self) -> str:
        """Render a multi-line description, useful for logs."""
        lines = []

        if self.title:
            lines.append(self.title)
        if self.detail and self.detail != self.title:
            lines.append(self.detail)
        if self.error_code:
            lines.append(f"Error Code: {self.error_code}")

        for entry in self.error_details:
            text = entry.detail or ""
            if entry.error_path:
                text = f"{text} (path: {entry.error_path})"
            lines.append(f"  - {text}")

        return "\n".join(lines) if lines else "Unknown NetSuite error"
