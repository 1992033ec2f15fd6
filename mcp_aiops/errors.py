from __future__ import annotations

from typing import Any


class AIOpsError(Exception):
    """Base error for the check pipeline; carries its HTTP mapping."""

    http_status: int = 500
    default_message: str = "Internal server error."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.message}


class ValidationError(AIOpsError):
    """The assembled snapshot failed schema checks."""

    http_status = 400
    default_message = "Invalid metric data."

    def __init__(
        self,
        fields: list[dict[str, Any]],
        message: str | None = None,
    ) -> None:
        super().__init__(message)
        self.fields = fields

    @classmethod
    def from_pydantic(cls, exc: Any) -> "ValidationError":
        fields = [
            {
                "field": str(err["loc"][0]) if err["loc"] else "",
                "loc": ".".join(str(p) for p in err["loc"]),
                "message": err["msg"],
                "type": err["type"],
            }
            for err in exc.errors()
        ]
        return cls(fields)

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.message, "details": self.fields}


class UpstreamServiceError(AIOpsError):
    """The metrics backend or the inference endpoint failed."""

    http_status = 502
    default_message = "Error communicating with an external service."

    def __init__(self, service: str, url: str, message: str | None = None) -> None:
        super().__init__(message)
        self.service = service
        self.url = url

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.message, "service": self.url}


class UnexpectedError(AIOpsError):
    """Any other failure; details stay in the server log."""

    http_status = 500
