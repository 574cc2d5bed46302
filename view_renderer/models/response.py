"""Immutable HTTP response value used by the renderer."""

from fastapi import Response
from pydantic import BaseModel, ConfigDict, Field

HTML_CONTENT_TYPE = "text/html"


class ResponseShell(BaseModel):
    """HTTP response state.

    Every ``with_*`` method returns a new instance and leaves the original
    untouched, so a shell can be shared as a starting point between requests.
    """

    model_config = ConfigDict(frozen=True)

    status_code: int = Field(default=200, ge=100, le=599)
    headers: dict[str, str] = Field(default_factory=dict)
    body: str = ""

    def with_header(self, name: str, value: str) -> "ResponseShell":
        """Set a header, replacing any existing header of the same name (case-insensitive)."""
        headers = {k: v for k, v in self.headers.items() if k.lower() != name.lower()}
        headers[name] = value
        return self.model_copy(update={"headers": headers})

    def with_status(self, status_code: int) -> "ResponseShell":
        return self.model_copy(update={"status_code": status_code})

    def with_body(self, body: str) -> "ResponseShell":
        return self.model_copy(update={"body": body})

    def get_header(self, name: str) -> str | None:
        """Look up a header value by case-insensitive name."""
        for key, value in self.headers.items():
            if key.lower() == name.lower():
                return value
        return None

    def to_response(self) -> Response:
        """Convert to a FastAPI response for returning from a route."""
        return Response(
            content=self.body,
            status_code=self.status_code,
            headers=self.headers,
        )
