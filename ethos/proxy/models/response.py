"""Response envelope data model."""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ResponseEnvelope(BaseModel):
    """Status, body and headers of a single fetch.

    The header mapping is stored with the names as the transport supplied
    them. Lookups try the exact name first and fall back to a
    case-insensitive match, so ``x-total-count`` and ``X-Total-Count``
    resolve to the same value.
    """

    status_code: int = 200
    body: str = ""
    headers: dict[str, str] = Field(default_factory=dict)
    requested_url: str | None = None

    model_config = ConfigDict(frozen=True)

    def header(self, name: str) -> str | None:
        """Value of a header, or None if absent or the name is blank."""
        if not name or not name.strip():
            return None
        if name in self.headers:
            return self.headers[name]
        wanted = name.lower()
        for key, value in self.headers.items():
            if key.lower() == wanted:
                return value
        return None

    def header_int(self, name: str) -> int | None:
        """Integer value of a header, or None if absent, blank or not an integer."""
        value = self.header(name)
        if value is None or not value.strip():
            return None
        try:
            return int(value.strip())
        except ValueError:
            return None

    @property
    def has_body(self) -> bool:
        return bool(self.body and self.body.strip())

    def content_as_json(self) -> Any:
        """Parse the body as JSON. An empty body parses to None."""
        if not self.has_body:
            return None
        return json.loads(self.body)

    def array_length(self) -> int | None:
        """Number of elements when the body is a JSON array, otherwise None."""
        if not self.has_body:
            return None
        try:
            data = json.loads(self.body)
        except ValueError:
            return None
        if isinstance(data, list):
            return len(data)
        return None

    def sliced(self, start: int = 0, stop: int | None = None) -> ResponseEnvelope:
        """Copy of this envelope whose JSON array body is cut to ``[start:stop]``.

        Bodies that are not JSON arrays are returned unchanged.
        """
        if not self.has_body:
            return self
        try:
            data = json.loads(self.body)
        except ValueError:
            return self
        if not isinstance(data, list):
            return self
        return self.model_copy(update={"body": json.dumps(data[start:stop])})
