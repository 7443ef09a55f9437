"""Data models for pages-showcase."""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, TypeAdapter, field_validator


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp; naive values are taken as UTC."""
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class Repository(BaseModel):
    """A repository as returned by ``GET /users/{user}/repos``.

    Only ``name``, ``has_pages`` and ``updated_at`` drive filtering and
    ordering. Every other field the API sends is kept as-is so templates
    can show it.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    name: str
    has_pages: bool = False
    updated_at: str

    @field_validator("updated_at")
    @classmethod
    def _check_timestamp(cls, value: str) -> str:
        parse_timestamp(value)
        return value

    @property
    def updated(self) -> datetime:
        return parse_timestamp(self.updated_at)

    def fields(self) -> dict:
        """All fields, declared and extra, as a plain dict."""
        return self.model_dump()


RepositoryList = TypeAdapter(list[Repository])
