"""Static configuration for the repository data source."""

import os
from typing import Optional

from pydantic import BaseModel, Field, field_validator

DEFAULT_BASE_URL = "https://api.github.com"

DEFAULT_EXCLUDE = frozenset({
    "liamnewmarch.github.io",
    "janineandliam.co.uk",
})


class ShowcaseConfig(BaseModel):
    """Where to fetch from and which repositories to leave out."""

    base_url: str = DEFAULT_BASE_URL
    exclude: frozenset[str] = Field(default=DEFAULT_EXCLUDE)
    token: Optional[str] = None
    per_page: int = Field(default=100, ge=1, le=100)
    timeout: float = 30.0
    pages_url_template: str = "https://{user}.github.io/{name}/"

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @classmethod
    def from_env(cls, **overrides: object) -> "ShowcaseConfig":
        """Build a config from environment variables.

        ``GITHUB_API_URL`` sets the base URL, ``SHOWCASE_EXCLUDE`` a
        comma-separated exclusion list and ``GITHUB_TOKEN`` / ``GH_TOKEN``
        the API token. Keyword overrides that are not ``None`` win.
        """
        values: dict[str, object] = {}
        base_url = os.environ.get("GITHUB_API_URL")
        if base_url:
            values["base_url"] = base_url
        exclude = os.environ.get("SHOWCASE_EXCLUDE")
        if exclude is not None:
            values["exclude"] = frozenset(
                name.strip() for name in exclude.split(",") if name.strip()
            )
        token = os.environ.get("GITHUB_TOKEN") or os.environ.get("GH_TOKEN")
        if token:
            values["token"] = token
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
