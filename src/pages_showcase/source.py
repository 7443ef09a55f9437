"""Repository data source: session cache first, GitHub REST API second."""

import logging
from typing import Iterable, Optional
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from pages_showcase.cache import SessionCache
from pages_showcase.config import DEFAULT_EXCLUDE, ShowcaseConfig
from pages_showcase.errors import CacheMiss, InvalidUser, NetworkError, ParseError
from pages_showcase.models import Repository, RepositoryList

logger = logging.getLogger(__name__)


def filter_and_sort(
    repos: Iterable[Repository],
    exclude: Iterable[str] = DEFAULT_EXCLUDE,
) -> list[Repository]:
    """Keep Pages-enabled, non-excluded repos, most recently updated first.

    The sort is stable, so repos with equal ``updated_at`` keep their
    input order.
    """
    excluded = set(exclude)
    kept = [r for r in repos if r.has_pages and r.name not in excluded]
    return sorted(kept, key=lambda r: r.updated, reverse=True)


class RepositorySource:
    """Returns a user's GitHub Pages repositories, cached per session."""

    def __init__(
        self,
        config: Optional[ShowcaseConfig] = None,
        cache: Optional[SessionCache] = None,
    ) -> None:
        self.config = config or ShowcaseConfig()
        self.cache = cache if cache is not None else SessionCache()
        self._client: Optional[httpx.AsyncClient] = None

    # ── HTTP plumbing ─────────────────────────────────────────────────────

    @property
    def headers(self) -> dict[str, str]:
        h: dict[str, str] = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }
        if self.config.token:
            h["Authorization"] = f"Bearer {self.config.token}"
        return h

    async def _client_instance(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.config.base_url,
                headers=self.headers,
                timeout=self.config.timeout,
            )
        return self._client

    async def close(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    # ── Cache ─────────────────────────────────────────────────────────────

    def read_cached(self, user_id: str) -> list[Repository]:
        """Parse the cached list for *user_id*.

        A missing entry and an unparseable one are the same thing here:
        both raise CacheMiss.
        """
        raw = self.cache.get(user_id)
        if raw is None:
            raise CacheMiss(user_id)
        try:
            return RepositoryList.validate_json(raw)
        except ValidationError as e:
            logger.warning("Ignoring corrupt cache entry for %r: %s", user_id, e)
            raise CacheMiss(user_id) from e

    def invalidate(self, user_id: str) -> None:
        self.cache.delete(user_id)

    # ── Repositories ──────────────────────────────────────────────────────

    async def get_repositories(self, user_id: str) -> list[Repository]:
        """Cached repos for *user_id* if usable, otherwise fetch them.

        Raises NetworkError or ParseError when the fetch fails.
        """
        try:
            repos = self.read_cached(user_id)
        except CacheMiss:
            return await self.fetch_user_repos(user_id)
        logger.debug("Cache hit for %r (%d repos)", user_id, len(repos))
        return repos

    async def fetch_user_repos(self, user_id: str) -> list[Repository]:
        """Fetch, filter and sort *user_id*'s repos, then cache the result."""
        if not user_id or not user_id.strip():
            raise InvalidUser("GitHub username must not be empty")
        path = f"/users/{quote(user_id, safe='')}/repos"
        client = await self._client_instance()
        logger.info("Fetching %s%s", self.config.base_url, path)
        try:
            resp = await client.get(
                path, params={"per_page": str(self.config.per_page)}
            )
        except httpx.TransportError as e:
            raise NetworkError(f"Request to {path} failed: {e}") from e

        if resp.status_code != 200:
            raise NetworkError(
                f"GitHub API returned {resp.status_code} for {path}",
                status_code=resp.status_code,
                body=resp.text,
            )

        try:
            data = RepositoryList.validate_json(resp.content)
        except ValidationError as e:
            raise ParseError(f"Unexpected response body for {path}: {e}") from e

        repos = self.filter_with_pages(data)
        self.cache.set(user_id, RepositoryList.dump_json(repos).decode())
        return repos

    def filter_with_pages(self, repos: Iterable[Repository]) -> list[Repository]:
        return filter_and_sort(repos, self.config.exclude)
