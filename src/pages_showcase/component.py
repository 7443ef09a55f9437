"""Renders one user's Pages repositories through a markup template."""

import html
import logging

from pages_showcase.models import Repository
from pages_showcase.source import RepositorySource
from pages_showcase.template import render, template_keys

logger = logging.getLogger(__name__)

DEFAULT_HTML_TEMPLATE = (
    '<span class="repo-name">{{ name }}</span> '
    '<span class="repo-description">{{ description }}</span>'
)

# Textual/Rich console markup
DEFAULT_CONSOLE_TEMPLATE = (
    "[b]{{ name }}[/b]  [dim]{{ updated_at }}[/dim]\n"
    "{{ description }}\n"
    "[link={{ pages_url }}]{{ pages_url }}[/link]"
)


class ReposComponent:
    """Binds a username, a template and a data source.

    ``load()`` does not catch data-retrieval errors: a bad username or an
    unreachable API aborts it, and the caller decides what to show.
    """

    def __init__(
        self,
        username: str,
        template: str,
        source: RepositorySource,
    ) -> None:
        self.username = username.strip()
        self.template = template
        self.source = source
        self.repos: list[Repository] = []

    def context(self, repo: Repository) -> dict:
        """Template fields for *repo*: its own fields plus ``pages_url``."""
        ctx = repo.fields()
        ctx["pages_url"] = self.source.config.pages_url_template.format(
            user=self.username, name=repo.name
        )
        return ctx

    def render_item(self, repo: Repository) -> str:
        return render(self.template, self.context(repo))

    def render_link(self, repo: Repository) -> str:
        """Rendered item wrapped in an ``<a class="repo-list-item">`` link."""
        href = html.escape(self.context(repo)["pages_url"], quote=True)
        return f'<a class="repo-list-item" href="{href}">{self.render_item(repo)}</a>'

    async def fetch(self, refresh: bool = False) -> list[Repository]:
        """Fetch (or reuse cached) repos without rendering them."""
        if refresh:
            self.source.invalidate(self.username)
        self.repos = await self.source.get_repositories(self.username)
        self._warn_unknown_keys()
        return self.repos

    async def load(self, refresh: bool = False) -> list[str]:
        """Fetch (or reuse cached) repos and render each one."""
        return [self.render_item(repo) for repo in await self.fetch(refresh)]

    def _warn_unknown_keys(self) -> None:
        if not self.repos:
            return
        known = set(self.context(self.repos[0]))
        for repo in self.repos[1:]:
            known |= set(repo.fields())
        missing = [k for k in template_keys(self.template) if k not in known]
        if missing:
            logger.warning(
                "Template keys %s not present on any repository; they render empty",
                ", ".join(missing),
            )
