"""Fill ``[github-repos]`` containers of an HTML document with repo links.

A page declares one or more containers and a single template element::

    <div github-repos github-username="octocat"></div>
    <script type="text/template" github-repos-template>
      <h3>{{ name }}</h3><p>{{ description }}</p>
    </script>

Every container gets one ``<a class="repo-list-item">`` per repository.
"""

import logging
from typing import Optional

from lxml import html as lxml_html

from pages_showcase.component import ReposComponent
from pages_showcase.errors import PageError
from pages_showcase.source import RepositorySource

logger = logging.getLogger(__name__)

CONTAINER_ATTR = "github-repos"
TEMPLATE_ATTR = "github-repos-template"
USERNAME_ATTR = "github-username"


def inner_html(element) -> str:  # type: ignore[no-untyped-def]
    """Markup between an element's start and end tags."""
    parts = [element.text or ""]
    for child in element:
        parts.append(lxml_html.tostring(child, encoding="unicode"))
    return "".join(parts)


def find_template(doc) -> str:  # type: ignore[no-untyped-def]
    nodes = doc.xpath(f"//*[@{TEMPLATE_ATTR}]")
    if not nodes:
        raise PageError(f"No element with a {TEMPLATE_ATTR} attribute")
    return inner_html(nodes[0])


def _append_markup(container, markup: str) -> None:  # type: ignore[no-untyped-def]
    for fragment in lxml_html.fragments_fromstring(markup):
        if not isinstance(fragment, str):
            container.append(fragment)
        elif len(container):
            container[-1].tail = (container[-1].tail or "") + fragment
        else:
            container.text = (container.text or "") + fragment


async def mount_page(
    markup: str,
    source: RepositorySource,
    template: Optional[str] = None,
) -> str:
    """Render every container in *markup* and return the updated document.

    *template* overrides the page's own template element. Retrieval errors
    propagate; a page is either fully rendered or not at all.
    """
    doc = lxml_html.document_fromstring(markup)
    containers = doc.xpath(f"//*[@{CONTAINER_ATTR}]")
    if not containers:
        logger.warning("No [%s] containers found", CONTAINER_ATTR)
        return markup
    if template is None:
        template = find_template(doc)

    for container in containers:
        username = (container.get(USERNAME_ATTR) or "").strip()
        if not username:
            raise PageError(f"[{CONTAINER_ATTR}] element without {USERNAME_ATTR}")
        component = ReposComponent(username, template, source)
        repos = await component.fetch()
        for repo in repos:
            _append_markup(container, component.render_link(repo))
        logger.info("Rendered %d repos for %s", len(repos), username)

    doctype = doc.getroottree().docinfo.doctype
    return lxml_html.tostring(doc, encoding="unicode", doctype=doctype or None)
