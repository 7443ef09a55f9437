"""Pages Showcase: list a GitHub user's Pages sites through a tiny template.

Fetches a user's repositories, keeps the ones publishing GitHub Pages,
caches them for the session and renders each one with ``{{ key }}``
placeholders.
"""

__version__ = "0.1.0"
