"""CLI entry point for pages-showcase."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pages-showcase",
        description="List a GitHub user's Pages repositories, newest first",
    )
    parser.add_argument(
        "username",
        nargs="?",
        help="GitHub username (opens the TUI directly on this user)",
    )
    parser.add_argument(
        "--template",
        type=Path,
        help="File holding a {{ key }} template for each repository",
    )
    parser.add_argument(
        "--page",
        type=Path,
        help="HTML page whose [github-repos] containers should be filled",
    )
    parser.add_argument(
        "--out",
        type=Path,
        help="Where to write the filled page (default: stdout)",
    )
    parser.add_argument(
        "--print",
        dest="print_only",
        action="store_true",
        help="Print rendered repositories for USERNAME instead of opening the TUI",
    )
    parser.add_argument(
        "--base-url",
        help="GitHub API root (default: $GITHUB_API_URL or https://api.github.com)",
    )
    parser.add_argument(
        "--exclude",
        nargs="*",
        metavar="NAME",
        help="Repository names to leave out (replaces the default list)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (default: $LOG_LEVEL or INFO)",
    )
    return parser


async def _print_repos(username: str, template: str, config) -> list[str]:  # type: ignore[no-untyped-def]
    from pages_showcase.component import ReposComponent
    from pages_showcase.source import RepositorySource

    source = RepositorySource(config)
    try:
        return await ReposComponent(username, template, source).load()
    finally:
        await source.close()


async def _fill_page(markup: str, template: Optional[str], config) -> str:  # type: ignore[no-untyped-def]
    from pages_showcase.page import mount_page
    from pages_showcase.source import RepositorySource

    source = RepositorySource(config)
    try:
        return await mount_page(markup, source, template=template)
    finally:
        await source.close()


def main(argv: Optional[list[str]] = None) -> int:
    """Fill a page, print a user's repos, or launch the TUI."""
    from dotenv import load_dotenv

    load_dotenv()  # Load .env file (e.g. GITHUB_TOKEN)

    from pages_showcase.component import DEFAULT_CONSOLE_TEMPLATE, DEFAULT_HTML_TEMPLATE
    from pages_showcase.config import ShowcaseConfig
    from pages_showcase.errors import ShowcaseError
    from pages_showcase.logging_setup import setup_logging

    args = build_parser().parse_args(argv)
    config = ShowcaseConfig.from_env(
        base_url=args.base_url,
        exclude=frozenset(args.exclude) if args.exclude is not None else None,
    )
    try:
        template = args.template.read_text(encoding="utf-8") if args.template else None
        page = args.page.read_text(encoding="utf-8") if args.page else None
    except OSError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if page is not None or args.print_only:
        setup_logging(args.log_level)
        try:
            if page is not None:
                filled = asyncio.run(_fill_page(page, template, config))
                if args.out:
                    args.out.write_text(filled, encoding="utf-8")
                    logger.info("Wrote %s", args.out)
                else:
                    sys.stdout.write(filled)
                return 0
            if not args.username:
                print("error: --print needs a USERNAME", file=sys.stderr)
                return 2
            items = asyncio.run(
                _print_repos(args.username, template or DEFAULT_HTML_TEMPLATE, config)
            )
        except ShowcaseError as e:
            print(f"error: {e}", file=sys.stderr)
            return 1
        for item in items:
            print(item)
        return 0

    from textual.logging import TextualHandler

    from pages_showcase.app import PagesShowcaseApp

    setup_logging(args.log_level, handler=TextualHandler())
    app = PagesShowcaseApp(
        config=config,
        template=template or DEFAULT_CONSOLE_TEMPLATE,
        username=args.username,
    )
    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
