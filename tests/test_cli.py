"""Tests for the CLI entry point."""

from unittest.mock import MagicMock, patch

import httpx
import pytest
import respx

from pages_showcase.cli import build_parser, main

REPOS_URL = "https://api.github.com/users/octocat/repos"


@pytest.fixture(autouse=True)
def quiet_env():
    with patch("dotenv.load_dotenv"), patch.dict("os.environ", {}, clear=True):
        with patch("pages_showcase.logging_setup.setup_logging"):
            yield


class TestParser:
    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.username is None
        assert args.exclude is None
        assert args.print_only is False

    def test_exclude_list(self):
        args = build_parser().parse_args(["octocat", "--exclude", "a", "b"])
        assert args.exclude == ["a", "b"]


class TestCli:
    def test_main_launches_tui(self):
        mock_app_instance = MagicMock()
        with patch(
            "pages_showcase.app.PagesShowcaseApp", return_value=mock_app_instance
        ) as mock_cls:
            assert main(["octocat"]) == 0
        mock_app_instance.run.assert_called_once()
        assert mock_cls.call_args.kwargs["username"] == "octocat"

    @respx.mock
    def test_print_mode(self, capsys, repos_payload):
        respx.get(REPOS_URL).mock(return_value=httpx.Response(200, json=repos_payload))
        assert main(["octocat", "--print"]) == 0
        out = capsys.readouterr().out
        assert '<span class="repo-name">x</span>' in out
        assert "Project Y" not in out

    @respx.mock
    def test_print_mode_with_template(self, capsys, tmp_path, repos_payload):
        respx.get(REPOS_URL).mock(return_value=httpx.Response(200, json=repos_payload))
        template = tmp_path / "item.tpl"
        template.write_text("- {{ name }} ({{ updated_at }})")
        assert main(["octocat", "--print", "--template", str(template)]) == 0
        assert capsys.readouterr().out == "- x (2020-01-01)\n"

    @respx.mock
    def test_print_mode_error_exit(self, capsys):
        respx.get(REPOS_URL).mock(return_value=httpx.Response(404))
        assert main(["octocat", "--print"]) == 1
        assert "404" in capsys.readouterr().err

    def test_print_needs_username(self, capsys):
        assert main(["--print"]) == 2

    @respx.mock
    def test_page_mode(self, tmp_path, repos_payload):
        respx.get(REPOS_URL).mock(return_value=httpx.Response(200, json=repos_payload))
        page = tmp_path / "index.html"
        page.write_text(
            '<html><body><div github-repos github-username="octocat"></div>'
            '<script type="text/template" github-repos-template>{{ name }}</script>'
            "</body></html>"
        )
        out = tmp_path / "out.html"
        assert main(["--page", str(page), "--out", str(out)]) == 0
        assert 'href="https://octocat.github.io/x/"' in out.read_text()

    @respx.mock
    def test_exclude_flag_replaces_defaults(self, capsys, tmp_path, repos_payload):
        respx.get(REPOS_URL).mock(return_value=httpx.Response(200, json=repos_payload))
        template = tmp_path / "item.tpl"
        template.write_text("{{ name }}")
        assert main(["octocat", "--print", "--template", str(template), "--exclude", "x"]) == 0
        assert capsys.readouterr().out == "liamnewmarch.github.io\n"

    def test_blank_username_exits_with_error(self, capsys):
        assert main(["   ", "--print"]) == 1
        assert "username" in capsys.readouterr().err

    def test_missing_template_file(self, capsys, tmp_path):
        assert main(["octocat", "--print", "--template", str(tmp_path / "nope.tpl")]) == 1
        assert "nope.tpl" in capsys.readouterr().err

    def test_missing_page_file(self, capsys, tmp_path):
        assert main(["--page", str(tmp_path / "nope.html")]) == 1
        assert "nope.html" in capsys.readouterr().err
