"""Tests for CLI commands."""

from __future__ import annotations

import logging
from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from sitecontent.cli import _build_loader, _setup_logging, app


runner = CliRunner()


class TestSetupLogging:
    """Tests for _setup_logging helper."""

    def test_setup_logging_verbose(self) -> None:
        """Verbose mode sets DEBUG level."""
        with patch("sitecontent.cli.logging.basicConfig") as mock_config:
            _setup_logging(verbose=True)
            mock_config.assert_called_once()
            assert mock_config.call_args[1]["level"] == logging.DEBUG

    def test_setup_logging_normal(self) -> None:
        """Normal mode sets INFO level."""
        with patch("sitecontent.cli.logging.basicConfig") as mock_config:
            _setup_logging(verbose=False)
            mock_config.assert_called_once()
            assert mock_config.call_args[1]["level"] == logging.INFO


class TestBuildLoader:
    """Tests for _build_loader helper."""

    def test_registers_virtual_files(self, tmp_path: Path) -> None:
        """Each DIR:NAME option becomes a registration."""
        loader = _build_loader(tmp_path, ["pages/*:index.html", "feeds:rss.xml"])

        assert [(r.directory, r.name) for r in loader.registry] == [
            ("pages/*", "index.html"),
            ("feeds", "rss.xml"),
        ]

    def test_no_virtual_files(self, tmp_path: Path) -> None:
        """No options means an empty registry."""
        assert len(_build_loader(tmp_path, None).registry) == 0


@pytest.fixture
def site(tmp_path: Path) -> Path:
    (tmp_path / "post.md").write_text("---\ntitle: Hello\n---\nBody text\n")
    (tmp_path / "app.js").write_text("run();\n")
    return tmp_path


class TestListCommand:
    """Tests for the ls command."""

    def test_ls_lists_files(self, site: Path) -> None:
        """Shows real files with their front-matter keys."""
        result = runner.invoke(app, ["ls", "--root", str(site)])

        assert result.exit_code == 0
        assert "post.md" in result.stdout
        assert "app.js" in result.stdout
        assert "title" in result.stdout

    def test_ls_with_virtual(self, site: Path) -> None:
        """Shows registered virtual files."""
        result = runner.invoke(app, ["ls", "--root", str(site), "--virtual", ".:feed.xml"])

        assert result.exit_code == 0
        assert "feed.xml" in result.stdout
        assert "virtual" in result.stdout

    def test_ls_empty(self, tmp_path: Path) -> None:
        """Shows a warning when nothing matches."""
        result = runner.invoke(app, ["ls", "missing", "--root", str(tmp_path)])

        assert result.exit_code == 0
        assert "No content found" in result.stdout

    def test_ls_glob_directory(self, site: Path) -> None:
        """Rejects globs in the directory part."""
        result = runner.invoke(app, ["ls", "a*/x.md", "--root", str(site)])

        assert result.exit_code == 2

    def test_ls_bad_virtual(self, site: Path) -> None:
        """Rejects malformed --virtual values."""
        result = runner.invoke(app, ["ls", "--root", str(site), "--virtual", "nocolon"])

        assert result.exit_code == 2


class TestShowCommand:
    """Tests for the show command."""

    def test_show_markdown(self, site: Path) -> None:
        """Prints config and body."""
        result = runner.invoke(app, ["show", "post.md", "--root", str(site)])

        assert result.exit_code == 0
        assert "title: Hello" in result.stdout
        assert "Body text" in result.stdout

    def test_show_lazy_file(self, site: Path) -> None:
        """Reads lazy bodies on demand."""
        result = runner.invoke(app, ["show", "app.js", "--root", str(site)])

        assert result.exit_code == 0
        assert "run();" in result.stdout

    def test_show_virtual(self, site: Path) -> None:
        """Describes generated files without reading them."""
        result = runner.invoke(
            app, ["show", "feed.xml", "--root", str(site), "--virtual", ".:feed.xml"]
        )

        assert result.exit_code == 0
        assert "virtual" in result.stdout

    def test_show_not_found(self, site: Path) -> None:
        """Exits with an error when the file is missing."""
        result = runner.invoke(app, ["show", "missing.md", "--root", str(site)])

        assert result.exit_code == 1
        assert "Not found" in result.stdout

    def test_show_glob(self, site: Path) -> None:
        """Rejects glob requests."""
        result = runner.invoke(app, ["show", "*.md", "--root", str(site)])

        assert result.exit_code == 2

    def test_show_ambiguous(self, site: Path) -> None:
        """Rejects paths matched by both a file and a generator."""
        result = runner.invoke(
            app, ["show", "post.md", "--root", str(site), "--virtual", ".:post.md"]
        )

        assert result.exit_code == 2
