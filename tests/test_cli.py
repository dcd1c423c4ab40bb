"""Tests for the mdpage CLI."""

import json
import os
import tempfile
import unittest
from unittest import mock

from typer.testing import CliRunner

from mdpage.cli.main import app
from mdpage.cli.utils import config as cli_config
from mdpage.rendering.options import RenderConfig


class CliTestCase(unittest.TestCase):
    def setUp(self):
        self.runner = CliRunner()
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)
        self.site = os.path.join(self.tmp.name, "site")
        os.makedirs(self.site)
        self.settings = os.path.join(self.tmp.name, "config.json")

        env = mock.patch.dict(os.environ)
        env.start()
        self.addCleanup(env.stop)
        for key in ("MDPAGE_CONTENT_PATH", "MDPAGE_TITLE", "MDPAGE_TIMEOUT"):
            os.environ.pop(key, None)

    def write(self, name, text):
        with open(os.path.join(self.site, name), "w", encoding="utf-8") as f:
            f.write(text)


class RenderCommandTest(CliTestCase):
    def test_render_writes_page(self):
        self.write("README.md", "# Hello\n\nWorld")
        out = os.path.join(self.tmp.name, "index.html")

        result = self.runner.invoke(
            app,
            ["render", "--out", out, "--config", self.settings, self.site],
        )

        self.assertEqual(result.exit_code, 0, result.output)
        with open(out, encoding="utf-8") as f:
            page = f.read()
        self.assertRegex(page, r"<h1[^>]*>Hello</h1>\n<p>World</p>")

    def test_render_missing_document_writes_fallback(self):
        out = os.path.join(self.tmp.name, "index.html")

        result = self.runner.invoke(
            app,
            ["render", "--out", out, "--config", self.settings, self.site],
        )

        self.assertEqual(result.exit_code, 1)
        with open(out, encoding="utf-8") as f:
            page = f.read()
        self.assertIn(RenderConfig().fallback_markup(), page)

    def test_render_uses_path_and_title(self):
        self.write("guide.md", "Guide text")
        out = os.path.join(self.tmp.name, "index.html")

        result = self.runner.invoke(
            app,
            [
                "render",
                "--out",
                out,
                "--path",
                "guide.md",
                "--title",
                "My Guide",
                "--config",
                self.settings,
                self.site,
            ],
        )

        self.assertEqual(result.exit_code, 0, result.output)
        with open(out, encoding="utf-8") as f:
            page = f.read()
        self.assertIn("<title>My Guide</title>", page)
        self.assertIn("<p>Guide text</p>", page)


    def test_render_unwritable_output_reports_error(self):
        self.write("README.md", "# Hello")
        blocker = os.path.join(self.tmp.name, "blocker")
        with open(blocker, "w", encoding="utf-8") as f:
            f.write("not a directory")
        out = os.path.join(blocker, "index.html")

        result = self.runner.invoke(
            app,
            ["render", "--out", out, "--config", self.settings, self.site],
        )

        self.assertEqual(result.exit_code, 1)
        self.assertNotIsInstance(result.exception, OSError)
        self.assertIn("Could not write", result.stdout)


class ShowCommandTest(CliTestCase):
    def test_show_prints_fragment(self):
        self.write("README.md", "Some *text*")
        result = self.runner.invoke(app, ["show", "--config", self.settings, self.site])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("<p>Some <em>text</em></p>", result.stdout)

    def test_show_prints_fallback_on_failure(self):
        result = self.runner.invoke(app, ["show", "--config", self.settings, self.site])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("<h1>Error</h1>", result.stdout)


class ConfigTest(CliTestCase):
    def test_settings_file_applies(self):
        with open(self.settings, "w", encoding="utf-8") as f:
            json.dump({"content_path": "intro.md", "extensions": ["tables"]}, f)

        conf = cli_config.build_config(settings_path=self.settings)

        self.assertEqual(conf.content_path, "intro.md")
        self.assertEqual(conf.extensions, ("tables",))

    def test_cli_options_beat_settings_and_env(self):
        with open(self.settings, "w", encoding="utf-8") as f:
            json.dump({"content_path": "intro.md", "title": "File"}, f)
        os.environ["MDPAGE_TITLE"] = "Env"

        conf = cli_config.build_config(
            content_path="cli.md", settings_path=self.settings
        )

        self.assertEqual(conf.content_path, "cli.md")
        self.assertEqual(conf.title, "File")

    def test_unknown_keys_are_ignored_with_warning(self):
        with open(self.settings, "w", encoding="utf-8") as f:
            json.dump({"colour": "blue"}, f)
        settings = cli_config.load_settings(self.settings)
        self.assertIsNone(settings.content_path)

    def test_non_positive_timeout_is_rejected(self):
        for timeout in (0, -5):
            with self.subTest(timeout=timeout):
                with open(self.settings, "w", encoding="utf-8") as f:
                    json.dump({"timeout": timeout}, f)
                conf = cli_config.build_config(settings_path=self.settings)
                self.assertEqual(conf.timeout, RenderConfig().timeout)

    def test_missing_file_yields_defaults(self):
        conf = cli_config.build_config(settings_path=self.settings)
        self.assertEqual(conf, RenderConfig())


if __name__ == "__main__":
    unittest.main()
