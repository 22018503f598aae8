"""Tests for the docufresh command-line tools."""

import json
import unittest
import sys
import os
import tempfile
import types
from datetime import datetime
from unittest.mock import patch

from click.testing import CliRunner

# Add the src directory to path to allow imports
src_path = os.path.abspath(os.path.join(os.path.dirname(__file__), '../src'))
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from docufresh.cli import html_main, markers_main, render_main
from docufresh.cli.markers import describe


def _plugin_module() -> types.ModuleType:
    module = types.ModuleType('docufresh_test_plugin')

    def register(registry):
        registry.register('shout', lambda params: params[0].upper() + '!')

    module.register = register
    return module


def _documented(params):
    """Documented marker.

    More detail.
    """
    return ""


class CLITestCase(unittest.TestCase):
    """Shared fixtures: frozen clock, temp dir and a fake plugin module."""

    def setUp(self):
        patcher = patch('docufresh.markers.dates.now', return_value=datetime(2026, 3, 15, 9, 0, 0))
        patcher.start()
        self.addCleanup(patcher.stop)

        modules = patch.dict(sys.modules, {'docufresh_test_plugin': _plugin_module()})
        modules.start()
        self.addCleanup(modules.stop)

        self.tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmpdir.cleanup)
        self.runner = CliRunner()

    def write(self, name: str, content: str) -> str:
        path = os.path.join(self.tmpdir.name, name)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(content)
        return path

    def read(self, path: str) -> str:
        with open(path, 'r', encoding='utf-8') as f:
            return f.read()


class TestRenderCLI(CLITestCase):
    """Tests for the `docufresh` command."""

    def test_render_stdin(self):
        result = self.runner.invoke(render_main, ['-d', 'name=Bob'], input="Hi {{name}}, {{current_year}}")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(result.output, "Hi Bob, 2026")

    def test_render_files_to_output(self):
        first = self.write("a.txt", "{{add:1,2}}\n")
        second = self.write("b.txt", "{{upper:b}}\n")
        output = os.path.join(self.tmpdir.name, "out.txt")

        result = self.runner.invoke(render_main, [first, second, '-o', output])

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(self.read(output), "3\nB\n")

    def test_data_file_and_pairs(self):
        data_file = self.write("data.json", json.dumps({"company": "Acme", "open": True, "staff": 12}))
        result = self.runner.invoke(
            render_main,
            ['--data-file', data_file, '-d', 'company=Initech'],
            input="{{company}} {{open}} {{staff}}",
        )
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(result.output, "Initech true 12")

    def test_data_file_rejects_nested_values(self):
        data_file = self.write("data.json", json.dumps({"nested": {"a": 1}}))
        result = self.runner.invoke(render_main, ['--data-file', data_file], input="x")
        self.assertEqual(result.exit_code, 2)

    def test_bad_pair_is_usage_error(self):
        result = self.runner.invoke(render_main, ['-d', 'novalue'], input="x")
        self.assertEqual(result.exit_code, 2)

    def test_plugin_registers_markers(self):
        result = self.runner.invoke(render_main, ['-p', 'docufresh_test_plugin'], input="{{shout:hey}}")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(result.output, "HEY!")

    def test_missing_plugin(self):
        result = self.runner.invoke(render_main, ['-p', 'no_such_module_anywhere'], input="x")
        self.assertEqual(result.exit_code, 2)

    def test_check_fails_on_unresolved(self):
        result = self.runner.invoke(render_main, ['--check'], input="{{nope}} {{current_year}}")
        self.assertEqual(result.exit_code, 1)
        self.assertIn("{{nope}}", result.output)

    def test_check_passes_when_resolved(self):
        result = self.runner.invoke(render_main, ['--check'], input="{{current_year}}")
        self.assertEqual(result.exit_code, 0, result.output)

    def test_missing_file_aborts(self):
        result = self.runner.invoke(render_main, [os.path.join(self.tmpdir.name, "missing.txt")])
        self.assertEqual(result.exit_code, 1)


class TestHtmlCLI(CLITestCase):
    """Tests for the `docufresh-html` command."""

    def test_updates_html_file(self):
        source = self.write("page.html", "<html><body><footer>&copy; {{current_year}} {{company}}</footer></body></html>")
        output = os.path.join(self.tmpdir.name, "out.html")

        result = self.runner.invoke(html_main, [source, '-d', 'company=Acme', '-o', output])

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("© 2026 Acme", self.read(output))

    def test_selector(self):
        source = self.write("page.html", "<body><p>{{current_year}}</p><div id='x'>{{current_year}}</div></body>")
        output = os.path.join(self.tmpdir.name, "out.html")

        result = self.runner.invoke(html_main, [source, '--selector', '#x', '-o', output])

        self.assertEqual(result.exit_code, 0, result.output)
        html = self.read(output)
        self.assertIn("<p>{{current_year}}</p>", html)
        self.assertIn('<div id="x">2026</div>', html)


class TestMarkersCLI(CLITestCase):
    """Tests for the `docufresh-markers` command."""

    def test_lists_builtins_and_plugins(self):
        result = self.runner.invoke(markers_main, ['-p', 'docufresh_test_plugin'])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("current_year", result.output)
        self.assertIn("format_number", result.output)
        self.assertIn("shout", result.output)

    def test_describe_ignores_non_callables(self):
        self.assertEqual(describe("not callable"), "")
        self.assertEqual(describe(lambda params: ""), "")
        self.assertEqual(describe(_documented), "Documented marker.")


if __name__ == '__main__':
    unittest.main()
