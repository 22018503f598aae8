"""Tests for in-place marker processing of HTML documents."""

import unittest
import sys
import os
from datetime import datetime
from unittest.mock import patch

from bs4 import BeautifulSoup
from bs4.element import Comment

# Add the src directory to path to allow imports
src_path = os.path.abspath(os.path.join(os.path.dirname(__file__), '../src'))
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from docufresh import TemplateProcessor
from docufresh.dom import auto_update, iter_text_nodes

HTML = (
    "<html><body>"
    "<p>&copy; {{current_year}} {{company}}</p>"
    "<!-- {{current_year}} -->"
    "<div id='footer'><span>{{upper:a}}</span>{{unknown}} plain</div>"
    "</body></html>"
)


class TestAutoUpdate(unittest.TestCase):
    """Tests for auto_update over BeautifulSoup documents."""

    def setUp(self):
        patcher = patch('docufresh.markers.dates.now', return_value=datetime(2026, 3, 15, 9, 0, 0))
        patcher.start()
        self.addCleanup(patcher.stop)
        self.processor = TemplateProcessor()
        self.soup = BeautifulSoup(HTML, 'html.parser')

    def test_updates_text_nodes_under_body(self):
        changed = self.processor.auto_update(self.soup, custom_data={"company": "Acme"})

        self.assertEqual(changed, 2)
        self.assertEqual(self.soup.p.get_text(), "© 2026 Acme")
        self.assertEqual(self.soup.span.get_text(), "A")
        self.assertIn("{{unknown}} plain", self.soup.find(id="footer").get_text())

    def test_comments_are_left_alone(self):
        self.processor.auto_update(self.soup)
        comment = self.soup.find(string=lambda s: isinstance(s, Comment))
        self.assertEqual(str(comment), " {{current_year}} ")

    def test_selector_limits_scope(self):
        changed = auto_update(self.processor, self.soup, "#footer")
        self.assertEqual(changed, 1)
        self.assertIn("{{current_year}}", self.soup.p.get_text())

    def test_selector_not_found(self):
        with self.assertLogs('docufresh.dom', level='WARNING') as logs:
            changed = auto_update(self.processor, self.soup, "#missing")
        self.assertEqual(changed, 0)
        self.assertIn('"#missing" not found', logs.output[0])

    def test_no_document(self):
        with self.assertLogs('docufresh.dom', level='WARNING'):
            self.assertEqual(auto_update(self.processor, None), 0)

    def test_unchanged_nodes_are_not_replaced(self):
        soup = BeautifulSoup("<body><p>{{nothing_here}}</p></body>", 'html.parser')
        node = soup.p.string
        self.assertEqual(auto_update(self.processor, soup), 0)
        self.assertIs(soup.p.string, node)

    def test_text_nodes_visited_in_document_order(self):
        soup = BeautifulSoup("<body><p>{{a}}<b>{{b}}</b> no marker</p>{{c}}</body>", 'html.parser')
        self.assertEqual([str(n) for n in iter_text_nodes(soup.body)], ["{{a}}", "{{b}}", "{{c}}"])


if __name__ == '__main__':
    unittest.main()
