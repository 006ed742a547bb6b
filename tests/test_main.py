"""Functional tests for the command-line entry point."""

import io
import json
import os
import shutil
import sys
import tempfile
import unittest
from unittest.mock import patch

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

import main
from config import LoaderConfig
from models import Crossword


FIXTURE = os.path.join(os.path.dirname(__file__), 'fixtures', 'wsj_sample.json')


@patch('main.setup_logging')
class TestMain(unittest.TestCase):
    """Tests for main()."""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def test_summary(self, _setup_logging):
        with patch('sys.stdout', new_callable=io.StringIO) as out:
            code = main.main([FIXTURE])

        self.assertEqual(code, 0)
        text = out.getvalue()
        self.assertIn("Title:     Birds & Boats", text)
        self.assertIn("Size:      5x3", text)
        self.assertIn("ACROSS", text)
        self.assertIn("  1. Wading bird (5)", text)
        self.assertIn("  2. Bitter vetch; see 1-Across (3)", text)

    def test_yaml_export(self, _setup_logging):
        code = main.main(["--format", "yaml", "--output", self.temp_dir, FIXTURE])

        self.assertEqual(code, 0)
        self.assertTrue(
            os.path.exists(os.path.join(self.temp_dir, "wsj_sample.yaml"))
        )

    def test_bad_puzzle_returns_error(self, _setup_logging):
        bad = os.path.join(self.temp_dir, "bad.json")
        with open(bad, 'w') as f:
            json.dump({"data": {}}, f)

        with patch('sys.stdout', new_callable=io.StringIO) as out:
            code = main.main([bad, FIXTURE])

        self.assertEqual(code, 1)
        self.assertIn("Birds & Boats", out.getvalue())

    def test_missing_file_returns_error(self, _setup_logging):
        code = main.main([os.path.join(self.temp_dir, "nope.json")])

        self.assertEqual(code, 1)

    def test_invalid_config_returns_error(self, setup_logging):
        with patch('sys.stderr', new_callable=io.StringIO) as err:
            code = main.main(["--format", "yaml", FIXTURE])

        self.assertEqual(code, 1)
        self.assertIn("Configuration error", err.getvalue())
        setup_logging.assert_not_called()


class TestLoadPuzzle(unittest.TestCase):
    """Tests for load_puzzle()."""

    def test_load_fixture(self):
        crossword = main.load_puzzle(FIXTURE, LoaderConfig())

        self.assertIsInstance(crossword, Crossword)
        self.assertEqual(len(crossword.words), 4)


if __name__ == '__main__':
    unittest.main()
