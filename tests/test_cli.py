# tests/test_cli.py
import io
import json
import os
import tempfile
import unittest
from unittest.mock import patch

from rich.console import Console

from logos.cli import cli
from logos.utils.logger_utils import Log


class CLITests(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.dir = self.tmp.name
        self.text = os.path.join(self.dir, "pub.txt")
        with open(self.text, "w", encoding="utf-8") as f:
            f.write("This is the body.\nOf the paragraph\n")
        self.config = os.path.join(self.dir, "logos.json")

    def tearDown(self):
        Log.configure()
        self.tmp.cleanup()

    def run_cli(self, *argv):
        return cli.main(["analyze", self.text, "--config", self.config, *argv])

    def test_json_report(self):
        with patch("builtins.print") as mock_print:
            code = self.run_cli("--json", "--long-threshold", "3")
        self.assertEqual(code, 0)
        out = json.loads(mock_print.call_args[0][0])
        self.assertEqual(out["word_count"], 7)
        self.assertEqual(out["line_count"], 2)
        self.assertEqual(out["words_longer_than"], 3)
        self.assertEqual(out["markov"]["1.the"], {"1.body": 0.5, "1.paragraph": 0.5})

    def test_matrix_out_and_wordlist(self):
        words = os.path.join(self.dir, "words.txt")
        with open(words, "w", encoding="utf-8") as f:
            f.write("the\n")
        out_path = os.path.join(self.dir, "matrix.json")
        with patch("builtins.print") as mock_print:
            code = self.run_cli("--json", "--ngram", "2", "--wordlist", words, "--matrix-out", out_path)
        self.assertEqual(code, 0)
        report = json.loads(mock_print.call_args[0][0])
        self.assertEqual(report["words_in_list"], 2)
        with open(out_path, encoding="utf-8") as f:
            doc = json.load(f)
        self.assertEqual(doc["ngram_size"], 2)
        self.assertIn("2.This.is", doc["rows"])

    def test_table_output_uses_config_file(self):
        with open(self.config, "w", encoding="utf-8") as f:
            json.dump({"ngram_size": 2, "top_transitions": 1}, f)
        with patch.object(cli, "render_report") as mock_render:
            code = self.run_cli()
        self.assertEqual(code, 0)
        report, path, topn = mock_render.call_args[0]
        self.assertEqual(report.ngram_size, 2)
        self.assertEqual(path, self.text)
        self.assertEqual(topn, 1)

    def test_render_report_prints_tables(self):
        with patch.object(cli, "console") as mock_console:
            self.assertEqual(self.run_cli(), 0)
        # metrics table + transitions table
        self.assertEqual(mock_console.print.call_count, 2)

    def test_missing_file_returns_error(self):
        code = cli.main(["analyze", os.path.join(self.dir, "missing.txt"), "--config", self.config])
        self.assertEqual(code, 1)

    def test_bad_ngram_size_returns_error(self):
        self.assertEqual(self.run_cli("--ngram", "0"), 1)

    def test_negative_top_is_a_usage_error(self):
        with self.assertRaises(SystemExit):
            self.run_cli("--top", "-1")

    def test_null_config_value_returns_error(self):
        with open(self.config, "w", encoding="utf-8") as f:
            json.dump({"long_word_threshold": None}, f)
        self.assertEqual(self.run_cli("--json"), 1)

    def test_markup_in_path_is_printed_literally(self):
        odd = os.path.join(self.dir, "notes[/b].txt")
        with open(odd, "w", encoding="utf-8") as f:
            f.write("A B A\n")
        out = io.StringIO()
        with patch.object(cli, "console", Console(file=out, width=300)):
            code = cli.main(["analyze", odd, "--config", self.config])
        self.assertEqual(code, 0)
        self.assertIn("notes[/b].txt", out.getvalue())

    def test_markup_in_error_is_printed_literally(self):
        missing = os.path.join(self.dir, "gone[/red].txt")
        err = io.StringIO()
        with patch.object(cli, "err_console", Console(file=err, width=300)):
            code = cli.main(["analyze", missing, "--config", self.config])
        self.assertEqual(code, 1)
        self.assertIn("gone[/red].txt", err.getvalue())

    def test_usage_error_exits(self):
        with self.assertRaises(SystemExit):
            cli.main([])


if __name__ == "__main__":
    unittest.main()
