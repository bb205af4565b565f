"""
CLI flow tests: text/json output, block mode, configuration file and failures.
"""
import io
import json
import os
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest.mock import patch

import yaml

from webvtt_reader import cli
from webvtt_reader.core import Cue, ParseResult


TWO_CUES = (
    "WEBVTT - demo\r\n"
    "\r\n"
    "1\r\n"
    "00:00:01.000 --> 00:00:02.500\r\n"
    "Hello\r\n"
    "\r\n"
    "00:01:00.000 --> 01:00:00.000\r\n"
    "World\r\n"
)


@patch('webvtt_reader.cli.find_default_config', return_value=None)
class TestCliFlow(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = self._tmp.name

    def tearDown(self):
        self._tmp.cleanup()

    def _write(self, name, content):
        path = os.path.join(self.tmp, name)
        with open(path, 'w', encoding='utf-8', newline='') as f:
            f.write(content)
        return path

    def _run(self, argv):
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            code = cli.main(argv)
        return code, out.getvalue(), err.getvalue()

    def test_text_output_single_block(self, _):
        path = self._write('a.vtt', TWO_CUES)
        code, out, err = self._run([path])
        self.assertEqual(code, 0, err)
        self.assertTrue(out.startswith("00:00:01.000 --> 00:00:02.500\n1Hello"))
        # Second timing line is part of the first cue's text
        self.assertIn("00:01:00.000 --> 01:00:00.000World", out)

    def test_text_output_all_blocks(self, _):
        path = self._write('a.vtt', TWO_CUES)
        code, out, _err = self._run([path, '--all-blocks'])
        self.assertEqual(code, 0)
        self.assertEqual(out, (
            "00:00:01.000 --> 00:00:02.500\n1Hello\n"
            "\n"
            "00:01:00.000 --> 01:00:00.000\nWorld\n"
        ))

    def test_json_output(self, _):
        path = self._write('a.vtt', TWO_CUES)
        code, out, _err = self._run([path, '--all-blocks', '--format', 'json', '--indent', '0'])
        self.assertEqual(code, 0)
        data = json.loads(out)
        self.assertEqual(data, {'cues': [
            {'start': 1.0, 'end': 2.5, 'text': '1Hello'},
            {'start': 60.0, 'end': 3600.0, 'text': 'World'},
        ]})

    def test_empty_document_prints_nothing(self, _):
        path = self._write('empty.vtt', "WEBVTT\n\n")
        code, out, _err = self._run([path])
        self.assertEqual(code, 0)
        self.assertEqual(out, "")

    def test_config_file_supplies_input_and_format(self, _):
        path = self._write('a.vtt', TWO_CUES)
        cfg = self._write('webvtt.yml', yaml.safe_dump({
            'input': path,
            'all_blocks': True,
            'output': {'format': 'json'},
        }))
        code, out, _err = self._run(['--config', cfg])
        self.assertEqual(code, 0)
        self.assertEqual(len(json.loads(out)['cues']), 2)

        # CLI flags override the file
        code, out, _err = self._run(['--config', cfg, '--single-block', '--format', 'text'])
        self.assertEqual(code, 0)
        self.assertTrue(out.startswith("00:00:01.000 --> 00:00:02.500"))

    def test_parse_error_exit_code(self, _):
        path = self._write('bad.vtt', "WEBVTT\n\n00:00:01.000 --> 00:00:02.000\nno newline")
        code, out, err = self._run([path])
        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertIn("UnexpectedEof", err)
        self.assertIn("line 4", err)

    def test_missing_file(self, _):
        code, _out, err = self._run([os.path.join(self.tmp, 'nope.vtt')])
        self.assertEqual(code, 2)
        self.assertIn("Cannot read", err)

    def test_no_input(self, _):
        code, _out, err = self._run([])
        self.assertEqual(code, 2)
        self.assertIn("No input file", err)

    def test_invalid_config_file(self, _):
        cfg = self._write('broken.yml', "invalid: yaml: content: [")
        code, _out, err = self._run(['--config', cfg, 'x.vtt'])
        self.assertEqual(code, 2)
        self.assertIn("Configuration error", err)

    def test_unsupported_format_in_config(self, _):
        path = self._write('a.vtt', TWO_CUES)
        cfg = self._write('webvtt.yml', yaml.safe_dump({'output': {'format': 'srt'}}))
        code, _out, err = self._run(['--config', cfg, path])
        self.assertEqual(code, 2)
        self.assertIn("Unsupported output format", err)

    def test_null_encoding_in_config_reads_utf8(self, _):
        path = self._write('a.vtt', "WEBVTT\n\n00:00:01.000 --> 00:00:02.000\nCafé ñ\n")
        cfg = self._write('webvtt.yml', "encoding: null\n")
        with patch('webvtt_reader.cli.source_svc.read_document',
                   wraps=cli.source_svc.read_document) as read_document:
            code, out, err = self._run(['--config', cfg, path])
        self.assertEqual(code, 0, err)
        read_document.assert_called_once_with(path, encoding='utf-8')
        self.assertIn("Café ñ", out)


class TestCliHelpers(unittest.TestCase):
    """Pure helpers, no I/O"""

    def test_format_cue_with_unset_timings(self):
        self.assertEqual(cli.format_cue(Cue(start=None, end=None, text="x")), "-- --> --\nx")

    def test_render_result_text(self):
        result = ParseResult([Cue(1.0, 2.0, "a"), Cue(3.0, 4.0, "b")])
        self.assertEqual(cli.render_result(result),
                         "00:00:01.000 --> 00:00:02.000\na\n\n00:00:03.000 --> 00:00:04.000\nb")

    def test_render_result_rejects_unknown_format(self):
        with self.assertRaises(ValueError):
            cli.render_result(ParseResult(), 'srt')

    def test_find_default_config(self):
        with tempfile.TemporaryDirectory() as tmp:
            self.assertIsNone(cli.find_default_config(tmp))
            path = os.path.join(tmp, 'webvtt.yaml')
            open(path, 'w').close()
            self.assertEqual(cli.find_default_config(tmp), path)


if __name__ == "__main__":
    unittest.main()
