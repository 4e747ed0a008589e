import io
import os
import tempfile
import unittest
from contextlib import redirect_stderr
from casekit.__main__ import main

def run(argv, stdin=''):
    out = io.StringIO()
    err = io.StringIO()
    with redirect_stderr(err):
        status = main(argv, out=out, stdin=io.StringIO(stdin))
    return status, out.getvalue(), err.getvalue()

class TestConvertCommand(unittest.TestCase):
    def test_text(self):
        status, out, _ = run(['convert', 'kebab', '-t', 'Hello World'])
        self.assertEqual((status, out), (0, 'hello-world\n'))

    def test_stdin_lines(self):
        status, out, _ = run(['convert', 'camel'], stdin='hello world\n\n123 user id\n')
        self.assertEqual((status, out), (0, 'helloWorld\n123UserId\n'))

    def test_file(self):
        with tempfile.NamedTemporaryFile('w', suffix='.txt', encoding='utf-8', delete=False) as f:
            f.write('Foo_BAR-baz\n')
        try:
            status, out, _ = run(['convert', 'dot', '-f', f.name])
        finally:
            os.unlink(f.name)
        self.assertEqual((status, out), (0, 'foo.bar.baz\n'))

    def test_flags(self):
        status, out, _ = run(['convert', 'kebab', '--split-camel', '--strip-accents', '-t', 'ÉxampleText'])
        self.assertEqual((status, out), (0, 'example-text\n'))

    def test_ascii(self):
        status, out, _ = run(['convert', 'kebab', '--ascii', '-t', 'Café'])
        self.assertEqual(out, 'caf\n')

    def test_unknown_style(self):
        status, out, err = run(['convert', 'snake', '-t', 'x'])
        self.assertEqual(status, 1)
        self.assertIn('Unknown case style', err)

    def test_missing_file(self):
        status, _, err = run(['convert', 'dot', '-f', os.path.join(tempfile.gettempdir(), 'casekit-missing.txt')])
        self.assertEqual(status, 1)

class TestPromptCommands(unittest.TestCase):
    def test_prompt(self):
        status, out, _ = run(['prompt', 'basic', '--language', 'Python'])
        self.assertEqual(status, 0)
        self.assertTrue(out.startswith('Write a Python function'))

    def test_unknown_prompt(self):
        status, _, err = run(['prompt', 'missing'])
        self.assertEqual(status, 1)
        self.assertTrue(err.startswith("casekit: Unknown prompt 'missing'"))

    def test_prompts(self):
        status, out, _ = run(['prompts'])
        self.assertEqual(status, 0)
        self.assertEqual(len(out.splitlines()), 4)
        self.assertTrue(out.startswith('basic '))
