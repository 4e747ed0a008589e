import unittest
from casekit import prompts
from casekit.entities import CaseStyle
from casekit.lookups import ExampleData, PromptData

class TestPackagedData(unittest.TestCase):
    def test_prompt_names(self):
        self.assertEqual(PromptData().names, ('basic', 'few_shot', 'chain', 'refined'))

    def test_example_styles(self):
        self.assertEqual(ExampleData().styles, [CaseStyle.CAMEL, CaseStyle.KEBAB, CaseStyle.DOT])

    def test_examples_keep_whitespace_and_empty_cells(self):
        pairs = ExampleData().for_style('camel')
        self.assertIn(('  user_ID 42 ', 'userId42'), pairs)
        self.assertIn(('', ''), pairs)

class TestFormatExamples(unittest.TestCase):
    def test_format_examples(self):
        result = prompts.format_examples('toDotCase', [('Hello World', 'hello.world'), ('', '')])
        self.assertEqual(result, '- toDotCase("Hello World") -> "hello.world"\n- toDotCase("") -> ""')

    def test_quotes_are_escaped(self):
        result = prompts.format_examples('toCamelCase', [('say "hi"', 'sayHi')])
        self.assertEqual(result, '- toCamelCase("say \\"hi\\"") -> "sayHi"')

    def test_non_ascii_kept(self):
        result = prompts.format_examples('toDotCase', [('caf\u00e9', 'caf\u00e9')])
        self.assertEqual(result, '- toDotCase("caf\u00e9") -> "caf\u00e9"')

class TestGetPrompt(unittest.TestCase):
    def test_get_prompt(self):
        prompt = prompts.get_prompt('chain')
        self.assertEqual(prompt.style, CaseStyle.KEBAB)
        self.assertEqual(prompt.function_name, 'toKebabCase')

    def test_unknown_prompt(self):
        with self.assertRaises(KeyError):
            prompts.get_prompt('missing')

    def test_list_prompts(self):
        self.assertIn('refined', prompts.list_prompts())

    def test_list_prompts_returns_copy(self):
        names = prompts.list_prompts()
        names.append('extra')
        self.assertEqual(prompts.list_prompts(), ['basic', 'few_shot', 'chain', 'refined'])

class TestRender(unittest.TestCase):
    def test_basic_prompt(self):
        text = prompts.render_prompt('basic')
        self.assertTrue(text.startswith('Write a JavaScript function named "toCamelCase(input)"'))
        self.assertIn('lower camelCase', text)
        self.assertIn('- toCamelCase("hello world") -> "helloWorld"', text)
        self.assertTrue(text.endswith('\n'))
        self.assertNotIn('$', text)

    def test_language(self):
        text = prompts.render_prompt('chain', language='Python')
        self.assertIn('Write a Python function named "toKebabCase(input)"', text)

    def test_explicit_examples(self):
        text = prompts.render_prompt('few_shot', examples=[('a b', 'aB')])
        self.assertIn('- toCamelCase("a b") -> "aB"', text)
        self.assertNotIn('helloWorld', text)

    def test_every_prompt_renders(self):
        for name in prompts.list_prompts():
            with self.subTest(name=name):
                self.assertNotIn('$', prompts.render_prompt(name))

    def test_unknown_placeholder(self):
        prompt = prompts.Prompt('custom', 'dot', 'toDotCase', 'test', 'Write $function_name in $dialect')
        with self.assertRaises(KeyError):
            prompt.render()

    def test_prompt_style_parsed(self):
        prompt = prompts.Prompt('custom', 'dot.case', 'toDotCase', 'test', '$label')
        self.assertEqual(prompt.render(examples=[]), 'dot.case\n')
