"""Prompt text describing the case converters to a language model.

Prompts are stored as `string.Template` text in the package data file
`casekit/data/prompts.yaml`. Each prompt targets one case style; unless
examples are passed explicitly, rendering fills in the rows of
`casekit/data/examples.csv` for that style.

Available prompts:
    * basic: requirements and examples for a camelCase converter
    * few_shot: a camelCase converter described only through examples
    * chain: step-by-step instructions for a kebab-case converter
    * refined: documented camelCase, kebab-case and dot.case converters
"""

__docformat__ = 'google'

__all__ = [
    # Classes
    'Prompt',
    # Functions
    'format_examples',
    'list_prompts',
    'get_prompt',
    'render_prompt'
]

import json
from dataclasses import dataclass
from functools import cache
from string import Template
from typing import Iterable, List, Optional, Tuple
from casekit.entities import CaseStyle
from casekit.lookups import ExampleData, PromptData

@cache
def _prompt_data() -> PromptData:
    return PromptData()

@cache
def _example_data() -> ExampleData:
    return ExampleData()

def _literal(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)

def format_examples(function_name: str, pairs: Iterable[Tuple[str, str]]) -> str:
    """
    Format input/output pairs as a bulleted list of calls.

    Args:
        function_name: Name shown in each call
        pairs: (input, expected output) tuples

    Returns:
        One line per pair

    Example:
        >>> print(format_examples('toDotCase', [('Hello World', 'hello.world'), ('', '')]))
        - toDotCase("Hello World") -> "hello.world"
        - toDotCase("") -> ""
        >>> print(format_examples('f', [('say "hi"', 'sayHi')]))
        - f("say \\"hi\\"") -> "sayHi"
    """
    return '\n'.join(
        f'- {function_name}({_literal(given)}) -> {_literal(expected)}' for given, expected in pairs
    )

@dataclass
class Prompt:
    """
    A prompt template for one converter.

    Args:
        name: Key of the prompt in the package data
        style: Case style the described function produces
        function_name: Name of the function the model is asked to write
        description: One-line summary
        template: `string.Template` text
    """
    name: str
    style: CaseStyle
    function_name: str
    description: str
    template: str

    def __post_init__(self):
        self.style = CaseStyle.parse(self.style)

    def render(self, language: str = 'JavaScript', examples: Optional[Iterable[Tuple[str, str]]] = None) -> str:
        """
        Fill in the template.

        Args:
            language: Programming language the function should be written in
            examples: (input, expected output) pairs; defaults to the packaged
                examples for this prompt's style

        Returns:
            Prompt text, ending with a single newline

        Raises:
            KeyError: if the template uses a placeholder other than
                $language, $function_name, $label or $examples
        """
        if examples is None:
            examples = _example_data().for_style(self.style)
        text = Template(self.template).substitute(
            language=language,
            function_name=self.function_name,
            label=self.style.label,
            examples=format_examples(self.function_name, examples)
        )
        return text.rstrip() + '\n'

def list_prompts() -> List[str]:
    """Names of all packaged prompts."""
    return list(_prompt_data().names)

def get_prompt(name: str) -> Prompt:
    """
    Look up a packaged prompt.

    Raises:
        KeyError: if no prompt has this name

    Example:
        >>> get_prompt('basic').style
        <CaseStyle.CAMEL: 'camel'>
    """
    records = _prompt_data().records
    if name not in records:
        raise KeyError(f"Unknown prompt {name!r} (available: {', '.join(records)})")
    return Prompt(name=name, **records[name])

def render_prompt(name: str, language: str = 'JavaScript', examples: Optional[Iterable[Tuple[str, str]]] = None) -> str:
    """Look up a packaged prompt and render it."""
    return get_prompt(name).render(language=language, examples=examples)
