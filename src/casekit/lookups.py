import logging
import pandas as pd
import yaml
from functools import cached_property
from keyword import iskeyword
from typing import Dict, List, Tuple
from casekit.connections import ExampleDataSource, PromptDataSource
from casekit.entities import CaseStyle

logger = logging.getLogger(__name__)

class PromptData(PromptDataSource):
    def __init__(self):
        with self.yaml_path().open('r', encoding='utf-8') as f:
            self.records: Dict[str, dict] = yaml.safe_load(f)
        logger.debug('Loaded %d prompt templates', len(self.records))

    @cached_property
    def names(self) -> Tuple[str, ...]:
        return tuple(self.records)

class ExampleData(ExampleDataSource):
    def __init__(self):
        with self.csv_path().open('r', encoding='utf-8') as f:
            self.data = pd.read_csv(f, dtype=str, keep_default_na=False)
            for column in self.data.columns:
                if not iskeyword(column):
                    setattr(self, column, self.data[column])
        logger.debug('Loaded %d conversion examples', len(self.data))

    def for_style(self, style: "CaseStyle | str") -> List[Tuple[str, str]]:
        """Input and expected output pairs for one case style, in file order."""
        style = CaseStyle.parse(style)
        rows = self.data[self.style == style.value]
        return list(zip(rows['input'], rows['expected']))

    @cached_property
    def styles(self) -> List[CaseStyle]:
        return [CaseStyle.parse(value) for value in self.style.unique()]
