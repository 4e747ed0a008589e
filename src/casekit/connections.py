from importlib import resources
from functools import cache

class PromptDataSource:
    @classmethod
    @cache
    def yaml_path(cls):
        """ Prompt templates """
        return resources.files('casekit.data').joinpath('prompts.yaml')

class ExampleDataSource:
    @classmethod
    @cache
    def csv_path(cls):
        return resources.files('casekit.data').joinpath('examples.csv')
