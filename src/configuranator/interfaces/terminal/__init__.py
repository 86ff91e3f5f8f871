"""Terminal interface: typed prompts, compound prompts and the interactive builder."""

from configuranator.interfaces.terminal.builder import BuildResult, ConfigBuilder
from configuranator.interfaces.terminal.compound import prompt_area, prompt_point, prompt_tuple
from configuranator.interfaces.terminal.parsers import SCALAR_PARSERS, ScalarKind, parse_tuple
from configuranator.interfaces.terminal.prompts import ConsoleInput, InputSource, Prompter, ScriptedInput

__all__ = [
    "BuildResult",
    "ConfigBuilder",
    "ConsoleInput",
    "InputSource",
    "parse_tuple",
    "Prompter",
    "prompt_area",
    "prompt_point",
    "prompt_tuple",
    "SCALAR_PARSERS",
    "ScalarKind",
    "ScriptedInput",
]
