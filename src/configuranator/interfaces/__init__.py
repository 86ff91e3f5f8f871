"""
Interfaces module - Adapters for operator-facing surfaces
==========================================================

- terminal/: typed prompts and the interactive configuration builder
"""

from configuranator.interfaces.terminal import ConfigBuilder, Prompter, ScriptedInput

__all__ = [
    'ConfigBuilder',
    'Prompter',
    'ScriptedInput',
]
