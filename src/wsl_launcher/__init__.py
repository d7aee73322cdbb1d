"""
WSL Launcher - run Linux commands from Windows with Windows paths

Main components:
- PathTranslator: Windows → WSL argument translation
- TranslationContext: cwd/home snapshot of the invoking process
- escape_arguments: argv → target argument list
- ExecutionEngine: Subprocess management
- main: Entry point
"""

from .argument_filter import escape_arguments, program_stem
from .config import LauncherConfig
from .errors import HomeDirectoryUnresolved, LauncherError, TargetLaunchError
from .execution_engine import ExecutionEngine
from .launcher import main
from .path_translator import PathClassification, PathTranslator
from .translation_context import TranslationContext

__all__ = [
    'PathTranslator',
    'PathClassification',
    'TranslationContext',
    'escape_arguments',
    'program_stem',
    'ExecutionEngine',
    'LauncherConfig',
    'LauncherError',
    'HomeDirectoryUnresolved',
    'TargetLaunchError',
    'main',
]
