"""
Translation Context - snapshot of the invoking environment

PathTranslator needs two facts about the process that launched it:
- the current working directory (anchors drive-less paths)
- the home directory (anchors ~/ paths)

Both are read ONCE per invocation and handed to the translator, which
never touches os.environ or os.getcwd() itself.
"""
import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .constants import HOME_ENV_VARS
from .errors import HomeDirectoryUnresolved


@dataclass(frozen=True)
class TranslationContext:
    """Working directory and home directory of the invoking process"""
    cwd: Optional[str] = None
    home: Optional[str] = None

    @classmethod
    def from_environment(cls, environ: Mapping[str, str] = None,
                         logger: logging.Logger = None) -> 'TranslationContext':
        """
        Capture cwd and home from the running process.

        Args:
            environ: Environment mapping (default: os.environ)
            logger: Logger instance

        Returns:
            TranslationContext with cwd always set ('.' if unreadable)
            and home None when no home variable is set
        """
        logger = logger or logging.getLogger('TranslationContext')
        if environ is None:
            environ = os.environ

        try:
            cwd = os.getcwd()
        except OSError as e:
            # Deleted or inaccessible cwd: '.' carries no drive
            logger.debug(f"Current directory unreadable ({e}), using '.'")
            cwd = '.'

        home = resolve_home(environ)
        logger.debug(f"Context: cwd={cwd!r} home={home!r}")
        return cls(cwd=cwd, home=home)

    def require_home(self, argument: str = None) -> str:
        """Home directory, or HomeDirectoryUnresolved if none was found"""
        if self.home is None:
            raise HomeDirectoryUnresolved(argument)
        return self.home


def resolve_home(environ: Mapping[str, str]) -> Optional[str]:
    """
    First home variable that is set, in HOME_ENV_VARS order.

    A variable set to the empty string counts as set.
    """
    for name in HOME_ENV_VARS:
        value = environ.get(name)
        if value is not None:
            return value
    return None
