"""
Exceptions raised by the WSL launcher
"""
from .constants import HOME_ENV_VARS


class LauncherError(Exception):
    """Base class for launcher errors"""


class HomeDirectoryUnresolved(LauncherError, LookupError):
    """
    A home-relative argument (~/...) was translated but no home directory is known.

    This is the only condition that aborts translation: every other
    irregular input degrades to a separator-normalized copy.
    """

    def __init__(self, argument: str = None):
        self.argument = argument
        names = ' nor '.join(HOME_ENV_VARS)
        super().__init__(f"home directory unresolved: neither {names} is set")


class TargetLaunchError(LauncherError, OSError):
    """The target executable could not be started at all"""

    def __init__(self, target: str, reason: str):
        self.target = target
        self.reason = reason
        super().__init__(f"failed to execute {target}: {reason}")
