"""
Path Translator - Windows → WSL argument translation
"""
import logging
import re
from enum import Enum
from typing import Optional

from .constants import FOREIGN_SEPARATOR, MOUNT_ROOT, NATIVE_SEPARATOR
from .translation_context import TranslationContext

# Drive designator: ASCII letter + colon at the very start
DRIVE_DESIGNATOR = re.compile(r'([A-Za-z]):')

# Already inside the mount tree: /mnt/c, /mnt/c/...
MOUNTED_PATH = re.compile(re.escape(MOUNT_ROOT) + r'/[A-Za-z](?:/|$)')


class PathClassification(Enum):
    """What an argument looks like before translation"""
    FOREIGN_ROOTED = "foreign_rooted"            # /usr/bin
    FOREIGN_HOME = "foreign_home"                # ~/docs
    FOREIGN_OTHER = "foreign_other"              # ., ./x, --flag, plain text
    NATIVE_OR_AMBIGUOUS = "native_or_ambiguous"  # C:\x, \x, a\b


def drive_designator(text: str) -> Optional[str]:
    """Drive letter of text (case preserved), or None"""
    if not text:
        return None
    match = DRIVE_DESIGNATOR.match(text)
    return match.group(1) if match else None


def normalize_separators(text: str) -> str:
    """Every backslash becomes a forward slash"""
    return text.replace(NATIVE_SEPARATOR, FOREIGN_SEPARATOR)


def format_path(text: str, drive: str, new_prefix: str) -> str:
    """
    Drive substitution: replace every literal 'X:\\' and 'X:/' with new_prefix.

    Plain substring replacement, both separator spellings, so strings that
    already mix conventions are handled. Must run BEFORE separator
    normalization.
    """
    return (text
            .replace(f"{drive}:{NATIVE_SEPARATOR}", new_prefix)
            .replace(f"{drive}:{FOREIGN_SEPARATOR}", new_prefix))


def mount_point(drive: str, trailing_slash: bool = False) -> str:
    """/mnt/<letter> for drive, optionally with trailing slash"""
    root = f"{MOUNT_ROOT}/{drive.lower()}"
    return root + FOREIGN_SEPARATOR if trailing_slash else root


class PathTranslator:
    """
    Windows → WSL path translation for launcher arguments.

    ARCHITECTURE:
    The launcher runs on Windows, the target (wsl.exe) runs in Linux.
    Every argument that looks like a Windows path is rewritten so the
    Linux side can open it; anything else passes through.

    CLASSIFICATION (first match wins):
    1. Starts with drive designator  → NATIVE_OR_AMBIGUOUS (always)
    2. Starts with '/'               → FOREIGN_ROOTED
    3. Starts with '~/'              → FOREIGN_HOME
    4. Contains a backslash          → NATIVE_OR_AMBIGUOUS
    5. Anything else                 → FOREIGN_OTHER

    EXAMPLE TRANSLATIONS (cwd D:\\work, home C:\\Users\\me):
    C:\\Users\\me\\file.txt  → /mnt/c/Users/me/file.txt
    C:/Users/me           → /mnt/c/Users/me
    \\tmp                  → /mnt/d/tmp
    relative\\sub          → /mnt/d/work/relative/sub
    ~/docs                → /mnt/c/Users/me/docs
    /etc/hosts            → /mnt/d/etc/hosts
    /mnt/c/x              → /mnt/c/x
    --verbose             → --verbose

    NOTE: drive substitution is literal string replacement, not a path
    model. Separator normalization (\\ → /) is always the last step.
    """

    def __init__(self, context: TranslationContext, logger: logging.Logger = None):
        self.context = context
        self.logger = logger or logging.getLogger('PathTranslator')

        # Context never changes during one invocation
        self.cwd = context.cwd or ''
        self.cwd_drive = drive_designator(self.cwd)

        self._handlers = {
            PathClassification.FOREIGN_ROOTED: self._translate_rooted,
            PathClassification.FOREIGN_HOME: self._translate_home,
            PathClassification.FOREIGN_OTHER: self._translate_other,
            PathClassification.NATIVE_OR_AMBIGUOUS: self._translate_native,
        }

    # ========== CLASSIFICATION ==========

    @staticmethod
    def classify(argument: str) -> PathClassification:
        """
        Assign exactly one PathClassification to argument.

        A drive designator overrides every other check.
        """
        if drive_designator(argument) is not None:
            return PathClassification.NATIVE_OR_AMBIGUOUS
        if argument.startswith('/'):
            return PathClassification.FOREIGN_ROOTED
        if argument.startswith('~/'):
            return PathClassification.FOREIGN_HOME
        if NATIVE_SEPARATOR in argument:
            return PathClassification.NATIVE_OR_AMBIGUOUS
        return PathClassification.FOREIGN_OTHER

    # ========== TRANSLATION ==========

    def translate(self, argument: str) -> str:
        """
        Translate one argument into WSL path syntax.

        Args:
            argument: Raw command-line argument

        Returns:
            Translated argument (unchanged text for non-paths)

        Raises:
            HomeDirectoryUnresolved: ~/ argument and no home directory in context
        """
        classification = self.classify(argument)
        self.logger.debug(f"{argument!r} classified as {classification.name}")

        result = self._handlers[classification](argument)
        self.logger.debug(f"{argument!r} → {result!r}")
        return result

    def _translate_other(self, argument: str) -> str:
        return normalize_separators(argument)

    def _translate_rooted(self, argument: str) -> str:
        # /mnt/<letter>/... is already a host drive path
        normalized = normalize_separators(argument)
        if MOUNTED_PATH.match(normalized):
            return normalized

        if self.cwd_drive is None:
            return normalize_separators(MOUNT_ROOT + argument)

        root = mount_point(self.cwd_drive)
        path = root + format_path(argument, self.cwd_drive, root)
        self.logger.debug(f"root={root!r} path={path!r}")
        return normalize_separators(path)

    def _translate_home(self, argument: str) -> str:
        home = self.context.require_home(argument)
        home_drive = drive_designator(home)
        if home_drive is None:
            return normalize_separators(argument)

        root = mount_point(home_drive, trailing_slash=True)
        joined = home + argument[1:]
        path = format_path(joined, home_drive, root)
        self.logger.debug(f"root={root!r} joined={joined!r} path={path!r}")
        return normalize_separators(path)

    def _translate_native(self, argument: str) -> str:
        this_drive = drive_designator(argument)

        # C:\x, C:/x
        if this_drive is not None:
            root = mount_point(this_drive, trailing_slash=True)
            return normalize_separators(format_path(argument, this_drive, root))

        if self.cwd_drive is None:
            return normalize_separators(argument)

        # \x → root of the current drive
        if argument.startswith(NATIVE_SEPARATOR):
            root = mount_point(self.cwd_drive)
            path = root + format_path(argument, self.cwd_drive, root)
        # a\b → relative to the current directory
        else:
            root = mount_point(self.cwd_drive, trailing_slash=True)
            path = format_path(self.cwd, self.cwd_drive, root) + FOREIGN_SEPARATOR + argument
        self.logger.debug(f"root={root!r} path={path!r}")
        return normalize_separators(path)
