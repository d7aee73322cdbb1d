"""
Argument filter - builds the argument list handed to the target executable
"""
from pathlib import PureWindowsPath
from typing import List, Sequence

from .path_translator import PathTranslator


def program_stem(program: str) -> str:
    """
    File stem of argv[0]: directory and last extension stripped.

    PureWindowsPath accepts both '\\' and '/' as separators, so the result
    is the same whichever shell started us.
    """
    return PureWindowsPath(program).stem


def escape_arguments(argv: Sequence[str], translator: PathTranslator) -> List[str]:
    """
    Turn the launcher's own argv into the target's argument list.

    Element 0 becomes the program stem (a launcher copied to git.exe runs
    'git' on the other side). Empty strings are dropped, everything else
    goes through the translator in order.

    Raises:
        HomeDirectoryUnresolved: propagated from the translator
    """
    if not argv:
        return []

    escaped = [program_stem(argv[0])]
    for argument in argv[1:]:
        if not argument:
            continue
        escaped.append(translator.translate(argument))
    return escaped
