"""
Launcher entry point: translate argv, run the target, forward its exit code
"""
import logging
import sys
from typing import Mapping, Optional, Sequence

from .argument_filter import escape_arguments
from .config import LauncherConfig, configure_logging
from .constants import EXIT_LAUNCH_FAILURE, EXIT_TRANSLATION_FAILURE
from .errors import HomeDirectoryUnresolved, TargetLaunchError
from .execution_engine import ExecutionEngine
from .path_translator import PathTranslator
from .translation_context import TranslationContext


def main(argv: Optional[Sequence[str]] = None,
         environ: Optional[Mapping[str, str]] = None) -> int:
    """
    Run the launcher.

    Args:
        argv: Full argument vector including program name (default: sys.argv)
        environ: Environment mapping (default: os.environ)

    Returns:
        Exit code: the child's, or EXIT_TRANSLATION_FAILURE / EXIT_LAUNCH_FAILURE
    """
    if argv is None:
        argv = sys.argv

    config = LauncherConfig.from_environment(environ)
    configure_logging(config.log_level)
    logger = logging.getLogger('Launcher')

    context = TranslationContext.from_environment(environ)
    translator = PathTranslator(context)
    engine = ExecutionEngine(config.target, test_mode=config.test_mode)

    try:
        arguments = escape_arguments(argv, translator)
    except HomeDirectoryUnresolved as e:
        logger.error(f"{e} (argument {e.argument!r})")
        return EXIT_TRANSLATION_FAILURE

    try:
        result = engine.execute(arguments)
    except TargetLaunchError as e:
        logger.error(str(e))
        print(f"{argv[0] if argv else 'wsl-launcher'}: {e}", file=sys.stderr)
        return EXIT_LAUNCH_FAILURE

    return engine.exit_code(result)
