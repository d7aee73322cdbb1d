"""
Execution Engine - Single point for the launcher's subprocess call

ARCHITECTURE:
This is the ONLY place where the launcher spawns a process.

    launcher.main()
        ↓
    escape_arguments()   ← path translation
        ↓
    ExecutionEngine      ← THIS CLASS
        ↓
    subprocess.run([target] + arguments)

RESPONSIBILITIES:
1. Spawn the target executable (wsl.exe) with the translated arguments
2. Inherit stdin/stdout/stderr so the child owns the console
3. Wait for completion, return the CompletedProcess
4. Turn "could not start" into TargetLaunchError
5. Test mode: log and print the command, return a fake result

NOT RESPONSIBLE FOR:
- Path translation (done by PathTranslator)
- Exit code mapping (done by launcher.main)
"""
import logging
import subprocess
from typing import List, Sequence

from .constants import DEFAULT_TARGET
from .errors import TargetLaunchError


class ExecutionEngine:
    """
    Spawns the target executable and waits for it.

    No timeout: the launcher lives exactly as long as its child.
    """

    def __init__(self, target: str = DEFAULT_TARGET,
                 test_mode: bool = False,
                 logger: logging.Logger = None,
                 test_mode_returncode: int = 0):
        """
        Initialize execution engine.

        Args:
            target: Executable to spawn (name on PATH or full path)
            test_mode: If True, print commands instead of executing
            logger: Logger instance for execution tracking
            test_mode_returncode: Exit code reported by fake results in test mode
        """
        self.target = target
        self.test_mode = test_mode
        self.test_mode_returncode = test_mode_returncode
        self.logger = logger or logging.getLogger('ExecutionEngine')

        if test_mode:
            self.logger.info("[TEST MODE] ExecutionEngine initialized")

    def build_command(self, arguments: Sequence[str]) -> List[str]:
        return [self.target, *arguments]

    def execute(self, arguments: Sequence[str]) -> subprocess.CompletedProcess:
        """
        Run target with arguments and wait for it.

        Args:
            arguments: Already translated argument list

        Returns:
            CompletedProcess (fake one in test mode)

        Raises:
            TargetLaunchError: target missing, not executable, etc.
        """
        command = self.build_command(arguments)

        if self.test_mode:
            self.logger.info(f"[TEST] {command}")
            print(f"[TEST MODE] Would execute: {command}")
            return subprocess.CompletedProcess(
                args=command,
                returncode=self.test_mode_returncode,
                stdout="",
                stderr=""
            )

        self.logger.info(f"Executing: {command}")
        try:
            result = subprocess.run(command)
        except OSError as e:
            self.logger.error(f"Failed to execute {self.target}: {e}")
            raise TargetLaunchError(self.target, str(e)) from e

        self.logger.debug(f"{self.target} exited with {result.returncode}")
        return result

    @staticmethod
    def exit_code(result: subprocess.CompletedProcess) -> int:
        """
        Exit code to propagate for result.

        Killed by a signal (negative returncode on POSIX) → 0.
        """
        if result.returncode is None or result.returncode < 0:
            return 0
        return result.returncode
