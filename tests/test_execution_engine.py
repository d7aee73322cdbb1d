#!/usr/bin/env python3
"""Test ExecutionEngine: test mode, real subprocess, launch failure"""
import logging
import subprocess
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from wsl_launcher.errors import TargetLaunchError
from wsl_launcher.execution_engine import ExecutionEngine

logging.basicConfig(
    level=logging.INFO,
    format='%(name)s - %(levelname)s - %(message)s'
)


def test_test_mode_does_not_spawn():
    engine = ExecutionEngine('does-not-exist.exe', test_mode=True, test_mode_returncode=3)
    result = engine.execute(['ls', '/mnt/c/x'])

    assert result.args == ['does-not-exist.exe', 'ls', '/mnt/c/x']
    assert result.returncode == 3


def test_real_exit_code_forwarded():
    engine = ExecutionEngine(sys.executable)
    result = engine.execute(['-c', 'import sys; sys.exit(7)'])
    assert result.returncode == 7
    assert engine.exit_code(result) == 7


def test_arguments_passed_verbatim():
    engine = ExecutionEngine(sys.executable)
    script = "import sys; sys.exit(0 if sys.argv[1:] == ['/mnt/c/a b', ''] else 1)"
    result = engine.execute(['-c', script, '/mnt/c/a b', ''])
    assert result.returncode == 0


def test_missing_target():
    engine = ExecutionEngine('wsl-launcher-no-such-binary-4f1c')
    with pytest.raises(TargetLaunchError) as excinfo:
        engine.execute(['ls'])

    assert excinfo.value.target == 'wsl-launcher-no-such-binary-4f1c'
    assert 'failed to execute' in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, OSError)


def test_exit_code_mapping():
    assert ExecutionEngine.exit_code(subprocess.CompletedProcess([], 0)) == 0
    assert ExecutionEngine.exit_code(subprocess.CompletedProcess([], 2)) == 2
    # Killed by signal: no exit code
    assert ExecutionEngine.exit_code(subprocess.CompletedProcess([], -9)) == 0


if __name__ == '__main__':
    for name, func in list(globals().items()):
        if name.startswith('test_') and callable(func):
            func()
            print(f"✅ {name}")
