#!/usr/bin/env python3
"""
Test launcher.main: end-to-end exit codes

Environment passed explicitly: os.environ never modified.
"""
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from wsl_launcher.config import LauncherConfig, parse_log_level
from wsl_launcher.constants import EXIT_LAUNCH_FAILURE, EXIT_TRANSLATION_FAILURE
from wsl_launcher.launcher import main


def test_child_exit_code_forwarded():
    environ = {'WSL_LAUNCHER_TARGET': sys.executable, 'HOME': '/home/me'}
    # argv[0] stem becomes the child's first argument: here '-c'
    assert main(['-c', 'import sys; sys.exit(5)'], environ) == 5


def test_test_mode():
    environ = {'WSL_LAUNCHER_TEST_MODE': '1', 'USERPROFILE': 'C:\\Users\\me'}
    assert main(['launcher.exe', 'C:\\x', '~/y'], environ) == 0


def test_home_unresolved_exit_code():
    environ = {'WSL_LAUNCHER_TEST_MODE': 'true'}
    assert main(['launcher.exe', '~/docs'], environ) == EXIT_TRANSLATION_FAILURE
    # No ~/ argument: missing home is irrelevant
    assert main(['launcher.exe', 'C:\\docs'], environ) == 0


def test_launch_failure_exit_code():
    environ = {'WSL_LAUNCHER_TARGET': 'wsl-launcher-no-such-binary-4f1c', 'HOME': '/home/me'}
    assert main(['launcher.exe', 'ls'], environ) == EXIT_LAUNCH_FAILURE


def test_config_from_environment():
    config = LauncherConfig.from_environment({})
    assert config.target == 'wsl.exe'
    assert config.log_level == logging.WARNING
    assert config.test_mode is False

    config = LauncherConfig.from_environment({
        'WSL_LAUNCHER_TARGET': 'C:\\Windows\\System32\\wsl.exe',
        'WSL_LAUNCHER_LOG': 'debug',
        'WSL_LAUNCHER_TEST_MODE': 'Yes',
    })
    assert config.target == 'C:\\Windows\\System32\\wsl.exe'
    assert config.log_level == logging.DEBUG
    assert config.test_mode is True


def test_parse_log_level():
    assert parse_log_level(None) == logging.WARNING
    assert parse_log_level('info') == logging.INFO
    assert parse_log_level(' ERROR ') == logging.ERROR
    assert parse_log_level('10') == 10
    assert parse_log_level('chatty') == logging.WARNING


if __name__ == '__main__':
    for name, func in list(globals().items()):
        if name.startswith('test_') and callable(func):
            func()
            print(f"✅ {name}")
