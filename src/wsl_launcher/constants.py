"""
Constants and configuration for the WSL launcher
"""

# ============================================================================
# FOREIGN NAMESPACE LAYOUT
# ============================================================================
# WSL mounts every host drive under /mnt/<letter> (lowercase).
# C:\Users\me  →  /mnt/c/Users/me
MOUNT_ROOT = '/mnt'

NATIVE_SEPARATOR = '\\'
FOREIGN_SEPARATOR = '/'

# Home directory lookup order: Windows first, then POSIX
HOME_ENV_VARS = ('USERPROFILE', 'HOME')


# ============================================================================
# LAUNCHER
# ============================================================================
DEFAULT_TARGET = 'wsl.exe'

TARGET_ENV_VAR = 'WSL_LAUNCHER_TARGET'
LOG_LEVEL_ENV_VAR = 'WSL_LAUNCHER_LOG'
TEST_MODE_ENV_VAR = 'WSL_LAUNCHER_TEST_MODE'

LOG_FORMAT = '%(name)s - %(levelname)s - %(message)s'


# ============================================================================
# EXIT CODES
# ============================================================================
# Child exit codes are passed through untouched; these are the launcher's own.
EXIT_TRANSLATION_FAILURE = 1
EXIT_LAUNCH_FAILURE = 127    # same as a shell's "command not found"
