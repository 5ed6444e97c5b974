"""Debug output that is switched on through an environment variable."""

import os
import sys

_TRUE_VALUES = ("true", "True")


def debug_enabled(env_var="DEBUG"):
    """Return True when ``env_var`` is set to ``true`` or ``True``."""
    return os.environ.get(env_var) in _TRUE_VALUES


def debug_print(message, newline=True, env_var="DEBUG"):
    """Write ``message`` to standard output if debugging is enabled."""
    if not debug_enabled(env_var):
        return
    sys.stdout.write(str(message))
    if newline:
        sys.stdout.write("\n")
    sys.stdout.flush()