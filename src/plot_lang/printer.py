# printer.py
# Sends an exported image to the platform's print spooler.

import sys
import shutil
import logging
import subprocess

from .errors import UnsupportedPlatformError, PrintCommandError

logger = logging.getLogger(__name__)


def print_command(path, platform=None):
    """Builds the spooler command line for path, or raises UnsupportedPlatformError."""
    platform = platform or sys.platform
    if platform.startswith('win'):
        return ['cmd', '/C', 'mspaint', '/pt', path]
    for spooler in ('lp', 'lpr'):
        if shutil.which(spooler):
            return [spooler, path]
    raise UnsupportedPlatformError(f"No print spooler found on platform `{platform}`.")


def print_file(path, platform=None):
    command = print_command(path, platform)
    logger.info("Printing %s with `%s`", path, ' '.join(command))
    try:
        result = subprocess.run(command, capture_output=True, text=True)
    except OSError as e:
        raise PrintCommandError(f"Could not run `{command[0]}`: {e}") from e
    if result.returncode != 0:
        raise PrintCommandError(
            f"`{command[0]}` exited with status {result.returncode}: {result.stderr.strip()}")
    return result
