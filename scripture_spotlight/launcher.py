"""Hand URIs to the operating system."""

import logging
import shlex
import shutil
import subprocess
import sys
from typing import List, Optional

logger = logging.getLogger(__name__)


def opener_command(command: Optional[str] = None) -> Optional[List[str]]:
    """Return the argv prefix used to open a URI on this platform.

    Args:
        command: Configured command line, e.g. "open -a 'JW Library'"

    Returns:
        Argument list or None when no opener is available
    """
    if command:
        return shlex.split(command)
    if sys.platform == "darwin":
        return ["open"]
    if sys.platform.startswith("win"):
        # start treats the first quoted argument as a window title
        return ["cmd", "/c", "start", ""]
    if shutil.which("xdg-open"):
        return ["xdg-open"]
    return None


def open_uri(uri: str, command: Optional[str] = None) -> bool:
    """Open a URI without waiting for the handler.

    Args:
        uri: URI to open
        command: Optional opener command line from the config

    Returns:
        True if the opener process was started
    """
    argv = opener_command(command)
    if not argv:
        logger.warning("No URI opener available for %s", uri)
        return False

    logger.info("Opening %s", uri)
    try:
        subprocess.Popen(
            [*argv, uri],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except (OSError, ValueError) as e:
        logger.warning("Could not open %s: %s", uri, e)
        return False
    return True
