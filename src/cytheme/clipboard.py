"""System clipboard access through whichever copy command is installed."""

import logging
import shutil
import subprocess

log = logging.getLogger(__name__)

COPY_COMMANDS: list[list[str]] = [
    ["pbcopy"],
    ["wl-copy"],
    ["xclip", "-selection", "clipboard"],
    ["xsel", "--clipboard", "--input"],
    ["clip"],
]


def copy_to_clipboard(text: str) -> bool:
    """Copy text to the clipboard. Returns False when no command succeeded."""
    for cmd in COPY_COMMANDS:
        if shutil.which(cmd[0]) is None:
            continue
        try:
            subprocess.run(cmd, input=text, text=True, check=True, timeout=5)
        except (OSError, subprocess.SubprocessError) as e:
            log.debug("%s failed: %s", cmd[0], e)
            continue
        log.debug("Copied %d characters with %s", len(text), cmd[0])
        return True
    return False
