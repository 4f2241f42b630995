"""System clipboard access through platform command-line tools.

Tries each known tool in turn; a missing binary or a non-zero exit moves
on to the next one.
"""

from __future__ import annotations

import logging
import shutil
import subprocess

from kubeviz.domain.errors import ClipboardUnavailableError

logger = logging.getLogger(__name__)

CLIPBOARD_COMMANDS: tuple[tuple[str, ...], ...] = (
    ("pbcopy",),
    ("wl-copy",),
    ("xclip", "-selection", "clipboard"),
    ("xsel", "--clipboard", "--input"),
    ("clip",),
)


def copy_to_clipboard(text: str) -> str:
    """Copy *text* to the system clipboard and return the tool used."""
    for command in CLIPBOARD_COMMANDS:
        if shutil.which(command[0]) is None:
            continue
        try:
            subprocess.run(
                list(command),
                input=text,
                text=True,
                capture_output=True,
                check=True,
                timeout=5,
            )
        except (OSError, subprocess.SubprocessError) as exc:
            logger.debug("Clipboard command %s failed: %s", command[0], exc)
            continue
        return command[0]
    raise ClipboardUnavailableError("No clipboard tool available")
