"""Terminal colors for command line results.

Text carries \\-X- codes which are turned into ANSI sequences on a
terminal, or removed otherwise.

    \\-r-  red     \\-g-  green    \\-y-  yellow    \\-d-  dim
    \\-s-  strong  \\-n-  normal (reset)
"""

__all__ = ["paint", "should_use_color"]

import os
import re

CODES = {
    "r": "\033[31m",  # red
    "g": "\033[32m",  # green
    "y": "\033[33m",  # yellow
    "s": "\033[1m",   # strong
    "d": "\033[2m",   # dim
    "n": "\033[0m",   # normal
}

COLOR_CODE_PATTERN = re.compile(r"\\-([rgysdn]+)-")


def paint(text, color):
    """Apply or strip the color codes in text.

    Args:
        text: (str) Text with \\-X- color codes
        color: (bool) Whether ANSI sequences should be written
    Returns:
        (str) Text ready for output
    """
    if not color:
        return COLOR_CODE_PATTERN.sub("", text)
    result, count = COLOR_CODE_PATTERN.subn(
        lambda match: "".join(CODES[c] for c in match.group(1)), text)
    if count:
        result += CODES["n"]
    return result


def should_use_color(stream):
    """Determine if color output should be used.

    Colors are used when the stream is a TTY and the NO_COLOR environment
    variable is not set (https://no-color.org/).

    Args:
        stream: Output stream (like sys.stdout)
    Returns:
        (bool) True if colors should be applied
    """
    if os.environ.get("NO_COLOR") is not None:
        return False
    try:
        return stream.isatty()
    except AttributeError:
        return False
