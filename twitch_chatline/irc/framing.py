"""CRLF line framing for the chat receive buffer."""

from __future__ import annotations

LINE_TERMINATOR = "\r\n"


def split_lines(buffer: str) -> tuple[list[str], str]:
    """Split complete lines off ``buffer``.

    Returns the complete, non-blank lines (without their terminator) and the
    incomplete remainder that should be kept for the next read.
    """
    lines: list[str] = []
    while LINE_TERMINATOR in buffer:
        line, buffer = buffer.split(LINE_TERMINATOR, 1)
        if line.strip():
            lines.append(line)
    return lines, buffer
