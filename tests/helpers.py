from unittest.mock import MagicMock


def sent_lines(writer: MagicMock) -> list[str]:
    """Lines written to a fake StreamWriter, without CRLF."""
    return b"".join(writer.written).decode("utf-8").split("\r\n")[:-1]
