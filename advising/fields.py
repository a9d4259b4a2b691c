"""Split one line of comma-delimited course data into fields."""

from __future__ import annotations

from typing import List

DELIMITER = ","
QUOTE = '"'
ASCII_WHITESPACE = " \t\n\r\x0b\x0c"


def parse_fields(line: str, delimiter: str = DELIMITER, quote: str = QUOTE) -> List[str]:
    """Tokenize ``line`` into trimmed fields.

    Quoted segments may contain the delimiter, and a doubled quote inside a
    quoted segment stands for one literal quote. An unterminated quote just
    runs to the end of the line. The last field is always emitted, so a line
    ending in the delimiter yields a trailing empty field. Fields are trimmed
    of ASCII whitespace only.
    """
    fields: List[str] = []
    buffer: List[str] = []
    in_quotes = False
    i = 0
    length = len(line)

    while i < length:
        ch = line[i]
        if in_quotes:
            if ch == quote:
                if i + 1 < length and line[i + 1] == quote:
                    buffer.append(quote)
                    i += 1
                else:
                    in_quotes = False
            else:
                buffer.append(ch)
        elif ch == quote:
            in_quotes = True
        elif ch == delimiter:
            fields.append("".join(buffer))
            buffer = []
        else:
            buffer.append(ch)
        i += 1

    fields.append("".join(buffer))
    return [field.strip(ASCII_WHITESPACE) for field in fields]
