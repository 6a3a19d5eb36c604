"""JSONC comment stripper - JSON with Comments support.

TIER 0: No internal imports, only Python stdlib.

Single left-to-right scan over the input. String literals are copied
verbatim, `//` and `/* */` comments outside strings are dropped, and every
other character is copied through unchanged.
"""

from enum import Enum

# Characters that end a // comment (the terminator itself is kept)
LINE_TERMINATORS = frozenset("\n\r\u2028\u2029")


class ScanMode(str, Enum):
    """Scanner state while stripping comments."""

    NORMAL = "normal"
    IN_STRING = "in_string"
    IN_LINE_COMMENT = "in_line_comment"
    IN_BLOCK_COMMENT = "in_block_comment"


def _find_string_close(content: str, start: int) -> int:
    """Find the first quote at or after start that is not preceded by a backslash.

    Returns:
        Index of the closing quote, or -1 if there is none.
    """
    j = content.find('"', start)
    while j != -1 and content[j - 1] == "\\":
        j = content.find('"', j + 1)
    return j


def strip_comments(content: str) -> str:
    """Strip JSONC comments from content.

    Removes:
    - Single-line comments: // comment (up to, not including, the newline)
    - Multi-line comments: /* comment */

    Preserves strings containing // or /* sequences, including escaped
    quotes. A string closes at the first quote not preceded by a
    backslash; failing that, at the quote of the last \\" in the input.
    A quote that cannot be closed, or a /* without a later */, is kept
    as plain text and scanning carries on after it.

    Never raises; any string is accepted, JSON or not.

    Args:
        content: JSONC content with comments.

    Returns:
        Content without comments (removed spans leave no placeholder).
    """
    result: list[str] = []
    mode = ScanMode.NORMAL
    length = len(content)
    # Set once a search fails; later openers cannot be closed either
    no_block_close = False
    no_string_close = False
    last_escaped_quote = content.rfind('\\"') + 1
    string_close = -1
    i = 0

    while i < length:
        char = content[i]
        pair = content[i : i + 2]

        if mode is ScanMode.IN_STRING:
            result.append(char)
            if i == string_close:
                mode = ScanMode.NORMAL
            i += 1
            continue

        if mode is ScanMode.IN_LINE_COMMENT:
            if char in LINE_TERMINATORS:
                # Newline is copied by NORMAL mode
                mode = ScanMode.NORMAL
            else:
                i += 1
            continue

        if mode is ScanMode.IN_BLOCK_COMMENT:
            if pair == "*/":
                mode = ScanMode.NORMAL
                i += 2
            else:
                i += 1
            continue

        # NORMAL
        if pair == '\\"':
            # Bare escaped quote never opens a string
            result.append(pair)
            i += 2
            continue

        if char == '"':
            close = -1
            if not no_string_close:
                close = _find_string_close(content, i + 1)
                no_string_close = close == -1
            if close == -1 and last_escaped_quote > i + 1:
                close = last_escaped_quote
            if close != -1:
                mode = ScanMode.IN_STRING
                string_close = close
                result.append(char)
                i += 1
                continue

        if pair == "//":
            mode = ScanMode.IN_LINE_COMMENT
            i += 2
            continue

        if pair == "/*" and not no_block_close:
            if content.find("*/", i + 2) != -1:
                mode = ScanMode.IN_BLOCK_COMMENT
                i += 2
                continue
            no_block_close = True

        result.append(char)
        i += 1

    return "".join(result)
