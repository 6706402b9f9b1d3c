"""Encoders that produce step-by-step tables for LZ77, LZSS, LZ78 and LZW.

Each encoder returns the rows of its table as strings. The first rows are
the header, and every following row describes one coding step.
"""

from .errors import LZError

LZ77_HEADER = "Dictionary | Buffer | Code LZ77"
LZSS_HEADER = "Dictionary | Buffer | Code LZSS"
LZ78_HEADER = "# | Dictionary | Code LZ78"
LZW_HEADER = "# | Dictionary | Code LZW"


def _require_text(text):
    if not text:
        raise LZError("empty string")


def _trim(window, size):
    """Keep only the last ``size`` characters of the sliding window."""
    if 0 <= size < len(window):
        return window[len(window) - size:]
    return window


def _longest_match(window, text, start, limit, find):
    """Grow the match at ``start`` while ``find`` locates it in the window."""
    index = count = 0
    for length in range(1, limit + 1):
        if start + length > len(text):
            break
        position = find(window, text[start:start + length])
        if position < 0:
            break
        index, count = position, length
    return index, count


def encode_lz77(text, dict_size, buffer_size):
    """Encode ``text`` with LZ77 and return the table rows."""
    _require_text(text)
    rows = [LZ77_HEADER]
    total = len(text)
    window = ""
    pos = 0
    while pos < total:
        index, count = _longest_match(window, text, pos, buffer_size, str.rfind)
        if count == 0:
            following = text[pos]
        elif pos + count < total:
            following = text[pos + count]
        else:
            following = "eos"
        buffer = text[pos:pos + max(buffer_size, 0)]
        rows.append(f"{window}|{buffer}|<{index},{count},'{following}'>")

        if count + 1 < total:
            count += 1
        elif count == 0:
            # A one-character text: consume it so the loop can finish.
            count = 1
        window = _trim(window + text[pos:pos + count], dict_size)
        pos += count
    rows.append(f"{window}| |")
    return rows


def encode_lzss(text, dict_size, buffer_size):
    """Encode ``text`` with LZSS and return the table rows."""
    _require_text(text)
    rows = [LZSS_HEADER]
    total = len(text)
    window = ""
    pos = 0
    while pos < total:
        index, count = _longest_match(window, text, pos, buffer_size, str.find)
        buffer = text[pos:pos + max(buffer_size, 0)]
        if count == 0:
            rows.append(f"{window}|{buffer}|0,'{text[pos]}'")
            count = 1
        else:
            rows.append(f"{window}|{buffer}|1,<{index},{count}>")
        window = _trim(window + text[pos:pos + count], dict_size)
        pos += count
    rows.append(f"{window}| |")
    return rows


def encode_lz78(text):
    """Encode ``text`` with LZ78 and return the table rows."""
    _require_text(text)
    rows = [LZ78_HEADER, "0| | --"]
    phrases = {}
    phrase = ""
    prefix = 0
    for ch in text:
        phrase += ch
        found = phrases.get(phrase)
        if found:
            prefix = found
            continue
        number = len(phrases) + 1
        rows.append(f"{number}|{phrase}|<{prefix},'{ch}'>")
        phrases[phrase] = number
        phrase = ""
        prefix = 0
    if phrase and prefix:
        rows.append(f"{len(phrases) + 1}| |<{prefix},'eos'>")
    return rows


def encode_lzw(text):
    """Encode ``text`` with LZW and return the table rows."""
    _require_text(text)
    rows = [LZW_HEADER, "0-255|ASCII|--"]
    # Phrase -> most recent position. Position 0 is never taken as a match,
    # so the first phrase is added again when it recurs.
    latest = {}
    size = 0
    phrase = ""
    prefix = 0
    for ch in text:
        phrase += ch
        if len(phrase) == 1:
            continue
        found = latest.get(phrase, 0)
        if found:
            prefix = found
            continue
        if len(phrase) == 2:
            code = f"ASCII index of '{phrase[0]}'"
        else:
            code = str(256 + prefix)
        rows.append(f"{256 + size}|{phrase}|{code}")
        latest[phrase] = size
        size += 1
        phrase = ch
        prefix = 0
    if prefix:
        rows.append(f"{256 + size}| |{256 + prefix}")
    return rows