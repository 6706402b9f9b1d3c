"""Decoders that read LZ77, LZSS, LZ78 and LZW code lines."""

from dataclasses import dataclass

from .errors import LZError

# Stands in for a token that closes without naming its symbol.
_NO_SYMBOL = "\xff"


@dataclass(frozen=True)
class DecodeResult:
    """Decoded text together with one trace line per decoded token."""

    text: str
    steps: tuple = ()

    def __str__(self):
        return self.text


def _lines(lines):
    for line in lines:
        yield line[:-1] if line.endswith("\n") else line


def _digit(ch):
    return ord(ch) - ord("0")


def _window_start(result, start, dict_size):
    if len(result) > dict_size:
        return len(result) - dict_size
    return start


def _copy(result, start, count):
    if start < 0 or start > len(result):
        raise LZError("index out of range")
    if count < 0:
        return result[start:]
    return result[start:start + count]


def decode_lz77(lines, dict_size):
    """Decode lines of ``<index,count,symbol>`` tokens."""
    result = ""
    start = 0
    steps = []
    for line in _lines(lines):
        part = 0
        index = count = 0
        symbol = " "
        for ch in line:
            if ch == "<" and part == 0:
                part = 1
                continue
            if ch == "," and part in (1, 2):
                part += 1
                continue
            if ch == ">" and part == 3:
                part = 4

            if part == 0:
                raise LZError("incorrect string")
            if part in (1, 2) and not "0" <= ch <= "9":
                raise LZError("incorrect symbol, not num")
            if part == 3 and symbol != " ":
                raise LZError("incorrect add symbol")

            if part == 1:
                index = index * 10 + _digit(ch)
            elif part == 2:
                count = count * 10 + _digit(ch)
            elif part == 3:
                symbol = ch
            else:
                if index > dict_size:
                    raise LZError("index out of range")
                if count > len(result) - start:
                    raise LZError("count symb is out of range")
                if result:
                    result += _copy(result, start + index, count)
                result += symbol
                start = _window_start(result, start, dict_size)
                steps.append(f"<{index},{count},{symbol}> --> {result}")
                part = 0
                index = count = 0
                symbol = " "
        if part != 0:
            raise LZError("incorrect string")
    return DecodeResult(result, tuple(steps))


def decode_lzss(lines, dict_size):
    """Decode lines of ``0,symbol`` and ``1,<index,count>`` tokens."""
    result = ""
    start = 0
    steps = []
    for line in _lines(lines):
        part = 0
        index = count = 0
        for ch in line:
            if ch == "0" and part == 0:
                part = 1
                continue
            if ch == "1" and part == 0:
                part = 3
                continue
            if ch == "," and part in (1, 3, 5):
                part += 1
                continue
            if ch == "<" and part == 4:
                part = 5
                continue
            if ch == ">" and part == 6:
                part = 7

            if part == 0:
                raise LZError("incorrect string")

            if part == 2:
                result += ch
                start = _window_start(result, start, dict_size)
                steps.append(f"0,{ch} --> {result}")
                part = 0
            elif part == 5:
                index = index * 10 + _digit(ch)
            elif part == 6:
                count = count * 10 + _digit(ch)
            elif part == 7:
                if index > dict_size:
                    raise LZError("index out of range")
                if count > len(result) - start:
                    raise LZError("count symb is out of range")
                result += _copy(result, start + index, count)
                start = _window_start(result, start, dict_size)
                steps.append(f"1,<{index},{count}> --> {result}")
                part = 0
                index = count = 0
        if part != 0:
            raise LZError("incorrect string")
    return DecodeResult(result, tuple(steps))


def decode_lz78(lines):
    """Decode lines of ``<index,symbol>`` tokens."""
    result = ""
    phrases = [""]
    steps = []
    for line in _lines(lines):
        part = 0
        index = 0
        symbol = None
        for ch in line:
            if ch == "<" and part == 0:
                part = 1
                continue
            if ch == "," and part == 1:
                part = 2
                continue
            if ch == ">" and part == 2:
                part = 3

            if part == 0:
                raise LZError("incorrect string")
            if part == 2 and symbol is not None:
                raise LZError("incorrect string")

            if part == 1:
                index = index * 10 + _digit(ch)
            elif part == 2:
                symbol = ch
            else:
                if symbol is None:
                    symbol = _NO_SYMBOL
                if not 0 <= index < len(phrases):
                    raise LZError("index is out of range")
                phrases.append(phrases[index] + symbol)
                result += phrases[-1]
                steps.append(f"<{index},{symbol}> --> {result}")
                part = 0
                index = 0
                symbol = None
        if part != 0:
            raise LZError("incorrect string")
    return DecodeResult(result, tuple(steps))


def decode_lzw(lines):
    """Decode lines of ``<0,symbol>`` literals and ``<code>`` references."""
    result = ""
    phrases = []
    pending = 0
    steps = []
    for line in _lines(lines):
        part = 0
        index = 0
        symbol = None
        for ch in line:
            if ch == "<" and part == 0:
                part = 1
                continue
            if ch == "," and part == 1:
                part = 2
                continue
            if ch == ">" and part in (1, 2):
                part = 3

            if part == 0:
                raise LZError("incorrect string")
            if part == 2 and symbol is not None:
                raise LZError("incorrect string")

            if part == 1:
                index = index * 10 + _digit(ch)
            elif part == 2:
                symbol = ch
            elif index == 0:
                if symbol is None:
                    symbol = _NO_SYMBOL
                result += symbol
                if not phrases:
                    phrases.append(symbol)
                else:
                    phrases[pending] += symbol
                    current = phrases[pending]
                    duplicated = any(
                        phrase == current
                        for position, phrase in enumerate(phrases)
                        if position != pending
                    )
                    if not duplicated:
                        phrases.append(current[-1])
                        pending = len(phrases) - 1
                steps.append(f"<0,{symbol}> --> {result}")
                part = 0
                symbol = None
            else:
                position = index - 256
                if not 0 <= position < len(phrases):
                    raise LZError("index of str is out of bound")
                if position == pending:
                    phrases[pending] += phrases[pending]
                else:
                    phrases[pending] += phrases[position][0]
                phrases.append(phrases[position])
                result += phrases[position]
                pending = len(phrases) - 1
                steps.append(f"<{index}> --> {result}")
                part = 0
                index = 0
                symbol = None
        if part != 0:
            raise LZError("incorrect string")
    return DecodeResult(result, tuple(steps))