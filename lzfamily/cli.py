"""Interactive menu for encoding strings and decoding code files."""

import argparse
import re
import sys

from . import decoders, encoders
from .errors import LZError

MENU = (
    " 1 - change code string\n 2 - change buffer size\n 3 - change dictionary size\n"
    " 4 - encode LZ77\n 5 - encode LZSS\n 6 - encode LZ78\n 7 - encode LZW\n"
    " 8 - decode LZ77\n 9 - decode LZSS\n 10 - decode LZ78\n 11 - decode LZW\n 12 - exit\n--> "
)
EXIT_CHOICE = 12
DEFAULT_BUFFER_SIZE = 4
DEFAULT_DICTIONARY_SIZE = 8

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _read_line(stream_in):
    """Return the next line without its newline; raise EOFError at the end."""
    line = stream_in.readline()
    if not line:
        raise EOFError("end of input")
    return line[:-1] if line.endswith("\n") else line


def _prompt(stream_out, text):
    stream_out.write(text)
    stream_out.flush()


def _parse_leading_int(text):
    """Parse the integer at the start of ``text``, ignoring what follows it."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"no integer in {text!r}")
    return int(match.group(1))


def read_menu_choice(stream_in, stream_out):
    """Show the menu until a choice between 1 and 12 is entered and return it."""
    while True:
        _prompt(stream_out, MENU)
        line = _read_line(stream_in)
        try:
            choice = _parse_leading_int(line)
        except ValueError:
            stream_out.write(" incorrect input\n \n")
            continue
        if 1 <= choice <= EXIT_CHOICE:
            return choice


def read_string(stream_in, stream_out):
    """Ask for a new code string until a non-empty one is entered."""
    while True:
        _prompt(stream_out, " new string --> ")
        line = _read_line(stream_in)
        if line:
            return line


def read_size(name, stream_in, stream_out):
    """Ask for a positive size of the named window and return it."""
    while True:
        _prompt(stream_out, f" new {name} size --> ")
        line = _read_line(stream_in)
        try:
            size = _parse_leading_int(line)
        except ValueError:
            stream_out.write(" incorrect input\n \n")
            continue
        if size > 0:
            return size


def read_file_path(stream_in, stream_out):
    """Ask for a path until one names a file that can be opened."""
    while True:
        _prompt(stream_out, "file name or path --> ")
        path = _read_line(stream_in)
        try:
            with open(path, encoding="utf-8"):
                pass
        except OSError:
            continue
        return path


def _write_rows(stream_out, rows):
    for row in rows:
        stream_out.write(f"{row}\n")


def _decode_file(path, name, decode, stream_out):
    with open(path, encoding="utf-8", newline="") as handle:
        result = decode(handle)
    _write_rows(stream_out, result.steps)
    stream_out.write(f" Decode {name} result ==> {result.text}\n")


def run(stream_in, stream_out):
    """Run the menu loop until the exit choice or the end of input."""
    code_string = ""
    buffer_size = DEFAULT_BUFFER_SIZE
    dictionary_size = DEFAULT_DICTIONARY_SIZE

    encoders_by_choice = {
        4: lambda: encoders.encode_lz77(code_string, dictionary_size, buffer_size),
        5: lambda: encoders.encode_lzss(code_string, dictionary_size, buffer_size),
        6: lambda: encoders.encode_lz78(code_string),
        7: lambda: encoders.encode_lzw(code_string),
    }
    decoders_by_choice = {
        8: ("LZ77", lambda lines: decoders.decode_lz77(lines, dictionary_size)),
        9: ("LZSS", lambda lines: decoders.decode_lzss(lines, dictionary_size)),
        10: ("LZ78", decoders.decode_lz78),
        11: ("LZW", decoders.decode_lzw),
    }

    try:
        while True:
            stream_out.write(f"\ncurrent string - [{code_string}]\n")
            stream_out.write(
                f"current buffer size {buffer_size}, "
                f"current dictionary size {dictionary_size}\n"
            )
            choice = read_menu_choice(stream_in, stream_out)
            try:
                if choice == 1:
                    code_string = read_string(stream_in, stream_out)
                elif choice == 2:
                    buffer_size = read_size("buffer", stream_in, stream_out)
                elif choice == 3:
                    dictionary_size = read_size("dictionary", stream_in, stream_out)
                elif choice in encoders_by_choice:
                    _write_rows(stream_out, encoders_by_choice[choice]())
                elif choice in decoders_by_choice:
                    path = read_file_path(stream_in, stream_out)
                    name, decode = decoders_by_choice[choice]
                    _decode_file(path, name, decode, stream_out)
                else:
                    return
            except LZError as exc:
                stream_out.write(f"{exc}\n")
    except EOFError:
        return
    finally:
        stream_out.flush()


def main(argv=None):
    """Start the interactive menu on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="lzfamily",
        description="Encode strings and decode code files with LZ77, LZSS, LZ78 and LZW.",
    )
    parser.parse_args(argv)
    run(sys.stdin, sys.stdout)
    return 0