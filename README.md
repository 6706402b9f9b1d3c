# lzfamily

Shows how the classic Lempel–Ziv family of dictionary coders works, step
by step. It covers LZ77, LZSS, LZ78 and LZW. Each encoder returns the rows
of the table you would draw by hand: dictionary, look-ahead buffer (for
LZ77 and LZSS) and the code emitted at each step. Each decoder reads such
codes back and records the text after every step.

The tables are for study. Nothing is written out as packed bytes, and no
file is compressed or decompressed.

## Installation

```
pip install .
```

## Interactive use

```
lzfamily
```

A menu on standard input and output lets you:

- set the string to encode
- change the look-ahead buffer size (default 4)
- change the dictionary size (default 8)
- encode the string with LZ77, LZSS, LZ78 or LZW and print the table
- decode a file of codes with any of the four algorithms; the menu asks
  for a path until it names a file that can be opened, then prints each
  step and the decoded text

Sizes must be positive whole numbers; other input is asked for again.
Errors such as an empty string or a malformed code line are printed, and
the menu comes back. Choice 12, or the end of input, leaves the menu.

The same loop can be driven from any pair of text streams with
`lzfamily.cli.run(stream_in, stream_out)`.

## Library use

```python
from lzfamily.encoders import encode_lz77, encode_lzss, encode_lz78, encode_lzw
from lzfamily.decoders import decode_lz77, decode_lzss, decode_lz78, decode_lzw
from lzfamily.errors import LZError

rows = encode_lz77("abracadabra", 8, 4)   # dict_size, buffer_size
rows = encode_lzw("abababa")

result = decode_lz78(["<0,a>", "<0,b>", "<1,b>"])
print(result.text)    # "abab"
print(result.steps)   # one trace line per decoded code
```

Every encoder returns a list of strings: the header rows first, then one
row per coding step. An empty string raises `LZError`.

The decoders accept any iterable of lines, so an open file works too; a
trailing newline on each line is ignored. `decode_lz77` and `decode_lzss`
also take the dictionary size. They return a `DecodeResult` whose `text`
is the decoded string and whose `steps` is a tuple of trace lines;
`str(result)` gives the text.

### Code formats read by the decoders

| Algorithm | One code                            |
|-----------|-------------------------------------|
| LZ77      | `<index,count,symbol>`              |
| LZSS      | `0,symbol` or `1,<index,count>`     |
| LZ78      | `<index,symbol>`                    |
| LZW       | `<0,symbol>` or `<code>` (256 up)   |

A line may hold several codes written one after another. Malformed codes,
or indexes and counts that reach outside what has been decoded so far,
raise `LZError` (a subclass of `ValueError`).

## Running the tests

```
pip install .[test]
pytest
```