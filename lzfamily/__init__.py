"""Step-by-step table encoders and decoders for LZ77, LZSS, LZ78 and LZW, with an interactive menu."""

__version__ = "0.1.0"
__all__ = ["cli", "decoders", "encoders", "errors"]