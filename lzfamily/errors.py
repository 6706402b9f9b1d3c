"""Errors raised by the encoders and decoders."""


class LZError(ValueError):
    """Raised for empty input or a malformed or inconsistent code stream."""