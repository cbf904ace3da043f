"""
Error taxonomy for scrambled display decoding.

Every error carries a stable ``kind`` string so the aggregator can report
skipped entries without holding on to exception objects.
"""


class DecodeError(Exception):
    """Base class for all decoding failures."""

    kind = "decode_error"


class MalformedInput(DecodeError):
    """The input itself is bad; the entry is skipped."""

    kind = "malformed_input"


class InvalidToken(MalformedInput):
    """A token has a bad length, repeated labels or unknown characters."""

    kind = "invalid_token"

    def __init__(self, token: str, reason: str):
        super().__init__(f"invalid token {token!r}: {reason}")
        self.token = token
        self.reason = reason


class MalformedLine(MalformedInput):
    """A line does not follow the ``<dictionary> | <four outputs>`` grammar."""

    kind = "malformed_line"


class MalformedDictionary(MalformedInput):
    """The dictionary's length buckets are not 1/1/1/3/3/1 for lengths 2-7."""

    kind = "malformed_dictionary"


class AmbiguousPattern(MalformedInput):
    """A length-5 or length-6 pattern matches no digit signature."""

    kind = "ambiguous_pattern"


class UnknownPattern(DecodeError):
    """An output pattern is missing from a resolved dictionary.

    Not a MalformedInput: on an otherwise well-formed entry this is an
    internal consistency fault.
    """

    kind = "unknown_pattern"


class WiringMismatch(DecodeError):
    """A resolved mapping matches no permutation of the display's wires."""

    kind = "wiring_mismatch"
