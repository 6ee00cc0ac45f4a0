"""Token classification: dimension index or label."""

import re
from dataclasses import dataclass
from typing import Optional

# Optional plus sign, ASCII digits only
INDEX_PATTERN = re.compile(r"\+?[0-9]+")

# Largest accepted dimension index (signed 32-bit range)
MAX_INDEX = 2**31 - 1
MAX_INDEX_DIGITS = len(str(MAX_INDEX))


@dataclass(frozen=True)
class TokenClass:
    """
    Outcome of classifying one token.

    Attributes:
        token: The raw token
        index: Parsed dimension index, or None when the token is a label
    """
    token: str
    index: Optional[int] = None

    @property
    def is_index(self) -> bool:
        return self.index is not None

    @classmethod
    def label(cls, token: str) -> "TokenClass":
        return cls(token=token)

    @classmethod
    def of_index(cls, token: str, index: int) -> "TokenClass":
        return cls(token=token, index=index)


def classify_token(token: str) -> TokenClass:
    """
    Try to read a token as a non-negative integer index.

    Failure is the normal signal that the token is a label, so this
    never raises. Integers above MAX_INDEX are labels too.
    """
    if not INDEX_PATTERN.fullmatch(token):
        return TokenClass.label(token)

    digits = token.lstrip("+").lstrip("0")
    if len(digits) > MAX_INDEX_DIGITS:
        return TokenClass.label(token)

    index = int(digits or "0")
    if index > MAX_INDEX:
        return TokenClass.label(token)
    return TokenClass.of_index(token, index)


def parse_value(token: str) -> Optional[float]:
    """Read a coordinate value, None if the token is not a float."""
    # float() accepts digit-group underscores, plain literals do not
    if "_" in token:
        return None
    try:
        return float(token)
    except ValueError:
        return None
