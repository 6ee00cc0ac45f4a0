"""Line parsers module - pluggable line formats for sparse vector input."""
from sparselabel.parsers.base import LineFormat, ParsedLine, ParseSession, ParserState
from sparselabel.parsers.dataset import Dataset, LabeledVector
from sparselabel.parsers.exceptions import (
    ParserError,
    FormatError,
    ParseIOError,
    UnknownLineFormatError,
)
from sparselabel.parsers.factory import (
    register_line_format,
    get_registered_line_formats,
    get_line_format,
    describe_line_format,
)
from sparselabel.parsers.tokens import TokenClass, classify_token

# Import line formats to trigger registration
from sparselabel.parsers.sparse_label import parse_sparse_line

from sparselabel.parsers.assembler import SparseVectorLabelParser

__all__ = [
    "LineFormat",
    "ParsedLine",
    "ParseSession",
    "ParserState",
    "Dataset",
    "LabeledVector",
    "ParserError",
    "FormatError",
    "ParseIOError",
    "UnknownLineFormatError",
    "register_line_format",
    "get_registered_line_formats",
    "get_line_format",
    "describe_line_format",
    "TokenClass",
    "classify_token",
    "parse_sparse_line",
    "SparseVectorLabelParser",
]
