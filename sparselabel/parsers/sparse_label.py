"""Line format for sparse vectors interleaved with labels."""

import logging
from typing import Dict, List

from sparselabel.core.config import ParserOptions
from sparselabel.core.types import SparseVector
from sparselabel.parsers.base import ParsedLine, ParseSession
from sparselabel.parsers.exceptions import FormatError
from sparselabel.parsers.factory import register_line_format
from sparselabel.parsers.tokens import classify_token, parse_value

logger = logging.getLogger(__name__)

SPARSE_FORMAT_DESCRIPTION = (
    "A single line provides a single point. Entries are separated by whitespace. "
    "The first entry of each line is the number of attributes with coordinate "
    "value not zero. Subsequent entries are of the form (index, value), where "
    "index is the number of the corresponding dimension and value is the value "
    "of the corresponding attribute. Any pair of two subsequent entries is tried "
    "to be read as int and float. If this fails for the first of the pair, it is "
    "appended to the labels, so a label must not be parseable as an integer. If "
    "the float component is not parseable, parsing fails. A fixed label index "
    "(counting all entries from 0) can be configured to force a class label "
    "column. Empty lines and comment lines are ignored. Once the input has been "
    "read completely, the maximum occurring index is set as dimensionality of "
    "every vector."
)


@register_line_format("sparse", description=SPARSE_FORMAT_DESCRIPTION)
def parse_sparse_line(line: str, session: ParseSession, options: ParserOptions) -> ParsedLine:
    """
    Parse one record line into a sparse vector and its labels.

    Args:
        line: Non-empty, non-comment input line
        session: Current parse session, its running maximum index is updated
        options: Parser settings (label_index is used here)

    Returns:
        ParsedLine whose vector dimensionality is still unresolved

    Raises:
        FormatError: If the entry after an index is not a number
    """
    tokens = line.split()
    if not tokens:
        return ParsedLine(vector=SparseVector())

    declared_count = classify_token(tokens[0]).index
    if declared_count is None:
        logger.debug(f"Line {session.line_number}: declared count '{tokens[0]}' is not an integer")

    entries: Dict[int, float] = {}
    labels: List[str] = []
    last = len(tokens) - 1

    i = 1
    while i < last:
        token = tokens[i]
        if i == options.label_index:
            labels.append(token)
            i += 1
            continue

        classified = classify_token(token)
        if not classified.is_index:
            labels.append(token)
            i += 1
            continue

        value = parse_value(tokens[i + 1])
        if value is None:
            raise FormatError(
                f"expected a number after index {classified.index}, got '{tokens[i + 1]}'"
            )
        entries[classified.index] = value
        session.observe_index(classified.index)
        i += 2

    # Trailing entry without a value partner
    if i == last:
        labels.append(tokens[last])

    return ParsedLine(
        vector=SparseVector(entries=entries),
        labels=labels,
        declared_count=declared_count,
    )
