"""Assembles a dataset from line-oriented sparse vector input."""

import io
import logging
from pathlib import Path
from typing import Iterable, List, Optional

from sparselabel.core.config import Config, ParserOptions
from sparselabel.parsers.base import ParseSession, ParserState
from sparselabel.parsers.dataset import Dataset, LabeledVector
from sparselabel.parsers.exceptions import FormatError, ParseIOError
from sparselabel.parsers.factory import get_line_format

logger = logging.getLogger(__name__)


class SparseVectorLabelParser:
    """
    Parses one point per line into a dataset of labeled sparse vectors.

    The parser holds configuration only. Every call to parse() runs its
    own ParseSession, so an instance can be reused for unrelated inputs.

    Usage:
        parser = SparseVectorLabelParser(ParserOptions(label_index=3))
        dataset = parser.load(Path("points.txt"))

        # Or from config
        parser = SparseVectorLabelParser.from_config(Config.load("config/parser.yaml"))
    """

    def __init__(self, options: Optional[ParserOptions] = None):
        """
        Args:
            options: Parser settings (defaults: '#' comments, no label column)

        Raises:
            UnknownLineFormatError: If options.line_format is not registered
        """
        self.options = options or ParserOptions()
        self.line_format = get_line_format(self.options.line_format)

    @classmethod
    def from_config(cls, config: Config) -> "SparseVectorLabelParser":
        return cls(ParserOptions.from_config(config))

    def parse(self, stream: Iterable[str]) -> Dataset:
        """
        Read every line of stream and build the dataset.

        Args:
            stream: Text stream or any iterable of lines

        Returns:
            Dataset whose vectors all share the maximum index seen as dimensionality

        Raises:
            FormatError: If a value after an index is not a number
            ParseIOError: If reading from the stream fails
        """
        session = ParseSession()
        records = self._read_records(stream, session)

        session.transition(ParserState.FINALIZE)
        for record in records:
            record.vector.dimensionality = session.max_index
        session.transition(ParserState.DONE)

        logger.info(f"Parsed {len(records)} records, dimensionality {session.max_index}")
        return Dataset(records=records, dimensionality=session.max_index)

    def parse_lines(self, lines: Iterable[str]) -> Dataset:
        """Alias of parse() for in-memory line sequences."""
        return self.parse(lines)

    def parse_text(self, text: str) -> Dataset:
        """Parse a whole document held in a string."""
        # Same line splitting as open() with universal newlines
        return self.parse(io.StringIO(text, newline=None))

    def load(self, file_path: Path) -> Dataset:
        """
        Parse a file from disk.

        Raises:
            FileNotFoundError: If file doesn't exist
        """
        file_path = Path(file_path)

        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        logger.info(f"Loading {file_path} with line format '{self.options.line_format}'")
        with open(file_path, "r", encoding=self.options.encoding) as f:
            return self.parse(f)

    def is_skipped(self, line: str) -> bool:
        """Blank and comment lines carry no record."""
        marker = self.options.comment_marker
        return not line.strip() or bool(marker and line.startswith(marker))

    def _read_records(self, stream: Iterable[str], session: ParseSession) -> List[LabeledVector]:
        records: List[LabeledVector] = []
        lines = iter(stream)
        session.transition(ParserState.READING_LINES)

        while True:
            session.line_number += 1
            try:
                line = next(lines)
            except StopIteration:
                break
            except (OSError, UnicodeDecodeError) as e:
                session.transition(ParserState.FAILED)
                raise ParseIOError(str(e), line_number=session.line_number) from e

            line = line.rstrip("\r\n")
            if self.is_skipped(line):
                continue

            try:
                parsed = self.line_format(line, session, self.options)
            except FormatError as e:
                session.transition(ParserState.FAILED)
                raise FormatError(e.reason, line_number=session.line_number) from e

            records.append(LabeledVector(
                vector=parsed.vector,
                labels=parsed.labels,
                line_number=session.line_number,
            ))
            logger.debug(
                f"Line {session.line_number}: {parsed.vector.nnz} entries, {len(parsed.labels)} labels"
            )

        return records
