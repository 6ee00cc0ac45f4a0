"""Parsed dataset of labeled sparse vectors."""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional

import numpy as np

from sparselabel.core.types import SparseVector


@dataclass
class LabeledVector:
    """
    One parsed input record.

    Attributes:
        vector: The sparse vector
        labels: Labels attached to the record
        line_number: 1-based input line the record came from
    """
    vector: SparseVector
    labels: List[str] = field(default_factory=list)
    line_number: Optional[int] = None

    def __iter__(self) -> Iterator:
        return iter((self.vector, self.labels))


@dataclass
class Dataset:
    """
    Ordered records sharing one resolved dimensionality.

    Usage:
        dataset = parser.parse_text(text)
        for vector, labels in dataset:
            ...
    """
    records: List[LabeledVector] = field(default_factory=list)
    dimensionality: Optional[int] = None

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[LabeledVector]:
        return iter(self.records)

    def __getitem__(self, index: int) -> LabeledVector:
        return self.records[index]

    def vectors(self) -> List[SparseVector]:
        return [record.vector for record in self.records]

    def labels(self) -> List[List[str]]:
        return [record.labels for record in self.records]

    def to_matrix(self) -> np.ndarray:
        """Stack all vectors into a dense (n_records, dimensionality + 1) array."""
        if not self.records:
            width = 0 if self.dimensionality is None else max(self.dimensionality + 1, 0)
            return np.zeros((0, width), dtype=np.float64)
        return np.vstack([vector.to_dense() for vector in self.vectors()])

    def __repr__(self) -> str:
        return f"Dataset(records={len(self.records)}, dimensionality={self.dimensionality})"
