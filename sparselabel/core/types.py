"""Shared types used across modules."""
from dataclasses import dataclass, field
from typing import Dict, List, Optional

import numpy as np


@dataclass
class SparseVector:
    """
    Sparse vector representation.

    Attributes:
        entries: Dimension index -> coordinate value, non-zero entries only
        dimensionality: Size of the coordinate space, None until resolved
    """
    entries: Dict[int, float] = field(default_factory=dict)
    dimensionality: Optional[int] = None

    def __post_init__(self):
        self.entries = dict(self.entries)

    @property
    def nnz(self) -> int:
        """Number of stored entries."""
        return len(self.entries)

    @property
    def indices(self) -> List[int]:
        return sorted(self.entries)

    @property
    def values(self) -> List[float]:
        return [self.entries[i] for i in self.indices]

    @property
    def is_resolved(self) -> bool:
        return self.dimensionality is not None

    def get(self, index: int) -> float:
        """Value at index, 0.0 for absent entries."""
        return self.entries.get(index, 0.0)

    def to_dict(self) -> Dict[int, float]:
        """Convert to {index: value} dict."""
        return dict(self.entries)

    def to_dense(self) -> np.ndarray:
        """
        Expand to a dense array covering indices 0..dimensionality.

        Allocates dimensionality + 1 float64 slots. Parsed indices are
        capped at 2**31 - 1, so very sparse high-index data can still
        need more memory than is available.

        Raises:
            ValueError: If dimensionality has not been resolved yet
        """
        if self.dimensionality is None:
            raise ValueError("Cannot densify a vector with unresolved dimensionality")
        dense = np.zeros(max(self.dimensionality + 1, 0), dtype=np.float64)
        for index, value in self.entries.items():
            dense[index] = value
        return dense

    def __repr__(self) -> str:
        return f"SparseVector(nnz={self.nnz}, dimensionality={self.dimensionality})"
