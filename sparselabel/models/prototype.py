"""Cluster models that store a single representative vector."""

from dataclasses import dataclass
from typing import Any, ClassVar


@dataclass(frozen=True)
class PrototypeModel:
    """
    Cluster model holding one prototype vector.

    Attributes:
        prototype: Representative vector of the cluster
    """
    prototype: Any

    PROTOTYPE_TYPE: ClassVar[str] = "Prototype"

    @property
    def prototype_type(self) -> str:
        """Tag used when the model is rendered as text."""
        return self.PROTOTYPE_TYPE


@dataclass(frozen=True)
class MeanModel(PrototypeModel):
    """
    Cluster model that stores a mean for the cluster.

    Usage:
        model = MeanModel(mean_vector)
        model.mean            # mean_vector, unchanged
        model.prototype_type  # "Mean"
    """

    PROTOTYPE_TYPE: ClassVar[str] = "Mean"

    @property
    def mean(self) -> Any:
        return self.prototype
