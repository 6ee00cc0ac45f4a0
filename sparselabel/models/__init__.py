"""Cluster models consumed by downstream reporting."""
from sparselabel.models.prototype import PrototypeModel, MeanModel

__all__ = [
    "PrototypeModel",
    "MeanModel",
]
