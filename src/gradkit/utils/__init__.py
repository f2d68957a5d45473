"""Utility functions for the gradkit package."""

from .concurrency import set_default_workers, set_workers
from .linalg import weighted_lstsq

__all__ = [
    "set_default_workers",
    "set_workers",
    "weighted_lstsq",
]
