"""Pluggable per-candidate signals."""

from .quality import IdBucketQualityProvider, QualitySignalProvider

__all__ = [
    "IdBucketQualityProvider",
    "QualitySignalProvider",
]
