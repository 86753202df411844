"""
Dependency classification engine.

Walks a resolved-library catalog to record provenance, then classifies the
libraries reachable from a project's direct references as direct or
transitive.
"""

from .catalog import Catalog, Library, ProjectAssets, TargetFrameworkAssets
from .classifier import TransitiveClassifier, filter_dependencies
from .walker import ProvenanceWalker

__all__ = [
    "Catalog",
    "Library",
    "ProjectAssets",
    "TargetFrameworkAssets",
    "ProvenanceWalker",
    "TransitiveClassifier",
    "filter_dependencies",
]
