"""
Project output node.
"""

from .base import IdentifiedBase
from .framework import Framework


class Project(IdentifiedBase[str, Framework]):
    """A project keyed by name; only frameworks with dependencies are kept."""

    def __init__(self, identifier: str, capacity: int = 0):
        super().__init__(identifier, capacity=capacity)

    def is_add_valid(self, child: Framework) -> bool:
        return child.has_children
