"""
Root of the output model.
"""

from .base import Base
from .project import Project


class Projects(Base[Project]):
    """All analysed projects that ended up with at least one non-empty framework."""

    def __init__(self, capacity: int = 0):
        super().__init__(capacity=capacity)

    def is_add_valid(self, child: Project) -> bool:
        return child.has_children
