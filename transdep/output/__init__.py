"""
Hierarchical output model: Projects -> Project -> Framework -> Dependency.
"""

from .dependency import Dependency
from .framework import Framework, FrameworkIdentifier
from .project import Project
from .projects import Projects

__all__ = ["Dependency", "Framework", "FrameworkIdentifier", "Project", "Projects"]
