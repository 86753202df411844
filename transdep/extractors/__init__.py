"""
Extractors package for reading resolved-library catalogs.

Provides the assets file reader and the restore runner that produces those
files.
"""

from .assets import AssetsReader
from .base import BaseExtractor
from .dotnet import DotNetRunner

__all__ = ["AssetsReader", "BaseExtractor", "DotNetRunner"]
