"""
Target framework identifier and the Framework output node.
"""

import re
from dataclasses import dataclass
from typing import Iterable, Optional

from packaging.version import InvalidVersion, Version

from .base import IdentifiedBase
from .dependency import Dependency

NET_CORE_APP = ".NETCoreApp"
NET_STANDARD = ".NETStandard"
NET_FRAMEWORK = ".NETFramework"

_LONG_FORM = re.compile(
    r"^(?P<name>[^,]+),\s*Version=v?(?P<version>[0-9.]+)(?:,\s*Platform=(?P<platform>[^,]+))?",
    re.IGNORECASE,
)
_SHORT_FORM = re.compile(r"^(?P<prefix>netcoreapp|netstandard|net)(?P<version>[0-9.]+)$", re.IGNORECASE)
_PLATFORM_VERSION = re.compile(r"[0-9.]+$")


def shortened_version(version: Version) -> str:
    """Render ``major.minor``, adding build and revision only when they are non-zero."""
    release = tuple(version.release) + (0, 0, 0, 0)
    major, minor, build, revision = release[:4]

    result = f"{major}.{minor}"
    if build > 0 or revision > 0:
        result += f".{build}"
    if revision > 0:
        result += f".{revision}"
    return result


@dataclass(frozen=True)
class FrameworkIdentifier:
    """
    A target framework, e.g. ``.NETCoreApp`` version 8.0.

    ``platform`` holds the OS suffix of platform-specific frameworks
    (``windows7.0`` for ``net8.0-windows7.0``) and is empty otherwise.
    """

    name: str
    version: Version
    platform: str = ""

    @classmethod
    def parse(cls, moniker: str) -> "FrameworkIdentifier":
        """
        Parse a target framework moniker.

        Accepts the long form (``.NETCoreApp,Version=v8.0``) and the short
        forms (``net8.0``, ``net8.0-windows``, ``netcoreapp3.1``,
        ``netstandard2.0``, ``net472``). Anything else keeps the moniker as the
        name with version 0.0.
        """
        moniker = moniker.strip()

        match = _LONG_FORM.match(moniker)
        if match:
            version = _parse_version(match.group("version"))
            if version is not None:
                return cls(match.group("name"), version, (match.group("platform") or "").lower())

        short, _, platform = moniker.partition("-")
        match = _SHORT_FORM.match(short)
        if match:
            prefix = match.group("prefix").lower()
            digits = match.group("version")

            if prefix == "netcoreapp":
                name = NET_CORE_APP
            elif prefix == "netstandard":
                name = NET_STANDARD
            elif "." in digits:
                # net5.0 and later
                name = NET_CORE_APP
            else:
                # net472 -> 4.7.2
                name = NET_FRAMEWORK
                digits = ".".join(digits)

            version = _parse_version(digits)
            if version is not None:
                return cls(name, version, platform.lower())

        return cls(moniker, Version("0.0"))

    @property
    def platform_name(self) -> str:
        """The platform without its version (``windows`` for ``windows7.0``)."""
        return _PLATFORM_VERSION.sub("", self.platform)

    def matches(self, other: "FrameworkIdentifier") -> bool:
        """
        Equal, or equal apart from a platform version that only ``other`` spells out.

        Project aliases such as ``net8.0-windows`` resolve to targets keyed
        ``net8.0-windows7.0``.
        """
        if self == other:
            return True
        return (
            self.name == other.name
            and self.version == other.version
            and self.platform != ""
            and self.platform == self.platform_name
            and self.platform_name == other.platform_name
        )

    def __str__(self) -> str:
        result = f"{self.name},Version=v{shortened_version(self.version)}"
        if self.platform:
            result += f",Platform={self.platform}"
        return result


def _parse_version(value: str) -> Optional[Version]:
    try:
        return Version(value)
    except InvalidVersion:
        return None


class Framework(IdentifiedBase[FrameworkIdentifier, Dependency]):
    """The classified dependencies of one project for one target framework."""

    def __init__(
        self,
        identifier: FrameworkIdentifier,
        children: Optional[Iterable[Dependency]] = None,
        capacity: int = 0,
    ):
        super().__init__(identifier, capacity=capacity, children=children)

    def is_add_valid(self, child: Dependency) -> bool:
        return True

    def __str__(self) -> str:
        result = f"{self.identifier.name} v{shortened_version(self.identifier.version)}"
        if self.identifier.platform:
            result += f" ({self.identifier.platform})"
        return result
