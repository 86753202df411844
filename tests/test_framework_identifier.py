"""Tests for target framework parsing."""

import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest
from packaging.version import Version

from transdep.output.framework import (
    NET_CORE_APP,
    NET_FRAMEWORK,
    NET_STANDARD,
    Framework,
    FrameworkIdentifier,
    shortened_version,
)


class TestFrameworkIdentifierParse:
    """Test moniker parsing."""

    @pytest.mark.parametrize(
        "moniker,name,version",
        [
            (".NETCoreApp,Version=v8.0", NET_CORE_APP, "8.0"),
            (".NETStandard,Version=v2.0", NET_STANDARD, "2.0"),
            ("net8.0", NET_CORE_APP, "8.0"),
            ("net8.0-windows", NET_CORE_APP, "8.0"),
            ("netcoreapp3.1", NET_CORE_APP, "3.1"),
            ("netstandard2.0", NET_STANDARD, "2.0"),
            ("net472", NET_FRAMEWORK, "4.7.2"),
            ("net48", NET_FRAMEWORK, "4.8"),
        ],
    )
    def test_known_monikers(self, moniker, name, version):
        identifier = FrameworkIdentifier.parse(moniker)

        assert identifier.name == name
        assert identifier.version == Version(version)

    def test_unknown_moniker_keeps_name(self):
        identifier = FrameworkIdentifier.parse("uap10.0")

        assert identifier.name == "uap10.0"
        assert identifier.version == Version("0.0")

    def test_long_and_short_forms_are_equal(self):
        assert FrameworkIdentifier.parse("net8.0") == FrameworkIdentifier.parse(".NETCoreApp,Version=v8.0")

    def test_usable_as_dict_key(self):
        targets = {FrameworkIdentifier.parse(".NETCoreApp,Version=v8.0"): "target"}

        assert targets.get(FrameworkIdentifier.parse("net8.0")) == "target"


class TestFrameworkRendering:
    """Test string forms of identifiers and framework nodes."""

    @pytest.mark.parametrize(
        "version,expected",
        [("8.0", "8.0"), ("8", "8.0"), ("4.7.2", "4.7.2"), ("1.0.0.5", "1.0.0.5"), ("4.6.1.0", "4.6.1")],
    )
    def test_shortened_version(self, version, expected):
        assert shortened_version(Version(version)) == expected

    def test_identifier_str(self):
        assert str(FrameworkIdentifier.parse("net8.0")) == ".NETCoreApp,Version=v8.0"

    def test_framework_str(self):
        assert str(Framework(FrameworkIdentifier.parse("net472"))) == ".NETFramework v4.7.2"


class TestPlatformFrameworks:
    """Test platform-specific monikers."""

    def test_platform_is_kept(self):
        identifier = FrameworkIdentifier.parse("net8.0-windows7.0")

        assert identifier.name == NET_CORE_APP
        assert identifier.version == Version("8.0")
        assert identifier.platform == "windows7.0"
        assert identifier.platform_name == "windows"

    def test_platform_frameworks_are_distinct(self):
        plain = FrameworkIdentifier.parse("net8.0")
        windows = FrameworkIdentifier.parse("net8.0-windows7.0")

        assert plain != windows
        assert len({plain, windows}) == 2
        assert Framework(plain) != Framework(windows)

    def test_platform_rendering_round_trips(self):
        identifier = FrameworkIdentifier.parse("net8.0-Windows7.0")

        assert str(identifier) == ".NETCoreApp,Version=v8.0,Platform=windows7.0"
        assert FrameworkIdentifier.parse(str(identifier)) == identifier
        assert str(Framework(identifier)) == ".NETCoreApp v8.0 (windows7.0)"

    def test_alias_without_platform_version_matches_target(self):
        alias = FrameworkIdentifier.parse("net8.0-windows")

        assert alias.matches(FrameworkIdentifier.parse("net8.0-windows7.0"))
        assert not alias.matches(FrameworkIdentifier.parse("net8.0"))
        assert not alias.matches(FrameworkIdentifier.parse("net8.0-android34.0"))
        assert not FrameworkIdentifier.parse("net8.0").matches(alias)
