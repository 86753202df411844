"""Tests for the Dependency record."""

import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest

from transdep.output.dependency import Dependency
from transdep.utils.exceptions import InvalidComparisonError


class TestDependencyIdentity:
    """Test equality, ordering and hashing of dependency records."""

    def test_equal_ignoring_case(self):
        assert Dependency("Serilog", "3.1.1-Beta") == Dependency("SERILOG", "3.1.1-beta")
        assert hash(Dependency("Serilog", "3.1.1-Beta")) == hash(Dependency("SERILOG", "3.1.1-beta"))

    def test_version_distinguishes_records(self):
        assert Dependency("Serilog", "3.1.1") != Dependency("Serilog", "3.0.0")

    def test_via_and_transitive_flag_do_not_affect_identity(self):
        left = Dependency("B", "1.0.0")
        right = Dependency("B", "1.0.0")
        left.via.add(Dependency("A", "2.0.0"))
        left.is_transitive = True

        assert left == right
        assert hash(left) == hash(right)

    def test_orders_by_identifier_then_version(self):
        dependencies = [
            Dependency("b", "1.0.0"),
            Dependency("A", "2.0.0"),
            Dependency("a", "10.0.0"),
        ]

        assert [str(d) for d in sorted(dependencies)] == ["a v10.0.0", "A v2.0.0", "b v1.0.0"]

    def test_version_compared_as_string(self):
        assert Dependency("A", "10.0.0") < Dependency("A", "9.0.0")

    def test_compare_to_is_clamped(self):
        assert Dependency("A", "1.0.0").compare_to(Dependency("Z", "1.0.0")) == -1
        assert Dependency("Z", "1.0.0").compare_to(Dependency("A", "1.0.0")) == 1
        assert Dependency("A", "1.0.0").compare_to(None) == 1

    def test_equality_against_foreign_type_is_false(self):
        assert Dependency("A", "1.0.0") != "A v1.0.0"
        assert not (Dependency("A", "1.0.0") == None)  # noqa: E711

    def test_ordering_against_foreign_type_raises(self):
        with pytest.raises(InvalidComparisonError, match="Object must be of type Dependency."):
            Dependency("A", "1.0.0") < "A"

    def test_usable_in_sets(self):
        via = {Dependency("A", "1.0.0"), Dependency("a", "1.0.0"), Dependency("B", "1.0.0")}
        assert len(via) == 2


class TestDependencyRendering:
    """Test string forms."""

    def test_str(self):
        assert str(Dependency("Microsoft.Extensions.Logging", "8.0.0")) == "Microsoft.Extensions.Logging v8.0.0"

    def test_defaults(self):
        dependency = Dependency("A", "1.0.0")
        assert dependency.via == set()
        assert dependency.is_transitive is False
