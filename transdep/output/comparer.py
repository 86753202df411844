"""
Comparison helpers shared by the output model.

Every output entity defines one comparison function returning -1, 0 or 1.
The ``Comparable`` mixin derives equality and ordering operators from it so
the contract lives in a single place per class.
"""

from typing import Any, Callable, Optional, TypeVar

from transdep.utils.exceptions import InvalidComparisonError

T = TypeVar("T")

ComparisonFunction = Callable[[Any, Any], int]


def map_compare_to(value: int) -> int:
    """Clamp a comparison result to -1, 0 or 1."""
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


def fold(value: str) -> str:
    """
    Case-fold a string for culture-invariant, case-insensitive ordinal comparison.

    Characters are upper-cased one at a time and keep their own value when
    the upper-case form is longer than one character (``"ß"`` stays ``"ß"``),
    so folding never changes a string's length.
    """
    if value.isascii():
        return value.upper()
    return "".join(_fold_char(char) for char in value)


def _fold_char(char: str) -> str:
    upper = char.upper()
    return upper if len(upper) == 1 else char


def compare_strings(left: str, right: str) -> int:
    """Compare two strings ignoring case, by code point."""
    left_folded = fold(left)
    right_folded = fold(right)
    return map_compare_to((left_folded > right_folded) - (left_folded < right_folded))


def compare_to(current: T, other: Optional[T], function: ComparisonFunction) -> int:
    if current is other:
        return 0
    if other is None:
        return 1
    return function(current, other)


def compare_to_object(
    current: T,
    obj: Any,
    function: ComparisonFunction,
    class_name: str,
) -> int:
    """
    Compare against an arbitrary object.

    Raises:
        InvalidComparisonError: If ``obj`` is not of ``current``'s class
    """
    if obj is None:
        return 1
    if not isinstance(obj, current.__class__):
        raise InvalidComparisonError(class_name)
    return compare_to(current, obj, function)


class Comparable:
    """
    Mixin deriving rich comparisons from ``comparison_function``.

    Subclasses must set ``comparison_function`` and define ``__hash__``
    consistently with it.
    """

    comparison_function: ComparisonFunction

    def compare_to(self, other: Any) -> int:
        return compare_to_object(self, other, type(self).comparison_function, type(self).__name__)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return compare_to(self, other, type(self).comparison_function) == 0

    def __ne__(self, other: Any) -> bool:
        return not self.__eq__(other)

    def __lt__(self, other: Any) -> bool:
        return self.compare_to(other) < 0

    def __le__(self, other: Any) -> bool:
        return self.compare_to(other) <= 0

    def __gt__(self, other: Any) -> bool:
        return self.compare_to(other) > 0

    def __ge__(self, other: Any) -> bool:
        return self.compare_to(other) >= 0

    __hash__ = None  # type: ignore[assignment]
