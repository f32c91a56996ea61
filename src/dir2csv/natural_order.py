"""Natural ordering of names.

Names are compared character by character. Where both names reach a run of ASCII
digits at the same point, the two runs compare by their numeric value instead, so
``file2`` sorts before ``file10`` while ``image.png`` still sorts before ``image1.png``.
Equal names keep their input position.
"""

import functools
import re
from typing import Any, Callable, Iterable, List, Optional, Sequence, TypeVar

T = TypeVar("T")

# Only ASCII digits form numbers; other Unicode digits compare as text
_DIGIT_RUN = re.compile(r"[0-9]+")


def compare_natural(left: str, right: str) -> int:
    """Compare two names in natural order.

    Args:
        left: First name.
        right: Second name.

    Returns:
        A negative number, zero or a positive number as ``left`` sorts before, together
        with or after ``right``.

    Example:
        >>> compare_natural("file2", "file10") < 0
        True
        >>> compare_natural("a01", "a1")
        0
    """
    i = j = 0
    while i < len(left) and j < len(right):
        left_number = _DIGIT_RUN.match(left, i)
        right_number = _DIGIT_RUN.match(right, j)
        if left_number and right_number:
            a, b = int(left_number.group()), int(right_number.group())
            if a != b:
                return -1 if a < b else 1
            i, j = left_number.end(), right_number.end()
        elif left[i] != right[j]:
            return -1 if left[i] < right[j] else 1
        else:
            i += 1
            j += 1
    # A name that is a prefix of the other sorts first
    return (i < len(left)) - (j < len(right))


_NaturalKey = functools.cmp_to_key(compare_natural)


def natural_key(name: str) -> Any:
    """Build a sort key that orders names naturally.

    Keys support the usual comparison operators and can be nested in tuples.

    Example:
        >>> natural_key("file2") < natural_key("file10")
        True
        >>> natural_key("image.png") < natural_key("image1.png")
        True
    """
    return _NaturalKey(name)


def natural_order(names: Sequence[str]) -> List[int]:
    """Return the permutation of indices that puts ``names`` in natural order.

    Ties (for example ``"1"`` and ``"01"``) keep their relative input order.

    Args:
        names: Names to order.

    Returns:
        A list ``perm`` such that ``[names[i] for i in perm]`` is naturally sorted.

    Example:
        >>> natural_order(["file10", "file2", "file1"])
        [2, 1, 0]
    """
    keys = [natural_key(name) for name in names]
    return sorted(range(len(names)), key=keys.__getitem__)


def natural_sorted(items: Iterable[T], key: Optional[Callable[[T], str]] = None) -> List[T]:
    """Sort items naturally, optionally by a string extracted with ``key``.

    Example:
        >>> natural_sorted(["a10", "a9", "a1"])
        ['a1', 'a9', 'a10']
    """
    extract = key if key is not None else str
    return sorted(items, key=lambda item: natural_key(extract(item)))
