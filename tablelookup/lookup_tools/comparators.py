"""Row comparisons used to drive a table scan

A scan compares each row with the target and gets back one of the three
ordering signals ``LESS``, ``EQUAL`` and ``GREATER``. The comparison is either
a numeric comparison of one field against the lookup value
(:class:`field_comparison`) or a user supplied function
(:class:`custom_comparator`).
"""

import numbers

LESS = -1
EQUAL = 0
GREATER = 1

ORDERINGS = (LESS, EQUAL, GREATER)


class ComparatorContractError(RuntimeError):
    """A comparator returned something other than -1, 0 or 1"""


def three_way(a, b):
    """Numeric three-way comparison of a and b

    Returns None for unordered operands such as NaN.
    """
    if a < b:
        return LESS
    if a > b:
        return GREATER
    if a == b:
        return EQUAL
    return None


class field_comparison:
    """Compare ``row[field]`` numerically against ``value``"""

    def __init__(self, field, value):
        self.field = field
        self.value = value

    def compare(self, accessor, row):
        return three_way(accessor.get(row, self.field), self.value)

    def __repr__(self):
        return f"field_comparison(field={self.field!r}, value={self.value!r})"


class custom_comparator:
    """Wrap a user function returning -1, 0 or 1 for a row

    The function receives the row, and the lookup value as second argument
    when one was given.
    """

    _unset = object()

    def __init__(self, code, value=_unset):
        self.code = code
        self.value = value

    @property
    def has_value(self):
        return self.value is not custom_comparator._unset

    def compare(self, accessor, row):
        if self.has_value:
            return self.code(row, self.value)
        return self.code(row)

    def __repr__(self):
        value = f", value={self.value!r}" if self.has_value else ""
        return f"custom_comparator({self.code!r}{value})"


def check_ordering(cmp):
    """Return ``cmp`` as one of the ordering signals or raise"""
    if isinstance(cmp, numbers.Real) and cmp in ORDERINGS:
        return int(cmp)
    raise ComparatorContractError(
        f"Something's wrong, comparator result is not -1|0|1 ({cmp!r})"
    )
