"""Row accessors

A table is a list of rows that are either all positional (lists, tuples)
or all named (dicts and other mappings). The accessor is picked once from
the first row and then used for every row of the scan. Fields missing from a
row read as None.
"""

from collections.abc import Mapping, Sequence


class sequence_row:
    """Field access by integer position"""

    @staticmethod
    def get(row, selector):
        if -len(row) <= selector < len(row):
            return row[selector]
        return None


class mapping_row:
    """Field access by string key"""

    @staticmethod
    def get(row, selector):
        return row.get(selector)


def row_accessor(row):
    """return the accessor matching the shape of ``row``"""
    if isinstance(row, Mapping):
        return mapping_row
    if isinstance(row, Sequence) and not isinstance(row, (str, bytes)):
        return sequence_row
    raise TypeError(
        "table rows must be sequences or mappings, but the first row is %r"
        % type(row)
    )


def check_selector(accessor, selector, name):
    """Make sure a field selector fits the row shape"""
    if accessor is sequence_row and not isinstance(selector, int):
        raise TypeError(
            f"{name} must be an integer index for a table of sequences, got {selector!r}"
        )
