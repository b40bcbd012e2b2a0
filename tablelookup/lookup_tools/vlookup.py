"""Look up a value in a table row by row

This is the VLOOKUP of spreadsheets: the table is scanned once, top to bottom,
until the row holding the lookup value is found, and a field of that row is
returned. With ``approx`` the nearest preceding row is used when there is no
exact match, and with ``interpolate`` the result is linearly interpolated
between the two rows bracketing the lookup value.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence, Union

from tablelookup.lookup_tools.comparators import (
    EQUAL,
    GREATER,
    LESS,
    check_ordering,
    custom_comparator,
    field_comparison,
)
from tablelookup.lookup_tools.rows import check_selector, row_accessor
from tablelookup.logger import json_str, request_summary

logger = logging.getLogger(__name__)

Selector = Union[int, str]


@dataclass(frozen=True)
class LookupResult:
    """Outcome of a lookup

    ``found`` tells a missing match apart from a matched row whose result
    field is itself ``None``.
    """

    found: bool
    value: Any = None
    interpolated: bool = False

    def __bool__(self):
        return self.found

    def get(self, default=None):
        """the value if found, ``default`` otherwise"""
        return self.value if self.found else default


NOT_FOUND = LookupResult(found=False)


@dataclass(frozen=True)
class LookupRequest:
    """Everything one lookup needs, already validated"""

    table: Sequence
    comparison: Union[field_comparison, custom_comparator]
    result_field: Selector
    approx: bool = False
    interpolate: bool = False


def _extract_exact(accessor, matching_row, result_field):
    return LookupResult(found=True, value=accessor.get(matching_row, result_field))


def _extract_interpolated(accessor, prev_row, row, comparison, result_field):
    x1 = accessor.get(prev_row, comparison.field)
    x2 = accessor.get(row, comparison.field)
    y1 = accessor.get(prev_row, result_field)
    y2 = accessor.get(row, result_field)
    value = y1 + (comparison.value - x1) / (x2 - x1) * (y2 - y1)
    return LookupResult(found=True, value=value, interpolated=True)


def lookup(request):
    """Run a single forward scan over ``request.table``

    Returns a :class:`LookupResult`. Raises
    :class:`~tablelookup.lookup_tools.comparators.ComparatorContractError`
    if the comparison yields something other than -1, 0 or 1.
    """
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("lookup request: %s", json_str(request_summary(request)))
    table = request.table
    if len(table) == 0:
        return NOT_FOUND

    accessor = row_accessor(table[0])
    comparison = request.comparison
    prev_row = None
    for irow, row in enumerate(table):
        cmp = check_ordering(comparison.compare(accessor, row))
        if cmp == EQUAL:
            logger.debug("exact match at row %d", irow)
            return _extract_exact(accessor, row, request.result_field)
        elif cmp == GREATER:
            if request.approx and prev_row is not None:
                if request.interpolate:
                    logger.debug(
                        "lookup value exceeded at row %d, interpolating from row %d",
                        irow,
                        irow - 1,
                    )
                    return _extract_interpolated(
                        accessor, prev_row, row, comparison, request.result_field
                    )
                logger.debug("lookup value exceeded at row %d, using previous row", irow)
                return _extract_exact(accessor, prev_row, request.result_field)
            logger.debug("lookup value exceeded at row %d, not found", irow)
            return NOT_FOUND
        assert cmp == LESS
        prev_row = row

    if request.approx and prev_row is not None:
        logger.debug("table exhausted, using last row")
        return _extract_exact(accessor, prev_row, request.result_field)
    logger.debug("table exhausted, not found")
    return NOT_FOUND


def _as_rows(table):
    # a DataFrame becomes a list of named rows
    if hasattr(table, "to_dict") and hasattr(table, "columns"):
        return table.to_dict("records")
    if not isinstance(table, (list, tuple)):
        raise TypeError("table must be a list of rows, but got %r" % type(table))
    return table


def _check_field(selector, name):
    if not isinstance(selector, (int, str)) or isinstance(selector, bool):
        raise TypeError(f"{name} must be an int or a str, got {selector!r}")


def make_request(
    table,
    lookup_value=custom_comparator._unset,
    lookup_field: Optional[Selector] = None,
    lookup_code: Optional[Callable] = None,
    result_field: Optional[Selector] = None,
    approx: bool = False,
    interpolate: bool = False,
):
    """Validate the arguments of :func:`table_vlookup` and build a request"""
    if table is None:
        raise ValueError("table is required")
    table = _as_rows(table)
    if result_field is None:
        raise ValueError("result_field is required")
    _check_field(result_field, "result_field")

    has_value = lookup_value is not custom_comparator._unset
    if lookup_field is not None and lookup_code is not None:
        raise ValueError("Specify only one of lookup_field and lookup_code")
    if lookup_field is None and lookup_code is None:
        raise ValueError("Specify either lookup_field or lookup_code")
    if interpolate and not approx:
        raise ValueError("interpolate can only be used together with approx")

    if lookup_code is not None:
        if not callable(lookup_code):
            raise TypeError("lookup_code must be callable, got %r" % lookup_code)
        if interpolate:
            raise ValueError("interpolate cannot be used with lookup_code")
        comparison = custom_comparator(lookup_code, lookup_value)
    else:
        if not has_value:
            raise ValueError("lookup_field and lookup_value must be given together")
        _check_field(lookup_field, "lookup_field")
        comparison = field_comparison(lookup_field, lookup_value)

    if len(table) > 0:
        accessor = row_accessor(table[0])
        check_selector(accessor, result_field, "result_field")
        if lookup_code is None:
            check_selector(accessor, lookup_field, "lookup_field")

    return LookupRequest(
        table=table,
        comparison=comparison,
        result_field=result_field,
        approx=bool(approx),
        interpolate=bool(interpolate),
    )


def table_vlookup(
    table,
    lookup_value=custom_comparator._unset,
    lookup_field: Optional[Selector] = None,
    lookup_code: Optional[Callable] = None,
    result_field: Optional[Selector] = None,
    approx: bool = False,
    interpolate: bool = False,
) -> LookupResult:
    """Look up a value in a table row by row

    The table is a list of rows, either all sequences (fields selected by
    integer index) or all mappings (fields selected by key), sorted in
    ascending order by the lookup field.

    Parameters
    ----------
        table: list
            The rows to scan. A ``pandas.DataFrame`` is also accepted.
        lookup_value:
            The value to look up in ``lookup_field``. Passed as second
            argument to ``lookup_code`` when both are given.
        lookup_field: int or str
            Where to look up the lookup value in.
        lookup_code: callable
            Instead of ``lookup_field`` and ``lookup_value``, a function
            called with the row (and the lookup value, if given) that returns
            -1 if the row comes before the value, 0 if it matches and 1 if it
            comes after.
        result_field: int or str
            Where to get the result from.
        approx: bool
            When the lookup field exceeds the lookup value, or the table runs
            out, use the previous row instead of failing.
        interpolate: bool
            With ``approx``, linearly interpolate the result between the two
            rows around the lookup value. Not available with ``lookup_code``.

    Example::

        table = [
            {"min_income": 0, "tax_rate": 0.13},
            {"min_income": 8_000, "tax_rate": 0.18},
            {"min_income": 15_000, "tax_rate": 0.22},
            {"min_income": 35_000, "tax_rate": 0.30},
            {"min_income": 85_000, "tax_rate": 0.39},
            {"min_income": 140_000, "tax_rate": 0.45},
        ]
        table_vlookup(table, 35_000, "min_income", result_field="tax_rate").value
        # 0.30
        table_vlookup(table, 40_000, "min_income", result_field="tax_rate").found
        # False
        table_vlookup(
            table, 40_000, "min_income", result_field="tax_rate", approx=True
        ).value
        # 0.30
        table_vlookup(
            table, 40_000, "min_income", result_field="tax_rate",
            approx=True, interpolate=True,
        ).value
        # 0.309, i.e. 0.30 + (40_000 - 35_000) / (85_000 - 35_000) * (0.39 - 0.30)

    Returns a :class:`LookupResult`; a missing match is not an error.
    """
    request = make_request(
        table,
        lookup_value=lookup_value,
        lookup_field=lookup_field,
        lookup_code=lookup_code,
        result_field=result_field,
        approx=approx,
        interpolate=interpolate,
    )
    return lookup(request)
