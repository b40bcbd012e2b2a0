from dataclasses import replace

import numpy

from tablelookup.lookup_tools.comparators import field_comparison
from tablelookup.lookup_tools.lookup_base import lookup_base
from tablelookup.lookup_tools.vlookup import lookup, make_request


class vlookup_table(lookup_base):
    """A table bound to its lookup and result fields

    Calling the object with a lookup value runs :func:`table_vlookup` on the
    stored table. Arrays of lookup values give arrays of results, with
    ``fill_value`` wherever nothing was found.

    Example::

        rates = vlookup_table(brackets, "min_income", "tax_rate", approx=True)
        rates(40_000)  # 0.30
        rates(numpy.array([-100, 40_000]))  # array([nan, 0.3])
    """

    def __init__(
        self,
        table,
        lookup_field,
        result_field,
        approx=False,
        interpolate=False,
        fill_value=numpy.nan,
    ):
        super().__init__()
        # validated once here, the lookup value is swapped in per call
        self._request = make_request(
            table,
            lookup_value=None,
            lookup_field=lookup_field,
            result_field=result_field,
            approx=approx,
            interpolate=interpolate,
        )
        self._fill_value = fill_value

    @property
    def table(self):
        return self._request.table

    def _evaluate(self, value):
        comparison = field_comparison(self._request.comparison.field, value)
        result = lookup(replace(self._request, comparison=comparison))
        return result.get(self._fill_value)

    def __len__(self):
        return len(self._request.table)

    def __repr__(self):
        request = self._request
        myrepr = object.__repr__(self)
        myrepr += f" {len(request.table)} row table looking up"
        myrepr += f" {request.comparison.field!r} -> {request.result_field!r}"
        if request.interpolate:
            myrepr += " (interpolated)"
        elif request.approx:
            myrepr += " (approximate)"
        return myrepr
