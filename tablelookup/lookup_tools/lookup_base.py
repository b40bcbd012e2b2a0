import numbers
from functools import partial

import awkward
import numpy


def getfunction(layout, thelookup, **kwargs):
    if isinstance(layout, awkward.contents.NumpyArray):
        backend = awkward.backend(layout)
        if backend != "cpu":
            raise NotImplementedError("support for cupy/jax/etc. numpy extensions")
        result = thelookup._evaluate_array(numpy.asarray(layout.data))
        if result.dtype.kind not in "biufc":
            raise TypeError(
                "awkward arrays of lookup values need numeric results, use a"
                " numpy array for results of type %r" % result.dtype
            )
        return awkward.contents.NumpyArray(result)
    return None


class lookup_base:
    """Base class for all objects that look up values in a table

    Subclasses implement ``_evaluate`` for a single value; numpy and awkward
    arrays are handled element by element and keep their shape. Numeric
    results give a numeric array, anything else an array of objects.
    """

    def __init__(self):
        pass

    def __call__(self, value):
        if isinstance(value, (numbers.Number, str, bytes)):
            return self._evaluate(value)
        elif isinstance(value, numpy.ndarray):
            return self._evaluate_array(value)
        elif isinstance(value, awkward.highlevel.Array):
            return awkward.transform(partial(getfunction, thelookup=self), value)
        raise TypeError(
            "lookup base must receive high level awkward arrays,"
            " numpy arrays, strings, or numbers!"
        )

    def _evaluate_array(self, values):
        out = [self._evaluate(value) for value in values.ravel()]
        if all(isinstance(x, numbers.Number) for x in out):
            result = numpy.asarray(out)
        else:
            # element by element, so sequence results are not unpacked
            result = numpy.empty(len(out), dtype=object)
            for i, x in enumerate(out):
                result[i] = x
        return result.reshape(values.shape)

    def _evaluate(self, value):
        raise NotImplementedError
