from tablelookup.lookup_tools.vlookup_table import vlookup_table

lookup_types = {
    "vlookup_table": vlookup_table,
}


class evaluator:
    """
    The evaluator class serves as a single point of entry for
    looking up values in the tables read in with the extractor class.
    Stored look ups can be indexed by name and then called.

    Example::

        ext = extractor()
        ext.add_lookup_sets_from_config("lookups.toml")
        ext.finalize()
        evaluator = ext.make_evaluator()
        out = evaluator["tax_rate"](income)

    The returned value has the same shape as the input argument.

    lookup_types is a map of possible constructors for extracted tables
    """

    def __init__(self, names, types, primitives):
        """
        initialize the evaluator from a list of inputs names,
        lookup types, and keyword arguments for each lookup
        """
        self._functions = {}
        for key in names.keys():
            lookup_type = types[names[key]]
            lookup_def = primitives[names[key]]
            self._functions[key] = lookup_types[lookup_type](**lookup_def)

    def __dir__(self):
        """dir is overloaded to list all available functions
        in the evaluator
        """
        return self._functions.keys()

    def __getitem__(self, key):
        """return a function named 'key'"""
        return self._functions[key]

    def keys(self):
        """returns the available functions"""
        return self._functions.keys()

    def __contains__(self, item):
        """item in X"""
        return item in self._functions
