import logging
import os

import toml

from tablelookup.lookup_tools.evaluator import evaluator
from tablelookup.lookup_tools.table_converters import convert_table_file
from tablelookup.logger import json_str

logger = logging.getLogger(__name__)

_lookup_options = ("lookup_field", "result_field", "approx", "interpolate")


class extractor:
    """
    This class defines a common entry point for collecting named lookup
    tables, either built in memory or read from files, and turning them
    into an evaluator.

    Tables can be added directly with::

        extractor.add_lookup_set(<name>, <rows>, <lookup field>, <result field>)

    or declared in a TOML file, one ``[lookups.<name>]`` table per lookup::

        [lookups.tax_rate]
        file = "tax_brackets.csv"   # relative to the TOML file
        lookup_field = "min_income"
        result_field = "tax_rate"
        approx = true

    ``rows = [[0.0, 0.13], [8000.0, 0.18]]`` can be given instead of ``file``.
    Supported file formats are those of
    ``tablelookup.lookup_tools.table_converters.file_converters``.
    """

    def __init__(self):
        self._lookups = []
        self._names = {}
        self._types = []
        self._filecache = {}
        self._finalized = False

    def add_lookup_set(
        self,
        local_name,
        table,
        lookup_field,
        result_field,
        approx=False,
        interpolate=False,
    ):
        """adds one lookup table to the extractor"""
        if self._finalized:
            raise Exception("extractor is finalized cannot add new lookups!")
        if local_name in self._names.keys():
            raise Exception(f'lookup name "{local_name}" already defined')
        self._names[local_name] = len(self._lookups)
        self._types.append("vlookup_table")
        self._lookups.append(
            dict(
                table=table,
                lookup_field=lookup_field,
                result_field=result_field,
                approx=approx,
                interpolate=interpolate,
            )
        )

    def add_lookup_sets_from_config(self, config_file):
        """read the ``[lookups.*]`` tables of a TOML file"""
        if self._finalized:
            raise Exception("extractor is finalized cannot add new lookups!")
        with open(config_file) as f:
            config = toml.loads(f.read())
        lookups = config.get("lookups", {})
        if not lookups:
            logger.warning("no lookups defined in %s", config_file)
        basedir = os.path.dirname(os.path.abspath(config_file))
        # every entry is checked and read before any is added
        pending = []
        for local_name, desc in lookups.items():
            if local_name in self._names.keys():
                raise Exception(f'lookup name "{local_name}" already defined')
            if ("file" in desc) == ("rows" in desc):
                raise Exception(
                    f'lookup "{local_name}" in {config_file} needs exactly one of "file" or "rows"'
                )
            unknown = set(desc) - set(_lookup_options) - {"file", "rows"}
            if unknown:
                raise Exception(
                    'lookup "{}" in {} has unknown options: {}'.format(
                        local_name, config_file, ", ".join(sorted(unknown))
                    )
                )
            missing = {"lookup_field", "result_field"} - set(desc)
            if missing:
                raise Exception(
                    'lookup "{}" in {} is missing: {}'.format(
                        local_name, config_file, ", ".join(sorted(missing))
                    )
                )
            if "file" in desc:
                table = self.import_file(os.path.join(basedir, desc["file"]))
            else:
                table = desc["rows"]
            options = {key: desc[key] for key in _lookup_options if key in desc}
            pending.append((local_name, table, options))
        for local_name, table, options in pending:
            self.add_lookup_set(local_name, table, **options)

    def import_file(self, thefile):
        """read a table file, reusing it if already read"""
        if self._finalized:
            raise Exception("extractor is finalized cannot import new tables!")
        if thefile not in self._filecache.keys():
            logger.debug("reading table from %s", thefile)
            self._filecache[thefile] = convert_table_file(thefile)
        return self._filecache[thefile]

    def finalize(self, reduce_list=None):
        """
        stop any further imports and if provided pare down
        the stored lookups to those specified in reduce_list
        """
        if self._finalized:
            raise Exception("extractor is already finalized!")
        if reduce_list is not None:
            names = {}
            types = []
            lookups = []
            for i, name in enumerate(reduce_list):
                if name not in self._names:
                    raise Exception(f'Lookup named "{name}" not in extractor!')
                names[name] = i
                types.append(self._types[self._names[name]])
                lookups.append(self._lookups[self._names[name]])
            self._names = names
            self._types = types
            self._lookups = lookups
        del self._filecache
        self._finalized = True
        logger.debug("finalized lookups: %s", json_str(sorted(self._names)))

    def make_evaluator(self):
        """produce an evaluator based on the finalized extractor"""
        if self._finalized:
            return evaluator(self._names, self._types, self._lookups)
        else:
            raise Exception("Cannot make an evaluator from unfinalized extractor!")
