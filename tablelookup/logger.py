from typing import Optional, List, Any
import logging
import json

from rich.logging import RichHandler
from rich.console import Console

from tablelookup.util import read_config

LEVELS = ["WARNING", "INFO", "DEBUG"]


class ModuleFilter(logging.Filter):
    """Keep records from tablelookup and the listed top level modules"""

    def __init__(self, modules: Optional[List] = None) -> None:
        self.modules = list(modules) if modules else []
        self.modules.append("tablelookup")

    def filter(self, record: logging.LogRecord) -> bool:
        base = record.name.split(".")[0]
        return base in self.modules


def setup_logger(
    level: Optional[str] = None,
    modules: Optional[List] = None,
    logfile: Optional[str] = None,
) -> logging.Logger:
    """Route tablelookup log records through rich.

    At DEBUG every scan reports its request, the row where it stopped and
    whether the result came from an exact, previous or interpolated row.
    Records of other libraries (pandas, awkward) are dropped unless their
    top level module is listed in ``modules``.

    Parameters
    ----------
        level: str, optional
            One of WARNING, INFO or DEBUG. Defaults to the
            ``[logging] level`` of ~/.tablelookup.toml, or INFO
        modules: list, optional
            Other top level modules whose records are kept
        logfile: str, optional
            Also write the records to this file
    """
    if level is None:
        level = read_config().get("logging", {}).get("level", "INFO")
    if level not in LEVELS:
        raise ValueError(
            "Passed wrong level for the logger. Allowed levels are: {}".format(
                ", ".join(LEVELS)
            )
        )

    logger = logging.getLogger()
    logger.setLevel(getattr(logging, level))

    formatter = logging.Formatter("%(name)s: %(message)s")
    filt = ModuleFilter(modules)

    consoles = [None]
    if logfile:
        consoles.append(Console(file=open(logfile, "wt")))
    for console in consoles:
        handler = RichHandler(show_time=False, rich_tracebacks=True, console=console)
        handler.setFormatter(formatter)
        handler.addFilter(filt)
        logger.addHandler(handler)

    return logger


def request_summary(request) -> dict:
    """The parameters of a lookup request, without the table rows"""
    comparison = request.comparison
    summary = {
        "rows": len(request.table),
        "result_field": request.result_field,
        "approx": request.approx,
        "interpolate": request.interpolate,
    }
    if hasattr(comparison, "field"):
        summary["lookup_field"] = comparison.field
        summary["lookup_value"] = comparison.value
    else:
        code = comparison.code
        summary["lookup_code"] = getattr(code, "__name__", repr(code))
        if comparison.has_value:
            summary["lookup_value"] = comparison.value
    return summary


def json_str(obj: Any) -> str:
    return json.dumps(obj, sort_keys=True, indent=4, default=str)
