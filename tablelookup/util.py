"""Utility functions

"""

import os

import toml


def config_path():
    """location of the user configuration file, or None"""
    if "HOME" in os.environ:
        return os.path.join(os.environ["HOME"], ".tablelookup.toml")
    elif "_CONDOR_SCRATCH_DIR" in os.environ:
        return os.path.join(os.environ["_CONDOR_SCRATCH_DIR"], ".tablelookup.toml")
    return None


def read_config():
    """Read ~/.tablelookup.toml, empty if there is none"""
    path = config_path()
    if path is not None and os.path.exists(path):
        with open(path) as f:
            return toml.loads(f.read())
    else:
        return dict()
