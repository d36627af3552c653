# -*- coding: utf-8 -*-
"""tests for the version of the package."""
import os
import re

import rmclone
from rmclone import core


def test_version_exported():
    assert rmclone.__version__ == core.__version__


def test_version_format():
    assert re.match(r"^\d+\.\d+\.\d+$", core.__version__)


def test_version_readable_by_setup():
    """setup.py reads the version from the '__version__' line of core.py"""
    with open(os.path.abspath(core.__file__.replace(".pyc", ".py")), "r") as fin:
        lines = [line for line in fin if line.startswith("__version__")]
    assert len(lines) == 1
    assert core.__version__ in lines[0]
