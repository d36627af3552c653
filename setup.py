"""
Setup.py for rmclone, a Unix style rm command.
"""

import ast
import os

from setuptools import setup, find_packages


INSTALL_REQUIREMENTS = [
    "pyte",  # terminal control, escape and graphics tables for colored output
]
TEST_REQUIREMENTS = [
    "pytest",
    "flake8>=3.7.9",
]


ROOT_DIR = os.path.dirname(os.path.abspath(__file__))
CORE_PATH = os.path.join(ROOT_DIR, "rmclone", "core.py")


def get_version(corepath):
    """
    Find and return the current rmclone version.
    :param corepath: path to the 'core.py' file of the rmclone package
    :type corepath: str
    :return: the version defined in the corepath
    :rtype: str
    """
    with open(corepath, "r") as fin:
        for line in fin:
            if line.startswith("__version__"):
                version = ast.literal_eval(line.split("=")[1].strip())
                return version
    raise Exception("Could not find rmclone version in file '{f}'".format(f=corepath))


setup(
    name="rmclone",
    version=get_version(CORE_PATH),
    description="Remove files and directories, modeled after the Unix rm command",
    packages=find_packages(include=["rmclone", "rmclone.*"]),
    scripts=["launch_rm.py"],
    python_requires=">=3.6",
    zip_safe=False,
    install_requires=INSTALL_REQUIREMENTS,
    extras_require={
        "testing": TEST_REQUIREMENTS,
    },
)
