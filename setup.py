#!/usr/bin/env python
# -*- coding: utf-8 -*-

from setuptools import setup, find_packages
import io
import os
import re

# Package meta-data.
VERSION = None
NAME = "mkvlang"
AUTHOR = "mkvlang contributors"
REQUIRES_PYTHON = ">=3.6.0"
KEYWORDS = "mkv mkvmerge mkvtoolnix audio language"
PLATFORMS = ["OS Independent"]
DESCRIPTION = "Python script, that acts as a front end for mkvtoolnix to remove " \
              "every audio track except one language from mkv files."

# Trove classifiers
# Full list: https://pypi.python.org/pypi?%3Aaction=list_classifiers
CLASSIFIERS = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3.6",
    "Programming Language :: Python :: 3.7",
    "Programming Language :: Python :: 3.8",
    "Topic :: Multimedia :: Sound/Audio",
    "Topic :: Multimedia :: Video",
    "Topic :: Utilities"
    ]

# License information, GPLv3, MIT
LICENSE = "GPLv3"
CLASSIFIERS.append("License :: OSI Approved :: GNU General Public License v3 (GPLv3)")

# What packages are required for this module to be executed?
# e.g. REQUIRED = ['requests', 'maya', 'records']
REQUIRED = ["PyYAML"]

# What packages are optional?
EXTRAS = {"test": ["pytest"]}


# The rest you shouldn't have to touch too much.
# Except, perhaps the package type, e.g. py_modules, entry_points, packages.
# ##########################################################################
here = os.path.abspath(os.path.dirname(__file__))

# Import the README and use it as the long-description.
# Note: this will only work if 'README.rst' is present in your MANIFEST.in file!
with io.open(os.path.join(here, "README.rst"), encoding="utf-8") as stream:
    long_description = "\n" + stream.read()

# Load the package's __version__.py module as a dictionary.
if not VERSION:
    paths = [os.path.join(here, "{}.py".format(NAME)),
             os.path.join(here, NAME, "__init__.py"),
             os.path.join(here, NAME, "__version__.py")]

    for path in paths:
        if os.path.exists(path):
            with io.open(path, "r", encoding="utf-8") as stream:
                search_refind = r'_{0,2}version_{0,2} = ["\'](\d+\.\d+\.\d+)["\']'
                match = re.search(search_refind, stream.read(), flags=re.IGNORECASE)
                if match:
                    VERSION = match.group(1)
                    break
    else:
        raise RuntimeError("Version number is required, Unable to extract from package")


# Where the magic happens:
setup(
    name=NAME,
    version=VERSION,
    description=DESCRIPTION,
    long_description=long_description,
    author=AUTHOR,
    license=LICENSE,
    keywords=KEYWORDS,
    platforms=PLATFORMS,
    python_requires=REQUIRES_PYTHON,
    install_requires=REQUIRED,
    extras_require=EXTRAS,
    include_package_data=True,
    classifiers=CLASSIFIERS,

    # If project is a package, use:
    packages=find_packages(exclude=("tests",)),

    # If project is a script, use
    entry_points={"console_scripts": ["mkvlang=mkvlang.__main__:main"]}
    )
