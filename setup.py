#!/usr/bin/env python
# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.
from setuptools import setup, find_packages
import pathlib
import re

HERE = pathlib.Path(__file__).parent.absolute()

JSONDELTA_PATH = HERE / "jsondelta"


def get_version(path):
    "Read __version__ from a file without importing the package."
    match = re.search(r'^__version__ = "([^"]+)"', path.read_text(encoding="utf8"), re.M)
    return match.group(1)


VERSION = get_version(JSONDELTA_PATH / '_version.py')

with open(HERE / 'README.md', encoding="utf8") as f:
    LONG_DESCRIPTION = f.read()


if __name__ == '__main__':
    setup(
      name="jsondelta",
      version=VERSION,
      description="Compute minimal RFC 6902 JSON Patch operations between two JSON documents",
      long_description=LONG_DESCRIPTION,
      long_description_content_type="text/markdown",
      license="BSD-3-Clause",
      python_requires=">=3.8",
      packages=find_packages(include=["jsondelta", "jsondelta.*"]),
      package_data={"jsondelta": ["*.schema.json"]},
      install_requires=[
          "colorama",
          "jsonpointer>=2.0",
          "jupyter_core",
          "traitlets>=5",
      ],
      extras_require={
          "test": [
              "jsonpatch",
              "jsonschema",
              "pytest>=6.0",
              "pytest-timeout",
          ],
      },
    )
