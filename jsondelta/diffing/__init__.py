# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .config import DiffConfig
from .generic import diff, diff_result, diff_json, DiffResult
from .moves import detect_moves

__all__ = ["diff", "diff_result", "diff_json", "DiffResult", "DiffConfig", "detect_moves"]
