# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy

import jsonpatch

from jsondelta import diff
from jsondelta.patch_format import is_valid_patch


def check_diff_and_patch(a, b, config=None):
    "Check that applying diff(a, b) to a reproduces b."
    d = diff(a, b, config=config)
    assert is_valid_patch(d)
    assert jsonpatch.apply_patch(copy.deepcopy(a), d) == b
    return d


def check_symmetric_diff_and_patch(a, b, config=None):
    "Check that applying diff(a, b) to a reproduces b and vice versa."
    check_diff_and_patch(a, b, config=config)
    check_diff_and_patch(b, a, config=config)


def ops_of_kind(d, op):
    return [e for e in d if e["op"] == op]
