# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json
from collections import namedtuple

from ..log import debug
from ..patch_format import op_add, op_remove, op_replace, validate_patch
from ..pointers import join_path
from ..utils import json_equal
from ..validation import (
    CONTAINER_KINDS, JsonValueError,
    check_container, check_document, check_value, classify,
)

from .config import DiffConfig
from .moves import detect_moves

__all__ = ["diff", "diff_result", "diff_json", "DiffResult"]


DiffResult = namedtuple("DiffResult", ["patch", "error"])


def diff(left, right, config=None):
    """Compute the JSON Patch transforming left into right.

    Both arguments must be objects (dicts) or arrays (lists) of plain
    JSON values. Returns a list of PatchEntry dicts with the ops
    add, remove, replace and move.
    """
    if config is None:
        config = DiffConfig()

    check_document(left, "left")
    check_document(right, "right")
    if config.strict_validation:
        check_value(left)
        check_value(right)

    # The root is never addressed, so the two documents are always
    # compared key by key, even an array against an object
    d = diff_containers(left, right, path="", config=config)

    if config.detect_moves:
        d = detect_moves(d, left)

    # We can turn this off for performance after the library has been well tested:
    validate_patch(d)

    debug("Computed patch with %d operations", len(d))
    return d


def diff_result(left, right, config=None):
    """Compute the patch of left and right without raising for invalid input.

    Returns a DiffResult (patch, error) where exactly one field is None.
    """
    try:
        return DiffResult(diff(left, right, config=config), None)
    except JsonValueError as e:
        return DiffResult(None, e)


def diff_json(left, right, config=None):
    """Diff two serialized JSON documents (str or bytes).

    Raises ValueError (json.JSONDecodeError) for malformed input.
    """
    return diff(json.loads(left), json.loads(right), config=config)


def _keys(value, config):
    if isinstance(value, list):
        return [str(i) for i in range(len(value))]
    keys = list(value.keys())
    if config.sort_keys:
        keys.sort()
    return keys


def _item(value, key):
    if isinstance(value, list):
        return value[int(key)]
    return value[key]


def diff_values(a, b, path, config):
    """Compute the patch entries for the values a and b found at path."""
    if config.is_atomic(path):
        ka = kb = None
    else:
        ka = classify(a)
        kb = classify(b)

    # If both are containers of the same kind, recurse
    if ka is kb and ka in CONTAINER_KINDS:
        return diff_containers(a, b, path=path, config=config)

    if json_equal(a, b):
        return []
    check_value(b, path)
    return [op_replace(path, b)]


def diff_containers(a, b, path="", config=None):
    """Compute the patch entries of two containers located at path.

    Lists are handled as objects keyed by their string-encoded
    indices. Direct removes and adds of this level come first,
    followed by the entries of the keys present in both a and b.
    """
    if config is None:
        config = DiffConfig()

    check_container(a, path)
    check_container(b, path)

    akeys = _keys(a, config)
    bkeys = _keys(b, config)
    aset = set(akeys)
    bset = set(bkeys)

    d = []

    removed = [key for key in akeys if key not in bset]
    if isinstance(a, list):
        # Remove from the tail first so each remaining index stays valid
        removed.reverse()
    for key in removed:
        d.append(op_remove(join_path(path, key)))

    for key in bkeys:
        if key not in aset:
            subpath = join_path(path, key)
            value = _item(b, key)
            check_value(value, subpath)
            d.append(op_add(subpath, value))

    for key in akeys:
        if key in bset:
            d.extend(diff_values(_item(a, key), _item(b, key), join_path(path, key), config))

    return d
