# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .validation import JsonKind, classify


def json_equal(a, b):
    """Deep equality of two JSON values.

    Unlike ==, booleans never compare equal to numbers,
    while 1 and 1.0 are the same JSON number.
    """
    if a is b:
        return True
    ka = classify(a)
    kb = classify(b)
    if ka is not kb:
        return False
    if ka is JsonKind.OBJECT:
        if len(a) != len(b) or a.keys() != b.keys():
            return False
        return all(json_equal(a[k], b[k]) for k in a)
    elif ka is JsonKind.ARRAY:
        if len(a) != len(b):
            return False
        return all(json_equal(x, y) for x, y in zip(a, b))
    return a == b