# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""JSON Pointer (RFC 6901) helpers used to address operations."""

import re

from jsonpointer import JsonPointer, JsonPointerException, escape, resolve_pointer


def join_path(path, key):
    "Append a single key (dict key or list index) to the pointer `path`."
    return "/".join((path, escape(str(key))))


def build_path(parts):
    "Build a pointer on the form '/foo/bar' from ['foo', 'bar']."
    return JsonPointer.from_parts(parts).path


def split_path(path):
    "Split a pointer on the form '/foo/bar' into ['foo', 'bar'], unescaping each part."
    return JsonPointer(path).parts


def resolve_path(obj, path):
    "Return the value addressed by `path` inside `obj`."
    return resolve_pointer(obj, path)


def is_valid_path(path):
    """Return True if `path` is a non-empty JSON Pointer.

    The document root ('') is never addressed by an operation,
    so it is not considered valid here.
    """
    if not isinstance(path, str) or not path:
        return False
    try:
        JsonPointer(path)
    except JsonPointerException:
        return False
    return True


r_is_int = re.compile(r"^[-+]?\d+$")

def star_path(path):
    """Replace integer parts of a pointer with * """
    parts = ['*' if r_is_int.match(p) else p for p in split_path(path)]
    return build_path(parts)
