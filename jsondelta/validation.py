# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Classification and validation of the values jsondelta can diff.

Only plain JSON values are accepted: None, bool, int, float, str,
and exact list and dict instances with str keys. Everything else is
rejected with one of the TypeError subclasses below.
"""

import enum
import math

from .log import debug
from .pointers import join_path


class JsonKind(enum.Enum):
    "Closed set of kinds a value can be classified as."
    NULL = "null"
    BOOL = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"

    # Rejected kinds
    CALLABLE = "callable"
    INSTANCE = "instance"
    UNSUPPORTED = "unsupported"


JSON_KINDS = frozenset((
    JsonKind.NULL,
    JsonKind.BOOL,
    JsonKind.NUMBER,
    JsonKind.STRING,
    JsonKind.ARRAY,
    JsonKind.OBJECT,
    ))

CONTAINER_KINDS = frozenset((JsonKind.ARRAY, JsonKind.OBJECT))


class JsonValueError(TypeError):
    "Base class for values outside the JSON domain."

    def __init__(self, message, path=None):
        super().__init__(message)
        self.path = path


class InvalidInputKind(JsonValueError):
    "A top-level argument is not an object or an array."


class ProtoPollutedObject(JsonValueError):
    "An object is not a plain dict (dict subclass or class instance)."


class NonSerializableValue(JsonValueError):
    "A callable or other non-JSON value was found."


def classify(value):
    """Return the JsonKind of value.

    Never raises; values outside the JSON domain are classified
    as one of the rejected kinds.
    """
    # Exact type checks first, subclasses are handled below
    t = type(value)
    if value is None:
        return JsonKind.NULL
    if t is bool:
        return JsonKind.BOOL
    if t is int:
        return JsonKind.NUMBER
    if t is float:
        return JsonKind.NUMBER if math.isfinite(value) else JsonKind.UNSUPPORTED
    if t is str:
        return JsonKind.STRING
    if t is list:
        return JsonKind.ARRAY
    if t is dict:
        if all(isinstance(k, str) for k in value):
            return JsonKind.OBJECT
        return JsonKind.UNSUPPORTED
    if callable(value):
        return JsonKind.CALLABLE
    if isinstance(value, dict) or hasattr(value, "__dict__"):
        return JsonKind.INSTANCE
    return JsonKind.UNSUPPORTED


def _describe(path):
    return "at '%s'" % path if path else "at the document root"


def _reject(kind, value, path):
    # Only called with rejected kinds
    where = _describe(path)
    debug("Rejecting %s value %s: %r", kind.value, where, value)
    if kind is JsonKind.INSTANCE:
        raise ProtoPollutedObject(
            "Object of type %s %s has a prototype; only plain dicts can be diffed." % (
                type(value).__name__, where), path)
    if kind is JsonKind.CALLABLE:
        raise NonSerializableValue(
            "Callable %r %s is not a valid JSON value." % (value, where), path)
    raise NonSerializableValue(
        "Value of type %s %s is not a valid JSON value." % (type(value).__name__, where), path)


def check_document(value, side="left"):
    """Check that a top-level diff argument is an object or an array.

    Returns the JsonKind of value.
    """
    kind = classify(value)
    if kind in CONTAINER_KINDS:
        return kind
    if kind is JsonKind.INSTANCE:
        _reject(kind, value, "")
    raise InvalidInputKind(
        "Can only diff objects or arrays, the %s argument is %s." % (
            side, "a callable" if kind is JsonKind.CALLABLE else "of type %s" % type(value).__name__))


def check_container(value, path=""):
    """Validate a visited container and the kinds of its direct members.

    Nested containers are not descended into, they are checked when
    the traversal reaches them. Returns the JsonKind of value.
    """
    kind = classify(value)
    if kind not in CONTAINER_KINDS:
        if kind not in JSON_KINDS:
            _reject(kind, value, path)
        return kind
    items = value.items() if kind is JsonKind.OBJECT else enumerate(value)
    for key, item in items:
        item_kind = classify(item)
        if item_kind not in JSON_KINDS:
            _reject(item_kind, item, join_path(path, key))
    return kind


def check_value(value, path=""):
    """Validate value and everything it contains.

    Returns the JsonKind of value.
    """
    kind = classify(value)
    if kind not in JSON_KINDS:
        _reject(kind, value, path)
    if kind is JsonKind.OBJECT:
        for key, item in value.items():
            check_value(item, join_path(path, key))
    elif kind is JsonKind.ARRAY:
        for index, item in enumerate(value):
            check_value(item, join_path(path, index))
    return kind


def is_valid_json(value):
    "Return True if value and everything it contains are plain JSON values."
    try:
        check_value(value)
    except JsonValueError:
        return False
    return True