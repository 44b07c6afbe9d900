# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json

from .log import PatchFormatError
from .pointers import is_valid_path


class PatchEntry(dict):
    """For internal usage in jsondelta library.

    Minimal class providing attribute access to patch entry keys.
    Since the move operation has a 'from' key, which is a reserved
    word, it is exposed as the attribute `from_`.

    Being a dict, an entry serializes to the RFC 6902 wire format
    without conversion.
    """
    def __getattr__(self, name):
        if name.startswith("__") and name.endswith("__"):
            return self.__getattribute__(name)
        if name == "from_":
            name = "from"
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name)

    def __setattr__(self, name, value):
        if name == "from_":
            name = "from"
        self[name] = value


class PatchOp:
    "Collection of valid values for the op field in patch entries."
    ADD = "add"
    REMOVE = "remove"
    REPLACE = "replace"
    MOVE = "move"


# Fields each op carries besides "op"
OP_FIELDS = {
    PatchOp.ADD: ("path", "value"),
    PatchOp.REMOVE: ("path",),
    PatchOp.REPLACE: ("path", "value"),
    PatchOp.MOVE: ("from", "path"),
    }


def op_add(path, value):
    "Create a patch entry to add value at path."
    return PatchEntry(op=PatchOp.ADD, path=path, value=value)

def op_remove(path):
    "Create a patch entry to remove the value at path."
    return PatchEntry(op=PatchOp.REMOVE, path=path)

def op_replace(path, value):
    "Create a patch entry to replace the value at path with given value."
    return PatchEntry(op=PatchOp.REPLACE, path=path, value=value)

def op_move(from_path, path):
    "Create a patch entry to move the value at from_path to path."
    return PatchEntry({"op": PatchOp.MOVE, "from": from_path, "path": path})


def is_valid_patch(patch):
    """Checks whether a patch (list of patch entries) is well formed.

    Returns a boolean indicating the well-formedness of the patch.
    """
    try:
        validate_patch(patch)
    except PatchFormatError:
        return False
    return True


def validate_patch(patch):
    """Check whether a patch (list of patch entries) is well formed.

    Raises a PatchFormatError if not well formed.
    """
    if not isinstance(patch, list):
        raise PatchFormatError("Patch must be a list.")
    for e in patch:
        validate_patch_entry(e)


def validate_patch_entry(e):
    """Check that e is a well formed patch entry.

    Raises a PatchFormatError if not well formed.
    """
    if not isinstance(e, dict):
        raise PatchFormatError("Patch entry '{}' is not a dict.".format(e))

    op = e.get("op")
    if op not in OP_FIELDS:
        raise PatchFormatError("Unknown patch op '{}'.".format(op))

    expected = set(OP_FIELDS[op])
    present = set(e.keys()) - {"op"}
    if present != expected:
        raise PatchFormatError(
            "Patch entry for op '{}' expects fields {}, got {}.".format(
                op, sorted(expected), sorted(present)))

    for field in ("path", "from"):
        if field in e and not is_valid_path(e[field]):
            raise PatchFormatError(
                "Invalid JSON pointer '{}' in '{}' of {} entry.".format(e[field], field, op))

    # Note that values are not checked here, they are
    # validated by the differ before an entry is created


def to_json(patch, **kwargs):
    """Serialize a patch to a JSON array string.

    Keyword arguments are passed on to json.dumps.
    """
    validate_patch(patch)
    return json.dumps(patch, **kwargs)


def from_json(text):
    """Parse a JSON array string into a list of patch entries."""
    entries = json.loads(text)
    if not isinstance(entries, list):
        raise PatchFormatError("Patch must be a list.")
    patch = [PatchEntry(e) if isinstance(e, dict) else e for e in entries]
    validate_patch(patch)
    return patch
