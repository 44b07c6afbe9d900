# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__

from .diffing import diff, diff_result, diff_json, DiffConfig, DiffResult
from .patch_format import PatchEntry, PatchOp, to_json, validate_patch
from .validation import (
    JsonValueError, InvalidInputKind, ProtoPollutedObject, NonSerializableValue,
)


__all__ = [
    "__version__",
    "diff", "diff_result", "diff_json",
    "DiffConfig", "DiffResult",
    "PatchEntry", "PatchOp", "to_json", "validate_patch",
    "JsonValueError", "InvalidInputKind", "ProtoPollutedObject", "NonSerializableValue",
    ]
