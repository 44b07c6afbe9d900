# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ..pointers import star_path


class DiffConfig:
    """Set of options to pass around the differ"""

    def __init__(self, *, detect_moves=True, sort_keys=False,
                 strict_validation=False, atomic_paths=None):
        self.detect_moves = detect_moves
        self.sort_keys = sort_keys
        self.strict_validation = strict_validation
        self._atomic_paths = set(atomic_paths or ())

    @property
    def atomic_paths(self):
        return frozenset(self._atomic_paths)

    def is_atomic(self, path):
        """Return True for paths the differ should treat as a single value.

        Atomic paths are given in starred form, with list indices
        replaced by *, e.g. '/items/*/payload'.
        """
        if not self._atomic_paths or not path:
            return False
        return path in self._atomic_paths or star_path(path) in self._atomic_paths

    def __copy__(self):
        return DiffConfig(
            detect_moves=self.detect_moves,
            sort_keys=self.sort_keys,
            strict_validation=self.strict_validation,
            atomic_paths=self._atomic_paths.copy(),
        )

    def __repr__(self):
        return "DiffConfig(detect_moves=%r, sort_keys=%r, strict_validation=%r, atomic_paths=%r)" % (
            self.detect_moves, self.sort_keys, self.strict_validation, sorted(self._atomic_paths))
