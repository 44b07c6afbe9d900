# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Rewriting of remove and add pairs carrying equal values into moves."""

from ..log import debug
from ..patch_format import PatchOp, op_move
from ..pointers import build_path, resolve_path, split_path
from ..utils import json_equal

__all__ = ["detect_moves", "find_move_pairs"]


def _in_array(left, path):
    # Entries are only emitted below containers present in both documents
    parent = build_path(split_path(path)[:-1])
    return isinstance(resolve_path(left, parent), list)


def find_move_pairs(d, left):
    """Find pairs of remove and add entries in d that carry equal values.

    The value of a remove entry is looked up in the `left` document.
    Each remove is paired with the first add, in the order of d,
    that is not already taken and carries an equal value.
    Array elements are never paired, since moving them would shift
    the indices of the tail removes and adds around them.

    Returns a list of (remove index, add index) tuples.
    """
    removes = [(i, resolve_path(left, e.path))
               for i, e in enumerate(d)
               if e.op == PatchOp.REMOVE and not _in_array(left, e.path)]
    adds = [(i, e.value)
            for i, e in enumerate(d)
            if e.op == PatchOp.ADD and not _in_array(left, e.path)]
    if not removes or not adds:
        return []

    pairs = []
    taken = set()
    for ri, rvalue in removes:
        for ai, avalue in adds:
            if ai not in taken and json_equal(rvalue, avalue):
                taken.add(ai)
                pairs.append((ri, ai))
                break
    return pairs


def detect_moves(d, left):
    """Replace equal-valued remove and add pairs in d with move entries.

    Each move takes the position of the later entry of its pair,
    entries that are not paired are kept in their original order.
    Replace entries never take part in a move.
    """
    pairs = find_move_pairs(d, left)
    if not pairs:
        return d

    moves = {}
    dropped = set()
    for ri, ai in pairs:
        moves[max(ri, ai)] = op_move(d[ri].path, d[ai].path)
        dropped.add(min(ri, ai))

    debug("Rewrote %d remove/add pairs as moves", len(pairs))
    return [moves.get(i, e) for i, e in enumerate(d) if i not in dropped]
