# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from jsondelta.diffing.moves import detect_moves, find_move_pairs
from jsondelta.patch_format import op_add, op_remove, op_replace, op_move


def test_no_candidates():
    left = {'a': 1}
    d = [op_remove('/a'), op_add('/b', 2)]
    assert find_move_pairs(d, left) == []
    assert detect_moves(d, left) is d

    assert detect_moves([], left) == []
    assert detect_moves([op_add('/b', 1)], left) == [op_add('/b', 1)]


def test_move_takes_position_of_later_entry():
    left = {'a': {'x': 1}, 'c': 3}
    d = [
        op_remove('/a'),
        op_replace('/c', 4),
        op_add('/b', {'x': 1}),
        ]
    assert detect_moves(d, left) == [
        op_replace('/c', 4),
        op_move('/a', '/b'),
        ]

    d = [
        op_add('/b', {'x': 1}),
        op_replace('/c', 4),
        op_remove('/a'),
        ]
    assert detect_moves(d, left) == [
        op_replace('/c', 4),
        op_move('/a', '/b'),
        ]


def test_first_match_wins():
    left = {'a': 'v', 'b': 'v'}
    d = [
        op_remove('/a'),
        op_remove('/b'),
        op_add('/x', 'v'),
        op_add('/y', 'v'),
        ]
    assert find_move_pairs(d, left) == [(0, 2), (1, 3)]
    assert detect_moves(d, left) == [op_move('/a', '/x'), op_move('/b', '/y')]


def test_each_entry_is_used_once():
    left = {'a': 'v', 'b': 'v'}
    d = [op_remove('/a'), op_remove('/b'), op_add('/x', 'v')]
    # The move sits at the add, which comes after the second remove
    assert detect_moves(d, left) == [op_remove('/b'), op_move('/a', '/x')]


def test_replace_is_never_paired():
    left = {'a': 'v', 'c': 'old'}
    d = [op_remove('/a'), op_replace('/c', 'v')]
    assert detect_moves(d, left) == d


def test_values_must_be_deeply_equal():
    left = {'a': {'k': [1, 2]}, 'b': 1, 'c': True}
    d = [
        op_remove('/a'),
        op_remove('/b'),
        op_remove('/c'),
        op_add('/x', {'k': [1, 2, 3]}),
        op_add('/y', True),
        op_add('/z', 1.0),
        ]
    assert detect_moves(d, left) == [
        op_remove('/a'),
        op_add('/x', {'k': [1, 2, 3]}),
        op_move('/c', '/y'),
        op_move('/b', '/z'),
        ]


def test_removed_values_are_looked_up_by_pointer():
    left = {'l': [0, {'deep': {'v': 'x'}}], 'a~b': {'c/d': 5}}
    d = [op_remove('/l/1/deep'), op_remove('/a~0b/c~1d'), op_add('/m', 5), op_add('/n', {'v': 'x'})]
    assert find_move_pairs(d, left) == [(0, 3), (1, 2)]


def test_array_elements_are_never_paired():
    left = {'l': [1, 7], 'm': [1], 'o': {'a': 7}}
    d = [op_remove('/l/1'), op_add('/m/1', 7), op_remove('/o/a'), op_add('/x', 7)]
    assert find_move_pairs(d, left) == [(2, 3)]
    assert detect_moves(d, left) == [
        op_remove('/l/1'),
        op_add('/m/1', 7),
        op_move('/o/a', '/x'),
        ]
