# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from jsondelta.utils import json_equal


def test_json_equal_leaves():
    assert json_equal(None, None)
    assert json_equal('a', 'a')
    assert json_equal(1, 1.0)
    assert not json_equal(1, True)
    assert not json_equal(0, False)
    assert not json_equal(None, 0)
    assert not json_equal('1', 1)


def test_json_equal_containers():
    a = {'x': [1, {'y': None}], 'z': 'w'}
    b = {'z': 'w', 'x': [1.0, {'y': None}]}
    assert json_equal(a, b)
    assert not json_equal(a, {'x': [1, {'y': None}]})
    assert not json_equal([1, 2], [2, 1])
    assert not json_equal([True], [1])
    assert not json_equal({}, [])
    assert not json_equal({'a': 1}, {'b': 1})
