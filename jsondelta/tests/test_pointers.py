# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import pytest
from jsonpointer import JsonPointerException

from jsondelta.pointers import (
    join_path, build_path, split_path, resolve_path, is_valid_path, star_path,
)


def test_join_path_escapes():
    assert join_path('', 'foo') == '/foo'
    assert join_path('/foo', 3) == '/foo/3'
    assert join_path('/foo', 'a/b') == '/foo/a~1b'
    assert join_path('/foo', '~x') == '/foo/~0x'
    assert join_path('', '') == '/'


def test_split_and_build_are_inverse():
    parts = ['a/b', '~c', '', '0']
    path = build_path(parts)
    assert path == '/a~1b/~0c//0'
    assert split_path(path) == parts
    assert build_path([]) == ''


def test_resolve_path():
    doc = {'a': [10, {'b/c': 'x'}], '': 1}
    assert resolve_path(doc, '/a/0') == 10
    assert resolve_path(doc, '/a/1/b~1c') == 'x'
    assert resolve_path(doc, '/') == 1
    with pytest.raises(JsonPointerException):
        resolve_path(doc, '/missing')


def test_is_valid_path():
    assert is_valid_path('/a')
    assert is_valid_path('/')
    assert is_valid_path('/a~0~1')
    assert not is_valid_path('')
    assert not is_valid_path('a')
    assert not is_valid_path('/a~')
    assert not is_valid_path(None)


def test_star_path():
    assert star_path('/cells/3/outputs/0/data') == '/cells/*/outputs/*/data'
    assert star_path('/a~1b/12') == '/a~1b/*'
    assert star_path('') == ''
