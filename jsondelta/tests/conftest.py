# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import json
import logging
import os

from jsonschema import Draft4Validator as Validator
from pytest import fixture, skip

from jsondelta import config as jsondelta_config
from jsondelta.log import logger


pjoin = os.path.join

schema_dir = os.path.abspath(pjoin(os.path.dirname(__file__), ".."))


@fixture
def slow(request):
    if request.config.getoption('--quick', default=False):
        skip('skipping slow test')


@fixture(scope='session')
def json_schema_patch(request):
    schema_path = os.path.join(schema_dir, 'patch_format.schema.json')
    with io.open(schema_path, encoding="utf8") as f:
        schema_json = json.load(f)
    return schema_json


@fixture
def patch_validator(request, json_schema_patch):
    return Validator(json_schema_patch)


@fixture
def config_dir(tmpdir):
    """A directory to write jsondelta_config.json into.

    Returns a function taking the config dict to write,
    which returns the search path to pass to the loaders.
    """
    def write(config):
        with io.open(str(tmpdir.join(jsondelta_config.CONFIG_BASENAME + '.json')),
                     'w', encoding='utf8') as f:
            json.dump(config, f)
        return [str(tmpdir)]
    return write


@fixture
def reset_log_level():
    level = logger.level
    yield
    logger.setLevel(level)


@fixture
def debug_log(caplog):
    caplog.set_level(logging.DEBUG, logger='jsondelta')
    return caplog
