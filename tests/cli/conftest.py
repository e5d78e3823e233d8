import functools
import logging

import click.testing
import pytest
import yaml

from labelkeeper.cli import main


@pytest.fixture(autouse=True)
def _restore_root_logger():
    logger = logging.getLogger()
    original_level = logger.level
    original_handlers = logger.handlers[:]
    yield
    logger.handlers[:] = original_handlers
    logger.setLevel(original_level)


@pytest.fixture()
def runner():
    return click.testing.CliRunner()


@pytest.fixture()
def invoke(runner):
    return functools.partial(runner.invoke, main, catch_exceptions=False)


@pytest.fixture()
def manifest(tmp_path):
    counter = iter(range(1000))

    def write(body, *, name=None):
        path = tmp_path / (name or f'manifest{next(counter)}.yaml')
        path.write_text(yaml.safe_dump(body), encoding='utf-8')
        return str(path)

    return write
