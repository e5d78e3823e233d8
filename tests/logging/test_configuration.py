import logging
from typing import Collection

import pytest

from labelkeeper._core.loggers import LogFormat, ObjectFormatter, ObjectJsonFormatter, \
                                     configure, make_formatter


def _get_own_handlers(logger: logging.Logger) -> Collection[logging.Handler]:
    return [
        handler for handler in logger.handlers
        if isinstance(handler, logging.StreamHandler) and
           isinstance(handler.formatter, ObjectFormatter)
    ]


def test_own_formatter_is_used():
    configure()
    logger = logging.getLogger()
    own_handlers = _get_own_handlers(logger)
    assert len(own_handlers) == 1


def test_reconfiguration_replaces_own_handlers():
    configure()
    configure()
    logger = logging.getLogger()
    own_handlers = _get_own_handlers(logger)
    assert len(own_handlers) == 1


@pytest.mark.parametrize('log_format', [LogFormat.FULL, LogFormat.PLAIN])
@pytest.mark.parametrize('log_prefix', [True, False])
def test_formatter_text(log_format, log_prefix):
    configure(log_format=log_format, log_prefix=log_prefix)
    formatter = _get_own_handlers(logging.getLogger())[0].formatter
    assert type(formatter) is ObjectFormatter
    assert formatter.prefix is log_prefix
    assert formatter._fmt == log_format.value


@pytest.mark.parametrize('log_prefix', [True, False])
def test_formatter_json(log_prefix):
    configure(log_format=LogFormat.JSON, log_prefix=log_prefix, log_refkey='ref')
    formatter = _get_own_handlers(logging.getLogger())[0].formatter
    assert type(formatter) is ObjectJsonFormatter
    assert formatter.prefix is log_prefix
    assert formatter.refkey == 'ref'


@pytest.mark.parametrize('log_format, prefix', [
    pytest.param(LogFormat.FULL, True, id='full'),
    pytest.param(LogFormat.PLAIN, True, id='plain'),
    pytest.param(LogFormat.JSON, False, id='json'),
])
def test_prefixing_defaults_depend_on_the_format(log_format, prefix):
    formatter = make_formatter(log_format=log_format)
    assert formatter.prefix is prefix


@pytest.mark.parametrize('log_format', ['%(message)s', 123, None])
def test_unsupported_format(log_format):
    with pytest.raises(ValueError):
        make_formatter(log_format=log_format)


@pytest.mark.parametrize('kwargs, expected', [
    pytest.param(dict(), logging.INFO, id='default'),
    pytest.param(dict(verbose=True), logging.DEBUG, id='verbose'),
    pytest.param(dict(debug=True), logging.DEBUG, id='debug'),
    pytest.param(dict(quiet=True), logging.WARNING, id='quiet'),
])
def test_levels(kwargs, expected):
    configure(**kwargs)
    assert logging.getLogger().level == expected
