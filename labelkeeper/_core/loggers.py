"""
Per-object logging of the bookkeeping decisions.

The bookkeeping functions log to whatever logger they are given. For the logs
to be readable when many objects are reconciled in a row, `ObjectLogger`
carries the object's reference in every record, and the formatters here
either prefix the messages with it (text logs) or put it into a dedicated
field (JSON logs) -- so that the log parsers can filter by the object.
"""
import copy
import enum
import logging
from typing import TYPE_CHECKING, Any, Mapping, MutableMapping, Optional, TextIO, Tuple

# The JSON formatter moved to its own modules in python-json-logger 3.1.0.
try:
    # python-json-logger>=3.1.0
    from pythonjsonlogger.core import RESERVED_ATTRS as _pjl_RESERVED_ATTRS
    from pythonjsonlogger.json import JsonFormatter as _pjl_JsonFormatter
except ImportError:
    # python-json-logger<3.1.0
    from pythonjsonlogger.jsonlogger import JsonFormatter as _pjl_JsonFormatter  # type: ignore
    from pythonjsonlogger.jsonlogger import RESERVED_ATTRS as _pjl_RESERVED_ATTRS  # type: ignore

from labelkeeper._cogs.helpers import typedefs
from labelkeeper._cogs.structs import bodies

logger = logging.getLogger('labelkeeper.objects')

# A key for object references in JSON logs, as seen by the log parsers.
DEFAULT_JSON_REFKEY = 'object'


class LogFormat(enum.Enum):
    """ Log formats, as specified on CLI. """
    PLAIN = '%(message)s'
    FULL = '[%(asctime)s] %(name)-20.20s [%(levelname)-8.8s] %(message)s'
    JSON = '-json-'  # not used for formatting, only for detection


def _make_prefix(ref: bodies.ObjectReference) -> str:
    namespace = ref.get('namespace')
    name = ref.get('name', '')
    return f"[{namespace}/{name}]" if namespace else f"[{name}]"


class ObjectFormatter(logging.Formatter):
    """
    A text formatter, which optionally prefixes the messages with the object.

    The prefix is added only to the records of `ObjectLogger`, i.e. those
    with ``k8s_ref``; all other records are formatted as usual.
    """

    def __init__(self, *args: Any, prefix: bool = False, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.prefix = prefix

    def format(self, record: logging.LogRecord) -> str:
        if self.prefix and hasattr(record, 'k8s_ref'):
            record = copy.copy(record)  # shallow
            record.msg = f"{_make_prefix(getattr(record, 'k8s_ref'))} {record.msg}"
        return super().format(record)


class ObjectJsonFormatter(ObjectFormatter, _pjl_JsonFormatter):
    """ A JSON formatter, which puts the object's reference into its own field. """

    def __init__(
            self,
            *args: Any,
            refkey: Optional[str] = None,
            **kwargs: Any,
    ) -> None:
        # The reference is rendered under the refkey, not as a raw extra.
        reserved_attrs = set(kwargs.pop('reserved_attrs', _pjl_RESERVED_ATTRS))
        kwargs.update(reserved_attrs=reserved_attrs | {'k8s_ref'})
        kwargs.setdefault('timestamp', True)
        super().__init__(*args, **kwargs)
        self.refkey: str = refkey or DEFAULT_JSON_REFKEY

    def add_fields(
            self,
            log_record: MutableMapping[str, object],
            record: logging.LogRecord,
            message_dict: MutableMapping[str, object],
    ) -> None:
        super().add_fields(log_record, record, message_dict)

        if hasattr(record, 'k8s_ref'):
            log_record[self.refkey] = getattr(record, 'k8s_ref')

        if 'severity' not in log_record:
            log_record['severity'] = (
                "debug" if record.levelno <= logging.DEBUG else
                "info" if record.levelno <= logging.INFO else
                "warn" if record.levelno <= logging.WARNING else
                "error" if record.levelno <= logging.ERROR else
                "fatal")


class ObjectLogger(typedefs.LoggerAdapter):
    """
    A logger/adapter to carry the object identifiers for formatting.

    The identifiers are then used for formatting the per-object messages
    in `ObjectFormatter` and `ObjectJsonFormatter`.

    The reference is built once at construction, so later modifications
    of the object (e.g. by the retention itself) do not affect the logs.
    """

    def __init__(self, *, body: Mapping[str, Any]) -> None:
        super().__init__(logger, dict(
            k8s_ref=bodies.build_object_reference(body),
        ))

    def process(
            self,
            msg: str,
            kwargs: MutableMapping[str, Any],
    ) -> Tuple[str, MutableMapping[str, Any]]:
        # Native logging overwrites the message's extra with the adapter's extra.
        # We merge them, so that both message's & adapter's extras are available.
        kwargs["extra"] = dict(self.extra or {}, **kwargs.get('extra', {}))
        return msg, kwargs


# Used to identify and remove our own handlers on re-configuration, e.g. in CLI tests,
# where the previous handlers can stream into a closed stderr interceptor of Click's runner.
if TYPE_CHECKING:
    class _LabelkeeperStreamHandler(logging.StreamHandler[TextIO]):
        pass
else:
    class _LabelkeeperStreamHandler(logging.StreamHandler):
        pass


def configure(
        debug: Optional[bool] = None,
        verbose: Optional[bool] = None,
        quiet: Optional[bool] = None,
        log_format: LogFormat = LogFormat.FULL,
        log_prefix: Optional[bool] = None,
        log_refkey: Optional[str] = None,
) -> None:
    log_level = 'DEBUG' if debug or verbose else 'WARNING' if quiet else 'INFO'
    formatter = make_formatter(log_format=log_format, log_prefix=log_prefix, log_refkey=log_refkey)
    handler = _LabelkeeperStreamHandler()
    handler.setFormatter(formatter)
    logger = logging.getLogger()
    logger.handlers[:] = [h for h in logger.handlers
                          if not isinstance(h, _LabelkeeperStreamHandler)]
    logger.addHandler(handler)
    logger.setLevel(log_level)


def make_formatter(
        log_format: LogFormat = LogFormat.FULL,
        log_prefix: Optional[bool] = None,
        log_refkey: Optional[str] = None,
) -> ObjectFormatter:
    # The JSON logs have the reference in a field, so the prefix is only a duplicate there.
    prefix = log_prefix if log_prefix is not None else log_format is not LogFormat.JSON
    if log_format is LogFormat.JSON:
        return ObjectJsonFormatter(refkey=log_refkey, prefix=prefix)
    elif isinstance(log_format, LogFormat):
        return ObjectFormatter(log_format.value, prefix=prefix)
    else:
        raise ValueError(f"Unsupported log format: {log_format!r}")
