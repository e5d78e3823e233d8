"""
Rudimentary type [re-]definitions for cross-versioned Python & mypy.

Some StdLib types are defined as generics in the mypy's type-sheds,
while the older Python runtimes do not support subscripting them.
This module defines them in a way that works both at runtime and for mypy.
"""
import logging
from typing import TYPE_CHECKING, Any, Union

if TYPE_CHECKING:
    LoggerAdapter = logging.LoggerAdapter[Any]
else:
    LoggerAdapter = logging.LoggerAdapter

# As publicly exposed: any of the built-in loggable classes is accepted.
Logger = Union[logging.Logger, LoggerAdapter]
