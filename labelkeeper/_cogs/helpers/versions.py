"""
Detecting the library's own version.

The version is taken from the installed package's metadata, if any.
When running from a source tree without installation, it remains ``None``.
"""
import importlib.metadata
from typing import Optional

version: Optional[str] = None

try:
    name, *_ = __name__.split('.')  # usually "labelkeeper", unless renamed/forked.
    version = importlib.metadata.version(name)
except importlib.metadata.PackageNotFoundError:
    pass
