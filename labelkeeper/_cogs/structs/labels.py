"""
Label manipulation on the resource objects.

The labels container (``metadata.labels``) is optional in the objects.
Reading functions treat its absence as no labels at all. Modifying functions
create it on demand, but never remove it, even if it becomes empty.
"""
from typing import Any, MutableMapping, Optional

from labelkeeper._cogs.structs import bodies, dicts

FIELD = 'metadata.labels'


def get_label_value(
        labels: Optional[bodies.Labels],
        key: str,
) -> str:
    """ Get a label's value, or an empty string if there is no such label. """
    if not labels or not key:
        return ''
    return labels.get(key, '')


def merge_label(
        body: MutableMapping[str, Any],
        key: str,
        value: str,
) -> None:
    labels: bodies.RawLabels = dicts.provide(body, FIELD)
    labels[key] = value


def dedupe_and_merge_labels(
        existing: Optional[bodies.Labels],
        incoming: Optional[bodies.Labels],
) -> Optional[bodies.RawLabels]:
    """
    Combine two sets of labels into a new one; the incoming values win.

    Neither of the arguments is modified. If both are absent, so is the result.
    """
    if existing is None and incoming is None:
        return None
    return {**(existing or {}), **(incoming or {})}


def remove_labels(
        body: MutableMapping[str, Any],
        *keys: str,
) -> None:
    labels = dicts.resolve(body, FIELD, None)
    if not labels:
        return
    for key in keys:
        labels.pop(key, None)
