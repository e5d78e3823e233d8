"""
Annotation manipulation on the resource objects.

Mirrors `labelkeeper._cogs.structs.labels`, but for ``metadata.annotations``.
Annotations also carry the bookkeeping of this library itself (the managed
sets), so the modifying functions here do not protect any reserved keys:
this is the caller's responsibility.
"""
from typing import Any, MutableMapping, Optional

from labelkeeper._cogs.structs import bodies, dicts

FIELD = 'metadata.annotations'


def get_annotation_value(
        annotations: Optional[bodies.Annotations],
        key: str,
) -> str:
    if not annotations or not key:
        return ''
    return annotations.get(key, '')


def merge_annotation(
        body: MutableMapping[str, Any],
        key: str,
        value: str,
) -> None:
    annotations: bodies.RawAnnotations = dicts.provide(body, FIELD)
    annotations[key] = value


def dedupe_and_merge_annotations(
        existing: Optional[bodies.Annotations],
        incoming: Optional[bodies.Annotations],
) -> Optional[bodies.RawAnnotations]:
    if existing is None and incoming is None:
        return None
    return {**(existing or {}), **(incoming or {})}


def remove_annotations(
        body: MutableMapping[str, Any],
        *keys: str,
) -> None:
    annotations = dicts.resolve(body, FIELD, None)
    if not annotations:
        return
    for key in keys:
        annotations.pop(key, None)
