"""
Tracking of the labels & annotations applied by us to the propagated objects.

After the desired object is applied to a member cluster, the keys of its labels
and annotations are stamped into the reserved annotations of that object.
On the next reconciliation cycle, the observed object brings these stamps back,
and `labelkeeper._core.retention` uses them to tell our own keys (which can be
dropped if not desired anymore) from the foreign keys (which are never dropped).

The stamps must be recorded on the freshly rendered desired object, before
the retention: the retained foreign keys must never be stamped as ours,
or else they are dropped on the next cycle as no longer desired.
"""
from typing import Any, Mapping, MutableMapping, Optional

from labelkeeper._cogs.configs import configuration
from labelkeeper._cogs.structs import annotations, bodies, managed


def record_managed_labels(
        body: MutableMapping[str, Any],
        *,
        settings: Optional[configuration.Settings] = None,
) -> None:
    settings = settings if settings is not None else configuration.Settings()
    keys = bodies.Body(body).meta.labels.keys()
    value = managed.encode_managed_keys(keys)
    annotations.merge_annotation(body, settings.bookkeeping.managed_labels_annotation, value)


def record_managed_annotations(
        body: MutableMapping[str, Any],
        *,
        settings: Optional[configuration.Settings] = None,
) -> None:
    """
    Stamp the current annotations' keys into the managed-annotations annotation.

    The managed-annotations annotation is itself always recorded as managed:
    if a re-rendered desired object lacks it, the stale one of the observed
    object must be dropped, not retained as a foreign one.
    """
    settings = settings if settings is not None else configuration.Settings()
    key = settings.bookkeeping.managed_annotations_annotation
    keys = set(bodies.Body(body).meta.annotations.keys()) | {key}
    annotations.merge_annotation(body, key, managed.encode_managed_keys(keys))


def record_managed_metadata(
        body: MutableMapping[str, Any],
        *,
        settings: Optional[configuration.Settings] = None,
) -> None:
    # The labels go first, so that their stamp gets into the managed annotations.
    record_managed_labels(body, settings=settings)
    record_managed_annotations(body, settings=settings)


def get_managed_labels(
        body: Mapping[str, Any],
        *,
        settings: Optional[configuration.Settings] = None,
) -> managed.ManagedKeys:
    settings = settings if settings is not None else configuration.Settings()
    key = settings.bookkeeping.managed_labels_annotation
    value = bodies.Body(body).meta.annotations.get(key)
    return managed.decode_managed_keys(value)


def get_managed_annotations(
        body: Mapping[str, Any],
        *,
        settings: Optional[configuration.Settings] = None,
) -> managed.ManagedKeys:
    settings = settings if settings is not None else configuration.Settings()
    key = settings.bookkeeping.managed_annotations_annotation
    value = bodies.Body(body).meta.annotations.get(key)
    return managed.decode_managed_keys(value)
