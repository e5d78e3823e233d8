"""
Retention of the foreign metadata when the desired objects are re-applied.

The desired object is freshly rendered on every reconciliation cycle, and it
knows nothing about the labels & annotations added to the object on a member
cluster by other actors (controllers, admission webhooks, humans). Applying it
as is would remove them. On the other hand, copying all the observed metadata
to the desired object makes it impossible to ever remove our own labels.

To tell one from another, the observed object's managed set is used
(see `labelkeeper._core.tracking`). Every observed key is classified:

* `Retention.KEEP` -- the key is desired: the desired value is authoritative;
* `Retention.COPY` -- the key is foreign (not in the managed set): retain it;
* `Retention.DROP` -- the key is ours, but is not desired anymore: forget it.

The classification depends only on the key itself, so the outcome
does not depend on the order of the keys in any of the objects.
"""
import enum
import logging
from typing import AbstractSet, Any, Mapping, MutableMapping, Optional

from labelkeeper._cogs.configs import configuration
from labelkeeper._cogs.helpers import typedefs
from labelkeeper._cogs.structs import annotations, bodies, dicts, finalizers, labels
from labelkeeper._core import tracking

default_logger = logging.getLogger(__name__)


class Retention(enum.Enum):
    """ What to do with an observed key in the desired object. """
    KEEP = enum.auto()
    COPY = enum.auto()
    DROP = enum.auto()


def classify(
        key: str,
        *,
        desired: Mapping[str, str],
        managed: AbstractSet[str],
) -> Retention:
    if key in desired:
        return Retention.KEEP
    elif key not in managed:
        return Retention.COPY
    else:
        return Retention.DROP


def retain_labels(
        desired: MutableMapping[str, Any],
        observed: Mapping[str, Any],
        *,
        settings: Optional[configuration.Settings] = None,
        logger: Optional[typedefs.Logger] = None,
) -> None:
    observed_labels = bodies.Body(observed).meta.labels
    if not observed_labels:
        return
    _retain(
        desired=desired,
        observed=observed_labels,
        managed=tracking.get_managed_labels(observed, settings=settings),
        field=labels.FIELD,
        noun='label',
        logger=logger,
    )


def retain_annotations(
        desired: MutableMapping[str, Any],
        observed: Mapping[str, Any],
        *,
        settings: Optional[configuration.Settings] = None,
        logger: Optional[typedefs.Logger] = None,
) -> None:
    settings = settings if settings is not None else configuration.Settings()
    observed_annotations = bodies.Body(observed).meta.annotations
    if not observed_annotations:
        return

    # The observed stamps are never foreign, even if they do not list themselves.
    managed = tracking.get_managed_annotations(observed, settings=settings) | {
        settings.bookkeeping.managed_labels_annotation,
        settings.bookkeeping.managed_annotations_annotation,
    }
    _retain(
        desired=desired,
        observed=observed_annotations,
        managed=managed,
        field=annotations.FIELD,
        noun='annotation',
        logger=logger,
    )


def retain_finalizers(
        desired: MutableMapping[str, Any],
        observed: Mapping[str, Any],
) -> None:
    """
    Merge the observed finalizers into the desired object.

    The observed finalizers go first: their order on the member cluster
    is what other controllers rely on. The desired ones are appended if new.
    """
    merged = finalizers.dedupe_and_merge_finalizers(
        bodies.Body(observed).meta.finalizers,
        bodies.Body(desired).meta.finalizers,
    )
    if merged:
        dicts.ensure(desired, 'metadata.finalizers', merged)


def retain_metadata(
        desired: MutableMapping[str, Any],
        observed: Mapping[str, Any],
        *,
        settings: Optional[configuration.Settings] = None,
        logger: Optional[typedefs.Logger] = None,
) -> None:
    retain_labels(desired, observed, settings=settings, logger=logger)
    retain_annotations(desired, observed, settings=settings, logger=logger)
    retain_finalizers(desired, observed)


def _retain(
        *,
        desired: MutableMapping[str, Any],
        observed: Mapping[str, str],
        managed: AbstractSet[str],
        field: str,
        noun: str,
        logger: Optional[typedefs.Logger],
) -> None:
    logger = logger if logger is not None else default_logger
    existing: Mapping[str, str] = dicts.resolve(desired, field, None) or {}

    retained = {}
    for key, value in observed.items():
        retention = classify(key, desired=existing, managed=managed)
        if retention is Retention.COPY:
            retained[key] = value
        elif retention is Retention.DROP:
            logger.debug(f"Dropping the {noun} {key!r} as no longer desired.")

    # Do not create an empty container in the desired object if nothing is retained.
    if retained:
        logger.debug(f"Retaining the foreign {noun}s: {sorted(retained)!r}")
        container = dicts.provide(desired, field)
        container.update(retained)
