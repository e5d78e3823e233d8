"""
All configuration flags, options, settings to fine-tune the bookkeeping.

All settings are grouped semantically just for convenience
(instead of a flat mega-object with all the values in it).

There are no global settings: every function that needs them accepts
an optional ``settings`` keyword, and uses the defaults if it is not passed.
The defaults are compatible with the control plane's reserved annotations,
so the objects stay interoperable with other implementations.
"""
import dataclasses

MANAGED_LABELS_ANNOTATION = 'resourcetemplate.karmada.io/managed-labels'
MANAGED_ANNOTATIONS_ANNOTATION = 'resourcetemplate.karmada.io/managed-annotations'


@dataclasses.dataclass
class BookkeepingSettings:

    managed_labels_annotation: str = MANAGED_LABELS_ANNOTATION
    """
    The annotation to store the keys of the labels that were applied by us.

    On the next reconciliation cycle, the labels listed there but absent
    in the desired object are considered as intentionally removed, and are not
    retained from the observed object. All other labels of the observed object
    are considered foreign (e.g. added by other controllers or by humans),
    and are retained.
    """

    managed_annotations_annotation: str = MANAGED_ANNOTATIONS_ANNOTATION
    """
    The annotation to store the keys of the annotations that were applied by us.

    Same as ``managed_labels_annotation``, but for annotations.
    """


@dataclasses.dataclass
class Settings:
    bookkeeping: BookkeepingSettings = dataclasses.field(default_factory=BookkeepingSettings)
