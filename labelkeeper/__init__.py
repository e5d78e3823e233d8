"""
The main labelkeeper module for all the exported functions & classes.
"""
# isort: skip_file

# Unlike all other places, where we import other modules and refer
# the functions via the modules, this is the library's top-level interface,
# as it is seen by the users. So, we export the individual functions.

from labelkeeper._cogs.configs.configuration import (
    MANAGED_LABELS_ANNOTATION,
    MANAGED_ANNOTATIONS_ANNOTATION,
    BookkeepingSettings,
    Settings,
)
from labelkeeper._cogs.helpers.typedefs import (
    Logger,
)
from labelkeeper._cogs.helpers.versions import (
    version as __version__,
)
from labelkeeper._cogs.structs.bodies import (
    RawBody,
    RawMeta,
    Body,
    Meta,
    Labels,
    Annotations,
    Finalizers,
    ObjectReference,
    build_object_reference,
)
from labelkeeper._cogs.structs.labels import (
    get_label_value,
    merge_label,
    dedupe_and_merge_labels,
    remove_labels,
)
from labelkeeper._cogs.structs.annotations import (
    get_annotation_value,
    merge_annotation,
    dedupe_and_merge_annotations,
    remove_annotations,
)
from labelkeeper._cogs.structs.finalizers import (
    dedupe_and_merge_finalizers,
)
from labelkeeper._cogs.structs.managed import (
    ManagedKeys,
    encode_managed_keys,
    decode_managed_keys,
)
from labelkeeper._core.tracking import (
    record_managed_labels,
    record_managed_annotations,
    record_managed_metadata,
    get_managed_labels,
    get_managed_annotations,
)
from labelkeeper._core.retention import (
    Retention,
    classify,
    retain_labels,
    retain_annotations,
    retain_finalizers,
    retain_metadata,
)
from labelkeeper._core.loggers import (
    LogFormat,
    ObjectLogger,
    configure,
)

__all__ = [
    'MANAGED_LABELS_ANNOTATION',
    'MANAGED_ANNOTATIONS_ANNOTATION',
    'BookkeepingSettings',
    'Settings',
    'Logger',
    'RawBody',
    'RawMeta',
    'Body',
    'Meta',
    'Labels',
    'Annotations',
    'Finalizers',
    'ObjectReference',
    'build_object_reference',
    'get_label_value',
    'merge_label',
    'dedupe_and_merge_labels',
    'remove_labels',
    'get_annotation_value',
    'merge_annotation',
    'dedupe_and_merge_annotations',
    'remove_annotations',
    'dedupe_and_merge_finalizers',
    'ManagedKeys',
    'encode_managed_keys',
    'decode_managed_keys',
    'record_managed_labels',
    'record_managed_annotations',
    'record_managed_metadata',
    'get_managed_labels',
    'get_managed_annotations',
    'Retention',
    'classify',
    'retain_labels',
    'retain_annotations',
    'retain_finalizers',
    'retain_metadata',
    'LogFormat',
    'ObjectLogger',
    'configure',
]
