"""
All the functions to merge the finalizers of the propagated objects.

Finalizers are used to block the actual deletion until the finalizers
are removed, meaning that the controllers have done all their duties
to "release" the object. Some controllers rely on the relative order
of their finalizers, so the existing order is never changed: the new
finalizers can only be appended to the end.
"""
from typing import Iterable, List, Optional


def dedupe_and_merge_finalizers(
        existing: Optional[Iterable[str]],
        incoming: Optional[Iterable[str]],
) -> List[str]:
    merged: List[str] = list(existing or [])
    for finalizer in incoming or []:
        if finalizer not in merged:
            merged.append(finalizer)
    return merged
