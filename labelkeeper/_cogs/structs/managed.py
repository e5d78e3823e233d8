"""
Encoding of the managed sets into the annotation values.

Annotations can only hold strings, so the set of keys managed by us is stored
as a comma-separated list. This module is the only place that knows about it:
everything else works with `frozenset` instances of the keys.

The keys are sorted on encoding, so that the same set always produces
the same annotation value (and does not cause needless changes on the object).
The readers must never rely on that order though: other writers may differ.
"""
from typing import FrozenSet, Iterable, Optional

SEPARATOR = ','

ManagedKeys = FrozenSet[str]


def encode_managed_keys(keys: Iterable[str]) -> str:
    return SEPARATOR.join(sorted(set(keys)))


def decode_managed_keys(value: Optional[str]) -> ManagedKeys:
    if not value:
        return frozenset()
    return frozenset(key for key in value.split(SEPARATOR) if key)
