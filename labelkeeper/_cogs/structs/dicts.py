"""
Some basic dicts and field-in-a-dict manipulation helpers.

The resource bodies are plain JSON-like trees of dicts, lists, and scalars.
These helpers walk them by "field paths" (e.g. ``metadata.labels``) without
caring whether the intermediate levels exist.
"""
import collections.abc
import enum
from typing import Any, Generic, Iterator, List, Mapping, MutableMapping, \
                   Optional, Tuple, TypeVar, Union

FieldPath = Tuple[str, ...]
FieldSpec = Union[None, str, FieldPath, List[str]]

_T = TypeVar('_T')
_K = TypeVar('_K')
_V = TypeVar('_V')


class _UNSET(enum.Enum):
    token = enum.auto()


def parse_field(
        field: FieldSpec,
) -> FieldPath:
    """
    Convert any field into a tuple of nested sub-fields.

    Supported notations:

    * ``None`` (for root of a dict).
    * ``"field.subfield"``
    * ``("field", "subfield")``
    * ``["field", "subfield"]``
    """
    if field is None:
        return tuple()
    elif isinstance(field, str):
        return tuple(field.split('.'))
    elif isinstance(field, (list, tuple)):
        return tuple(field)
    else:
        raise ValueError(f"Field must be either a str, or a list/tuple. Got {field!r}")


def resolve(
        d: Optional[Mapping[Any, Any]],
        field: FieldSpec,
        default: Union[_T, _UNSET] = _UNSET.token,
) -> Union[Any, _T]:
    """
    Retrieve a nested sub-field from a dict.

    If ``default`` is provided, then all non-existent and non-mapping values
    are assumed to be empty dictionaries, and ``default`` is returned.

    Otherwise (with no default), attempts to get the inexistent keys will
    raise either a ``TypeError`` or ``KeyError``:

    * ``KeyError`` for actual absence of keys while the structures are correct.
    * ``TypeError`` for attempting to get a key for a non-dictionary:
      e.g. ``None['key']``, ``"string"['key']``, ``123['key']``, etc.
    """
    path = parse_field(field)
    try:
        result = d
        for key in path:
            if isinstance(result, collections.abc.Mapping):
                result = result[key]
            elif not isinstance(default, _UNSET):
                return default
            else:
                raise TypeError(f"The structure is not a dict with field {key!r}: {result!r}")
        return result
    except KeyError:
        if not isinstance(default, _UNSET):
            return default
        raise


def ensure(
        d: MutableMapping[Any, Any],
        field: FieldSpec,
        value: Any,
) -> None:
    """
    Force-set a nested sub-field in a dict.

    If some levels of parents are missing, they are created as empty dicts
    (this what makes it "ensuring", not just "setting").
    """
    path = parse_field(field)
    if not path:
        raise ValueError("Setting a root of a dict is impossible. Provide the specific fields.")
    parent = provide(d, path[:-1])
    parent[path[-1]] = value


def provide(
        d: MutableMapping[Any, Any],
        field: FieldSpec,
) -> MutableMapping[Any, Any]:
    """
    Get a nested sub-dict, creating it and all its missing parents if absent.

    Unlike `ensure`, the existing values are never replaced: if the field
    is already there, it is returned as is, so that the caller can modify it
    in place. ``None`` values are treated as absent (as K8s does for nulls).
    If the existing value is not a mapping, a ``TypeError`` is raised.
    """
    result = d
    for key in parse_field(field):
        if not isinstance(result, collections.abc.MutableMapping):
            raise TypeError(f"The structure is not a dict with field {key!r}: {result!r}")
        if result.get(key) is None:
            result[key] = {}
        result = result[key]
    if not isinstance(result, collections.abc.MutableMapping):
        raise TypeError(f"The field {field!r} is not a dict: {result!r}")
    return result


class MappingView(Mapping[_K, _V], Generic[_K, _V]):
    """
    A lazy resolver for the "on-demand" dict keys.

    This is needed to have ``labels`` and ``annotations`` to be *assumed*
    as dicts, even if they are actually not present. And to prevent their
    implicit creation with ``.setdefault('labels', {})``, which produces
    unwanted side-effects (actually adds this field to the desired object).

    >>> body = {}
    >>> labels = MappingView(body, 'metadata.labels')
    >>> labels.get('key', 'default')
    ... 'default'
    >>> body['metadata'] = {'labels': {'key': 'value'}}
    >>> labels.get('key', 'default')
    ... 'value'
    """
    _src: Mapping[_K, _V]

    def __init__(self, __src: Mapping[Any, Any], __path: FieldSpec = None) -> None:
        super().__init__()
        self._src = __src
        self._path = parse_field(__path)

    def __repr__(self) -> str:
        return repr(dict(self))

    def __len__(self) -> int:
        return len(resolve(self._src, self._path, None) or {})

    def __iter__(self) -> Iterator[Any]:
        return iter(resolve(self._src, self._path, None) or {})

    def __getitem__(self, item: _K) -> _V:
        container = resolve(self._src, self._path, None) or {}
        return container[item]  # type: ignore
