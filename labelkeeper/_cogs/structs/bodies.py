"""
All the structures of the resource objects as propagated to member clusters.

The objects are plain JSON-decoded dicts (e.g. as rendered from a resource
template, or as fetched from a member cluster). They are owned by the caller:
this library never replaces them, only modifies a few metadata fields in place.

For strict type-checking, they are detailed to the per-field level
(`TypedDict` instead of just ``Mapping[Any, Any]``) as used by the library.
Arbitrary other fields are allowed at runtime, but are not type-checked.

For read-only access, the raw bodies can be wrapped into `Body`, which presents
the absent metadata containers as empty mappings instead of failing on them::

    body = Body({'metadata': {'name': 'demo'}})
    body.meta.labels.get('app')  # None, and no labels are created
"""
from typing import Any, List, Mapping, MutableMapping, Optional, cast

from typing_extensions import TypedDict

from labelkeeper._cogs.structs import dicts

Labels = Mapping[str, str]
Annotations = Mapping[str, str]
Finalizers = List[str]

# The mutable variants, as modified in the desired objects.
RawLabels = MutableMapping[str, str]
RawAnnotations = MutableMapping[str, str]


class RawMeta(TypedDict, total=False):
    uid: str
    name: str
    namespace: str
    labels: RawLabels
    annotations: RawAnnotations
    finalizers: Finalizers
    resourceVersion: str
    generation: int


class RawBody(TypedDict, total=False):
    apiVersion: str
    kind: str
    metadata: RawMeta
    spec: Mapping[str, Any]
    status: Mapping[str, Any]


#
# Read-only dict-wrappers for easier typed access to well-known typed fields.
# They never create the missing fields, so they are safe to use on any body.
#


class Meta(dicts.MappingView[str, Any]):

    def __init__(self, __src: "Body") -> None:
        super().__init__(__src, 'metadata')
        self._labels: dicts.MappingView[str, str] = dicts.MappingView(self, 'labels')
        self._annotations: dicts.MappingView[str, str] = dicts.MappingView(self, 'annotations')

    @property
    def labels(self) -> Labels:
        return self._labels

    @property
    def annotations(self) -> Annotations:
        return self._annotations

    @property
    def finalizers(self) -> Finalizers:
        return list(self.get('finalizers') or [])

    @property
    def uid(self) -> Optional[str]:
        return cast(Optional[str], self.get('uid'))

    @property
    def name(self) -> Optional[str]:
        return cast(Optional[str], self.get('name'))

    @property
    def namespace(self) -> Optional[str]:
        return cast(Optional[str], self.get('namespace'))


class Body(dicts.MappingView[str, Any]):

    def __init__(self, __src: Mapping[str, Any]) -> None:
        super().__init__(__src)
        self._meta = Meta(self)

    @property
    def metadata(self) -> Meta:
        return self._meta

    @property
    def meta(self) -> Meta:
        return self._meta


class ObjectReference(TypedDict, total=False):
    apiVersion: str
    kind: str
    namespace: Optional[str]
    name: str
    uid: str


def build_object_reference(
        body: Mapping[str, Any],
) -> ObjectReference:
    """
    Construct an object reference for the logs.

    Keep in mind that some fields can be absent: e.g. ``namespace``
    for cluster resources, or ``uid`` for the freshly rendered desired objects.
    """
    view = Body(body)
    ref = dict(
        apiVersion=view.get('apiVersion'),
        kind=view.get('kind'),
        name=view.meta.name,
        uid=view.meta.uid,
        namespace=view.meta.namespace,
    )
    return cast(ObjectReference, {key: val for key, val in ref.items() if val})
