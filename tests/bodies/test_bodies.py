import pytest

from labelkeeper._cogs.structs.bodies import Body, build_object_reference


def test_meta_is_an_alias_of_metadata():
    body = Body({'metadata': {'name': 'name1'}})
    assert body.meta is body.metadata
    assert body.meta.name == 'name1'


@pytest.mark.parametrize('raw', [
    pytest.param({}, id='no-metadata'),
    pytest.param({'metadata': None}, id='none-metadata'),
    pytest.param({'metadata': {}}, id='empty-metadata'),
    pytest.param({'metadata': {'labels': None, 'annotations': None}}, id='none-containers'),
])
def test_absent_containers_are_empty(raw):
    body = Body(raw)
    assert dict(body.meta.labels) == {}
    assert dict(body.meta.annotations) == {}
    assert body.meta.finalizers == []
    assert body.meta.uid is None
    assert body.meta.namespace is None


def test_absent_containers_are_not_created():
    raw = {}
    body = Body(raw)
    assert body.meta.labels.get('app') is None
    assert body.meta.finalizers == []
    assert raw == {}


def test_views_follow_the_changes_of_the_body():
    raw = {}
    body = Body(raw)
    raw['metadata'] = {'labels': {'app': 'web'}}
    assert dict(body.meta.labels) == {'app': 'web'}


def test_finalizers_are_a_copy():
    raw = {'metadata': {'finalizers': ['f1']}}
    Body(raw).meta.finalizers.append('f2')
    assert raw['metadata']['finalizers'] == ['f1']


def test_object_reference_of_namespaced_objects():
    ref = build_object_reference({
        'apiVersion': 'apps/v1',
        'kind': 'Deployment',
        'metadata': {'name': 'web', 'namespace': 'default', 'uid': 'uid1', 'labels': {}},
    })
    assert ref == {
        'apiVersion': 'apps/v1',
        'kind': 'Deployment',
        'name': 'web',
        'namespace': 'default',
        'uid': 'uid1',
    }


def test_object_reference_skips_absent_fields():
    ref = build_object_reference({'kind': 'Namespace', 'metadata': {'name': 'ns1'}})
    assert ref == {'kind': 'Namespace', 'name': 'ns1'}


def test_object_reference_without_metadata():
    assert build_object_reference({}) == {}


@pytest.mark.parametrize('raw', [
    pytest.param({'kind': 'Pod', 'metadata': None}, id='none-metadata'),
    pytest.param({'kind': 'Pod', 'metadata': {'name': '', 'namespace': None}}, id='falsy-fields'),
])
def test_object_reference_with_empty_metadata(raw):
    assert build_object_reference(raw) == {'kind': 'Pod'}


def test_object_reference_of_a_body_view():
    body = Body({'kind': 'Pod', 'metadata': {'name': 'pod1', 'namespace': 'ns1'}})
    assert build_object_reference(body) == {'kind': 'Pod', 'name': 'pod1', 'namespace': 'ns1'}
