import pytest

from labelkeeper._cogs.structs.labels import dedupe_and_merge_labels


@pytest.mark.parametrize('existing, incoming, expected', [
    pytest.param(None, None, None, id='both-none'),
    pytest.param({'foo': 'bar'}, None, {'foo': 'bar'}, id='none-incoming'),
    pytest.param(None, {'foo': 'bar'}, {'foo': 'bar'}, id='none-existing'),
    pytest.param({}, {}, {}, id='both-empty'),
    pytest.param({'foo': 'bar'}, {'foo': 'bar'}, {'foo': 'bar'}, id='same-keys'),
    pytest.param({'foo': 'bar'}, {'foo1': 'bar1'}, {'foo': 'bar', 'foo1': 'bar1'}, id='different-keys'),
    pytest.param({'foo': 'old'}, {'foo': 'new'}, {'foo': 'new'}, id='incoming-wins'),
])
def test_merging(existing, incoming, expected):
    assert dedupe_and_merge_labels(existing, incoming) == expected


def test_inputs_are_not_modified():
    existing = {'foo': 'old', 'a': 'b'}
    incoming = {'foo': 'new', 'c': 'd'}
    result = dedupe_and_merge_labels(existing, incoming)
    assert result == {'foo': 'new', 'a': 'b', 'c': 'd'}
    assert existing == {'foo': 'old', 'a': 'b'}
    assert incoming == {'foo': 'new', 'c': 'd'}


@pytest.mark.parametrize('labels', [
    pytest.param({'foo': 'bar'}, id='existing'),
    pytest.param({'foo': 'bar', 'foo1': 'bar1'}, id='incoming'),
])
def test_result_is_a_new_dict(labels):
    assert dedupe_and_merge_labels(labels, None) is not labels
    assert dedupe_and_merge_labels(None, labels) is not labels


def test_idempotence():
    labels = {'foo': 'bar', 'foo1': 'bar1'}
    assert dedupe_and_merge_labels(labels, labels) == labels
