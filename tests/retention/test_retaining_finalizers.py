import pytest

from labelkeeper._core.retention import retain_finalizers


@pytest.mark.parametrize('desired, observed, expected', [
    pytest.param({}, {}, {}, id='none-anywhere'),
    pytest.param({'metadata': {}}, {'metadata': {'finalizers': []}}, {'metadata': {}}, id='empty'),
    pytest.param({}, {'metadata': {'finalizers': ['a']}},
                 {'metadata': {'finalizers': ['a']}}, id='observed-only'),
    pytest.param({'metadata': {'finalizers': ['a']}}, {},
                 {'metadata': {'finalizers': ['a']}}, id='desired-only'),
    pytest.param({'metadata': {'finalizers': ['a', 'b']}}, {'metadata': {'finalizers': ['b', 'a']}},
                 {'metadata': {'finalizers': ['b', 'a']}}, id='observed-order-wins'),
    pytest.param({'metadata': {'finalizers': ['c', 'a']}}, {'metadata': {'finalizers': ['a', 'b']}},
                 {'metadata': {'finalizers': ['a', 'b', 'c']}}, id='new-appended'),
])
def test_retaining(desired, observed, expected):
    retain_finalizers(desired, observed)
    assert desired == expected


def test_observed_is_not_modified():
    desired = {'metadata': {'finalizers': ['c']}}
    observed = {'metadata': {'finalizers': ['a']}}
    retain_finalizers(desired, observed)
    assert observed == {'metadata': {'finalizers': ['a']}}
    assert desired['metadata']['finalizers'] is not observed['metadata']['finalizers']
