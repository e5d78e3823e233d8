import pytest

from labelkeeper._cogs.configs.configuration import BookkeepingSettings, Settings


def pytest_configure(config):
    # Unexpected warnings should fail the tests. Use `-Wignore` to explicitly disable it.
    config.addinivalue_line('filterwarnings', 'error')


@pytest.fixture()
def settings():
    return Settings()


@pytest.fixture()
def custom_settings():
    return Settings(bookkeeping=BookkeepingSettings(
        managed_labels_annotation='example.com/labels',
        managed_annotations_annotation='example.com/annotations',
    ))
