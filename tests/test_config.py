"""Unit tests for search configuration."""

import os

import pytest

from mersennepy.config import ConfigError, SearchConfig, clear_config, configure_search, get_config, resolved_workers


@pytest.fixture(autouse=True)
def _reset_config():
    clear_config()
    yield
    clear_config()


def test_configure_and_get():
    cfg = configure_search(workers=3, executor="thread", verbose=True, time_job=True)
    assert get_config() is cfg
    assert cfg.workers == 3
    assert cfg.executor == "thread"
    assert cfg.verbose is True
    assert cfg.progress_to_terminal is True


def test_clear_config():
    configure_search()
    clear_config()
    assert get_config() is None


def test_validation():
    with pytest.raises(ConfigError):
        configure_search(workers=0)
    with pytest.raises(ConfigError):
        configure_search(executor="mpi")
    with pytest.raises(ConfigError):
        configure_search(verbose=True, progress_to_terminal=False)
    assert get_config() is None


def test_config_error_is_value_error():
    assert issubclass(ConfigError, ValueError)


def test_resolved_workers():
    assert resolved_workers(SearchConfig(workers=5)) == 5
    assert resolved_workers(SearchConfig()) == (os.cpu_count() or 1)
    assert resolved_workers(None) == (os.cpu_count() or 1)
