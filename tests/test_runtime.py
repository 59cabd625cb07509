"""Unit tests for the local worker pool."""

import pytest

from mersennepy.config import ConfigError
from mersennepy.lucas_lehmer import is_mersenne_prime
from mersennepy.runtime import JobStateError, cancel_job, cancel_requested, job_active, parallel_map


def square(x: int) -> int:
    return x * x


def test_inline_map():
    assert parallel_map(square, [1, 2, 3]) == {1: 1, 2: 4, 3: 9}


def test_thread_pool_map():
    result = parallel_map(square, range(50), workers=4, executor="thread")
    assert result == {x: x * x for x in range(50)}


def test_process_pool_map():
    result = parallel_map(is_mersenne_prime, [2, 3, 5, 7, 11, 13], workers=2, executor="process")
    assert result == {2: True, 3: True, 5: True, 7: True, 11: False, 13: True}


def test_empty_items():
    assert parallel_map(square, [], workers=4, executor="thread") == {}


def test_on_result_sees_every_item():
    seen = []
    parallel_map(square, range(10), workers=3, executor="thread", on_result=lambda k, v: seen.append((k, v)))
    assert sorted(seen) == [(x, x * x) for x in range(10)]


def test_task_errors_propagate():
    def boom(x):
        raise ZeroDivisionError(x)

    with pytest.raises(ZeroDivisionError):
        parallel_map(boom, [1, 2], workers=2, executor="thread")
    assert job_active() is False


def test_rejects_bad_arguments():
    with pytest.raises(ValueError):
        parallel_map(square, [1], workers=0)
    with pytest.raises(ConfigError):
        parallel_map(square, [1, 2], workers=2, executor="cluster")


def test_one_job_at_a_time():
    def nested(x):
        return parallel_map(square, [x])

    with pytest.raises(JobStateError):
        parallel_map(nested, [1])
    assert parallel_map(square, [4]) == {4: 16}


def test_cancel_without_job():
    with pytest.raises(JobStateError):
        cancel_job()


def test_cancel_stops_dispatch_inline():
    def cancel_on_first(x):
        if x == 0:
            cancel_job()
        return x

    assert parallel_map(cancel_on_first, range(5)) == {0: 0}
    assert cancel_requested() is False


def test_cancel_stops_dispatch_pooled():
    def cancel_on_first(x):
        if x == 0:
            cancel_job()
        return x

    result = parallel_map(cancel_on_first, range(100), workers=2, executor="thread")
    assert 0 in result
    assert len(result) < 100
    assert cancel_requested() is False
