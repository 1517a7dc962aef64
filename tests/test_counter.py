import threading

import pytest

from hotserve.counter import WRAP, VersionCounter


def test_starts_at_zero():
    assert VersionCounter().value == 0


def test_increment_returns_new_value():
    counter = VersionCounter()
    assert counter.increment() == 1
    assert counter.increment() == 2
    assert counter.value == 2
    assert str(counter) == "2"


def test_wraps_at_sixteen_bits():
    counter = VersionCounter(WRAP - 1)
    assert counter.increment() == 0


def test_rejects_out_of_range_initial():
    with pytest.raises(ValueError):
        VersionCounter(WRAP)
    with pytest.raises(ValueError):
        VersionCounter(-1)


def test_concurrent_increments_are_not_lost():
    counter = VersionCounter()

    def bump():
        for _ in range(1000):
            counter.increment()

    threads = [threading.Thread(target=bump) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert counter.value == 8000
