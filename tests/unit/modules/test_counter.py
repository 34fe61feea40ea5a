"""
Unit tests for the counter factory.
"""

import dataclasses
import threading

import pytest

from hof import counter


@pytest.mark.unit
@pytest.mark.domain
class TestCounter:
    """Test counter(start).next()."""

    def test_first_call_returns_start_plus_one(self):
        c = counter(2)

        assert c.next() == 3

    def test_kth_call_returns_start_plus_k(self):
        c = counter(10)

        values = [c.next() for _ in range(5)]

        assert values == [11, 12, 13, 14, 15]

    def test_default_start_is_zero(self):
        assert counter().next() == 1

    def test_negative_start(self):
        c = counter(-2)

        assert [c.next(), c.next(), c.next()] == [-1, 0, 1]

    def test_instances_are_independent(self):
        # Arrange
        first = counter(0)
        second = counter(0)

        # Act
        first.next()
        first.next()

        # Assert
        assert second.next() == 1
        assert first.next() == 3

    def test_handle_is_immutable(self):
        c = counter(0)

        with pytest.raises(dataclasses.FrozenInstanceError):
            c.next = lambda: 0  # type: ignore[misc]

    def test_concurrent_calls_never_repeat_a_value(self):
        # Arrange
        c = counter(0)
        seen = []
        seen_lock = threading.Lock()

        def worker():
            for _ in range(500):
                value = c.next()
                with seen_lock:
                    seen.append(value)

        threads = [threading.Thread(target=worker) for _ in range(4)]

        # Act
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        # Assert
        assert sorted(seen) == list(range(1, 2001))
