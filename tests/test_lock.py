"""
Unit tests for the reader/writer lock.
"""

import threading

import pytest

from twm.lock import RWLock


@pytest.mark.unit
class TestRWLock:
    """Test shared and exclusive locking."""

    def test_readers_share(self):
        lock = RWLock()

        with lock.read():
            with lock.read():
                assert lock.readers == 2
        assert lock.readers == 0

    def test_write_is_exclusive(self):
        lock = RWLock()

        with lock.write():
            assert lock.locked_for_write
        assert not lock.locked_for_write

    def test_released_on_exception(self):
        lock = RWLock()

        with pytest.raises(KeyError):
            with lock.write():
                raise KeyError("boom")

        assert not lock.locked_for_write
        with lock.read():
            assert lock.readers == 1

    def test_release_without_acquire(self):
        lock = RWLock()

        with pytest.raises(RuntimeError):
            lock.release_read()
        with pytest.raises(RuntimeError):
            lock.release_write()

    def test_writer_waits_for_readers(self):
        lock = RWLock()
        written = threading.Event()

        def writer():
            with lock.write():
                written.set()

        lock.acquire_read()
        thread = threading.Thread(target=writer)
        thread.start()

        assert not written.wait(0.1)

        lock.release_read()
        thread.join(timeout=2)
        assert written.is_set()

    def test_reader_waits_for_writer(self):
        lock = RWLock()
        read = threading.Event()

        def reader():
            with lock.read():
                read.set()

        lock.acquire_write()
        thread = threading.Thread(target=reader)
        thread.start()

        assert not read.wait(0.1)

        lock.release_write()
        thread.join(timeout=2)
        assert read.is_set()

    def test_concurrent_writers_serialize(self):
        lock = RWLock()
        counter = {"value": 0}

        def increment():
            for _ in range(1000):
                with lock.write():
                    counter["value"] += 1

        threads = [threading.Thread(target=increment) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join(timeout=10)

        assert counter["value"] == 4000
