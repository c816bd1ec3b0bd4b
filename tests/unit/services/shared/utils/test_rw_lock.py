import threading

from services.shared.utils.rw_lock import ReadWriteLock


class TestReadWriteLock:
    def test_readers_can_hold_lock_concurrently(self):
        lock = ReadWriteLock()
        barrier = threading.Barrier(2, timeout=2)
        results = []

        def reader():
            with lock.read_lock():
                try:
                    barrier.wait()
                    results.append("ok")
                except threading.BrokenBarrierError:
                    results.append("blocked")

        threads = [threading.Thread(target=reader) for _ in range(2)]
        for t in threads:
            t.start()
        for t in threads:
            t.join(timeout=5)

        assert results == ["ok", "ok"]

    def test_writer_waits_for_active_reader(self):
        lock = ReadWriteLock()
        events = []
        reader_entered = threading.Event()
        release_reader = threading.Event()

        def reader():
            with lock.read_lock():
                reader_entered.set()
                release_reader.wait(timeout=5)
                events.append("reader-done")

        def writer():
            with lock.write_lock():
                events.append("writer")

        reader_thread = threading.Thread(target=reader)
        reader_thread.start()
        assert reader_entered.wait(timeout=5)

        writer_thread = threading.Thread(target=writer)
        writer_thread.start()
        writer_thread.join(timeout=0.2)
        assert writer_thread.is_alive()

        release_reader.set()
        reader_thread.join(timeout=5)
        writer_thread.join(timeout=5)

        assert events == ["reader-done", "writer"]

    def test_lock_is_released_after_exception(self):
        lock = ReadWriteLock()

        try:
            with lock.write_lock():
                raise RuntimeError("boom")
        except RuntimeError:
            pass

        with lock.read_lock():
            pass
        with lock.write_lock():
            pass
