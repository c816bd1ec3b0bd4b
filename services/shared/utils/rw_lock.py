from contextlib import contextmanager
from threading import Condition, Lock
from typing import Iterator


class ReadWriteLock:
    """読み取り優位のワークロード向け Reader-Writer ロック

    - 読み取りは並行に実行できる
    - 書き込みは排他。待機中の書き込みがあれば新しい読み取りは待たされる
    """

    def __init__(self) -> None:
        self._condition = Condition(Lock())
        self._readers = 0
        self._writers_waiting = 0
        self._writing = False

    @contextmanager
    def read_lock(self) -> Iterator[None]:
        with self._condition:
            while self._writing or self._writers_waiting:
                self._condition.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._condition:
                self._readers -= 1
                if self._readers == 0:
                    self._condition.notify_all()

    @contextmanager
    def write_lock(self) -> Iterator[None]:
        with self._condition:
            self._writers_waiting += 1
            while self._writing or self._readers:
                self._condition.wait()
            self._writers_waiting -= 1
            self._writing = True
        try:
            yield
        finally:
            with self._condition:
                self._writing = False
                self._condition.notify_all()
