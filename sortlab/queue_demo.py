"""Producer and consumer threads sharing a bounded ring buffer.

Six workers run at the same time. They hand signals to each other through
condition variables and semaphores. They also read and update a set of
fixed-width integer cells under a lock.
"""

from __future__ import annotations

import argparse
import sys
import threading
from collections import deque
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import TextIO

MAX_COUNT = 20
INITIAL_LENGTH = 10
PRODUCED_VALUE = 8
_WAIT_SLICE = 0.05


class BufferEmpty(Exception):
    """Raised when an element is requested from an empty buffer."""


class RingBuffer:
    """A bounded first-in, first-out buffer of integers."""

    def __init__(self, capacity: int = MAX_COUNT) -> None:
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._items: deque[int] = deque()

    def add(self, number: int) -> bool:
        """Append ``number``; return False and leave the buffer as it is when full."""
        if len(self._items) >= self.capacity:
            return False
        self._items.append(number)
        return True

    def get(self) -> int:
        """Remove and return the oldest element."""
        if not self._items:
            raise BufferEmpty("buffer is empty")
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)


def _wrap(value: int, bits: int, signed: bool) -> int:
    value &= (1 << bits) - 1
    if signed and value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


@dataclass
class AtomicCells:
    """Pairs of 32-bit and 64-bit integer cells, signed and unsigned, updated under a lock."""

    ati1: int = 0
    ati2: int = 0
    atu1: int = 0
    atu2: int = 0
    atl1: int = 0
    atl2: int = 0
    atlu1: int = 0
    atlu2: int = 0
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def snapshot(self, tnum: int) -> str:
        """Describe the current value of every cell."""
        with self._lock:
            return (
                f"Thread{tnum} use atom START: \n"
                f"int: {self.ati1}, {self.ati2}\n"
                f"unsigned: {self.atu1}, {self.atu2}\n"
                f"long: {self.atl1}, {self.atl2}\n"
                f"long unsigned: {self.atlu1}, {self.atlu2}\n"
            )

    def modify(self, tnum: int) -> str:
        """Apply one round of read-modify-write operations with ``tnum``; describe the results."""
        with self._lock:
            lines = [f"Thread{tnum} mod_atom START: \n\n\n"]

            self.ati1 = _wrap(self.ati1 - tnum, 32, True)
            lines.append(f"int sub fetch: {self.ati1}\n")

            self.ati2 = _wrap(self.ati2 & tnum, 32, True)
            lines.append(f"int and fetch: {self.ati2}\n")

            self.atu1 = _wrap(self.atu1 | tnum, 32, False)
            lines.append(f"unsigned or fetch: {self.atu1}\n")

            old = self.atu2
            self.atu2 = _wrap(old + tnum, 32, False)
            lines.append(f"unsigned fetch add: {old}\n")

            old = self.atl1
            self.atl1 = _wrap(old ^ tnum, 64, True)
            lines.append(f"long fetch xor: {old}\n")

            old = self.atl2
            self.atl2 = _wrap(~(old & tnum), 64, True)
            lines.append(f"long fetch nand: {old}\n")

            if self.atlu1 == self.atlu2:
                self.atlu1 = _wrap(tnum, 64, False)
                swapped = 1
            else:
                self.atlu2 = self.atlu1
                swapped = 0
            lines.append(f"long unsigned compare exchange: {swapped}\n")
            lines.append(
                f"long unsigned compare exchange: before {self.atlu2}, {self.atlu1};\n"
            )
            # The exchange writes the previous value of atlu2 back into atlu2,
            # so neither cell changes.
            lines.append(f" after exchange {self.atlu2}, {self.atlu1}\n")
            return "".join(lines)


class _Semaphore:
    """A counting semaphore whose value can be read and that is taken without blocking."""

    def __init__(self, value: int = 0) -> None:
        self._value = value
        self._lock = threading.Lock()

    def try_acquire(self) -> bool:
        with self._lock:
            if self._value == 0:
                return False
            self._value -= 1
            return True

    def release(self) -> None:
        with self._lock:
            self._value += 1

    @property
    def value(self) -> int:
        with self._lock:
            return self._value


class Demo:
    """Six cooperating producer and consumer threads around one ring buffer."""

    def __init__(
        self,
        out: TextIO | None = None,
        initial: int = INITIAL_LENGTH,
        capacity: int = MAX_COUNT,
    ) -> None:
        if not 0 <= initial <= capacity:
            raise ValueError(f"initial length must be within 0..{capacity}, got {initial}")
        self.out = out if out is not None else sys.stdout
        self.initial = initial
        self.buffer = RingBuffer(capacity)
        self.atoms = AtomicCells()
        self._queue_sem = _Semaphore()
        self._scr21 = _Semaphore()
        self._buffer_lock = threading.Lock()
        self._out_lock = threading.Lock()
        self._cond21 = threading.Condition()
        self._cond22 = threading.Condition()
        self._flag21 = 0
        self._flag22 = 0
        self._stop = threading.Event()

    @property
    def semaphore_value(self) -> int:
        """The number of elements the queue semaphore has counted."""
        return self._queue_sem.value

    def _emit(self, text: str) -> None:
        with self._out_lock:
            self.out.write(text)

    def _add(self, number: int) -> bool:
        if self.buffer.add(number):
            self._emit(f"[Add] Added {number} (current count: {len(self.buffer)})\n")
            return True
        self._emit(
            f"[Add] Cannot add {number}: list is full (max {self.buffer.capacity} elements)\n"
        )
        return False

    def _consume(self, num: int) -> None:
        if not self._queue_sem.try_acquire():
            return
        value = self._queue_sem.value
        with self._buffer_lock:
            try:
                number = self.buffer.get()
            except BufferEmpty:
                self._emit("[Buffer] EMPTY! Cannot get.\n")
                return
            self._emit(f"[Get] Got {number}\n")
            self._emit(
                f"Consumer thread{num}: semaphore={value}; element {number} TAKEN; \n"
            )

    def _produce(self, num: int) -> None:
        value = self._queue_sem.value
        if value >= self.buffer.capacity:
            return
        with self._buffer_lock:
            if self._add(PRODUCED_VALUE):
                self._emit(f"Producer thread{num}: semaphore={value}; element  CREATED; \n")
                self._queue_sem.release()

    def _take21(self, num: int) -> bool:
        with self._cond21:
            self._emit(f"Thread{num}: in mutex21! \n")
            while self._flag21 == 0:
                if self._stop.is_set():
                    return False
                self._cond21.wait(_WAIT_SLICE)
            self._flag21 = 0
        return True

    def _take22(self, num: int) -> bool:
        with self._cond22:
            self._emit(f"Thread{num}: in mutex22! \n")
            while self._flag22 == 0:
                if self._stop.is_set():
                    return False
                self._cond22.wait(_WAIT_SLICE)
            self._flag22 -= 1
        return True

    def _probe_scr21(self) -> bool:
        if self._scr21.try_acquire():
            self._scr21.release()
            return True
        return False

    def _worker1(self, num: int) -> None:
        while not self._stop.is_set():
            if self._scr21.try_acquire():
                self._emit(f"Thread{num} semaphore SCR21 semaphore is open\n")
            self._emit(self.atoms.snapshot(num))
            self._emit(self.atoms.modify(num))
            with self._cond22:
                self._flag22 += 1
                self._cond22.notify()

    def _worker2(self, num: int) -> None:
        while not self._stop.is_set():
            if self._probe_scr21():
                self._emit(f"Thread{num} semaphore`s(SCR21)  signal was just sent \n")
            else:
                self._emit(
                    f"Thread{num} semaphor`s(SCR21) signal has already been sent before \n"
                )
            self._consume(num)

    def _worker3(self, num: int) -> None:
        while not self._stop.is_set():
            if not self._take21(num):
                return
            self._emit(self.atoms.snapshot(num))
            self._produce(num)

    def _worker4(self, num: int) -> None:
        while not self._stop.is_set():
            if not self._take22(num):
                return
            self._emit(self.atoms.snapshot(num))
            self._emit(self.atoms.modify(num))
            self._probe_scr21()

    def _worker5(self, num: int) -> None:
        while not self._stop.is_set():
            if not self._take22(num):
                return
            self._consume(num)

    def _worker6(self, num: int) -> None:
        while not self._stop.is_set():
            self._emit(self.atoms.modify(num))
            with self._cond21:
                self._emit(f"Thread{num}: in mutex21! \n")
                self._flag21 = 1
                self._cond21.notify()
            self._produce(num)

    def run(self, duration: float | None = None) -> int:
        """Fill the buffer, run all workers for ``duration`` seconds (or until
        interrupted when None), stop them, and return the buffer's length."""
        self._stop.clear()
        self._emit(f"semaphore={self._queue_sem.value}\n")
        for number in range(self.initial):
            if self._add(number):
                self._queue_sem.release()
        self._emit(
            f"Queue with elements from 0-th to {self.initial - 1}-th has been created !!!\n"
        )
        self._emit(f"semaphore={self._queue_sem.value}\n")

        workers: tuple[Callable[[int], None], ...] = (
            self._worker1,
            self._worker2,
            self._worker3,
            self._worker4,
            self._worker5,
            self._worker6,
        )
        threads = [
            threading.Thread(target=worker, args=(number,), daemon=True)
            for number, worker in enumerate(workers, 1)
        ]
        for thread in threads:
            thread.start()
        try:
            self._stop.wait(duration)
        finally:
            self._stop.set()
            for cond in (self._cond21, self._cond22):
                with cond:
                    cond.notify_all()
            for thread in threads:
                thread.join()
        self._emit("All threads stopped !!!\n")
        return len(self.buffer)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Run producer and consumer threads around a bounded buffer."
    )
    parser.add_argument(
        "--duration",
        type=float,
        default=None,
        help="seconds to run; runs until interrupted when omitted",
    )
    parser.add_argument(
        "--initial", type=int, default=INITIAL_LENGTH, help="elements placed before start"
    )
    args = parser.parse_args(argv)
    try:
        demo = Demo(initial=args.initial)
    except ValueError as exc:
        parser.error(str(exc))
    try:
        demo.run(args.duration)
    except KeyboardInterrupt:
        pass
    return 0