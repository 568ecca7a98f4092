"""
Generator state: counter, machine tag and process tag.

One `Generator` hands out distinct (timestamp, machine, pid, counter) fields
to any number of threads. The counter starts at a random 24-bit value and is
the only state touched per call, under a lock held for the increment only.
Clock, host name and pid sources are injectable so tests can pin them.
"""

import os
import random
import socket
import struct
import threading
import time

from internal.logging import get_logger
from utils.timestamp import unix_seconds
from xid.layout import COUNTER_MASK, PROCESS_MASK, Fields

_DJB2_SEED = 5381

_default = None
_default_lock = threading.Lock()


def machine_hash(data):
    """First 3 bytes of the big-endian 32-bit djb2 hash of `data`."""
    value = _DJB2_SEED
    for byte in data:
        value = (value * 33 + byte) & 0xFFFFFFFF
    return struct.pack(">I", value)[:3]


class Generator:
    def __init__(self, clock=time.time, hostname=socket.gethostname, pid=os.getpid, seed=None, logger=None):
        self._clock = clock
        self._logger = logger
        self._lock = threading.Lock()
        if seed is None:
            seed = random.SystemRandom().getrandbits(24)
        self._counter = seed & COUNTER_MASK

        self.hostname_fallback = False
        try:
            name = hostname()
        except OSError as exc:
            self._log.warn("hostname lookup failed, using empty machine tag", error=exc)
            name = None
        if not name:
            self.hostname_fallback = True
            name = ""
        self.machine_tag = machine_hash(name.encode("utf-8"))
        self.process_tag = pid() & PROCESS_MASK
        self._log.debug("xid generator ready", machine_tag=self.machine_tag.hex(), process_tag=self.process_tag)

    @property
    def _log(self):
        return self._logger or get_logger()

    def clock(self):
        """Current time from the generator's clock, in seconds."""
        return self._clock()

    def next(self, timestamp=None):
        """Fields for a new XID at `timestamp` (default: now)."""
        if timestamp is None:
            timestamp = self._clock()
        seconds = unix_seconds(timestamp)
        with self._lock:
            self._counter = (self._counter + 1) & COUNTER_MASK
            counter = self._counter
        if counter == 0:
            self._log.debug("xid counter wrapped", timestamp=seconds)
        return Fields(seconds, self.machine_tag, self.process_tag, counter)


def get_generator():
    """Process-wide generator, created on first use."""
    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                _default = Generator()
    return _default


def set_generator(generator):
    """Replace the process-wide generator. Returns the previous one."""
    global _default
    with _default_lock:
        previous, _default = _default, generator
    return previous
