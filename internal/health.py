"""Health checks for the id service.

A check is a plain callable returning ``(Status, msg)``. Checks only read
generator state, so they run inline on every request.
"""

import math
import time
from collections import namedtuple
from enum import Enum
from utils.timestamp import UINT32_MASK, format_timestamp

class Status(Enum):
    OK = "healthy"
    DEGRADED = "degraded"
    FAIL = "unhealthy"

CheckResult = namedtuple("CheckResult", ("name", "status", "msg"))

class HealthChecker:
    def __init__(self, clock=time.time):
        self._checks = []
        self._clock = clock
        self._started = clock()

    def register(self, name, check_fn, critical=True):
        self._checks.append((name, check_fn, critical))

    def run(self):
        """Run every check. Returns (overall status, results)."""
        overall = Status.OK
        results = []
        for name, check_fn, critical in self._checks:
            try:
                status, msg = check_fn()
            except Exception as exc:
                status, msg = Status.FAIL, str(exc)
            results.append(CheckResult(name, status, msg))
            # A failing non-critical check only degrades
            if status == Status.FAIL and critical:
                overall = Status.FAIL
            elif status != Status.OK and overall == Status.OK:
                overall = Status.DEGRADED
        return overall, results

    def report(self):
        overall, results = self.run()
        return {
            "status": overall.value,
            "timestamp": format_timestamp(),
            "uptime": round(self._clock() - self._started, 1),
            "checks": [{"name": r.name, "status": r.status.value, "msg": r.msg} for r in results],
        }

def create_hostname_check(generator):
    def check():
        if generator.hostname_fallback:
            return Status.DEGRADED, "no_hostname"
        return Status.OK, generator.machine_tag.hex()
    return check

def create_clock_check(generator):
    def check():
        seconds = generator.clock()
        # Timestamps past 2106 (or before 1970) wrap and lose ordering
        if not math.isfinite(seconds) or not 0 <= seconds <= UINT32_MASK:
            return Status.DEGRADED, f"clock_wrap@{seconds}"
        return Status.OK, str(int(seconds))
    return check
