"""Unit tests for utility and internal modules."""

import io
import json
from datetime import datetime, timedelta, timezone

import pytest
from internal.health import HealthChecker, Status, create_clock_check, create_hostname_check
from internal.logging import LogLevel, StructuredLogger
from utils.timestamp import format_timestamp, from_unix_seconds, now_micros, unix_seconds
from xid import Generator


class TestTimestamp:
    """Tests for timestamp utilities."""

    def test_format_timestamp_iso_format(self):
        """Timestamp is ISO 8601 format."""
        ts = format_timestamp()
        assert "T" in ts
        assert ts.endswith("Z")

    def test_format_timestamp_has_microseconds(self):
        """Timestamp includes microseconds."""
        assert format_timestamp(1_500_000) == "1970-01-01T00:00:01.500000Z"

    def test_now_micros_reasonable_value(self):
        """now_micros returns reasonable timestamp."""
        micros = now_micros()
        assert isinstance(micros, int)
        assert micros > 1577836808000000  # 2020-01-01

    def test_unix_seconds_truncates(self):
        """Fractions are dropped."""
        assert unix_seconds(1000.99) == 1000

    def test_unix_seconds_naive_is_utc(self):
        """Naive datetimes count as UTC."""
        assert unix_seconds(datetime(2022, 1, 1)) == 1_640_995_200

    def test_unix_seconds_aware(self):
        """Aware datetimes use their offset."""
        tz = timezone(timedelta(hours=2))
        assert unix_seconds(datetime(2022, 1, 1, 2, tzinfo=tz)) == 1_640_995_200

    def test_unix_seconds_wraps(self):
        """Values wrap modulo 2**32."""
        assert unix_seconds(2**32) == 0

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_unix_seconds_non_finite(self, value):
        """NaN and infinities map to 0."""
        assert unix_seconds(value) == 0

    def test_from_unix_seconds(self):
        """Seconds convert to aware UTC datetimes."""
        assert from_unix_seconds(0) == datetime(1970, 1, 1, tzinfo=timezone.utc)


class TestStructuredLogger:
    """Tests for the JSON logger."""

    def test_emits_json_line(self):
        """Records are one JSON object per line."""
        stream = io.StringIO()
        StructuredLogger(LogLevel.INFO, stream).info("issued", count=3)
        record = json.loads(stream.getvalue())
        assert record["level"] == "INFO"
        assert record["msg"] == "issued"
        assert record["count"] == 3

    def test_level_filter(self):
        """Records below the level are dropped."""
        stream = io.StringIO()
        StructuredLogger(LogLevel.WARN, stream).info("quiet")
        assert stream.getvalue() == ""

    def test_bind(self):
        """Bound fields appear on every record."""
        stream = io.StringIO()
        StructuredLogger(LogLevel.DEBUG, stream).bind(component="ids").debug("x")
        assert json.loads(stream.getvalue())["component"] == "ids"

    @pytest.mark.parametrize("name, level", [
        ("debug", LogLevel.DEBUG),
        ("INFO", LogLevel.INFO),
        ("warning", LogLevel.WARN),
        ("ERROR", LogLevel.ERROR),
        ("bogus", LogLevel.INFO),
    ])
    def test_parse_level(self, name, level):
        """Config strings map to levels."""
        assert LogLevel.parse(name) == level


class TestHealthChecker:
    """Tests for HealthChecker and the generator checks."""

    def test_hostname_ok(self, generator):
        """Healthy generator reports its machine tag."""
        assert create_hostname_check(generator)() == (Status.OK, generator.machine_tag.hex())

    def test_hostname_fallback_degraded(self):
        """Missing host name degrades."""
        gen = Generator(hostname=lambda: "")
        assert create_hostname_check(gen)() == (Status.DEGRADED, "no_hostname")

    def test_clock_ok(self, generator):
        """In-range clock reports its second count."""
        assert create_clock_check(generator)() == (Status.OK, "1600000000")

    @pytest.mark.parametrize("reading", [2**32 + 1, -5, float("nan"), float("inf")])
    def test_clock_out_of_range_degraded(self, reading):
        """Clock readings that would wrap degrade."""
        gen = Generator(clock=lambda: reading, hostname=lambda: "h")
        status, _ = create_clock_check(gen)()
        assert status == Status.DEGRADED

    def test_all_ok(self, generator):
        """All passing checks give a healthy report."""
        checker = HealthChecker(clock=lambda: 100.0)
        checker.register("clock", create_clock_check(generator))
        checker.register("hostname", create_hostname_check(generator), critical=False)
        report = checker.report()
        assert report["status"] == "healthy"
        assert report["uptime"] == 0.0
        assert [check["name"] for check in report["checks"]] == ["clock", "hostname"]

    def test_non_critical_degrades(self):
        """Non-critical degradation keeps the report up."""
        checker = HealthChecker()
        checker.register("hostname", create_hostname_check(Generator(hostname=lambda: "")), critical=False)
        overall, _ = checker.run()
        assert overall == Status.DEGRADED

    def test_raising_critical_check_fails(self):
        """A critical check that raises fails the report."""
        def broken():
            raise RuntimeError("clock gone")

        checker = HealthChecker()
        checker.register("clock", broken)
        overall, results = checker.run()
        assert overall == Status.FAIL
        assert results[0].msg == "clock gone"

    def test_raising_non_critical_check_degrades(self):
        """A non-critical check that raises only degrades."""
        def broken():
            raise RuntimeError("boom")

        checker = HealthChecker()
        checker.register("extra", broken, critical=False)
        overall, results = checker.run()
        assert overall == Status.DEGRADED
        assert results[0].status == Status.FAIL

    def test_uptime(self):
        """Uptime counts from construction."""
        readings = iter([10.0, 12.34])
        checker = HealthChecker(clock=lambda: next(readings))
        assert checker.report()["uptime"] == 2.3
