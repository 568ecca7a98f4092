"""Health and observability routes."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from internal.health import Status
from utils.timestamp import format_timestamp

router = APIRouter(prefix="/api/v1", tags=["health"])

# These will be set by app.py
_generator = None
_health_checker = None


def init(generator, health_checker):
    """Initialize with generator and health checker references."""
    global _generator, _health_checker
    _generator = generator
    _health_checker = health_checker


@router.get("/health")
async def health():
    """Health check with component status."""
    report = _health_checker.report()
    status_code = 503 if report["status"] == Status.FAIL.value else 200
    return JSONResponse(content=report, status_code=status_code)


@router.get("/heartbeat")
async def heartbeat():
    """Lightweight heartbeat for frequent polling."""
    return {
        "status": "ok",
        "timestamp": format_timestamp(),
        "machine_tag": _generator.machine_tag.hex(),
        "process_tag": _generator.process_tag,
    }
