"""Identifier routes: issue and inspect XIDs."""

import math
from typing import Optional

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel

from xid import XID

router = APIRouter(prefix="/api/v1/ids", tags=["ids"])

# These will be set by app.py
_generator = None
_max_batch = 1000


def init(generator, max_batch):
    """Initialize with generator reference and batch limit."""
    global _generator, _max_batch
    _generator = generator
    _max_batch = max_batch


class IDBatch(BaseModel):
    ids: list[XID]


class IDComponents(BaseModel):
    id: XID
    timestamp: int
    time: str
    machine_tag: str
    process_tag: int
    counter: int
    bytes: str

    @classmethod
    def from_xid(cls, xid):
        return cls(
            id=xid,
            timestamp=xid.timestamp,
            time=xid.time.isoformat(),
            machine_tag=xid.machine_tag.hex(),
            process_tag=xid.process_tag,
            counter=xid.counter,
            bytes=xid.bytes.hex(),
        )


@router.get("", response_model=IDBatch)
async def issue(count: int = Query(1, ge=1), at: Optional[float] = None):
    """Issue `count` new ids, at unix time `at` if given."""
    if count > _max_batch:
        raise HTTPException(
            status_code=422,
            detail=f"count must be <= {_max_batch}",
        )
    if at is None:
        ids = [XID.now(_generator) for _ in range(count)]
    elif not math.isfinite(at):
        raise HTTPException(status_code=422, detail="at must be a finite number of seconds")
    else:
        ids = [XID.from_timestamp(at, _generator) for _ in range(count)]
    return IDBatch(ids=ids)


@router.get("/{xid}", response_model=IDComponents)
async def inspect(xid: XID):
    """Decode an id into its components."""
    return IDComponents.from_xid(xid)
