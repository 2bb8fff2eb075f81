"""Schemas for the health endpoint."""

from typing import Literal

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Process liveness plus database reachability."""

    status: Literal["ok"] = "ok"
    db: Literal["ok", "unavailable"]
