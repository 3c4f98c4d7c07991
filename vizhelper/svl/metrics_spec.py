# vizhelper/svl/metrics_spec.py
from __future__ import annotations
from typing import Tuple
from uuid import UUID, uuid4
from pydantic import BaseModel, ConfigDict, PrivateAttr

class MetricPoint(BaseModel):
    """One sample of a scalar series at position t."""
    model_config = ConfigDict(frozen=True, strict=True, allow_inf_nan=False)

    t: float
    y: float
    # render-only identity; never read from or written to the wire
    _id: UUID = PrivateAttr(default_factory=uuid4)

    @property
    def id(self) -> UUID:
        return self._id

class MetricsResponse(BaseModel):
    model_config = ConfigDict(frozen=True, strict=True, allow_inf_nan=False)

    series: str
    points: Tuple[MetricPoint, ...]
