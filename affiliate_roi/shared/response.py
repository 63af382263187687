from __future__ import annotations

from datetime import date
from typing import Generic, Optional, TypeVar

from affiliate_roi.core.config import get_settings
from affiliate_roi.shared.base import BaseSchema


T = TypeVar("T")


class Meta(BaseSchema):
    as_of_date: str
    source: str
    time_window: str
    calculation_version: str
    currency: Optional[str] = None


class ResponseEnvelope(BaseSchema, Generic[T]):
    data: T
    meta: Optional[Meta] = None


def build_meta(source: str, time_window: str, currency: Optional[str] = None) -> Meta:
    return Meta(
        as_of_date=date.today().isoformat(),
        source=source,
        time_window=time_window,
        calculation_version=get_settings().calculation_version,
        currency=currency,
    )
