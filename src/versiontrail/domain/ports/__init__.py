"""Domain port definitions for adapters."""

from __future__ import annotations

from .gateway import RecordGateway, TransportError

__all__ = ["RecordGateway", "TransportError"]
