"""BaseService — shared foundation for buildlayout services.

Every service receives a validated :class:`BuildLayoutDescriptor` at
construction. Services translate domain errors into ServiceResult failures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from buildlayout.domain.descriptor import BuildLayoutDescriptor


class BaseService:
    """Base for service-layer classes operating on one descriptor."""

    def __init__(self, descriptor: BuildLayoutDescriptor) -> None:
        self._descriptor = descriptor
