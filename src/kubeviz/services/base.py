"""BaseService — shared construction for kubeviz services.

Every service receives the frozen settings object. Services are cheap to
build and hold no state between calls.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from kubeviz.config.settings import KubevizSettings

logger = logging.getLogger(__name__)


class BaseService:
    """Abstract base for service-layer classes.

    Usage::

        class ShareService(BaseService):
            def encode(self, text: str) -> ServiceResult:
                base_url = self._settings.share.base_url
                ...
    """

    def __init__(self, settings: KubevizSettings | None = None) -> None:
        if settings is None:
            from kubeviz.config.settings import KubevizSettings

            settings = KubevizSettings()
        self._settings = settings

    @property
    def settings(self) -> KubevizSettings:
        return self._settings
