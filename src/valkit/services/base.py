"""BaseService — shared foundation for valkit services.

Every service receives the frozen :class:`ValkitSettings` at construction
time and reads its section of the configuration from there.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from valkit.config.settings import ValkitSettings


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class EmailService(BaseService):
            def check(self, raw: str) -> ServiceResult:
                limit = self._settings.email.warn_length
                ...
    """

    def __init__(self, settings: ValkitSettings | None = None) -> None:
        if settings is None:
            from valkit.config.settings import ValkitSettings

            settings = ValkitSettings()
        self._settings = settings
