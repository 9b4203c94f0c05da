"""BaseService — common foundation for assetviz services.

Every service receives the run's :class:`AssetvizSettings` at
construction time and reads its configuration sections from there.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from assetviz.config.settings import AssetvizSettings


class BaseService:
    """Base for service-layer classes.

    Usage::

        class BuildService(BaseService):
            def build(self, lines) -> ServiceResult:
                parser = self._settings.parser
                ...
    """

    def __init__(self, settings: AssetvizSettings) -> None:
        self._settings = settings
