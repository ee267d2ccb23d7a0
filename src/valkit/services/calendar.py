"""CalendarService — enumerate and look up days of the week."""

from __future__ import annotations

import logging

from valkit.domain.days import day_of_week, days_of_week, rotate_week
from valkit.services.base import BaseService
from valkit.services.contracts import DayItem, DayListData, dump_validated
from valkit.services.result import ServiceResult

logger = logging.getLogger(__name__)


class CalendarService(BaseService):
    """Day-of-week listing honoring the configured first day."""

    def list_days(self) -> ServiceResult:
        """List all seven days, starting at ``days.first_day``.

        Each item's ``index`` is the day's declaration position (Sunday = 0),
        independent of the display rotation.
        """
        order = days_of_week()
        days = rotate_week(self._settings.days.first_day)
        items = [{"index": order.index(day), "name": str(day)} for day in days]
        return ServiceResult.success(
            "list_days",
            dump_validated(DayListData, {"items": items, "count": len(items)}),
        )

    def get_day(self, name: str) -> ServiceResult:
        """Look up a day by exact name."""
        op = "get_day"
        try:
            day = day_of_week(name)
        except ValueError:
            logger.debug("Unknown day name %r", name)
            return ServiceResult.failure(
                op,
                "UNKNOWN_DAY",
                f"No day named {name!r}",
                detail={"name": name, "valid": [str(d) for d in days_of_week()]},
            )
        data = dump_validated(DayItem, {"index": days_of_week().index(day), "name": str(day)})
        return ServiceResult.success(op, data)
