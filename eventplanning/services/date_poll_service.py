from collections.abc import Iterable
from datetime import date, datetime

from ..core.exceptions import InvalidDateOptionError
from ..core.logging import PlanningLogger
from ..schemas.poll import DateOptionChanges


def ensure_date(value: date | datetime | str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip())
        except ValueError as e:
            raise InvalidDateOptionError(value) from e
    raise InvalidDateOptionError(value)


def plan_date_option_changes(
    existing_dates: Iterable[date | datetime | str],
    new_dates: Iterable[date | datetime | str],
) -> DateOptionChanges:
    """Work out which date options to add and remove for a new selection.

    Options whose date stays selected are left alone so their votes survive.
    """
    existing = {ensure_date(value) for value in existing_dates}
    selected = {ensure_date(value) for value in new_dates}

    changes = DateOptionChanges(
        to_add=sorted(selected - existing),
        to_remove=sorted(existing - selected),
        unchanged=sorted(existing & selected),
    )

    if changes.has_changes:
        PlanningLogger.log_date_option_changes(
            len(changes.to_add), len(changes.to_remove), len(changes.unchanged)
        )

    return changes
