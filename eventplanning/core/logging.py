import logging
import json
from datetime import datetime, timezone
from collections.abc import Mapping
from eventplanning.config import settings


logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

resolution_logger = logging.getLogger("eventplanning.resolution")
voting_logger = logging.getLogger("eventplanning.voting")


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


class PlanningLogger:
    @staticmethod
    def log_attribute_fallback(
        field: str,
        raw_value: object,
        default: str,
    ):
        log_data: dict[str, object] = {
            "event_type": "attribute_fallback",
            "field": field,
            "raw_value": repr(raw_value),
            "default": default,
            "timestamp": _timestamp(),
        }

        resolution_logger.warning(
            f"Unrecognized form value, using default: {json.dumps(log_data)}"
        )

    @staticmethod
    def log_attribute_resolution(
        inputs: Mapping[str, str],
        resolved: Mapping[str, object],
    ):
        if not resolution_logger.isEnabledFor(logging.DEBUG):
            return

        log_data: dict[str, object] = {
            "event_type": "attribute_resolution",
            "inputs": dict(inputs),
            "resolved": dict(resolved),
            "timestamp": _timestamp(),
        }

        resolution_logger.debug(f"Event attributes resolved: {json.dumps(log_data)}")

    @staticmethod
    def log_bulk_vote_plan(
        inserted: int,
        updated: int,
        unchanged: int,
        user_id: int | None = None,
    ):
        log_data: dict[str, object] = {
            "event_type": "bulk_vote_plan",
            "inserted": inserted,
            "updated": updated,
            "unchanged": unchanged,
            "timestamp": _timestamp(),
        }

        if user_id:
            log_data["user_id"] = user_id

        voting_logger.info(f"Bulk vote plan prepared: {json.dumps(log_data)}")

    @staticmethod
    def log_invalid_votes(
        invalid: list[dict[str, object]],
        user_id: int | None = None,
    ):
        log_data: dict[str, object] = {
            "event_type": "invalid_vote_types",
            "invalid_votes": invalid,
            "timestamp": _timestamp(),
        }

        if user_id:
            log_data["user_id"] = user_id

        voting_logger.error(f"Invalid vote types in bulk request: {json.dumps(log_data)}")

    @staticmethod
    def log_date_option_changes(added: int, removed: int, unchanged: int):
        log_data: dict[str, object] = {
            "event_type": "date_option_changes",
            "added": added,
            "removed": removed,
            "unchanged": unchanged,
            "timestamp": _timestamp(),
        }

        voting_logger.info(f"Date option changes planned: {json.dumps(log_data)}")
