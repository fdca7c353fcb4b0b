# nexa/ticket/services.py
import json
from datetime import datetime, timezone
from typing import Any

from nexa.core.database import Store
from nexa.ticket.schemas import TicketCreate, TicketUpdate

SELECT_ALL = "SELECT * FROM tickets ORDER BY id DESC"

SELECT_ONE = "SELECT * FROM tickets WHERE id = :1"

INSERT = """
    INSERT INTO tickets (data, title, priority, status, user_name, feedbacks)
    VALUES (:1, :2, :3, :4, :5, :6)
    RETURNING *
"""

# omitted fields bind NULL and COALESCE keeps the stored value
UPDATE = """
    UPDATE tickets
    SET title = COALESCE(:1, title),
        priority = COALESCE(:2, priority),
        status = COALESCE(:3, status)
    WHERE id = :4
    RETURNING *
"""

DELETE = "DELETE FROM tickets WHERE id = :1 RETURNING *"


def _first(rows: list[dict[str, Any]]) -> dict[str, Any] | None:
    return rows[0] if rows else None


def _utc_naive(moment: datetime) -> datetime:
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc).replace(tzinfo=None)
    return moment


def serialize_feedbacks(feedbacks: Any) -> str:
    """Render any JSON value as the text of a JSON array.

    Missing or false-like values (null, false, 0, "", {}) become an empty array.
    """
    if not feedbacks:
        feedbacks = []
    elif not isinstance(feedbacks, list):
        feedbacks = [feedbacks]
    return json.dumps(feedbacks)


def get_all_tickets(store: Store) -> list[dict[str, Any]]:
    return store.execute(SELECT_ALL)


def get_ticket(store: Store, ticket_id: int) -> dict[str, Any] | None:
    return _first(store.execute(SELECT_ONE, [ticket_id]))


def create_ticket(store: Store, payload: TicketCreate, default_status: str) -> dict[str, Any]:
    created_at = payload.data or datetime.now(timezone.utc)
    rows = store.execute(
        INSERT,
        [
            _utc_naive(created_at),
            payload.title,
            payload.priority,
            payload.status or default_status,
            payload.user_name,
            serialize_feedbacks(payload.feedbacks),
        ],
    )
    return rows[0]


def update_ticket(store: Store, ticket_id: int, payload: TicketUpdate) -> dict[str, Any] | None:
    # empty strings bind NULL too, so COALESCE keeps the stored value
    fields = [payload.title or None, payload.priority or None, payload.status or None]
    rows = store.execute(UPDATE, [*fields, ticket_id])
    return _first(rows)


def delete_ticket(store: Store, ticket_id: int) -> dict[str, Any] | None:
    return _first(store.execute(DELETE, [ticket_id]))
