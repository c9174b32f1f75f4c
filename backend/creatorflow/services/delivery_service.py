"""
Delivery service: shipment writes, bulk operations, filtering and totals.
"""
import logging
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Optional, Set
from creatorflow.core.config import settings
from creatorflow.core.errors import InvalidTransitionError
from creatorflow.core.utils import to_money
from creatorflow.models.delivery import Delivery, DeliveryStatus
from creatorflow.models.influencer import Influencer
from creatorflow.models.project import PaymentStatus
from creatorflow.services.document_store import DocumentStore

logger = logging.getLogger(__name__)

DELIVERIES = "deliveries"
PAYMENT_FILTERS = ("All", "Paid", "Unpaid")

# Forward-only pipeline used when ENFORCE_DELIVERY_TRANSITIONS is on
ALLOWED_TRANSITIONS = {
    DeliveryStatus.PENDING: {DeliveryStatus.SENT, DeliveryStatus.CANCELLED},
    DeliveryStatus.SENT: {DeliveryStatus.DELIVERED, DeliveryStatus.CANCELLED},
    DeliveryStatus.DELIVERED: set(),
    DeliveryStatus.CANCELLED: set(),
}


def check_transition(current: DeliveryStatus, target: DeliveryStatus, enforce: Optional[bool] = None) -> None:
    """Raise InvalidTransitionError for a disallowed status change when the guard is on."""
    if enforce is None:
        enforce = settings.ENFORCE_DELIVERY_TRANSITIONS
    if not enforce or current == target:
        return
    if target not in ALLOWED_TRANSITIONS[current]:
        raise InvalidTransitionError(f"Cannot move delivery from {current.value} to {target.value}")


def resolve_influencer_name(store: DocumentStore, influencer_id: Optional[int]) -> str:
    if influencer_id is None:
        return "Unknown"
    influencer = store.db.query(Influencer).filter(Influencer.id == influencer_id).first()
    return influencer.name if influencer else "Unknown"


def create_delivery(store: DocumentStore, data: Dict[str, Any]) -> Delivery:
    data = dict(data)
    data["influencer_name"] = resolve_influencer_name(store, data.get("influencer_id"))
    data["price"] = to_money(data.get("price", 0))
    return store.create(DELIVERIES, **data)


def update_delivery(store: DocumentStore, delivery_id: int, patch: Dict[str, Any]) -> Delivery:
    patch = dict(patch)
    if "status" in patch:
        delivery = store.get(DELIVERIES, delivery_id)
        check_transition(delivery.status, patch["status"])
    if "influencer_id" in patch:
        patch["influencer_name"] = resolve_influencer_name(store, patch["influencer_id"])
    if "price" in patch:
        patch["price"] = to_money(patch["price"])
    return store.update(DELIVERIES, delivery_id, patch)


def bulk_update(store: DocumentStore, ids: Iterable[int], patch: Dict[str, Any]) -> int:
    """Apply one patch to every selected delivery as a single commit."""
    ids = list(ids)
    if "status" in patch:
        for delivery in store.db.query(Delivery).filter(Delivery.id.in_(ids)).all():
            check_transition(delivery.status, patch["status"])
    affected = store.batch_update(DELIVERIES, ids, patch)
    logger.info(f"Bulk updated {affected} deliveries with {patch}")
    return affected


def bulk_delete(store: DocumentStore, ids: Iterable[int]) -> int:
    affected = store.batch_delete(DELIVERIES, ids)
    logger.info(f"Bulk deleted {affected} deliveries")
    return affected


def filter_deliveries(deliveries: List[Delivery], search: str = "", payment: str = "All") -> List[Delivery]:
    """Match search against influencer or product name (case-insensitive) and payment status."""
    term = (search or "").lower()
    result = []
    for d in deliveries:
        matches_search = term in d.influencer_name.lower() or term in d.product_name.lower()
        matches_payment = payment == "All" or d.payment_status.value == payment
        if matches_search and matches_payment:
            result.append(d)
    return result


def delivery_stats(deliveries: List[Delivery]) -> Dict[str, Decimal]:
    """Sum of delivery prices by payment status."""
    paid = sum((to_money(d.price) for d in deliveries if d.payment_status == PaymentStatus.PAID), Decimal("0.00"))
    unpaid = sum((to_money(d.price) for d in deliveries if d.payment_status == PaymentStatus.UNPAID), Decimal("0.00"))
    return {"paid": paid, "unpaid": unpaid, "total": paid + unpaid}


class DeliverySelection:
    """
    The set of delivery ids a user has ticked for a bulk action.

    Bulk helpers clear the selection once the store call has returned.
    """

    def __init__(self, ids: Iterable[int] = ()):
        self.ids: Set[int] = set(ids)

    def toggle(self, delivery_id: int) -> None:
        if delivery_id in self.ids:
            self.ids.discard(delivery_id)
        else:
            self.ids.add(delivery_id)

    def toggle_all(self, visible_ids: Iterable[int]) -> None:
        """Select every visible id, or clear when all of them are already selected."""
        visible = set(visible_ids)
        if len(self.ids) == len(visible):
            self.clear()
        else:
            self.ids = visible

    def clear(self) -> None:
        self.ids = set()

    def __len__(self) -> int:
        return len(self.ids)

    def __contains__(self, delivery_id) -> bool:
        return delivery_id in self.ids

    def mark_delivered(self, store: DocumentStore) -> int:
        return self._bulk_update(store, {"status": DeliveryStatus.DELIVERED})

    def mark_paid(self, store: DocumentStore) -> int:
        return self._bulk_update(store, {"payment_status": PaymentStatus.PAID})

    def delete(self, store: DocumentStore) -> int:
        affected = bulk_delete(store, sorted(self.ids))
        self.clear()
        return affected

    def _bulk_update(self, store: DocumentStore, patch: Dict[str, Any]) -> int:
        affected = bulk_update(store, sorted(self.ids), patch)
        self.clear()
        return affected
