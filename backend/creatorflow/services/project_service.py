"""
Project budget aggregation and payment recording.

These functions work on any object shaped like a project: ``budget``,
``paid_amount``, ``status`` and an ``expenses`` list whose items expose
``quantity`` and ``unit_price``. ORM rows and response schemas both qualify.
All money is handled as cent-quantized ``Decimal``.
"""
import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict
from creatorflow.core.utils import CENT, is_whole_cents, to_decimal, to_money
from creatorflow.models.project import PaymentStatus

logger = logging.getLogger(__name__)

ZERO = Decimal("0.00")


def line_amount(item) -> Decimal:
    """quantity x unit_price for a single line item."""
    return to_money(Decimal(item.quantity or 0) * to_money(item.unit_price))


def compute_total_cost(project) -> Decimal:
    """Sum of line amounts over the project's expenses."""
    return to_money(sum((line_amount(item) for item in project.expenses), ZERO))


def compute_balance(project) -> Decimal:
    """Signed amount still owed. Negative when the project is overpaid."""
    return to_money(compute_total_cost(project) - to_money(project.paid_amount))


def display_balance(project) -> Decimal:
    """Balance as shown to users: never below zero."""
    return max(ZERO, compute_balance(project))


def has_budget(project) -> bool:
    return to_money(project.budget) > 0


def compute_percent_used(project) -> Decimal:
    """Total cost as a percentage of budget, or 0 when no budget is set."""
    if not has_budget(project):
        return ZERO
    percent = compute_total_cost(project) / to_money(project.budget) * 100
    return percent.quantize(CENT, rounding=ROUND_HALF_UP)


def derive_status(paid_amount: Decimal, total_cost: Decimal) -> PaymentStatus:
    return PaymentStatus.PAID if paid_amount >= total_cost else PaymentStatus.UNPAID


def record_payment(project, amount) -> bool:
    """
    Add a payment to the project's cumulative paid amount and refresh status.

    Returns False without touching the project when ``amount`` is not
    positive or carries a fraction of a cent. Accepted amounts are added
    as given, never rounded. Status compares against the total at this
    moment only; later expense edits do not re-derive it.
    """
    amount = to_decimal(amount)
    if amount <= 0:
        logger.info(f"Rejected non-positive payment of {amount} for project {getattr(project, 'id', None)}")
        return False
    if not is_whole_cents(amount):
        logger.info(f"Rejected sub-cent payment of {amount} for project {getattr(project, 'id', None)}")
        return False

    project.paid_amount = to_money(project.paid_amount) + amount
    project.status = derive_status(project.paid_amount, compute_total_cost(project))
    return True


def summarize(project) -> Dict[str, Any]:
    """Derived figures for a project, keyed like ``ProjectSummary``."""
    return {
        "project_id": project.id,
        "title": project.title,
        "budget": to_money(project.budget),
        "total_cost": compute_total_cost(project),
        "paid_amount": to_money(project.paid_amount),
        "balance": compute_balance(project),
        "display_balance": display_balance(project),
        "percent_used": compute_percent_used(project),
        "has_budget": has_budget(project),
        "status": project.status,
        "item_count": len(project.expenses),
    }
