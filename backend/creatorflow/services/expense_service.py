"""
Expense service for project and line-item persistence.
"""
import logging
from datetime import date
from typing import Any, Dict, Optional
from creatorflow.core.config import settings
from creatorflow.core.errors import InvalidPaymentError, NotFoundError
from creatorflow.core.utils import format_display_date, is_whole_cents, to_money
from creatorflow.models.project import ExpenseItem, PaymentStatus, Project
from creatorflow.services.document_store import DocumentStore
from creatorflow.services.project_service import record_payment

logger = logging.getLogger(__name__)

PROJECTS = "projects"


def create_project(
    store: DocumentStore,
    title: str,
    budget=0,
    today: Optional[date] = None
) -> Project:
    """Create an empty, unpaid project."""
    return store.create(
        PROJECTS,
        title=title,
        budget=to_money(budget),
        paid_amount=to_money(0),
        created_label=format_display_date(today or date.today()),
        status=PaymentStatus.UNPAID
    )


def get_project(store: DocumentStore, project_id: int) -> Project:
    return store.get(PROJECTS, project_id)


def update_project(store: DocumentStore, project_id: int, patch: Dict[str, Any]) -> Project:
    if "budget" in patch:
        patch["budget"] = to_money(patch["budget"])
    return store.update(PROJECTS, project_id, patch)


def delete_project(store: DocumentStore, project_id: int) -> None:
    """Delete a project; its line items go with it."""
    store.delete(PROJECTS, project_id)


def _find_item(project: Project, item_id: int) -> ExpenseItem:
    for item in project.expenses:
        if item.id == item_id:
            return item
    raise NotFoundError("Expense item not found")


def add_expense_item(store: DocumentStore, project_id: int, data: Dict[str, Any]) -> ExpenseItem:
    """Append a line item to the end of the project's expense list."""
    project = get_project(store, project_id)
    item = ExpenseItem(
        description=data.get("description") or "",
        category=data.get("category") or settings.PROTECTED_CATEGORY,
        quantity=data.get("quantity", 1),
        unit_price=to_money(data.get("unit_price", 0))
    )
    project.expenses.append(item)
    store.commit(PROJECTS)
    store.db.refresh(item)
    return item


def update_expense_item(
    store: DocumentStore,
    project_id: int,
    item_id: int,
    patch: Dict[str, Any]
) -> ExpenseItem:
    """Patch a line item. Project status is left as is until the next payment."""
    project = get_project(store, project_id)
    item = _find_item(project, item_id)
    for field, value in patch.items():
        if field == "unit_price":
            value = to_money(value)
        setattr(item, field, value)
    store.commit(PROJECTS)
    store.db.refresh(item)
    return item


def delete_expense_item(store: DocumentStore, project_id: int, item_id: int) -> None:
    project = get_project(store, project_id)
    item = _find_item(project, item_id)
    project.expenses.remove(item)
    store.commit(PROJECTS)


def record_project_payment(store: DocumentStore, project_id: int, amount) -> Project:
    """Record a payment; non-positive and sub-cent amounts are rejected as invalid input."""
    project = get_project(store, project_id)
    if not is_whole_cents(amount):
        raise InvalidPaymentError("Payment amount cannot include fractions of a cent")
    if not record_payment(project, amount):
        raise InvalidPaymentError("Payment amount must be greater than zero")
    store.commit(PROJECTS)
    store.db.refresh(project)
    logger.info(f"Recorded payment of {to_money(amount)} on project {project_id}, status {project.status.value}")
    return project
