"""
Project expense tracking, payment and invoice routes.
"""
import logging
from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse
from typing import List, Optional
from creatorflow.schemas.invoice import InvoiceConfig, InvoiceDocument, ShareResult
from creatorflow.schemas.project import (
    ExpenseItemCreate, ExpenseItemResponse, ExpenseItemUpdate, PaymentCreate,
    ProjectCreate, ProjectResponse, ProjectSummary, ProjectUpdate
)
from creatorflow.schemas.user import SessionUser
from creatorflow.api.dependencies import get_current_user, get_store
from creatorflow.services import expense_service
from creatorflow.services.document_store import DocumentStore
from creatorflow.services.invoice_service import build_invoice, render_printable, share_invoice
from creatorflow.services.project_service import summarize

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/projects", tags=["projects"])


@router.get("", response_model=List[ProjectResponse])
async def list_projects(
    current_user: SessionUser = Depends(get_current_user),
    store: DocumentStore = Depends(get_store)
):
    return store.list_documents(expense_service.PROJECTS)


@router.post("", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
async def create_project(
    project_data: ProjectCreate,
    current_user: SessionUser = Depends(get_current_user),
    store: DocumentStore = Depends(get_store)
):
    """Create an empty project with a title and budget."""
    return expense_service.create_project(store, project_data.title, project_data.budget)


@router.get("/{project_id}", response_model=ProjectResponse)
async def get_project(
    project_id: int,
    current_user: SessionUser = Depends(get_current_user),
    store: DocumentStore = Depends(get_store)
):
    return expense_service.get_project(store, project_id)


@router.patch("/{project_id}", response_model=ProjectResponse)
async def update_project(
    project_id: int,
    project_data: ProjectUpdate,
    current_user: SessionUser = Depends(get_current_user),
    store: DocumentStore = Depends(get_store)
):
    """Rename a project or change its budget."""
    patch = project_data.model_dump(exclude_unset=True, exclude_none=True)
    return expense_service.update_project(store, project_id, patch)


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project(
    project_id: int,
    current_user: SessionUser = Depends(get_current_user),
    store: DocumentStore = Depends(get_store)
):
    expense_service.delete_project(store, project_id)


@router.get("/{project_id}/summary", response_model=ProjectSummary)
async def get_project_summary(
    project_id: int,
    current_user: SessionUser = Depends(get_current_user),
    store: DocumentStore = Depends(get_store)
):
    """Total cost, balance and budget consumption for a project."""
    project = expense_service.get_project(store, project_id)
    return ProjectSummary(**summarize(project))


@router.post("/{project_id}/payments", response_model=ProjectSummary)
async def record_payment(
    project_id: int,
    payment: PaymentCreate,
    current_user: SessionUser = Depends(get_current_user),
    store: DocumentStore = Depends(get_store)
):
    """Record a payment; the project status is recomputed against the current total."""
    project = expense_service.record_project_payment(store, project_id, payment.amount)
    return ProjectSummary(**summarize(project))


@router.post("/{project_id}/expenses", response_model=ExpenseItemResponse, status_code=status.HTTP_201_CREATED)
async def add_expense_item(
    project_id: int,
    item_data: Optional[ExpenseItemCreate] = None,
    current_user: SessionUser = Depends(get_current_user),
    store: DocumentStore = Depends(get_store)
):
    """Append a line item. An empty body adds a blank row in the default category."""
    item_data = item_data or ExpenseItemCreate()
    return expense_service.add_expense_item(store, project_id, item_data.model_dump())


@router.patch("/{project_id}/expenses/{item_id}", response_model=ExpenseItemResponse)
async def update_expense_item(
    project_id: int,
    item_id: int,
    item_data: ExpenseItemUpdate,
    current_user: SessionUser = Depends(get_current_user),
    store: DocumentStore = Depends(get_store)
):
    patch = item_data.model_dump(exclude_unset=True, exclude_none=True)
    return expense_service.update_expense_item(store, project_id, item_id, patch)


@router.delete("/{project_id}/expenses/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_expense_item(
    project_id: int,
    item_id: int,
    current_user: SessionUser = Depends(get_current_user),
    store: DocumentStore = Depends(get_store)
):
    expense_service.delete_expense_item(store, project_id, item_id)


@router.post("/{project_id}/invoice", response_model=InvoiceDocument)
async def compose_invoice(
    project_id: int,
    config: Optional[InvoiceConfig] = None,
    current_user: SessionUser = Depends(get_current_user),
    store: DocumentStore = Depends(get_store)
):
    """Compose an invoice, generating number and dates where they are missing."""
    project = expense_service.get_project(store, project_id)
    return build_invoice(project, config)


@router.post("/{project_id}/invoice/print", response_class=PlainTextResponse)
async def print_invoice(
    project_id: int,
    config: Optional[InvoiceConfig] = None,
    current_user: SessionUser = Depends(get_current_user),
    store: DocumentStore = Depends(get_store)
):
    """Printable plain-text invoice."""
    project = expense_service.get_project(store, project_id)
    return PlainTextResponse(render_printable(build_invoice(project, config)))


@router.post("/{project_id}/invoice/share", response_model=ShareResult)
async def share_project_invoice(
    project_id: int,
    config: Optional[InvoiceConfig] = None,
    current_user: SessionUser = Depends(get_current_user),
    store: DocumentStore = Depends(get_store)
):
    """Share summary text. There is no share sheet server-side, so the text is returned for the clipboard."""
    project = expense_service.get_project(store, project_id)
    result = share_invoice(build_invoice(project, config))
    logger.debug(f"Invoice share for project {project_id} via {result.channel}")
    return result
