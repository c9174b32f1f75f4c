"""
Delivery logistics routes, including bulk actions.
"""
from fastapi import APIRouter, Depends, Query, status
from typing import List, Literal
from creatorflow.schemas.delivery import (
    BulkResult, DeliveryBulkDelete, DeliveryBulkUpdate,
    DeliveryCreate, DeliveryResponse, DeliveryStats, DeliveryUpdate
)
from creatorflow.schemas.user import SessionUser
from creatorflow.api.dependencies import get_current_user, get_store
from creatorflow.services.document_store import DocumentStore
from creatorflow.services import delivery_service
from creatorflow.services.delivery_service import DELIVERIES

router = APIRouter(prefix="/deliveries", tags=["deliveries"])


@router.get("", response_model=List[DeliveryResponse])
async def list_deliveries(
    search: str = "",
    payment: Literal["All", "Paid", "Unpaid"] = Query("All"),
    current_user: SessionUser = Depends(get_current_user),
    store: DocumentStore = Depends(get_store)
):
    """List deliveries, filtered by influencer/product search and payment status."""
    deliveries = store.list_documents(DELIVERIES)
    return delivery_service.filter_deliveries(deliveries, search=search, payment=payment)


@router.get("/stats", response_model=DeliveryStats)
async def get_delivery_stats(
    current_user: SessionUser = Depends(get_current_user),
    store: DocumentStore = Depends(get_store)
):
    """Paid, unpaid and total delivery value."""
    return delivery_service.delivery_stats(store.list_documents(DELIVERIES))


@router.post("", response_model=DeliveryResponse, status_code=status.HTTP_201_CREATED)
async def create_delivery(
    delivery_data: DeliveryCreate,
    current_user: SessionUser = Depends(get_current_user),
    store: DocumentStore = Depends(get_store)
):
    """Log a new shipment."""
    return delivery_service.create_delivery(store, delivery_data.model_dump())


@router.post("/bulk-update", response_model=BulkResult)
async def bulk_update_deliveries(
    bulk_data: DeliveryBulkUpdate,
    current_user: SessionUser = Depends(get_current_user),
    store: DocumentStore = Depends(get_store)
):
    """Apply one status and/or payment status change to every selected delivery."""
    affected = delivery_service.bulk_update(store, bulk_data.ids, bulk_data.patch())
    return BulkResult(affected=affected)


@router.post("/bulk-delete", response_model=BulkResult)
async def bulk_delete_deliveries(
    bulk_data: DeliveryBulkDelete,
    current_user: SessionUser = Depends(get_current_user),
    store: DocumentStore = Depends(get_store)
):
    """Delete every selected delivery."""
    return BulkResult(affected=delivery_service.bulk_delete(store, bulk_data.ids))


@router.get("/{delivery_id}", response_model=DeliveryResponse)
async def get_delivery(
    delivery_id: int,
    current_user: SessionUser = Depends(get_current_user),
    store: DocumentStore = Depends(get_store)
):
    return store.get(DELIVERIES, delivery_id)


@router.patch("/{delivery_id}", response_model=DeliveryResponse)
async def update_delivery(
    delivery_id: int,
    delivery_data: DeliveryUpdate,
    current_user: SessionUser = Depends(get_current_user),
    store: DocumentStore = Depends(get_store)
):
    """Update a delivery. Status changes are checked when the transition guard is on."""
    patch = delivery_data.model_dump(exclude_unset=True, exclude_none=True)
    return delivery_service.update_delivery(store, delivery_id, patch)


@router.delete("/{delivery_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_delivery(
    delivery_id: int,
    current_user: SessionUser = Depends(get_current_user),
    store: DocumentStore = Depends(get_store)
):
    store.delete(DELIVERIES, delivery_id)
