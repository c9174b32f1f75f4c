"""
Campaign transaction routes.
"""
from fastapi import APIRouter, Depends, status
from typing import List
from creatorflow.core.utils import to_money
from creatorflow.schemas.transaction import TransactionCreate, TransactionResponse, TransactionUpdate
from creatorflow.schemas.user import SessionUser
from creatorflow.api.dependencies import get_current_user, get_store
from creatorflow.services.document_store import DocumentStore

router = APIRouter(prefix="/transactions", tags=["transactions"])

TRANSACTIONS = "transactions"


@router.get("", response_model=List[TransactionResponse])
async def list_transactions(
    current_user: SessionUser = Depends(get_current_user),
    store: DocumentStore = Depends(get_store)
):
    return store.list_documents(TRANSACTIONS)


@router.post("", response_model=TransactionResponse, status_code=status.HTTP_201_CREATED)
async def create_transaction(
    transaction_data: TransactionCreate,
    current_user: SessionUser = Depends(get_current_user),
    store: DocumentStore = Depends(get_store)
):
    """Record a transaction against an influencer."""
    fields = transaction_data.model_dump()
    fields["amount"] = to_money(fields["amount"])
    return store.create(TRANSACTIONS, **fields)


@router.get("/{transaction_id}", response_model=TransactionResponse)
async def get_transaction(
    transaction_id: int,
    current_user: SessionUser = Depends(get_current_user),
    store: DocumentStore = Depends(get_store)
):
    return store.get(TRANSACTIONS, transaction_id)


@router.patch("/{transaction_id}", response_model=TransactionResponse)
async def update_transaction(
    transaction_id: int,
    transaction_data: TransactionUpdate,
    current_user: SessionUser = Depends(get_current_user),
    store: DocumentStore = Depends(get_store)
):
    patch = transaction_data.model_dump(exclude_unset=True, exclude_none=True)
    if "amount" in patch:
        patch["amount"] = to_money(patch["amount"])
    return store.update(TRANSACTIONS, transaction_id, patch)


@router.delete("/{transaction_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_transaction(
    transaction_id: int,
    current_user: SessionUser = Depends(get_current_user),
    store: DocumentStore = Depends(get_store)
):
    store.delete(TRANSACTIONS, transaction_id)
