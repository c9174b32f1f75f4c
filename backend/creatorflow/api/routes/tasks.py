"""
Operational task routes.
"""
from fastapi import APIRouter, Depends, status
from typing import List
from creatorflow.models.task import TaskStatus
from creatorflow.schemas.task import TaskCreate, TaskResponse, TaskStats, TaskUpdate
from creatorflow.schemas.user import SessionUser
from creatorflow.api.dependencies import get_current_user, get_store
from creatorflow.services.document_store import DocumentStore
from creatorflow.services.task_service import TASKS, list_tasks, task_stats, toggle_status

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.get("", response_model=List[TaskResponse])
async def get_tasks(
    search: str = "",
    current_user: SessionUser = Depends(get_current_user),
    store: DocumentStore = Depends(get_store)
):
    """List tasks newest first, optionally filtered by title."""
    return list_tasks(store, search=search)


@router.get("/stats", response_model=TaskStats)
async def get_task_stats(
    current_user: SessionUser = Depends(get_current_user),
    store: DocumentStore = Depends(get_store)
):
    return task_stats(store.list_documents(TASKS))


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
async def create_task(
    task_data: TaskCreate,
    current_user: SessionUser = Depends(get_current_user),
    store: DocumentStore = Depends(get_store)
):
    return store.create(TASKS, status=TaskStatus.NOT_DONE, **task_data.model_dump())


@router.patch("/{task_id}", response_model=TaskResponse)
async def update_task(
    task_id: int,
    task_data: TaskUpdate,
    current_user: SessionUser = Depends(get_current_user),
    store: DocumentStore = Depends(get_store)
):
    """Edit title, due date or priority."""
    patch = task_data.model_dump(exclude_unset=True, exclude_none=True)
    return store.update(TASKS, task_id, patch)


@router.post("/{task_id}/toggle", response_model=TaskResponse)
async def toggle_task(
    task_id: int,
    current_user: SessionUser = Depends(get_current_user),
    store: DocumentStore = Depends(get_store)
):
    """Flip a task between Done and Not Done."""
    return toggle_status(store, task_id)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_task(
    task_id: int,
    current_user: SessionUser = Depends(get_current_user),
    store: DocumentStore = Depends(get_store)
):
    store.delete(TASKS, task_id)
