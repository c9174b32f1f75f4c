"""
Task board helpers.
"""
from typing import Dict, List
from creatorflow.models.task import Task, TaskStatus
from creatorflow.services.document_store import DocumentStore

TASKS = "tasks"


def list_tasks(store: DocumentStore, search: str = "") -> List[Task]:
    """Tasks newest first, optionally narrowed by a case-insensitive title match."""
    tasks = list(reversed(store.list_documents(TASKS)))
    term = (search or "").lower()
    if term:
        tasks = [t for t in tasks if term in t.title.lower()]
    return tasks


def toggle_status(store: DocumentStore, task_id: int) -> Task:
    task = store.get(TASKS, task_id)
    status = TaskStatus.NOT_DONE if task.status == TaskStatus.DONE else TaskStatus.DONE
    return store.update(TASKS, task_id, {"status": status})


def task_stats(tasks: List[Task]) -> Dict[str, int]:
    return {
        "done": sum(1 for t in tasks if t.status == TaskStatus.DONE),
        "pending": sum(1 for t in tasks if t.status == TaskStatus.NOT_DONE),
    }
