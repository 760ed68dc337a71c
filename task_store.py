"""
In-memory task store shared by the HTTP handlers.
"""

import logging
import threading
from dataclasses import asdict, dataclass

logger = logging.getLogger(__name__)


class TaskNotFound(LookupError):
    """Raised when no task carries the requested ID."""

    def __init__(self, task_id):
        super().__init__(f"task {task_id} not found")
        self.task_id = task_id


@dataclass
class Task:
    id: int
    title: str = ""
    completed: bool = False

    def to_dict(self) -> dict:
        return asdict(self)


class TaskStore:
    """
    Ordered task collection plus a monotonic ID counter.

    Every read-modify-write runs under one lock, so a single instance can be
    shared across request threads. IDs start at 1 and are never reused.
    """

    def __init__(self):
        self._tasks = []
        self._next_id = 1
        self._lock = threading.Lock()

    def __len__(self):
        with self._lock:
            return len(self._tasks)

    def list_tasks(self) -> list:
        with self._lock:
            return [task.to_dict() for task in self._tasks]

    def create_task(self, title: str = "", completed: bool = False) -> dict:
        with self._lock:
            task = Task(id=self._next_id, title=title, completed=completed)
            self._next_id += 1
            self._tasks.append(task)
            logger.info("Created task id=%s", task.id)
            return task.to_dict()

    def update_task(self, task_id: int, title: str = "", completed: bool = False) -> dict:
        with self._lock:
            task = self._find(task_id)
            task.title = title
            task.completed = completed
            logger.info("Updated task id=%s completed=%s", task.id, task.completed)
            return task.to_dict()

    def delete_task(self, task_id: int) -> None:
        with self._lock:
            task = self._find(task_id)
            self._tasks.remove(task)
            logger.info("Deleted task id=%s", task_id)

    def _find(self, task_id):
        # caller holds the lock
        for task in self._tasks:
            if task.id == task_id:
                return task
        logger.debug("Task id=%s not found", task_id)
        raise TaskNotFound(task_id)
