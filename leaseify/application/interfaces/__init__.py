from .task_repository import TaskRepository
from .transport import Transport

__all__ = [
    "TaskRepository",
    "Transport",
]
