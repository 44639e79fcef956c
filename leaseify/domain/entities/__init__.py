from .task import Task
from .request_status import ErrorRecord, OperationState, RequestStatus

__all__ = [
    "Task",
    "ErrorRecord",
    "OperationState",
    "RequestStatus",
]
