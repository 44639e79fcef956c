from .base import ResourceView, SubmitOutcome, ViewState, select_view_state
from .task_list import TaskListView
from .tenant_views import ReliabilityScoreBadge, TenantDetailView

__all__ = [
    "ResourceView",
    "SubmitOutcome",
    "ViewState",
    "select_view_state",
    "TaskListView",
    "ReliabilityScoreBadge",
    "TenantDetailView",
]
