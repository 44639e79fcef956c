"""View binding contract shared by every screen that shows a resource.

A view subscribes to one store, dispatches its fetch once per key (e.g. a
tenant id), and renders exactly one of four states. Mutations go through
the store, whose reconciliation updates the cache; views never re-fetch a
whole collection after a create, update or delete.
"""

from collections.abc import Awaitable, Callable, Hashable, Sized
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

from leaseify.application.state.resource_store import (
    LIST,
    OperationResult,
    ResourceState,
    ResourceStore,
)
from leaseify.application.validation import ValidationResult
from leaseify.domain.entities import ErrorRecord

T = TypeVar("T")

ChangeCallback = Callable[["ViewState", Any], None]

_NOT_SHOWN = object()


class ViewState(str, Enum):
    LOADING = "loading"
    EMPTY = "empty"
    ERROR = "error"
    POPULATED = "populated"


def _is_empty(data: Any) -> bool:
    if data is None:
        return True
    if isinstance(data, Sized):
        return len(data) == 0
    return False


def select_view_state(data: Any, is_loading: bool, error: ErrorRecord | None) -> ViewState:
    """Pick the one state to render. Error wins, then a loading skeleton for an
    empty cache, then the empty state; data already on screen stays visible
    while a refresh is in flight."""
    if error is not None:
        return ViewState.ERROR
    if _is_empty(data):
        return ViewState.LOADING if is_loading else ViewState.EMPTY
    return ViewState.POPULATED


@dataclass(frozen=True)
class SubmitOutcome(Generic[T]):
    """Result of a form submission: validation first, dispatch only if valid."""

    validation: ValidationResult
    result: OperationResult[T] | None = None

    @property
    def ok(self) -> bool:
        return self.validation.is_valid and self.result is not None and self.result.ok


class ResourceView(Generic[T]):
    """Binds one store to a screen.

    ``select`` picks what the screen displays from the store state,
    ``load`` dispatches the fetch for a key, ``kind`` names the operation
    whose status drives the loading and error states.
    """

    def __init__(
        self,
        store: ResourceStore,
        *,
        load: Callable[[Any], Awaitable[OperationResult[Any]]],
        select: Callable[[ResourceState[Any]], T] = lambda state: state.items,
        kind: str = LIST,
        on_change: ChangeCallback | None = None,
    ):
        self._store = store
        self._load = load
        self._select = select
        self._kind = kind
        self._on_change = on_change
        self._key: Any = _NOT_SHOWN
        self._closed = False
        self._unsubscribe = store.subscribe(self._handle_change)

    @property
    def key(self) -> Any:
        return None if self._key is _NOT_SHOWN else self._key

    @property
    def data(self) -> T:
        return self._select(self._store.state)

    @property
    def error(self) -> ErrorRecord | None:
        return self._store.error(self._kind)

    @property
    def is_loading(self) -> bool:
        return self._store.is_loading(self._kind)

    @property
    def view_state(self) -> ViewState:
        return select_view_state(self.data, self.is_loading, self.error)

    @property
    def closed(self) -> bool:
        return self._closed

    async def show(self, key: Hashable = None) -> OperationResult[Any] | None:
        """Dispatch the fetch the first time, and again only when ``key`` changes."""
        if self._closed:
            raise RuntimeError("View is closed")
        if self._key is not _NOT_SHOWN and self._key == key:
            return None
        self._key = key
        return await self._load(key)

    async def retry(self) -> OperationResult[Any]:
        """User-initiated re-dispatch for the current key."""
        if self._closed:
            raise RuntimeError("View is closed")
        return await self._load(self.key)

    def close(self) -> None:
        """Stop observing the store; results still in flight land in the store only."""
        if not self._closed:
            self._closed = True
            self._unsubscribe()

    def _handle_change(self, state: ResourceState[Any]) -> None:
        if self._on_change is not None:
            self._on_change(self.view_state, self.data)
