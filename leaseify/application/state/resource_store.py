"""Generic client-side resource store.

One store owns the cached state of one resource type (tasks, tenants, ...)
and exposes every remote call as an async operation with a three-phase
lifecycle:

    pending    → status ``loading``, previous error of that kind cleared
    fulfilled  → status ``succeeded``, payload merged by the kind's reducer
    rejected   → status ``failed``, error recorded, cache left untouched

Operations never raise on failure; they return an ``OperationResult`` the
caller can ``unwrap()`` if it wants the exception back.

Late responses
--------------
Every dispatch is tagged with a token. Fetch-like kinds *supersede*: only
the latest token of a (kind, key) channel is applied, older responses are
discarded when they arrive. Mutations never supersede each other. ``reset()``
bumps an epoch so anything still in flight is discarded on arrival.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable, Hashable, Mapping
from dataclasses import dataclass, field, replace
from typing import Any, Generic, TypeVar

from leaseify.application.schemas.records import ResourceRecord
from leaseify.application.services.resource_api import ResourceApi
from leaseify.domain.entities import ErrorRecord, OperationState, RequestStatus
from leaseify.domain.exceptions import ApiError
from leaseify.infrastructure.logging.store_logger import OperationStage, StoreLogger

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=ResourceRecord)
T = TypeVar("T")

# Operation kinds shared by every store
LIST = "list"
GET = "get"
CREATE = "create"
UPDATE = "update"
DELETE = "delete"


def keyed(kind: str, key: str) -> str:
    """Operation kind tracked separately for one ``key`` (e.g. one tenant)."""
    return f"{kind}:{key}"


# ── State ────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class ResourceState(Generic[R]):
    """Immutable snapshot of one store; every transition builds a new one."""

    items: list[R] = field(default_factory=list)
    selected: R | None = None
    collections: Mapping[str, list[Any]] = field(default_factory=dict)
    lookups: Mapping[str, Mapping[str, Any]] = field(default_factory=dict)
    values: Mapping[str, Any] = field(default_factory=dict)
    operations: Mapping[str, OperationState] = field(default_factory=dict)

    def operation(self, kind: str) -> OperationState:
        return self.operations.get(kind, OperationState())

    def find(self, record_id: str) -> R | None:
        return next((r for r in self.items if r.id == record_id), None)

    def collection(self, name: str) -> list[Any]:
        return self.collections.get(name, [])

    def lookup(self, name: str, key: str) -> Any | None:
        return self.lookups.get(name, {}).get(key)


# ── Reducers ─────────────────────────────────────────────────────────
#
# Pure functions: (state, payload) → new state. None of them mutate the
# lists or mappings of the state they receive.


def replace_items(state: ResourceState[R], records: list[R]) -> ResourceState[R]:
    return replace(state, items=list(records))


def set_selected(state: ResourceState[R], record: R | None) -> ResourceState[R]:
    return replace(state, selected=record)


def upsert(state: ResourceState[R], record: R, *, prepend: bool = False) -> ResourceState[R]:
    """Add a created record; if its id is already cached, replace it in place."""
    if state.find(record.id) is not None:
        return replace_by_id(state, record)
    items = [record, *state.items] if prepend else [*state.items, record]
    return replace(state, items=items)


def replace_by_id(state: ResourceState[R], record: R) -> ResourceState[R]:
    """Swap in the updated record; a record that is not cached is ignored."""
    if state.find(record.id) is None:
        logger.debug("Update for uncached record %s ignored", record.id)
        items = state.items
    else:
        items = [record if r.id == record.id else r for r in state.items]
    selected = state.selected
    if selected is not None and selected.id == record.id:
        selected = record
    return replace(state, items=items, selected=selected)


def remove_by_id(state: ResourceState[R], record_id: str) -> ResourceState[R]:
    items = [r for r in state.items if r.id != record_id]
    selected = state.selected
    if selected is not None and selected.id == record_id:
        selected = None
    return replace(state, items=items, selected=selected)


def set_collection(state: ResourceState[R], name: str, records: list[Any]) -> ResourceState[R]:
    return replace(state, collections={**state.collections, name: list(records)})


def set_lookup(state: ResourceState[R], name: str, key: str, value: Any) -> ResourceState[R]:
    entries = {**state.lookups.get(name, {}), key: value}
    return replace(state, lookups={**state.lookups, name: entries})


def set_value(state: ResourceState[R], name: str, value: Any) -> ResourceState[R]:
    return replace(state, values={**state.values, name: value})


def with_operation(state: ResourceState[R], kind: str, op: OperationState) -> ResourceState[R]:
    return replace(state, operations={**state.operations, kind: op})


# ── Results ──────────────────────────────────────────────────────────


@dataclass(frozen=True)
class OperationResult(Generic[T]):
    """Outcome of one dispatched operation.

    ``applied`` is False when the response arrived too late (superseded by a
    newer request of the same kind, or the store was reset meanwhile).
    """

    kind: str
    payload: T | None = None
    error: ErrorRecord | None = None
    exception: Exception | None = field(default=None, repr=False, compare=False)
    applied: bool = True

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the payload, or re-raise the exception the operation recorded."""
        if self.exception is not None:
            raise self.exception
        if self.error is not None:
            raise ApiError(self.error.message, self.error.status_code, self.error.errors)
        return self.payload  # type: ignore[return-value]


Listener = Callable[[ResourceState[Any]], None]


# ── Store ────────────────────────────────────────────────────────────


class ResourceStore(Generic[R]):
    """Owns the collection cache and per-operation status of one resource type.

    Subclasses add resource-specific operations on top of the generic
    list/get/create/update/delete set by calling ``_run`` with their own
    kind and reducer.
    """

    name: str = "resource"
    prepend_created: bool = False

    def __init__(self, api: ResourceApi[R]):
        self._api = api
        self._state: ResourceState[R] = self.initial_state()
        self._listeners: list[Listener] = []
        self._log = StoreLogger(self.name)
        self._epoch = 0
        self._next_token = 0
        # latest token per superseding (kind, key) channel
        self._latest: dict[tuple[str, Hashable], int] = {}
        # tokens still eligible to be applied, per kind
        self._outstanding: dict[str, set[int]] = {}

    def initial_state(self) -> ResourceState[R]:
        return ResourceState()

    # ── Readers ──

    @property
    def state(self) -> ResourceState[R]:
        return self._state

    def status(self, kind: str) -> RequestStatus:
        return self._state.operation(kind).status

    def is_loading(self, kind: str = LIST) -> bool:
        return self._state.operation(kind).is_loading

    def error(self, kind: str = LIST) -> ErrorRecord | None:
        return self._state.operation(kind).error

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` for state changes; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ── Lifecycle ──

    def reset(self) -> None:
        """Restore the initial state; responses still in flight will be discarded."""
        self._epoch += 1
        self._latest.clear()
        self._outstanding.clear()
        self._log.reset(self._epoch)
        self._set_state(self.initial_state())

    # ── Generic operations ──

    async def fetch_all(self, **params: Any) -> OperationResult[list[R]]:
        return await self._run(
            LIST, lambda: self._api.list_all(**params), replace_items
        )

    async def fetch_one(self, record_id: str) -> OperationResult[R]:
        return await self._run(GET, lambda: self._api.get(record_id), set_selected)

    async def create(self, data: Mapping[str, Any]) -> OperationResult[R]:
        return await self._run(
            CREATE,
            lambda: self._api.create(data),
            lambda state, record: upsert(state, record, prepend=self.prepend_created),
            supersedes=False,
        )

    async def update(self, record_id: str, patch: Mapping[str, Any]) -> OperationResult[R]:
        return await self._run(
            UPDATE,
            lambda: self._api.update(record_id, patch),
            replace_by_id,
            key=record_id,
            supersedes=False,
        )

    async def delete(self, record_id: str) -> OperationResult[str]:
        return await self._run(
            DELETE,
            lambda: self._api.delete(record_id),
            lambda state, _: remove_by_id(state, record_id),
            key=record_id,
            supersedes=False,
        )

    # ── Machinery ──

    async def _run(
        self,
        kind: str,
        call: Callable[[], Awaitable[T]],
        reduce: Callable[[ResourceState[R], T], ResourceState[R]],
        *,
        key: Hashable = None,
        supersedes: bool = True,
    ) -> OperationResult[T]:
        """Dispatch one operation through pending → fulfilled | rejected."""
        epoch = self._epoch
        token = self._issue(kind, key, supersedes)
        self._log.transition(OperationStage.PENDING, kind, token=token)
        self._set_state(
            with_operation(self._state, kind, OperationState(RequestStatus.LOADING))
        )

        try:
            payload = await call()
        except asyncio.CancelledError:
            self._abandon(kind, key, token, epoch)
            raise
        except ApiError as exc:
            error = ErrorRecord(exc.message, tuple(exc.errors), exc.status_code)
            return self._reject(kind, key, token, epoch, error, exc)
        except Exception as exc:
            self._log.unexpected(kind, exc)
            error = ErrorRecord(str(exc) or type(exc).__name__)
            return self._reject(kind, key, token, epoch, error, exc)

        return self._fulfill(kind, key, token, epoch, payload, reduce)

    def _issue(self, kind: str, key: Hashable, supersedes: bool) -> int:
        self._next_token += 1
        token = self._next_token
        outstanding = self._outstanding.setdefault(kind, set())
        if supersedes:
            previous = self._latest.get((kind, key))
            if previous is not None:
                outstanding.discard(previous)
            self._latest[(kind, key)] = token
        outstanding.add(token)
        return token

    def _claim(self, kind: str, key: Hashable, token: int, epoch: int) -> bool:
        """Consume ``token`` if its response may still be applied."""
        if epoch != self._epoch:
            return False
        outstanding = self._outstanding.get(kind)
        if outstanding is None or token not in outstanding:
            return False
        outstanding.discard(token)
        if self._latest.get((kind, key)) == token:
            del self._latest[(kind, key)]
        return True

    def _fulfill(
        self,
        kind: str,
        key: Hashable,
        token: int,
        epoch: int,
        payload: T,
        reduce: Callable[[ResourceState[R], T], ResourceState[R]],
    ) -> OperationResult[T]:
        if not self._claim(kind, key, token, epoch):
            self._log.transition(OperationStage.DISCARDED, kind, token=token)
            return OperationResult(kind, payload=payload, applied=False)

        current = self._state.operation(kind)
        if current.error is not None:
            # a sibling of the same kind failed after this one started
            op = OperationState(RequestStatus.FAILED, current.error)
        elif self._outstanding.get(kind):
            op = OperationState(RequestStatus.LOADING)
        else:
            op = OperationState(RequestStatus.SUCCEEDED)

        self._set_state(with_operation(reduce(self._state, payload), kind, op))
        self._log.transition(OperationStage.FULFILLED, kind, token=token)
        return OperationResult(kind, payload=payload)

    def _reject(
        self,
        kind: str,
        key: Hashable,
        token: int,
        epoch: int,
        error: ErrorRecord,
        exc: Exception,
    ) -> OperationResult[Any]:
        if not self._claim(kind, key, token, epoch):
            self._log.transition(OperationStage.DISCARDED, kind, token=token, error=error.message)
            return OperationResult(kind, error=error, exception=exc, applied=False)

        self._set_state(
            with_operation(self._state, kind, OperationState(RequestStatus.FAILED, error))
        )
        self._log.transition(
            OperationStage.REJECTED, kind, token=token, status=error.status_code, message=error.message
        )
        return OperationResult(kind, error=error, exception=exc)

    def _abandon(self, kind: str, key: Hashable, token: int, epoch: int) -> None:
        """The awaiting task was cancelled; stop counting this request as in flight."""
        if not self._claim(kind, key, token, epoch):
            return
        current = self._state.operation(kind)
        if current.is_loading and not self._outstanding.get(kind):
            self._set_state(with_operation(self._state, kind, OperationState()))

    def _set_state(self, state: ResourceState[R]) -> None:
        self._state = state
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                logger.exception("Listener of store '%s' failed", self.name)
