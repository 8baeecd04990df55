"""
Search orchestrator — debounced, cancel-and-replace search execution.

Drives one logical search "generation" at a time through
IDLE -> DEBOUNCING -> PENDING -> SETTLED on the running asyncio loop.

Triggers (submit, sort header click, page change) restart a debounce
timer; only the last trigger inside the window dispatches. Dispatching a
new generation cancels whatever is still in flight and emits a single
"Previous search cancelled." info notice. Settlement delivers exactly
one success or failure for the current generation and always clears
``loading``; superseded generations deliver nothing.

Usage:
    orchestrator = SearchOrchestrator(api_client, notices)
    orchestrator.update_form(criteria="widget", by=SearchBy.DESCRIPTION)
    orchestrator.on_search()
    await orchestrator.wait_settled()
    orchestrator.items, orchestrator.total
"""
import asyncio
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Protocol, Sequence

from inventory_search.core.constants.search import (
    CANCELLED_NOTICE,
    DEFAULT_PAGE_SIZE,
    DEFAULT_SORT_FIELD,
    SEARCH_FAILED_MESSAGE,
    SORTABLE_FIELDS,
)
from inventory_search.core.exceptions import InventorySearchException
from inventory_search.schemas.inventory import (
    InventoryItem,
    SearchBy,
    SearchQuery,
    SearchResult,
    SortDirection,
    SortSpec,
)
from inventory_search.services.notice_service import NoticeService
from inventory_search.utils.request_handle import RequestHandle

logger = logging.getLogger(__name__)

DEFAULT_DEBOUNCE_MS = 50


class SearchApi(Protocol):
    def search(self, query: SearchQuery) -> RequestHandle[SearchResult]: ...


class SearchState(str, Enum):
    IDLE = "idle"
    DEBOUNCING = "debouncing"
    PENDING = "pending"
    SETTLED = "settled"


@dataclass
class SearchForm:
    """Current values of the search inputs."""
    criteria: str = ""
    by: Optional[SearchBy] = SearchBy.PART_NUMBER
    branches: List[str] = field(default_factory=list)
    only_available: bool = False

    def is_valid(self) -> bool:
        return bool(self.criteria and self.criteria.strip()) and self.by is not None


@dataclass(frozen=True)
class SearchOutcome:
    generation: int
    query: SearchQuery
    result: Optional[SearchResult] = None
    error: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.error is None


OutcomeListener = Callable[[SearchOutcome], None]


class SearchOrchestrator:
    def __init__(
        self,
        api: SearchApi,
        notices: NoticeService,
        debounce_ms: int = DEFAULT_DEBOUNCE_MS,
        page_size: int = DEFAULT_PAGE_SIZE,
        default_sort_field: str = DEFAULT_SORT_FIELD,
    ) -> None:
        self._api = api
        self._notices = notices
        self._debounce_seconds = max(0, debounce_ms) / 1000.0
        self._page_size = page_size
        self._default_sort_field = default_sort_field

        self.form = SearchForm()
        self._sort = SortSpec(field=default_sort_field, direction=SortDirection.ASC)
        self._page = 0

        self._state = SearchState.IDLE
        self._generation = 0
        self._timer: Optional[asyncio.TimerHandle] = None
        self._task: Optional[asyncio.Task] = None
        self._handle: Optional[RequestHandle[SearchResult]] = None
        self._last_query: Optional[SearchQuery] = None
        self._listeners: List[OutcomeListener] = []

        self.loading = False
        self.items: List[InventoryItem] = []
        self.total = 0
        self.error_message: Optional[str] = None

    # -- Read-only state -----------------------------------------------------

    @property
    def state(self) -> SearchState:
        return self._state

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def current_page(self) -> int:
        return self._page

    @property
    def sort(self) -> SortSpec:
        return self._sort

    @property
    def debounce_seconds(self) -> float:
        return self._debounce_seconds

    @property
    def last_query(self) -> Optional[SearchQuery]:
        return self._last_query

    def add_listener(self, listener: OutcomeListener) -> Callable[[], None]:
        """Receive every settled (non-superseded) outcome; returns an unsubscribe function."""
        self._listeners.append(listener)

        def _remove() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _remove

    # -- Inputs --------------------------------------------------------------

    def update_form(
        self,
        criteria: Optional[str] = None,
        by: Optional[SearchBy] = None,
        branches: Optional[Sequence[str]] = None,
        only_available: Optional[bool] = None,
    ) -> None:
        if criteria is not None:
            self.form.criteria = criteria
        if by is not None:
            self.form.by = by
        if branches is not None:
            self.form.branches = list(branches)
        if only_available is not None:
            self.form.only_available = only_available

    def on_search(self) -> None:
        """Explicit submit: back to the first page, then trigger."""
        if not self.form.is_valid():
            return
        self._page = 0
        self._trigger()

    def on_sort(self, sort_field: str) -> None:
        """Toggle asc -> desc on the active field; any other field starts at asc."""
        if self._sort.field == sort_field and self._sort.direction == SortDirection.ASC:
            direction = SortDirection.DESC
        else:
            direction = SortDirection.ASC
        if sort_field not in SORTABLE_FIELDS:
            sort_field = self._default_sort_field
        self._sort = SortSpec(field=sort_field, direction=direction)
        self._page = 0
        self._trigger()

    def on_page_change(self, page: int) -> None:
        self._page = max(0, page)
        self._trigger()

    def build_query(self) -> SearchQuery:
        return SearchQuery(
            criteria=self.form.criteria,
            by=self.form.by or SearchBy.PART_NUMBER,
            branches=tuple(self.form.branches),
            only_available=self.form.only_available,
            page=self._page,
            size=self._page_size,
            sort=self._sort,
        )

    # -- Debounce ------------------------------------------------------------

    def _trigger(self) -> None:
        loop = asyncio.get_running_loop()
        if self._timer is not None:
            self._timer.cancel()
        self._timer = loop.call_later(self._debounce_seconds, self._on_debounce_elapsed)
        self._state = SearchState.DEBOUNCING

    def _in_flight(self) -> bool:
        return self._task is not None and not self._task.done()

    def _on_debounce_elapsed(self) -> None:
        self._timer = None
        if not self.form.is_valid():
            if self._in_flight():
                self._state = SearchState.PENDING
            else:
                self._state = SearchState.SETTLED if self._generation else SearchState.IDLE
            return
        self._dispatch(self.build_query())

    # -- Dispatch & settlement -----------------------------------------------

    def _cancel_in_flight(self, notify: bool) -> bool:
        task, handle = self._task, self._handle
        self._task = None
        self._handle = None
        if task is None or task.done():
            return False
        if handle is not None:
            handle.cancel()
        task.cancel()
        if notify:
            self._notices.info(CANCELLED_NOTICE)
        return True

    def _dispatch(self, query: SearchQuery) -> None:
        self._generation += 1
        generation = self._generation
        self._last_query = query
        logger.info(
            f"Dispatching search generation {generation}: by={query.by.value} "
            f"criteria={query.criteria!r} page={query.page} sort={query.sort.to_param() if query.sort else ''}"
        )

        # Subscribe before releasing the previous handle: an identical
        # in-flight request must never drop to zero subscribers
        try:
            handle = self._api.search(query)
        except Exception as e:
            logger.error(f"Search generation {generation} could not start: {e}")
            self._cancel_in_flight(notify=True)
            self._settle(SearchOutcome(generation, query, error=str(e) or SEARCH_FAILED_MESSAGE))
            return

        if self._cancel_in_flight(notify=True):
            logger.info(f"Search generation {generation - 1} superseded by {generation}")

        self.error_message = None
        self.loading = True
        self._state = SearchState.PENDING
        self._handle = handle
        self._task = asyncio.get_running_loop().create_task(
            self._await_generation(generation, query, handle)
        )

    async def _await_generation(
        self, generation: int, query: SearchQuery, handle: RequestHandle[SearchResult]
    ) -> None:
        try:
            result = await handle.result()
        except asyncio.CancelledError:
            logger.info(f"Search generation {generation} cancelled")
            raise
        except InventorySearchException as e:
            if generation == self._generation:
                self._settle(SearchOutcome(generation, query, error=str(e) or SEARCH_FAILED_MESSAGE))
        except Exception as e:
            logger.exception(f"Unexpected error in search generation {generation}")
            if generation == self._generation:
                self._settle(SearchOutcome(generation, query, error=str(e) or SEARCH_FAILED_MESSAGE))
        else:
            if generation == self._generation:
                self._settle(SearchOutcome(generation, query, result=result))

    def _settle(self, outcome: SearchOutcome) -> None:
        self.loading = False
        self._task = None
        self._handle = None
        if self._timer is None:
            self._state = SearchState.SETTLED

        if outcome.succeeded:
            self.items = list(outcome.result.items)
            self.total = outcome.result.total
            logger.info(f"Search generation {outcome.generation} settled: {self.total} total")
        else:
            self.items = []
            self.total = 0
            self.error_message = outcome.error
            self._notices.error(outcome.error)
            logger.info(f"Search generation {outcome.generation} failed: {outcome.error}")

        for listener in list(self._listeners):
            try:
                listener(outcome)
            except Exception as e:
                logger.error(f"Search outcome listener failed: {e}")

    # -- Lifecycle -----------------------------------------------------------

    async def wait_settled(self) -> None:
        """Wait until no debounce is scheduled and no generation is in flight."""
        loop = asyncio.get_running_loop()
        while True:
            if self._timer is not None:
                await asyncio.sleep(max(0.0, self._timer.when() - loop.time()))
                continue
            task = self._task
            if task is not None and not task.done():
                await asyncio.wait({task})
                continue
            return

    def close(self) -> None:
        """Cancel any pending debounce and in-flight request without notices."""
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        self._cancel_in_flight(notify=False)
        self.loading = False
        self._listeners.clear()
        self._state = SearchState.SETTLED if self._generation else SearchState.IDLE
