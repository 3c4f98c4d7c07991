# vizhelper/state/base.py
from __future__ import annotations
import asyncio, logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Mapping, Optional, Set

from vizhelper import config
from vizhelper.api.client import APIClient
from vizhelper.logging_utils import log_fetch_run

log = logging.getLogger(__name__)

Listener = Callable[[Dict[str, Any]], None]


class ViewState(ABC):
    """
    Explicit state holder for one screen. Subclasses mutate their fields in
    `load()` and call `_emit()` after each transition; `_emit()` re-renders
    the whole view from state and hands it to every listener.

    Loads are neither serialized nor cancelled: overlapping loads race and
    whichever finishes last decides the final state.
    """

    screen = "view"

    def __init__(self, api: APIClient, fetch_log: Optional[str] = None):
        self.api = api
        self.fetch_log = fetch_log if fetch_log is not None else config.FETCH_LOG
        self.error: Optional[str] = None
        self.loading = False
        self.revision = 0
        self.view: Dict[str, Any] = {}
        self._listeners: List[Listener] = []
        self._tasks: Set[asyncio.Task] = set()

    def subscribe(self, fn: Listener) -> None:
        self._listeners.append(fn)

    @abstractmethod
    def render(self) -> Dict[str, Any]:
        """Build the view model from current state; no side effects."""

    @abstractmethod
    async def load(self) -> None:
        """Fetch, update state, emit; must leave `loading` False on every exit."""

    def _emit(self) -> None:
        self.revision += 1
        self.view = self.render()
        for fn in self._listeners:
            fn(self.view)

    def _record(self, params: Mapping, n_points: int, outcome: str) -> None:
        # the run log is best-effort; a bad path must not fail a finished load
        try:
            log_fetch_run(self.fetch_log, self.screen, params, n_points, outcome)
        except OSError as e:
            log.warning("could not write fetch log %s: %s", self.fetch_log, e)

    def _finished(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if not task.cancelled() and task.exception() is not None:
            log.error("%s load crashed", self.screen, exc_info=task.exception())

    def start(self) -> asyncio.Task:
        """Schedule a load on the running loop and return its task."""
        task = asyncio.get_running_loop().create_task(self.load())
        self._tasks.add(task)
        task.add_done_callback(self._finished)
        return task

    @property
    def pending(self) -> int:
        return len(self._tasks)
