"""
Notice service — the channel UI collaborators listen on.

Four severities: info, warning, error, success. Listeners are plain
callables; a listener that raises is logged and skipped so one broken
consumer cannot stop delivery to the others.
"""
import logging
from typing import Callable, List

from inventory_search.schemas.inventory import Notice, NoticeLevel

logger = logging.getLogger(__name__)

NoticeListener = Callable[[Notice], None]

_LOG_LEVELS = {
    "info": logging.INFO,
    "success": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


class NoticeService:
    def __init__(self) -> None:
        self._listeners: List[NoticeListener] = []

    def subscribe(self, listener: NoticeListener) -> Callable[[], None]:
        """Register ``listener``; returns a function that unsubscribes it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def show(self, level: NoticeLevel, text: str) -> Notice:
        notice = Notice(level=level, text=text)
        logger.log(_LOG_LEVELS[level], f"notice[{level}]: {text}")
        for listener in list(self._listeners):
            try:
                listener(notice)
            except Exception as e:
                logger.error(f"Notice listener failed: {e}")
        return notice

    def info(self, text: str) -> Notice:
        return self.show("info", text)

    def warning(self, text: str) -> Notice:
        return self.show("warning", text)

    def error(self, text: str) -> Notice:
        return self.show("error", text)

    def success(self, text: str) -> Notice:
        return self.show("success", text)
