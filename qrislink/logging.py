import logging
import threading
from collections import deque
from typing import Deque, Dict, List


class RingBufferHandler(logging.Handler):
    def __init__(self, max_entries: int = 200):
        super().__init__()
        self.max_entries = max_entries
        self._events: Deque[Dict] = deque(maxlen=max_entries)
        self._lock = threading.Lock()

    def emit(self, record: logging.LogRecord) -> None:
        event = {
            "event": record.getMessage(),
            "level": record.levelname,
            "logger": record.name,
            "ts": record.created,
            "details": getattr(record, "details", {}),
        }
        with self._lock:
            self._events.append(event)

    def get_events(self) -> List[Dict]:
        with self._lock:
            return list(self._events)

    def clear(self) -> None:
        with self._lock:
            self._events.clear()


def create_logger(name: str, ring_size: int, level: int = logging.INFO) -> logging.Logger:
    """
    Return the named logger with a ``RingBufferHandler`` attached.

    Child loggers (``qrislink.parsing.*``) propagate into it, so one handler
    on ``"qrislink"`` captures events from the whole package. Calling this
    again for the same name returns the already configured logger.
    """
    logger = logging.getLogger(name)
    if any(isinstance(h, RingBufferHandler) for h in logger.handlers):
        return logger
    logger.setLevel(level)
    handler = RingBufferHandler(max_entries=ring_size)
    formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def get_ring_buffer(logger: logging.Logger) -> RingBufferHandler | None:
    for handler in logger.handlers:
        if isinstance(handler, RingBufferHandler):
            return handler
    return None
