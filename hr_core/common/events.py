# hr_core/common/events.py
"""
In-process domain events.

Apps publish id-only payloads and never import their subscribers; e.g. records
publishes "prescription.saved" and hr_core.reminders.subscribers rebuilds the
reminders. Handlers run synchronously inside the publisher's transaction, so
a handler error rolls the write back.
"""
from __future__ import annotations

import logging
from collections import defaultdict
from typing import Any, Callable, Dict, List, Tuple

logger = logging.getLogger(__name__)

Payload = Dict[str, Any]
Handler = Callable[[Payload], None]

_handlers: Dict[str, List[Handler]] = defaultdict(list)


def subscribe(event_name: str) -> Callable[[Handler], Handler]:
    def _register(fn: Handler) -> Handler:
        # AppConfig.ready() may run more than once under the test runner
        if fn not in _handlers[event_name]:
            _handlers[event_name].append(fn)
        return fn

    return _register


def subscribers(event_name: str) -> Tuple[Handler, ...]:
    return tuple(_handlers.get(event_name, ()))


def publish(event_name: str, payload: Payload) -> None:
    handlers = subscribers(event_name)
    logger.debug("Event %s -> %d handler(s): %s", event_name, len(handlers), payload)
    for handler in handlers:
        handler(payload)
