import inspect
from collections import defaultdict
from typing import Any, Callable, Dict, List

SEARCH = "search"
UNITS = "units"
TOGGLE_ALL = "toggle-all"
DAY = "day"


class EventSource:
    """Named events with explicitly registered handlers.

    Handlers run in registration order; coroutine results are awaited.
    """

    def __init__(self) -> None:
        self._handlers: Dict[str, List[Callable[..., Any]]] = defaultdict(list)

    def on(self, event: str, handler: Callable[..., Any]) -> None:
        self._handlers[event].append(handler)

    async def emit(self, event: str, *args: Any) -> List[Any]:
        if event not in self._handlers:
            raise KeyError(f"No handlers registered for {event!r}")
        results = []
        for handler in self._handlers[event]:
            result = handler(*args)
            if inspect.isawaitable(result):
                result = await result
            results.append(result)
        return results
