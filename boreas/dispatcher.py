"""Events emitted while an invalidation is submitted and watched, and the
dispatcher delivering them to the CLI.

Following events are emitted by the Invalidator:

* INVALIDATION_SUBMITTED (invalidation_id): the batch has been accepted ;
* INVALIDATION_WAIT_STARTED (invalidation_id, wait): polling begins ;
* INVALIDATION_PENDING (invalidation_id): a poll found it still running ;
* INVALIDATION_COMPLETED (invalidation_id): a poll found it completed ;
* INVALIDATION_WAIT_ENDED (invalidation_id, state): polling stopped,
  whatever the reason ;
"""

from typing import Any, Callable, Dict, List, Tuple

INVALIDATION_SUBMITTED = 'invalidation.submitted'
INVALIDATION_WAIT_STARTED = 'invalidation.wait_started'
INVALIDATION_PENDING = 'invalidation.pending'
INVALIDATION_COMPLETED = 'invalidation.completed'
INVALIDATION_WAIT_ENDED = 'invalidation.wait_ended'

INVALIDATION_EVENTS = (
    INVALIDATION_SUBMITTED,
    INVALIDATION_WAIT_STARTED,
    INVALIDATION_PENDING,
    INVALIDATION_COMPLETED,
    INVALIDATION_WAIT_ENDED,
)


class Dispatcher(object):
    """Dispatcher delivers invalidation events to the listeners registered
    for them, such that the Invalidator never writes to the CLI by itself.
    """
    def __init__(self, events: Tuple[str, ...] = INVALIDATION_EVENTS):
        """
        Args:
            events (Tuple[str, ...]):
                Names of the events listeners can be registered for.
        """
        self.__listeners: Dict[str, List[Callable[..., bool]]] = {
            name: []
            for name in events
        }

    def on(self, event_name: str, fn: Callable[..., bool]):
        """Register a listener for a given event name.

        Args:
            event_name (str):
                Name of the event the listener should be attached to.
            fn (Callable[..., bool]):
                The event listener, returning True to let the next listeners
                receive the event.

        Raises:
            ValueError: When the event isn't one this dispatcher knows about.
        """
        if event_name not in self.__listeners:
            raise ValueError("Unknown event %r." % (event_name))

        self.__listeners[event_name].append(fn)

    def emit(self, event_name: str, **kwargs: Any) -> bool:
        """Trigger the listeners registered for a given event name, in the
        order they've been registered.

        Propagation stops at the first listener returning anything but True.

        Args:
            event_name (str): Name of the emitted event
            **kwargs: Any arguments associated with the event

        Returns:
            bool: Whether every listener has received the event.

        Raises:
            ValueError: When the event isn't one this dispatcher knows about.
        """
        if event_name not in self.__listeners:
            raise ValueError("Unknown event %r." % (event_name))

        for fn in self.__listeners[event_name]:
            if not fn(**kwargs):
                return False

        return True
