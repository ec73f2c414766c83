"""
events.py

Typed event keys and bound emit helpers.
"""

from collections.abc import Callable, Hashable
from typing import TYPE_CHECKING, Any, Generic, TypeVarTuple

if TYPE_CHECKING:
    from . import EventEmitter

Ts = TypeVarTuple("Ts")


class Event(Generic[*Ts]):
    """
    Event name that carries the types of its payload.

    The type parameters tie ``register`` and ``emit`` together for a type checker,
    while ``payload_types`` keeps the same information available at runtime::

        MOUSE_CLICK: Event[int, int] = Event("mouseClick", int, int)
    """

    __slots__ = ("name", "payload_types")

    def __init__(self, name: str, *payload_types: Any) -> None:
        self.name = name
        self.payload_types = payload_types

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Event):
            return NotImplemented
        return self.name == other.name and self.payload_types == other.payload_types

    def __hash__(self) -> int:
        return hash((self.name, self.payload_types))

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        types = ", ".join(getattr(t, "__name__", repr(t)) for t in self.payload_types)
        return f"Event({self.name!r}, [{types}])"


def create_emitter(emitter: "EventEmitter", event_name: Hashable) -> Callable[..., None]:
    """
    Create an emit function bound to one event.

    Args:
        emitter: The emitter that owns the listeners
        event_name: Event every call of the returned function fires

    Returns:
        An emit function that forwards its positional payload to ``emitter.emit``
    """
    def emit(*payload: Any) -> None:
        emitter.emit(event_name, *payload)
    return emit
