from __future__ import annotations

from collections.abc import Callable, Hashable
from enum import Enum
from logging import getLogger
from typing import Any, TypeVarTuple, overload

from pydantic import ValidationError
from pydantic.errors import PydanticInvalidForJsonSchema, PydanticSchemaGenerationError

from .events import Event, create_emitter
from .payload_schema import payload_to_schema, validate_payload

logger = getLogger("typedemit")

Ts = TypeVarTuple("Ts")

Listener = Callable[..., None]

# static type of untyped names; any hashable works at runtime
UntypedEventName = str | Enum


class UnregisteredEventError(LookupError):
    """Raised by ``emit`` for an event name that was never registered."""

    def __init__(self, event_name: Hashable) -> None:
        self.event_name = event_name
        super().__init__(f"{event_name} is not a registered listener")


class EventEmitter:
    """
    Synchronous publish/subscribe emitter.

    Listeners are kept per event name in registration order. Event names can be
    plain hashables (untyped) or ``Event`` tokens, whose payload types are checked
    statically and, with ``validate=True``, at emit time as well.

    ``emit`` iterates over a snapshot of the listeners, so listeners added or
    removed while an emit is running only take part in later emits.
    """

    def __init__(self, *, validate: bool = False) -> None:
        self.validate = validate
        self._listeners: dict[Hashable, list[Listener]] = {}

    def __contains__(self, event_name: Hashable) -> bool:
        return event_name in self._listeners

    @overload
    def register(self, event_name: Event[*Ts], listener: Callable[[*Ts], None]) -> None: ...
    @overload
    def register(self, event_name: UntypedEventName, listener: Listener) -> None: ...
    def register(self, event_name, listener):
        """
        Add a listener to fire when the event is emitted.

        Args:
            event_name: Name of the event
            listener: Callback invoked with the emitted payload
        """
        self._listeners.setdefault(event_name, []).append(listener)
        logger.debug("Registered listener %r for event '%s'", listener, event_name)

    on = register

    @overload
    def once(self, event_name: Event[*Ts], listener: Callable[[*Ts], None]) -> None: ...
    @overload
    def once(self, event_name: UntypedEventName, listener: Listener) -> None: ...
    def once(self, event_name, listener):
        """Register a listener that removes itself the first time it fires."""
        self.register(event_name, _OnceListener(self, event_name, listener))

    def unregister(self, event_name: Hashable, listener: Listener) -> bool:
        """
        Remove the earliest registration of a listener.

        The event name itself stays registered, so emitting it afterwards is not an error.

        Returns:
            Whether a registration was removed
        """
        listeners = self._listeners.get(event_name, [])
        for i, registered in enumerate(listeners):
            # once() wrappers are matched by the listener they wrap too
            if registered == listener or (isinstance(registered, _OnceListener) and registered.listener == listener):
                del listeners[i]
                logger.debug("Unregistered listener %r from event '%s'", listener, event_name)
                return True
        return False

    off = unregister

    @overload
    def emit(self, event_name: Event[*Ts], *payload: *Ts) -> None: ...
    @overload
    def emit(self, event_name: UntypedEventName, *payload: Any) -> None: ...
    def emit(self, event_name, *payload):
        """
        Synchronously call the listeners of an event in the order they were registered.

        Args:
            event_name: Name of the event for the listeners being invoked
            *payload: Arguments passed to each listener

        Raises:
            UnregisteredEventError: if nothing was ever registered under ``event_name``
            TypeError: if validation is on and the payload does not fit the ``Event`` types
        """
        if event_name not in self._listeners:
            raise UnregisteredEventError(event_name)

        if self.validate and isinstance(event_name, Event):
            try:
                validate_payload(event_name.payload_types, payload)
            except ValidationError as exc:
                msg = f"Invalid payload for event {event_name}: {exc}"
                raise TypeError(msg) from exc

        listeners = tuple(self._listeners[event_name])
        logger.debug("Emitting '%s' to %d listeners", event_name, len(listeners))
        for listener in listeners:
            listener(*payload)

    def listeners(self, event_name: Hashable) -> tuple[Listener, ...]:
        return tuple(self._listeners.get(event_name, ()))

    def event_names(self) -> tuple[Hashable, ...]:
        return tuple(self._listeners)

    def payload_schemas(self) -> dict[str, dict[str, Any]]:
        """
        JSON schema of the payload of every registered ``Event``, keyed by ``repr(event)``.

        Events whose payload types have no JSON schema (plain classes) are left out.
        """
        schemas = {}
        for event in self._listeners:
            if not isinstance(event, Event):
                continue
            try:
                schema = payload_to_schema(event.payload_types)
            except (PydanticInvalidForJsonSchema, PydanticSchemaGenerationError):
                logger.debug("No JSON schema for payload of event %r", event)
                continue
            schemas[repr(event)] = {"title": event.name, **schema}
        return schemas


class _OnceListener:
    """Listener wrapper registered by ``EventEmitter.once``."""

    def __init__(self, emitter: EventEmitter, event_name: Hashable, listener: Listener) -> None:
        self.emitter = emitter
        self.event_name = event_name
        self.listener = listener
        self.fired = False

    def __call__(self, *payload: Any) -> None:
        # an outer emit may still hold this wrapper in its snapshot
        if self.fired:
            return
        self.fired = True
        self.emitter.unregister(self.event_name, self)
        self.listener(*payload)

    def __repr__(self) -> str:
        return f"once({self.listener!r})"


__all__ = [
    "Event",
    "EventEmitter",
    "UnregisteredEventError",
    "create_emitter",
    "payload_to_schema",
    "validate_payload",
]
