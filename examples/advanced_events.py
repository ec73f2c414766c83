"""
Example: Advanced Event Usage

This example demonstrates advanced event patterns including:
- Typed Event keys with runtime validation
- Bound emit functions handed to child widgets
- Fire-once listeners
- Payload JSON schemas
"""

import json
import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from typedemit import Event, EventEmitter, create_emitter


class Status(Enum):
    IDLE = "idle"
    BUSY = "busy"


@dataclass
class Selection:
    start: int
    end: int


# Typed events
TEXT_CHANGED: Event[str, int] = Event("textChanged", str, int)
SELECTION_CHANGED: Event[Selection] = Event("selectionChanged", Selection)
STATUS_CHANGED: Event[Status] = Event("statusChanged", Status)


# Example 1: A widget that only knows its emit function
def text_box(initial: str, emit: Callable[[str, int], None]) -> None:
    """Simulate typing into a text box."""
    text = initial
    for char in "abc":
        text += char
        emit(text, len(text))


def main():
    """Demonstrate advanced event usage."""
    logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s %(message)s")
    print("=== Advanced Events Demo ===\n")

    emitter = EventEmitter(validate=True)

    print("1. Bound emitter:")
    emitter.register(TEXT_CHANGED, lambda text, length: print(f"   [TEXT] {text!r} ({length} chars)"))
    text_box("xy", create_emitter(emitter, TEXT_CHANGED))
    print()

    print("2. Fire-once listener:")
    emitter.once(STATUS_CHANGED, lambda status: print(f"   [FIRST STATUS] {status.value}"))
    emitter.register(STATUS_CHANGED, lambda status: print(f"   [STATUS] {status.value}"))
    emitter.emit(STATUS_CHANGED, Status.BUSY)
    emitter.emit(STATUS_CHANGED, Status.IDLE)
    print()

    print("3. Payload validation:")
    emitter.register(SELECTION_CHANGED, lambda sel: print(f"   [SELECTION] {sel.start}..{sel.end}"))
    emitter.emit(SELECTION_CHANGED, Selection(start=0, end=4))
    try:
        emitter.emit(SELECTION_CHANGED, {"start": "zero", "end": 4})
    except TypeError as e:
        print(f"   Exception caught: {str(e).splitlines()[0]}\n")

    print("4. Payload schemas:")
    print(json.dumps(emitter.payload_schemas(), indent=2))

    print("\n=== Demo Complete ===")


if __name__ == "__main__":
    main()
