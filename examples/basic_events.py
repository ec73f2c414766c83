"""
Example: Basic Event Usage

This example demonstrates the basic usage of typedemit.
Widgets register listeners by event name and the application emits payloads to them.
"""

from dataclasses import dataclass

from typedemit import EventEmitter, UnregisteredEventError


@dataclass
class Click:
    x: int
    y: int
    button: str = "left"


def main():
    """Demonstrate basic event usage."""
    print("=== Basic Events Demo ===\n")

    emitter = EventEmitter()

    # Example 1: One listener, one payload
    print("1. Single listener:")
    emitter.register("mouseClick", lambda click: print(f"   [CLICK] {click.button} at ({click.x}, {click.y})"))
    emitter.emit("mouseClick", Click(x=10, y=20))
    print()

    # Example 2: Several listeners fire in registration order
    print("2. Multiple listeners:")
    emitter.register("mouseClick", lambda click: print("   [STATUS] Status bar updated"))
    emitter.register("mouseClick", lambda click: print("   [HISTORY] Click recorded"))
    emitter.emit("mouseClick", Click(x=1, y=2, button="right"))
    print()

    # Example 3: Several positional arguments
    print("3. Positional payload:")
    emitter.register("keyPress", lambda key, shift: print(f"   [KEY] {key.upper() if shift else key}"))
    emitter.emit("keyPress", "a", True)
    print()

    # Example 4: Unknown events are an error
    print("4. Unregistered event:")
    try:
        emitter.emit("scroll", 3)
    except UnregisteredEventError as e:
        print(f"   Exception caught: {e}\n")

    print("=== Demo Complete ===")


if __name__ == "__main__":
    main()
