"""Walkthrough of basic language constructs for JavaScript developers.

Each ``demo_*`` function covers a single theme and prints a colored
heading followed by its lines. ``run_all`` executes them in a fixed
order; the only input is the line read by :func:`demo_6_input`.
"""

from __future__ import annotations

import logging
import sys
from typing import Callable, TextIO

from .console import banner, heading
from .exceptions import InvalidNumberError
from .messages import Boolean, Message, Number, Text, format_bool, process_message
from .models import User
from .parsing import parse_number, read_line

logger = logging.getLogger(__name__)

LANGUAGE = "Python"
GREETING = "Hello"
GREETING_NAME = "Alice"
GREETING_AGE = 30
FIXED_NUMBERS = (1, 2, 3, 4, 5)
STARTING_NUMBERS = (1, 2, 3)
SAMPLE_USER_NAME = "Bob"
SAMPLE_USER_AGE = 25
SAMPLE_MESSAGES: tuple[Message, ...] = (
    Text("Hello, world!"),
    Number(42),
    Boolean(True),
)
CLOSURE_OPERANDS = (5, 7)


def demo_1_variables() -> None:
    """Bindings that stay put next to one that is rebound.

    Python has no ``const``; a name that is never reassigned plays that
    role, and ``+=`` rebinds like ``let`` does in JavaScript.
    """
    print(heading("1. variables"))
    name = GREETING_NAME
    age = GREETING_AGE
    age += 1
    full_greeting = f"{GREETING}, {name}! You are {age} years old."
    print(full_greeting)


def demo_2_collections() -> None:
    """Tuples are fixed in size, lists grow like JavaScript arrays."""
    print(heading("2. collections"))
    fixed = FIXED_NUMBERS
    numbers = list(STARTING_NUMBERS)
    numbers.append(4)  # array.push() in JavaScript
    print(f"Fixed-size tuple holds {len(fixed)} items")
    print("Numbers in the list:")
    for num in numbers:
        print(f"- {num}")


def demo_3_records() -> None:
    """A dataclass with methods stands in for a JavaScript class."""
    print(heading("3. records"))
    user = User.new(SAMPLE_USER_NAME, SAMPLE_USER_AGE)
    print(user.describe())

    user.set_active(False)
    print(f"User active status: {format_bool(user.active)}")

    print("User tags:")
    for key, value in user.get_tags().items():
        print(f"- {key}: {value}")


def demo_4_messages() -> None:
    """Tagged variants matched with ``match``, like a TypeScript union."""
    print(heading("4. tagged unions"))
    print("Handling different message types:")
    for msg in SAMPLE_MESSAGES:
        process_message(msg)


def make_adder() -> Callable[[int, int], int]:
    """Return a two-argument addition function, the arrow function analogue."""
    return lambda a, b: a + b


def demo_5_closures() -> None:
    print(heading("5. closures"))
    add = make_adder()
    print(f"Result from closure: {add(*CLOSURE_OPERANDS)}")


def demo_6_input(stream: TextIO | None) -> None:
    """Read one line and try to parse it, reporting either outcome.

    A line that is not a number is handled here, the way ``try``/``catch``
    would be. A stream that can not be read at all raises
    :class:`~langtour.exceptions.InputReadError` to the caller.
    """
    print(heading("6. input"))
    print("Let's get user input!")
    print("Enter a number: ", flush=True)

    line = read_line(stream)
    try:
        number = parse_number(line)
    except InvalidNumberError as exc:
        logger.debug("rejected input %r: %s", line, exc)
        print("That's not a valid number!")
    else:
        print(f"You entered: {number}. Double that is: {number * 2}")


def run_all(stream: TextIO | None = None) -> None:
    """Execute each demo in order; ``stream`` defaults to ``sys.stdin``."""
    if stream is None:
        stream = sys.stdin
    print(banner(f"Simple {LANGUAGE} App for JS Developers!"))
    demo_1_variables()
    demo_2_collections()
    demo_3_records()
    demo_4_messages()
    demo_5_closures()
    demo_6_input(stream)
    print(banner(f"Thanks for trying {LANGUAGE}!"))
