"""
Quote Session

Console state machine that collects one package, validates it and prints a
quote.

STATES
------
    START -> WEIGHT_INPUT -> DIMENSIONS_INPUT -> QUOTE_CALCULATION -> COMPLETE
                  |                 |
                  +-----> ERROR <---+

    COMPLETE and ERROR are terminal. Invalid numeric input keeps the session
    in its current state and reprompts. Exceeding a limit moves to ERROR.

USAGE
-----
    from package_express.session import QuoteSession
    QuoteSession().run()
"""

import logging
from enum import Enum
from typing import Callable

from .calculate_quote import calculate_quote
from .limits import Overweight, Oversize, validate_weight, validate_dimensions
from .package import PackageRecord
from .parsing import parse_number

logger = logging.getLogger(__name__)


# =============================================================================
# MESSAGES
# =============================================================================

WELCOME = "Welcome to Package Express. Please follow the instructions below."

WEIGHT_PROMPT = "Please enter the package weight:"
WIDTH_PROMPT = "Please enter the package width:"
HEIGHT_PROMPT = "Please enter the package height:"
LENGTH_PROMPT = "Please enter the package length:"

INVALID_WEIGHT = "Invalid input. Please enter a valid number."
INVALID_DIMENSIONS = "Invalid input. Please enter valid numbers."

QUOTE_LINE = "Your estimated total for shipping this package is: ${quote:.2f}"
THANK_YOU = "Thank you!"

# Dimension prompts in the order they are asked
DIMENSION_PROMPTS = [
    ("width", WIDTH_PROMPT),
    ("height", HEIGHT_PROMPT),
    ("length", LENGTH_PROMPT),
]


# =============================================================================
# STATES
# =============================================================================

class QuoteState(Enum):
    START = "start"
    WEIGHT_INPUT = "weight_input"
    DIMENSIONS_INPUT = "dimensions_input"
    QUOTE_CALCULATION = "quote_calculation"
    COMPLETE = "complete"
    ERROR = "error"

    @property
    def is_terminal(self) -> bool:
        return self in (QuoteState.COMPLETE, QuoteState.ERROR)


# =============================================================================
# SESSION
# =============================================================================

class QuoteSession:
    """
    One quote session: welcome to COMPLETE or ERROR.

    Args:
        read: Returns the next input line (default: input)
        write: Emits one output line (default: print)
    """

    def __init__(
        self,
        read: Callable[[], str] = input,
        write: Callable[[str], None] = print,
    ):
        self._read = read
        self._write = write
        self.state = QuoteState.START
        self.package = PackageRecord()
        self.quote: float | None = None

    def run(self) -> QuoteState:
        """Run until a terminal state is reached and return it."""
        self._write(WELCOME)
        while not self.state.is_terminal:
            self.step()
        return self.state

    def step(self) -> QuoteState:
        """Process the current state once and move to the next."""
        if self.state.is_terminal:
            return self.state

        next_state = self._handle(self.state)
        if next_state is not self.state:
            logger.debug("%s -> %s", self.state.name, next_state.name)
        self.state = next_state
        return next_state

    def _handle(self, state: QuoteState) -> QuoteState:
        if state is QuoteState.START:
            return QuoteState.WEIGHT_INPUT
        if state is QuoteState.WEIGHT_INPUT:
            return self._weight_input()
        if state is QuoteState.DIMENSIONS_INPUT:
            return self._dimensions_input()
        if state is QuoteState.QUOTE_CALCULATION:
            return self._quote_calculation()
        raise ValueError(f"No handler for state {state}")

    # -------------------------------------------------------------------------
    # STATE HANDLERS
    # -------------------------------------------------------------------------

    def _weight_input(self) -> QuoteState:
        self._write(WEIGHT_PROMPT)
        result = parse_number(self._read())

        if not result.ok:
            logger.debug("Weight rejected: %s", result.error)
            self._write(INVALID_WEIGHT)
            return QuoteState.WEIGHT_INPUT

        self.package.weight = result.value

        if not validate_weight(self.package.weight):
            self._write(Overweight.rejection_message)
            return QuoteState.ERROR

        return QuoteState.DIMENSIONS_INPUT

    def _dimensions_input(self) -> QuoteState:
        values = {}

        # All three must parse in one pass; nothing is kept from a failed pass
        for name, prompt in DIMENSION_PROMPTS:
            self._write(prompt)
            result = parse_number(self._read())

            if not result.ok:
                logger.debug("%s rejected: %s", name.capitalize(), result.error)
                self._write(INVALID_DIMENSIONS)
                return QuoteState.DIMENSIONS_INPUT

            values[name] = result.value

        self.package.width = values["width"]
        self.package.height = values["height"]
        self.package.length = values["length"]

        if not validate_dimensions(self.package):
            self._write(Oversize.rejection_message)
            return QuoteState.ERROR

        return QuoteState.QUOTE_CALCULATION

    def _quote_calculation(self) -> QuoteState:
        self.quote = calculate_quote(self.package)
        self._write(QUOTE_LINE.format(quote=self.quote))
        self._write(THANK_YOU)
        return QuoteState.COMPLETE


__all__ = [
    "QuoteState",
    "QuoteSession",
    "WELCOME",
    "WEIGHT_PROMPT",
    "WIDTH_PROMPT",
    "HEIGHT_PROMPT",
    "LENGTH_PROMPT",
    "INVALID_WEIGHT",
    "INVALID_DIMENSIONS",
    "THANK_YOU",
]
