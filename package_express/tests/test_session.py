"""
Unit Tests for the Quote Session State Machine

Drives sessions with scripted input lines and checks the transcript, the
final state, and the package record.
"""

import pytest

from package_express.session import (
    QuoteSession,
    QuoteState,
    WELCOME,
    WEIGHT_PROMPT,
    WIDTH_PROMPT,
    HEIGHT_PROMPT,
    LENGTH_PROMPT,
    INVALID_WEIGHT,
    INVALID_DIMENSIONS,
    THANK_YOU,
)

TOO_HEAVY = "Package too heavy to be shipped via Package Express. Have a good day."
TOO_BIG = "Package too big to be shipped via Package Express."


# =============================================================================
# FIXTURES
# =============================================================================

class ScriptedConsole:
    """Feeds input lines and records output lines."""

    def __init__(self, lines):
        self._lines = iter(lines)
        self.output = []
        self.reads = 0

    def read(self) -> str:
        self.reads += 1
        return next(self._lines)

    def write(self, line: str) -> None:
        self.output.append(line)


@pytest.fixture
def run_session():
    """Run a full session over scripted input, return (session, console)."""
    def _run(lines):
        console = ScriptedConsole(lines)
        session = QuoteSession(read=console.read, write=console.write)
        session.run()
        return session, console
    return _run


def quote_lines(output):
    return [line for line in output if line.startswith("Your estimated total")]


# =============================================================================
# SCENARIO TESTS
# =============================================================================

class TestScenarios:
    """End-to-end sessions."""

    def test_valid_package(self, run_session):
        """weight=10, 2x3x4 -> $2.40."""
        session, console = run_session(["10", "2", "3", "4"])

        assert session.state is QuoteState.COMPLETE
        assert session.quote == pytest.approx(2.40)
        assert console.output == [
            WELCOME,
            WEIGHT_PROMPT,
            WIDTH_PROMPT,
            HEIGHT_PROMPT,
            LENGTH_PROMPT,
            "Your estimated total for shipping this package is: $2.40",
            THANK_YOU,
        ]

    def test_too_heavy(self, run_session):
        """weight=60 ends immediately without asking for dimensions."""
        session, console = run_session(["60"])

        assert session.state is QuoteState.ERROR
        assert session.quote is None
        assert console.output == [WELCOME, WEIGHT_PROMPT, TOO_HEAVY]
        assert console.reads == 1

    def test_too_big(self, run_session):
        """weight=10, 20x20x20 -> total 60 -> rejected."""
        session, console = run_session(["10", "20", "20", "20"])

        assert session.state is QuoteState.ERROR
        assert session.quote is None
        assert console.output[-1] == TOO_BIG
        assert quote_lines(console.output) == []

    def test_boundary_package_quoted(self, run_session):
        """weight=50, dims summing to 50 are accepted."""
        session, console = run_session(["50", "20", "20", "10"])

        assert session.state is QuoteState.COMPLETE
        assert quote_lines(console.output) == [
            "Your estimated total for shipping this package is: $2000.00"
        ]

    def test_two_decimal_places(self, run_session):
        """Quote is always shown with exactly two decimals."""
        _, console = run_session(["7", "1.3", "1", "1"])
        assert quote_lines(console.output) == [
            "Your estimated total for shipping this package is: $0.09"
        ]

    def test_no_reads_after_terminal(self, run_session):
        """Extra input is never consumed once the session ends."""
        _, console = run_session(["60", "1", "2", "3"])
        assert console.reads == 1


# =============================================================================
# WEIGHT INPUT TESTS
# =============================================================================

class TestWeightInput:
    """Tests for invalid input at the weight prompt."""

    def test_retry_after_non_numeric(self, run_session):
        """Non-numeric weight reprompts the weight stage."""
        session, console = run_session(["heavy", "10", "2", "3", "4"])

        assert session.state is QuoteState.COMPLETE
        assert console.output[:4] == [WELCOME, WEIGHT_PROMPT, INVALID_WEIGHT, WEIGHT_PROMPT]

    def test_failed_parse_does_not_mutate(self):
        """Record is untouched and state unchanged after a bad weight."""
        console = ScriptedConsole(["abc"])
        session = QuoteSession(read=console.read, write=console.write)
        session.step()  # START -> WEIGHT_INPUT

        assert session.step() is QuoteState.WEIGHT_INPUT
        assert session.package.weight is None

    def test_repeated_failures(self, run_session):
        """Any number of retries is allowed."""
        session, console = run_session(["", "x", "-1", "nan", "5", "1", "1", "1"])

        assert session.state is QuoteState.COMPLETE
        assert console.output.count(INVALID_WEIGHT) == 4
        assert session.package.weight == 5.0

    def test_negative_weight_reprompts(self, run_session):
        """A negative weight is invalid input, not a quotable package."""
        session, console = run_session(["-5", "10", "2", "3", "4"])

        assert session.state is QuoteState.COMPLETE
        assert console.output[:4] == [WELCOME, WEIGHT_PROMPT, INVALID_WEIGHT, WEIGHT_PROMPT]
        assert session.package.weight == 10.0


# =============================================================================
# DIMENSIONS INPUT TESTS
# =============================================================================

class TestDimensionsInput:
    """Tests for invalid input at the dimension prompts."""

    def test_failure_restarts_from_width(self, run_session):
        """Bad height abandons the pass; retry starts again at width."""
        session, console = run_session(["10", "2", "tall", "2", "3", "4"])

        assert session.state is QuoteState.COMPLETE
        assert console.output[2:9] == [
            WIDTH_PROMPT,
            HEIGHT_PROMPT,
            INVALID_DIMENSIONS,
            WIDTH_PROMPT,
            HEIGHT_PROMPT,
            LENGTH_PROMPT,
            "Your estimated total for shipping this package is: $2.40",
        ]

    def test_failure_skips_remaining_prompts(self, run_session):
        """A bad width means height and length are not asked in that pass."""
        _, console = run_session(["10", "wide", "2", "3", "4"])
        assert console.output[2:5] == [WIDTH_PROMPT, INVALID_DIMENSIONS, WIDTH_PROMPT]

    def test_failed_pass_leaves_record_unmodified(self):
        """Width parsed before a failed length is not kept."""
        console = ScriptedConsole(["10", "2", "3", "long"])
        session = QuoteSession(read=console.read, write=console.write)
        session.step()  # START
        session.step()  # WEIGHT_INPUT

        assert session.step() is QuoteState.DIMENSIONS_INPUT
        assert session.package.width is None
        assert session.package.height is None
        assert session.package.length is None
        assert session.package.weight == 10.0

    def test_retry_values_replace(self, run_session):
        """Values come only from the successful pass."""
        session, _ = run_session(["10", "9", "9", "oops", "1", "2", "3"])

        assert session.package.width == 1.0
        assert session.package.height == 2.0
        assert session.package.length == 3.0

    def test_negative_dimension_reprompts(self, run_session):
        """A negative dimension abandons the pass like any invalid input."""
        session, console = run_session(["10", "-2", "2", "3", "4"])

        assert session.state is QuoteState.COMPLETE
        assert console.output[2:5] == [WIDTH_PROMPT, INVALID_DIMENSIONS, WIDTH_PROMPT]
        assert session.package.width == 2.0

    def test_negative_zero_quotes_unsigned(self, run_session):
        """-0 as a dimension quotes $0.00, never $-0.00."""
        session, console = run_session(["10", "-0", "3", "4"])

        assert session.state is QuoteState.COMPLETE
        assert quote_lines(console.output) == [
            "Your estimated total for shipping this package is: $0.00"
        ]


# =============================================================================
# STATE MACHINE TESTS
# =============================================================================

class TestStateMachine:
    """Tests for state transitions."""

    def test_initial_state(self):
        session = QuoteSession(read=lambda: "", write=lambda line: None)
        assert session.state is QuoteState.START

    def test_start_has_no_io(self):
        """START moves to WEIGHT_INPUT without reading or writing."""
        console = ScriptedConsole([])
        session = QuoteSession(read=console.read, write=console.write)

        assert session.step() is QuoteState.WEIGHT_INPUT
        assert console.output == []
        assert console.reads == 0

    def test_step_on_terminal_is_noop(self, run_session):
        session, console = run_session(["60"])
        before = list(console.output)

        assert session.step() is QuoteState.ERROR
        assert console.output == before

    @pytest.mark.parametrize("state, terminal", [
        (QuoteState.START, False),
        (QuoteState.WEIGHT_INPUT, False),
        (QuoteState.DIMENSIONS_INPUT, False),
        (QuoteState.QUOTE_CALCULATION, False),
        (QuoteState.COMPLETE, True),
        (QuoteState.ERROR, True),
    ])
    def test_terminal_states(self, state, terminal):
        assert state.is_terminal is terminal

    def test_run_returns_final_state(self):
        console = ScriptedConsole(["10", "2", "3", "4"])
        session = QuoteSession(read=console.read, write=console.write)
        assert session.run() is QuoteState.COMPLETE
