"""Console output of the walkthrough steps."""

import io
import logging
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from langtour import tour
from langtour.exceptions import InputReadError


def run(stream_text: str, capsys) -> str:
    tour.run_all(io.StringIO(stream_text))
    return capsys.readouterr().out


def test_variables_greeting_uses_incremented_age(capsys):
    tour.demo_1_variables()
    assert "Hello, Alice! You are 31 years old." in capsys.readouterr().out


def test_collections_lists_appended_numbers(capsys):
    tour.demo_2_collections()
    out = capsys.readouterr().out
    assert "Numbers in the list:" in out
    assert "- 1\n- 2\n- 3\n- 4\n" in out
    assert tour.STARTING_NUMBERS == (1, 2, 3)


def test_records_describe_toggle_and_tags(capsys):
    tour.demo_3_records()
    out = capsys.readouterr().out
    assert "Bob is 25 years old" in out
    assert "User active status: false" in out
    assert "- role: user" in out


def test_messages_cover_every_variant(capsys):
    tour.demo_4_messages()
    out = capsys.readouterr().out
    assert "Received text: Hello, world!" in out
    assert "Received number: 42" in out
    assert "Received boolean: true" in out


def test_closure_result(capsys):
    tour.demo_5_closures()
    assert "Result from closure: 12" in capsys.readouterr().out


class TestMakeAdder:
    def test_adds(self):
        assert tour.make_adder()(5, 7) == 12

    @pytest.mark.parametrize("a,b,c", [(1, 2, 3), (-4, 9, 0), (2**40, 2**40, -1)])
    def test_commutative_and_associative(self, a, b, c):
        add = tour.make_adder()
        assert add(a, b) == add(b, a)
        assert add(add(a, b), c) == add(a, add(b, c))

    def test_widens_past_32_bits(self):
        assert tour.make_adder()(2**31 - 1, 1) == 2**31


def test_valid_number_is_doubled(capsys):
    out = run("21\n", capsys)
    assert "You entered: 21. Double that is: 42" in out
    assert "That's not a valid number!" not in out


def test_invalid_number_is_rejected_and_tour_completes(capsys):
    out = run("abc\n", capsys)
    assert "That's not a valid number!" in out
    assert "Thanks for trying Python!" in out


def test_end_of_input_is_rejected(capsys):
    out = run("", capsys)
    assert "That's not a valid number!" in out


def test_steps_run_in_order(capsys):
    out = run("  -5  \n", capsys)
    markers = [
        "Simple Python App for JS Developers!",
        "Hello, Alice!",
        "Numbers in the list:",
        "Bob is 25 years old",
        "Handling different message types:",
        "Result from closure: 12",
        "You entered: -5. Double that is: -10",
        "Thanks for trying Python!",
    ]
    positions = [out.index(marker) for marker in markers]
    assert positions == sorted(positions)


def test_run_all_defaults_to_stdin(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("8\n"))
    tour.run_all()
    assert "Double that is: 16" in capsys.readouterr().out


def test_rejection_is_logged_at_debug(caplog, capsys):
    with caplog.at_level(logging.DEBUG, logger="langtour.tour"):
        tour.demo_6_input(io.StringIO("abc\n"))
    assert any("rejected input" in record.getMessage() for record in caplog.records)


def test_read_failure_propagates(capsys):
    stream = io.StringIO("21\n")
    stream.close()
    with pytest.raises(InputReadError):
        tour.run_all(stream)
    assert "Thanks for trying" not in capsys.readouterr().out
