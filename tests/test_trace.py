"""
Tests for the step tracer and explanation builder.
"""

import pytest

from oldphonepad import FormatError, decode, explain, trace


class TestTrace:
    """Test the ordered step list."""

    def test_pause_and_end_steps(self):
        assert trace("22 3#") == [
            "Pause detected - processing '22' -> 'B'",
            "End of input - processing '3' -> 'D'",
        ]

    def test_new_key_step(self):
        assert trace("23#")[0] == "New key pressed - processing '2' -> 'A'"

    def test_backspace_steps(self):
        assert trace("23*#") == [
            "New key pressed - processing '2' -> 'A'",
            "Backspace next - processing '3' -> 'D'",
            "Backspace key pressed",
        ]

    def test_each_zero_is_a_step(self):
        steps = trace("2000#")
        assert steps[0] == "Zero key next - processing '2' -> 'A'"
        assert steps[1:] == ["Zero key pressed - inserting space"] * 3

    def test_send_only(self):
        assert trace("#") == []

    def test_invalid_sequence_raises(self):
        with pytest.raises(FormatError):
            trace("2a#")


class TestExplain:
    """Test the multi-line explanation."""

    def test_valid_input(self):
        text = explain("22 3#")
        assert "Input: 22 3#" in text
        assert "Processing steps:" in text
        assert "Pause detected" in text
        assert "Result: BD" in text

    def test_steps_are_numbered(self):
        lines = explain("23#").splitlines()
        assert lines[2].startswith("  Step 1: ")
        assert lines[3].startswith("  Step 2: ")

    @pytest.mark.parametrize("sequence,zeros", [
        ("20#", 1),
        ("200#", 2),
        ("2000#", 3),
    ])
    def test_counts_zero_presses(self, sequence, zeros):
        assert explain(sequence).count("Zero key pressed") == zeros

    def test_result_matches_decode(self):
        sequence = "8 88777444666*664#"
        assert f"Result: {decode(sequence)}\n" in explain(sequence)

    def test_trailing_spaces_kept_in_result(self):
        assert "Result: A   \n" in explain("2000#")

    @pytest.mark.parametrize("sequence", ["", None, "223", "2a#", "2#3#"])
    def test_invalid_input(self, sequence):
        assert explain(sequence) == "Invalid input format"
