"""Unit tests for the report harness."""

from __future__ import annotations

import pytest

from b64seq import RangeError
from b64seq.harness import SampleCase, default_cases, evaluate_case, run_report


class TestDefaultCases:
    """Test the standard sample cases."""

    def test_case_set(self) -> None:
        cases = default_cases(seed=1)

        assert len(cases) == 10
        assert cases[0].data == [1, 2, 3]
        assert [len(c.data) for c in cases[2:6]] == [50, 100, 500, 1000]
        assert len(cases[-1].data) == 900

    def test_values_in_range(self) -> None:
        for case in default_cases(seed=2):
            assert all(1 <= value <= 300 for value in case.data)

    def test_seed_is_reproducible(self) -> None:
        assert default_cases(seed=3) == default_cases(seed=3)


class TestRunReport:
    """Test report output through an injected sink."""

    def test_writes_to_sink(self) -> None:
        """Test that every line goes to the supplied sink."""
        lines: list[str] = []
        results = run_report([SampleCase(description="tiny", data=[1, 2, 3])], sink=lines.append)

        assert lines[0] == "Test: tiny"
        assert "Trivial: 1,2,3" in lines
        assert "Encoded: BgkY" in lines
        assert "Compression ratio: 0.800" in lines
        assert "Round-trip OK: yes" in lines
        assert results[0].roundtrip_ok
        assert results[0].encoded_length == 4

    def test_long_trivial_form_is_truncated(self) -> None:
        lines: list[str] = []
        run_report([SampleCase(description="long", data=[300] * 50)], sink=lines.append)

        trivial_line = next(line for line in lines if line.startswith("Trivial: "))
        assert trivial_line.endswith("...")
        assert len(trivial_line) == len("Trivial: ") + 60 + 3

    def test_default_cases_roundtrip(self) -> None:
        """Test every standard case round-trips."""
        results = run_report(default_cases(seed=0), sink=lambda line: None)

        assert len(results) == 10
        assert all(result.roundtrip_ok for result in results)

    def test_invalid_case_propagates(self) -> None:
        with pytest.raises(RangeError):
            evaluate_case(SampleCase(description="bad", data=[0]))
