# Area: Core Tests
"""Tests for randomness sources and draw_u32."""

import pytest
from pebbles_game.errors import EntropyError
from pebbles_game.randomness import (
    U32_MAX,
    ConstantRandomSource,
    RandomnessSource,
    ScriptedRandomSource,
    SeededRandomSource,
    SystemRandomSource,
    draw_u32,
)


class BrokenSource(RandomnessSource):
    def next_u32(self) -> int:
        raise OSError("entropy pool unavailable")


class TestSources:
    """Tests for the bundled sources."""

    def test_system_source_returns_uint32(self):
        """System draws stay within the uint32 range."""
        source = SystemRandomSource()
        for _ in range(100):
            assert 0 <= source.next_u32() <= U32_MAX

    def test_seeded_source_is_reproducible(self):
        """Two sources with the same seed yield the same sequence."""
        a = SeededRandomSource(7)
        b = SeededRandomSource(7)
        assert [a.next_u32() for _ in range(5)] == [b.next_u32() for _ in range(5)]

    def test_constant_source(self):
        source = ConstantRandomSource(42)
        assert source.next_u32() == 42
        assert source.next_u32() == 42

    def test_scripted_source_cycles(self):
        """Scripted values repeat when cycling."""
        source = ScriptedRandomSource([1, 2])
        assert [source.next_u32() for _ in range(5)] == [1, 2, 1, 2, 1]
        assert source.calls == 5

    def test_scripted_source_exhausts(self):
        """Without cycling the source fails after its last value."""
        source = ScriptedRandomSource([3], cycle=False)
        assert source.next_u32() == 3
        with pytest.raises(LookupError):
            source.next_u32()

    def test_scripted_source_rejects_empty(self):
        with pytest.raises(ValueError):
            ScriptedRandomSource([])


class TestDrawU32:
    """Tests for draw_u32 error wrapping."""

    def test_returns_value(self):
        assert draw_u32(ConstantRandomSource(9)) == 9

    def test_source_failure_becomes_entropy_error(self):
        """Exceptions from a source surface as EntropyError."""
        with pytest.raises(EntropyError) as exc_info:
            draw_u32(BrokenSource())
        assert isinstance(exc_info.value.__cause__, OSError)
        assert exc_info.value.context["source"] == "BrokenSource"

    def test_out_of_range_value_rejected(self):
        with pytest.raises(EntropyError):
            draw_u32(ConstantRandomSource(2**32))

    def test_negative_value_rejected(self):
        with pytest.raises(EntropyError):
            draw_u32(ConstantRandomSource(-1))
