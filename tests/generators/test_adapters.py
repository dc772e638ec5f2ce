"""Tests for the engines that wrap random.Random and numpy's PCG64."""

from __future__ import annotations

import random

import numpy as np
import pytest

from core.errors import InvalidParameterError
from generators import PCG64Generator, StandardGenerator


class TestStandardGenerator:
    """StandardGenerator should expose random.Random draws unchanged."""

    def test_matches_random_module(self) -> None:
        gen = StandardGenerator(seed=8)
        reference = random.Random(8)
        assert gen.next_uint() == reference.getrandbits(32)
        assert gen.next_double() == reference.random()


class TestPCG64Generator:
    """Tests for the numpy-backed engine."""

    def test_words_come_from_numpy_blocks(self) -> None:
        gen = PCG64Generator(seed=8, block_size=16)
        reference = np.random.Generator(np.random.PCG64(8))
        block = reference.integers(0, 2**32 - 1, size=16, dtype=np.uint32, endpoint=True)
        assert [gen.next_uint() for _ in range(16)] == block.tolist()

    def test_refills_after_block(self) -> None:
        gen = PCG64Generator(seed=8, block_size=4)
        first = [gen.next_uint() for _ in range(10)]
        gen.reset()
        assert [gen.next_uint() for _ in range(10)] == first

    def test_block_size_validation(self) -> None:
        with pytest.raises(InvalidParameterError):
            PCG64Generator(seed=1, block_size=0)
        assert PCG64Generator(seed=1).block_size == PCG64Generator.DEFAULT_BLOCK_SIZE
