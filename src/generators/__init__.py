"""Uniform pseudo-random generators.

Every engine derives from AbstractGenerator and satisfies the
core.protocols.Generator contract:

- XorShift128Generator: default engine for distributions
- ALFGenerator: additive lagged Fibonacci (418, 1279)
- MT19937Generator: Mersenne Twister 19937
- NR3Generator, NR3Q1Generator, NR3Q2Generator: Numerical Recipes engines
- StandardGenerator: adapter over random.Random
- PCG64Generator: adapter over numpy's PCG64
"""

from __future__ import annotations

from generators.alf import ALFGenerator
from generators.base import AbstractGenerator, normalize_seed
from generators.mt19937 import MT19937Generator
from generators.nr3 import NR3Generator, NR3Q1Generator, NR3Q2Generator
from generators.pcg64 import PCG64Generator
from generators.standard import StandardGenerator
from generators.xorshift128 import XorShift128Generator

__all__ = [
    "AbstractGenerator",
    "normalize_seed",
    "ALFGenerator",
    "MT19937Generator",
    "NR3Generator",
    "NR3Q1Generator",
    "NR3Q2Generator",
    "PCG64Generator",
    "StandardGenerator",
    "XorShift128Generator",
]
