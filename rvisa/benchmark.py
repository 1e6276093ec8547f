"""Simple timing loops for a rough feel of a core's speed.

Three loops are run, each exercising a different part of the ISA:

* integer multiply/add (M extension), reported in MOPS;
* square root and sine (F/D extensions), reported in MFLOPS;
* a byte-wise write then read of a buffer, reported in MB/s.

The numbers only compare machines running the same interpreter; they
measure the interpreter loop as much as the hardware.

Example usage::

    from rvisa.benchmark import run_benchmarks

    for result in run_benchmarks():
        print(result.label, f"{result.score:.2f}", result.unit)
"""

from __future__ import annotations

import logging
import math
import time
from typing import List, NamedTuple, Optional

logger = logging.getLogger(__name__)

INT_ITERATIONS = 1_000_000
FLOAT_ITERATIONS = 500_000
MEMORY_BYTES = 1_000_000

_MASK64 = (1 << 64) - 1

# Floor for elapsed time so a very short run never divides by zero
_MIN_ELAPSED = 1e-9


class BenchmarkResult(NamedTuple):
    label: str
    score: float
    unit: str


def _per_second(count: float, elapsed: float) -> float:
    """Millions of ``count`` per second."""
    return count / max(elapsed, _MIN_ELAPSED) / 1_000_000.0


def benchmark_integer_ops(iterations: Optional[int] = None) -> float:
    """Run a 64-bit wrapping multiply/add loop and return MOPS."""
    iterations = iterations or INT_ITERATIONS
    start = time.perf_counter()
    result = 1
    for i in range(1, iterations):
        result = (result * i + i) & _MASK64
    elapsed = time.perf_counter() - start
    logger.debug("Integer loop: %d iterations in %.3fs (result %d)", iterations, elapsed, result)
    return _per_second(iterations, elapsed)


def benchmark_float_ops(iterations: Optional[int] = None) -> float:
    """Run a sqrt/sin loop and return MFLOPS (two operations per iteration)."""
    iterations = iterations or FLOAT_ITERATIONS
    start = time.perf_counter()
    result = 1.0
    for i in range(1, iterations):
        x = float(i)
        result = math.sqrt(result * x) + math.sin(x)
    elapsed = time.perf_counter() - start
    logger.debug("Float loop: %d iterations in %.3fs (result %f)", iterations, elapsed, result)
    return _per_second(iterations * 2.0, elapsed)


def benchmark_memory(size: Optional[int] = None) -> float:
    """Write then read every byte of a buffer and return MB/s."""
    size = size or MEMORY_BYTES
    data = bytearray(size)
    start = time.perf_counter()
    for i in range(size):
        data[i] = i & 0xFF
    total = 0
    for byte in data:
        total += byte
    elapsed = time.perf_counter() - start
    logger.debug("Memory loop: %d bytes in %.3fs (sum %d)", size, elapsed, total)
    return _per_second(size * 2.0, elapsed)


def run_benchmarks() -> List[BenchmarkResult]:
    """Run all three loops with their default sizes."""
    return [
        BenchmarkResult("Integer Ops (M)", benchmark_integer_ops(), "MOPS"),
        BenchmarkResult("Float Ops (F/D)", benchmark_float_ops(), "MFLOPS"),
        BenchmarkResult("Memory Bandwidth", benchmark_memory(), "MB/s"),
    ]
