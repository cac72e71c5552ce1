"""
Execution timing for decomposition backends.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Accumulating section timer with per-sweep rates.

    Usage:
        timer = Timer()
        timer.start()

        with timer.section('rotations'):
            nit = mat_eigen_sym_jacobi(l, v, work)
        timer.record_sweeps('rotations', nit)

        timer.stop()
        timer.result()
        # {'total_seconds': 0.002, 'rotations': 0.0018,
        #  'rotations_per_sweep': 0.00036}
    """

    def __init__(self):
        self._sections: dict[str, float] = {}
        self._sweeps: dict[str, int] = {}
        self._start_time: float | None = None
        self._total: float | None = None

    def start(self) -> None:
        self._start_time = time.perf_counter()

    def stop(self) -> None:
        if self._start_time is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._total = time.perf_counter() - self._start_time

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Time a named section; repeated sections accumulate."""
        start = time.perf_counter()
        try:
            yield
        finally:
            elapsed = time.perf_counter() - start
            self._sections[name] = self._sections.get(name, 0.0) + elapsed

    def record_sweeps(self, name: str, sweeps: int) -> None:
        """
        Attach a sweep count to a timed section.

        result() then reports '{name}_per_sweep'. Counts for the same
        section add up, like the section times do.

        Raises:
            ValueError: If sweeps is not positive
            KeyError: If the section was never timed
        """
        if sweeps < 1:
            raise ValueError(f"sweeps must be >= 1, got {sweeps}")
        if name not in self._sections:
            raise KeyError(f"no timed section named {name!r}")
        self._sweeps[name] = self._sweeps.get(name, 0) + sweeps

    def result(self) -> dict[str, float]:
        """
        Timing breakdown: 'total_seconds', each section, and
        '{section}_per_sweep' for sections with a recorded sweep count.

        Raises:
            RuntimeError: If called before stop()
        """
        if self._total is None:
            raise RuntimeError("Timer.result() called before stop()")

        result = {'total_seconds': self._total}
        result.update(self._sections)
        for name, sweeps in self._sweeps.items():
            result[f'{name}_per_sweep'] = self._sections[name] / sweeps
        return result
