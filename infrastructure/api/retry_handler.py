from __future__ import annotations

import asyncio
import os
import random
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional, Tuple, TypeVar

from core.logging.logger import StructuredLogger, get_logger
from .errors import APIError, is_retryable

T = TypeVar("T")

Operation = Callable[[], Awaitable[T]]
RetryPredicate = Callable[[BaseException], bool]
Sleeper = Callable[[float], Awaitable[None]]
JitterSource = Callable[[float, float], float]


@dataclass(frozen=True)
class RetryConfiguration:
    """Backoff policy. ``max_attempts`` counts the first try."""

    max_attempts: int = 3
    initial_delay: float = 1.0
    max_delay: float = 60.0
    backoff_multiplier: float = 2.0
    jitter_range: Tuple[float, float] = (0.8, 1.2)

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        low, high = self.jitter_range
        if low < 0 or high < low:
            raise ValueError(f"invalid jitter_range {self.jitter_range}")

    @classmethod
    def default(cls) -> RetryConfiguration:
        return cls()

    @classmethod
    def aggressive(cls) -> RetryConfiguration:
        """More attempts with shorter waits, for calls the caller cannot skip."""
        return cls(max_attempts=5, initial_delay=0.5, max_delay=30.0, backoff_multiplier=1.5)

    @classmethod
    def conservative(cls) -> RetryConfiguration:
        return cls(max_attempts=2, initial_delay=2.0, max_delay=10.0, backoff_multiplier=2.0)

    @classmethod
    def presets(cls) -> dict[str, RetryConfiguration]:
        return {
            "default": cls.default(),
            "aggressive": cls.aggressive(),
            "conservative": cls.conservative(),
        }

    @classmethod
    def from_env(cls, base: Optional[RetryConfiguration] = None) -> RetryConfiguration:
        """Overlay SC2_RETRY_* environment variables on ``base``."""
        base = base or cls.default()

        def _int(name: str, default: int) -> int:
            try:
                return int(os.getenv(name, str(default)))
            except ValueError:
                return default

        def _float(name: str, default: float) -> float:
            try:
                return float(os.getenv(name, str(default)))
            except ValueError:
                return default

        return cls(
            max_attempts=_int("SC2_RETRY_ATTEMPTS", base.max_attempts),
            initial_delay=_float("SC2_RETRY_INITIAL_DELAY", base.initial_delay),
            max_delay=_float("SC2_RETRY_MAX_DELAY", base.max_delay),
            backoff_multiplier=_float("SC2_RETRY_FACTOR", base.backoff_multiplier),
            jitter_range=base.jitter_range,
        )


class RetryHandler:
    """Runs an async operation with exponential backoff and jitter."""

    def __init__(
        self,
        configuration: Optional[RetryConfiguration] = None,
        *,
        logger: Optional[StructuredLogger] = None,
        sleep: Sleeper = asyncio.sleep,
        jitter: JitterSource = random.uniform,
    ) -> None:
        self.configuration = configuration or RetryConfiguration.default()
        self.logger = logger or get_logger(__name__, service="retry")
        self._sleep = sleep
        self._jitter = jitter

    async def execute(
        self,
        operation: Operation[T],
        should_retry: Optional[RetryPredicate] = None,
    ) -> T:
        """Await ``operation`` until it succeeds or retrying stops.

        Non-retryable errors propagate on first occurrence; after the last
        attempt the last error is re-raised unchanged.
        """
        predicate = should_retry or is_retryable
        max_attempts = self.configuration.max_attempts

        for attempt in range(max_attempts):
            try:
                result = await operation()
            except Exception as exc:
                if not predicate(exc):
                    self.logger.debug(lambda: f"not retryable: {exc}")
                    raise
                if attempt == max_attempts - 1:
                    self.logger.error(
                        lambda: f"giving up after {max_attempts} attempts: {exc}",
                        extra={"attempt": attempt + 1},
                    )
                    raise
                delay = self.calculate_delay(attempt, exc)
                self.logger.warning(
                    lambda: f"attempt {attempt + 1} failed: {exc}; retrying in {delay:.2f}s",
                    extra={"attempt": attempt + 1, "delay_s": round(delay, 2)},
                )
                await self._sleep(delay)
                continue
            if attempt > 0:
                self.logger.info(lambda: f"succeeded after {attempt} retries")
            return result

        raise AssertionError("unreachable: loop always returns or raises")

    def calculate_delay(self, attempt: int, error: Optional[BaseException] = None) -> float:
        """Seconds to wait after the zero-based ``attempt`` failed with ``error``."""
        config = self.configuration
        suggested = error.suggested_retry_delay if isinstance(error, APIError) else None
        if suggested is not None:
            delay = suggested
        else:
            delay = config.initial_delay * config.backoff_multiplier ** attempt
        delay = min(delay, config.max_delay)
        return delay * self._jitter(*config.jitter_range)
