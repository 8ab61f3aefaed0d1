"""
Utility functions for maze path finding operations.
"""

import gc
import logging
import os
import time
from threading import Event
from typing import List, Optional

import psutil

from ..exceptions import SearchCancelledError
from ..graph import Maze
from .models import PathResult
from .types import Solutions

# Configure logging
logger = logging.getLogger(__name__)

# Constants
DEFAULT_MAX_MEMORY_MB: Optional[float] = None  # No memory limit unless requested
MEMORY_CHECK_INTERVAL = 0.1  # Seconds between two RSS samples


def raise_if_cancelled(cancel_event: Optional[Event], operation: str) -> None:
    """Raise SearchCancelledError if the cancel event has been set."""
    if cancel_event is not None and cancel_event.is_set():
        logger.debug("%s observed cancellation", operation)
        raise SearchCancelledError(f"{operation} was cancelled")


def create_path_results(
    solutions: Solutions, maze: Optional[Maze] = None
) -> List[PathResult]:
    """Wrap raw vertex sequences into PathResult objects, validating them if a maze is given."""
    results = [PathResult(vertices=list(path)) for path in solutions]
    if maze is not None:
        for result in results:
            result.validate(maze)
    return results


class MemoryManager:
    """Memory management utilities for search algorithms."""

    def __init__(self, max_memory_mb: Optional[float] = DEFAULT_MAX_MEMORY_MB):
        """Initialize memory manager."""
        # Force garbage collection at start
        gc.collect()

        self.max_memory = max_memory_mb * 1024 * 1024 if max_memory_mb else None
        self.start_memory = get_memory_usage()
        self._peak_memory = self.start_memory
        self._last_check = time.time()
        self._check_interval = MEMORY_CHECK_INTERVAL

    def check_memory(self) -> None:
        """Check if memory usage exceeds limit."""
        current_time = time.time()
        if current_time - self._last_check < self._check_interval:
            return

        self._last_check = current_time
        if not self.max_memory:
            return

        current = get_memory_usage()
        self._peak_memory = max(self._peak_memory, current)

        if current - self.start_memory > self.max_memory:
            # Try to reclaim memory
            gc.collect()
            current = get_memory_usage()

            if current - self.start_memory > self.max_memory:
                logger.error("Memory limit exceeded during search")
                raise MemoryError(
                    f"Memory usage {current/1024/1024:.1f}MB exceeds "
                    f"limit of {self.max_memory/1024/1024:.1f}MB"
                )

    @property
    def peak_memory_mb(self) -> float:
        """Get peak memory usage in MB."""
        return self._peak_memory / 1024 / 1024

    def reset_peak_memory(self) -> None:
        """Reset peak memory tracking."""
        self._peak_memory = get_memory_usage()
        self.start_memory = self._peak_memory
        self._last_check = time.time()


def get_memory_usage() -> int:
    """Get current memory usage in bytes."""
    process = psutil.Process(os.getpid())
    return process.memory_info().rss
