"""
Environment adapter reporting process uptime, memory and host identification.
"""

import logging
import os
import platform
import sys
import time
from typing import Callable, Optional

from typing_extensions import override

from storeshell.ports.environment.environment_info_port import EnvironmentInfoPort


class LocalEnvironmentAdapter(EnvironmentInfoPort):
    """Reads information about the host running the interpreter, via stdlib."""

    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._logger = logger or logging.getLogger(__name__)
        self._clock = clock
        self._started = clock()

    @override
    def uptime(self) -> str:
        elapsed = int(self._clock() - self._started)
        days, rest = divmod(elapsed, 86400)
        hours, rest = divmod(rest, 3600)
        minutes, seconds = divmod(rest, 60)
        return f"Uptime: {days}d {hours:02d}h {minutes:02d}m {seconds:02d}s"

    def _get_memory_info(self) -> tuple[Optional[int], Optional[int]]:
        """Return (total, available) physical memory in bytes when known."""
        if not hasattr(os, "sysconf"):
            return None, None
        try:
            page = int(os.sysconf("SC_PAGE_SIZE"))
            phys = int(os.sysconf("SC_PHYS_PAGES"))
            avail = (
                int(os.sysconf("SC_AVPHYS_PAGES"))
                if "SC_AVPHYS_PAGES" in os.sysconf_names
                else None
            )
        except (ValueError, OSError) as e:
            self._logger.debug(f"sysconf memory query failed: {e}")
            return None, None
        total = page * phys if phys > 0 else None
        available = page * avail if avail and avail > 0 else None
        return total, available

    @override
    def free_memory(self) -> str:
        total, available = self._get_memory_info()
        if total is None and available is None:
            return "Free memory: unavailable on this platform"
        lines = []
        if available is not None:
            lines.append(f"Free memory: {available} bytes")
        if total is not None:
            lines.append(f"Total memory: {total} bytes")
        return "\n".join(lines)

    @override
    def chip_info(self) -> str:
        return "\n".join(
            [
                f"Platform: {platform.platform()}",
                f"Machine: {platform.machine() or 'unknown'}",
                f"Processor: {platform.processor() or 'unknown'}",
                f"CPU cores: {os.cpu_count() or 'unknown'}",
                f"Python: {platform.python_version()} ({sys.implementation.name})",
            ]
        )
