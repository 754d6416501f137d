"""
Environment information port: read-only, informational queries.
"""

from abc import ABC, abstractmethod


class EnvironmentInfoPort(ABC):
    """Port interface for host/environment statistics."""

    @abstractmethod
    def uptime(self) -> str:
        """
        Describe how long the interpreter has been running.

        Returns:
            Human-readable uptime line
        """
        pass

    @abstractmethod
    def free_memory(self) -> str:
        """
        Describe available memory.

        Returns:
            Human-readable memory report
        """
        pass

    @abstractmethod
    def chip_info(self) -> str:
        """
        Describe the host (platform, machine, interpreter).

        Returns:
            Human-readable host identification
        """
        pass
