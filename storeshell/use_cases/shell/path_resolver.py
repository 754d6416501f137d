"""
Resolution of user-supplied paths against the working directory.

Only the navigate operation interprets '..' (see ShellState.navigate); every
other command hands the resolved path to the store literally.
"""

ROOT = "/"


class PathResolver:
    """Turns a user path and the working directory into an absolute store path."""

    @staticmethod
    def resolve(path: str, cwd: str, expect_directory: bool = False) -> str:
        """
        Resolve a path. Never fails; existence is checked by the store.

        Args:
            path: User input, absolute or relative to cwd
            cwd: Current working directory (absolute, ends with '/')
            expect_directory: Append a trailing '/' when missing

        Returns:
            Absolute store path
        """
        resolved = path.strip()
        if not resolved.startswith(ROOT):
            resolved = cwd + resolved
        if expect_directory and not resolved.endswith(ROOT):
            resolved += ROOT
        return resolved

    @staticmethod
    def parent(cwd: str) -> str:
        """Strip the last segment of a directory path, never going above root."""
        if cwd == ROOT:
            return ROOT
        head = cwd.rstrip(ROOT).rsplit(ROOT, 1)[0]
        if not head:
            return ROOT
        return head + ROOT
