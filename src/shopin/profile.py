"""Profile management for shopin storage and configuration."""

import os
from pathlib import Path
from typing import Optional


class Profile:
    """Manages profile-specific paths for shopin storage.

    A profile determines where shopin keeps its recipe store and logs.
    The active profile is determined by the SHOPIN_PROFILE environment variable,
    defaulting to "default" if not set. SHOPIN_HOME moves the whole data tree.
    """

    def __init__(self, name: Optional[str] = None, home: Optional[Path] = None):
        """Initialize profile with given name or from environment.

        Args:
            name: Profile name. If None, uses SHOPIN_PROFILE env var or "default".
            home: Data tree root. If None, uses SHOPIN_HOME or <project>/data.
        """
        self.name = name or os.getenv("SHOPIN_PROFILE", "default")
        if home is None:
            env_home = os.getenv("SHOPIN_HOME")
            home = Path(env_home) if env_home else self._find_project_root() / "data"
        self._home = Path(home).expanduser()
        self._data_root = self._home / self.name

        self._ensure_directories()

    def _find_project_root(self) -> Path:
        """Find project root by looking for pyproject.toml or .git."""
        current = Path(__file__).resolve().parent

        while current != current.parent:
            if (current / "pyproject.toml").exists() or (current / ".git").exists():
                return current
            current = current.parent

        return Path.cwd()

    def _ensure_directories(self) -> None:
        """Create profile directories if they don't exist."""
        self.data_root.mkdir(parents=True, exist_ok=True)
        self.store_dir.mkdir(parents=True, exist_ok=True)
        self.logs_dir.mkdir(parents=True, exist_ok=True)

    @property
    def data_root(self) -> Path:
        """Root directory for profile data."""
        return self._data_root

    @property
    def store_dir(self) -> Path:
        """Directory backing the key-value store."""
        return self._data_root / "store"

    @property
    def logs_dir(self) -> Path:
        """Directory for log files."""
        return self._data_root / "logs"

    @property
    def log_file(self) -> Path:
        """Path to the main shopin log file."""
        return self.logs_dir / "shopin.log"

    @classmethod
    def current(cls) -> "Profile":
        """Get the current active profile."""
        return cls()

    def __str__(self) -> str:
        return f"Profile({self.name})"

    def __repr__(self) -> str:
        return f"Profile(name={self.name!r}, data_root={self._data_root!s})"
