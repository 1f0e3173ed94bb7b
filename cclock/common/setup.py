import os
import sys
from pathlib import Path
from dataclasses import dataclass

# Lil helper function to create missing directories if missing, and optionally error out when a path
# doesn't exist.
def ensure_directory(path: Path,must_exist=False):
    if must_exist:
        if not path.exists():
            raise FileNotFoundError(f"Required directory is missing: {path}")
        if not path.is_dir():
            raise NotADirectoryError(f"Expected a directory, got a file: {path}")
    else:
        path.mkdir(parents=True,exist_ok=True)
    return path

# Figures out where per-user data should live on this platform. CCLOCK_HOME always wins, which is also what the
# tests use to keep logs out of the real user folder.
def _resolve_data_root() -> Path:
    override = os.getenv("CCLOCK_HOME")
    if override:
        return Path(override)
    if sys.platform == "win32":
        appdata = os.getenv("APPDATA")
        if not appdata:
            raise RuntimeError("Missing APPDATA environment variable, cannot determine data directories.")
        return Path(appdata) / "ChessClock"
    xdg = os.getenv("XDG_DATA_HOME")
    if xdg:
        return Path(xdg) / "chessclock"
    return Path.home() / ".local" / "share" / "chessclock"

# Dataclass for accessing paths across program.
@dataclass(frozen=False)
class ProjectPaths:

    data: Path
    logs: Path

    @staticmethod
    def build():
        # Folder for all user-specific stuff (settings + logs)
        data = ensure_directory(_resolve_data_root())
        logs = ensure_directory(data / "logs")

        return ProjectPaths(
            data = data,
            logs = logs,
        )
PATHS = ProjectPaths.build()
