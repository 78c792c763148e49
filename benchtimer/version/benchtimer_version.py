import hashlib
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

_SKIP_DIRS = {"__pycache__", ".git", ".pytest_cache"}


@dataclass(frozen=True)
class Version:
    """
    Semantic version of benchtimer plus a content hash and release date.
    """
    major: int
    minor: int
    patch: int
    hash: str
    date: datetime

    def __str__(self) -> str:
        """Return the semantic version string (e.g., '0.1.0')."""
        return f"{self.major}.{self.minor}.{self.patch}"

    def full_version(self) -> str:
        return f"{self} (hash: {self.hash_short()}, date: {self.date_string()})"

    def semver(self) -> tuple[int, int, int]:
        return (self.major, self.minor, self.patch)

    def hash_short(self, length: int = 8) -> str:
        return self.hash[:length]

    def date_string(self, fmt: str = "%Y-%m-%d") -> str:
        return self.date.strftime(fmt)


def _compute_package_hash() -> str:
    """
    SHA256 over the source files of the installed benchtimer package.
    """
    package_dir = Path(__file__).resolve().parent.parent
    hasher = hashlib.sha256()

    for path in sorted(package_dir.rglob("*.py")):
        if _SKIP_DIRS.intersection(path.parts):
            continue
        try:
            hasher.update(path.read_bytes())
        except OSError:
            continue

    return hasher.hexdigest()


BENCHTIMER_VERSION = Version(
    major=0,
    minor=1,
    patch=0,
    hash=_compute_package_hash(),
    date=datetime(2026, 10, 17),
)
