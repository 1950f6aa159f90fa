import hashlib
import os
from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Version:
    """
    Semantic version of the performer package.

    Carries a content hash of the installed sources so two benchmark
    exports can be traced back to the exact harness that produced them.
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
        """Return version with short hash and release date."""
        return f"{self} (hash: {self.hash_short()}, date: {self.date_string()})"

    def semver(self) -> tuple[int, int, int]:
        return (self.major, self.minor, self.patch)

    def hash_short(self, length: int = 8) -> str:
        return self.hash[:length]

    def date_string(self, fmt: str = "%Y-%m-%d") -> str:
        return self.date.strftime(fmt)


def _compute_package_hash() -> str:
    """SHA256 over every source file of the performer package."""
    package_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    hasher = hashlib.sha256()

    for root, dirs, files in os.walk(package_dir):
        dirs[:] = sorted(d for d in dirs if d != "__pycache__")

        for file in sorted(files):
            if not file.endswith(".py"):
                continue
            try:
                with open(os.path.join(root, file), "rb") as f:
                    hasher.update(f.read())
            except OSError:
                pass

    return hasher.hexdigest()


PERFORMER_VERSION = Version(
    major=0,
    minor=1,
    patch=0,
    hash=_compute_package_hash(),
    date=datetime(2026, 10, 18),
)
