"""Version information for performer."""

from performer.version.performer_version import PERFORMER_VERSION, Version

__all__ = ["PERFORMER_VERSION", "Version"]
