"""CLI commands for quest-lift."""

from .init import init
from .plans import plans
from .profile import profile
from .rewards import rewards, stats
from .serve import serve
from .workout import workout

__all__ = [
    "init",
    "plans",
    "profile",
    "rewards",
    "serve",
    "stats",
    "workout",
]
