from .challenges import router as challenges_router
from .courses import router as courses_router
from .leaderboard import router as leaderboard_router
from .learn import router as learn_router
from .progress import router as progress_router

__all__ = [
    "challenges_router",
    "courses_router",
    "leaderboard_router",
    "learn_router",
    "progress_router",
]
