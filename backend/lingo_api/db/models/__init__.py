from lingo_api.db.models.user import User
from lingo_api.db.models.lesson import Lesson
from lingo_api.db.models.challenge import Challenge, ChallengeOption
from lingo_api.db.models.challenge_progress import ChallengeProgress
from lingo_api.db.models.user_progress import UserProgress
from lingo_api.db.models.user_subscription import UserSubscription

__all__ = [
    "User",
    "Lesson",
    "Challenge",
    "ChallengeOption",
    "ChallengeProgress",
    "UserProgress",
    "UserSubscription",
]
