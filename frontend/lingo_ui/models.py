"""Data models the lesson page builds from the quiz API response."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class ChallengeOption:
    id: int
    challenge_id: int
    text: str
    correct: bool = False
    image_src: Optional[str] = None
    audio_src: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "ChallengeOption":
        return cls(
            id=data["id"],
            challenge_id=data["challenge_id"],
            text=data["text"],
            correct=bool(data.get("correct")),
            image_src=data.get("image_src"),
            audio_src=data.get("audio_src"),
        )


@dataclass(frozen=True)
class Challenge:
    """A lesson question annotated with the user's completion status."""

    id: int
    lesson_id: int
    type: str
    question: str
    order: int
    completed: bool = False
    options: tuple[ChallengeOption, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: dict) -> "Challenge":
        return cls(
            id=data["id"],
            lesson_id=data["lesson_id"],
            type=data["type"],
            question=data["question"],
            order=data["order"],
            completed=bool(data.get("completed")),
            options=tuple(ChallengeOption.from_dict(o) for o in data.get("options") or ()),
        )


@dataclass(frozen=True)
class Subscription:
    """The part of a subscription record the quiz reads."""

    is_active: bool = False

    @classmethod
    def from_dict(cls, data: Optional[dict[str, Any]]) -> Optional["Subscription"]:
        """None for a missing record; a missing or falsey flag reads as inactive."""
        if not data:
            return None
        return cls(is_active=bool(data.get("is_active")))


@dataclass(frozen=True)
class QuizPayload:
    lesson_id: int
    initial_hearts: int
    initial_percentage: float
    initial_lesson_challenges: tuple[Challenge, ...]
    user_subscription: Optional[Subscription]

    @classmethod
    def from_dict(cls, data: dict) -> "QuizPayload":
        return cls(
            lesson_id=data["lesson_id"],
            initial_hearts=data["initial_hearts"],
            initial_percentage=data["initial_percentage"],
            initial_lesson_challenges=tuple(
                Challenge.from_dict(c) for c in data.get("initial_lesson_challenges") or ()
            ),
            user_subscription=Subscription.from_dict(data.get("user_subscription")),
        )
