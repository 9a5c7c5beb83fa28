"""Quiz session view.

Holds the hearts and completion percentage for one lesson session and draws
the lesson header from them. State lives in a session-state mapping
(``st.session_state`` in the app) so it survives Streamlit reruns; it is
seeded from the initial values the first time the view is built for a
lesson and is not re-seeded afterwards.
"""

from __future__ import annotations

from typing import Callable, MutableMapping, Optional, Sequence

from lingo_ui.header import render_header
from lingo_ui.models import Challenge, QuizPayload, Subscription
from lingo_ui.stores import ModalStore

HeaderRenderer = Callable[..., None]


def _state_key(lesson_id: int, name: str) -> str:
    return f"quiz:{lesson_id}:{name}"


def clear_session(state: MutableMapping, lesson_id: int) -> None:
    """Drop a lesson's session state (the user left the lesson)."""
    for name in ("hearts", "percentage", "hearts_prompted"):
        state.pop(_state_key(lesson_id, name), None)


class Quiz:
    def __init__(
        self,
        lesson_id: int,
        initial_hearts: int,
        initial_percentage: float,
        initial_lesson_challenges: Sequence[Challenge],
        user_subscription: Optional[Subscription],
        state: MutableMapping,
        header: HeaderRenderer = render_header,
    ) -> None:
        self.lesson_id = lesson_id
        self.challenges = tuple(initial_lesson_challenges)
        self.user_subscription = user_subscription
        self._state = state
        self._header = header

        self._state.setdefault(self._key("hearts"), initial_hearts)
        self._state.setdefault(self._key("percentage"), initial_percentage)

    @classmethod
    def from_payload(
        cls,
        payload: QuizPayload,
        state: MutableMapping,
        header: HeaderRenderer = render_header,
    ) -> "Quiz":
        return cls(
            lesson_id=payload.lesson_id,
            initial_hearts=payload.initial_hearts,
            initial_percentage=payload.initial_percentage,
            initial_lesson_challenges=payload.initial_lesson_challenges,
            user_subscription=payload.user_subscription,
            state=state,
            header=header,
        )

    def _key(self, name: str) -> str:
        return _state_key(self.lesson_id, name)

    @property
    def hearts(self) -> int:
        return self._state[self._key("hearts")]

    @property
    def percentage(self) -> float:
        return self._state[self._key("percentage")]

    @property
    def has_active_subscription(self) -> bool:
        return self.user_subscription is not None and bool(self.user_subscription.is_active)

    @property
    def out_of_hearts(self) -> bool:
        return self.hearts <= 0 and not self.has_active_subscription

    def prompt_hearts_modal(self, store: ModalStore) -> None:
        """Open the hearts modal the first time this session runs out of hearts."""
        key = self._key("hearts_prompted")
        if self.out_of_hearts and not self._state.get(key):
            self._state[key] = True
            store.open()

    def render(self) -> None:
        self._header(
            hearts=self.hearts,
            percentage=self.percentage,
            has_active_subscription=self.has_active_subscription,
        )

    def clear(self) -> None:
        clear_session(self._state, self.lesson_id)
