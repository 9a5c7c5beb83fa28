"""Open/closed state for the app's modals.

Stores are plain objects. The host creates one ``ModalStores`` per browser
session with :func:`get_modal_stores` and passes it to whatever renders or
toggles a modal.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import MutableMapping

_SESSION_KEY = "modal_stores"


@dataclass
class ModalStore:
    """Visibility of a single modal. Starts closed."""

    is_open: bool = False

    def open(self) -> None:
        self.is_open = True

    def close(self) -> None:
        self.is_open = False


@dataclass
class ModalStores:
    hearts: ModalStore = field(default_factory=ModalStore)
    practice: ModalStore = field(default_factory=ModalStore)


def get_modal_stores(state: MutableMapping) -> ModalStores:
    """Return the session's stores, creating them on first use."""
    stores = state.get(_SESSION_KEY)
    if stores is None:
        stores = ModalStores()
        state[_SESSION_KEY] = stores
    return stores
