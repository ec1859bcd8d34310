"""Translation port — user-facing labels and messages only."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any


class Translator(ABC):
    """Resolves a message key to display text.

    The core never branches on the returned text.
    """

    @abstractmethod
    def translate(self, key: str, params: Mapping[str, Any] | None = None) -> str:
        ...
