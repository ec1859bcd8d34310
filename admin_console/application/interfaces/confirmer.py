"""Confirmation port — gates irreversible actions behind the user."""

from abc import ABC, abstractmethod


class Confirmer(ABC):
    @abstractmethod
    async def confirm(self, message: str) -> bool:
        """Ask the user to confirm ``message``; True means proceed."""
        ...
