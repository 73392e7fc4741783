"""Abstract logging interface for goal-tracker."""

from abc import ABC, abstractmethod
from typing import Any


class Logger(ABC):
    """Minimal structured logging interface.

    Keyword arguments are structured fields attached to the log record.
    """

    @abstractmethod
    def debug(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def info(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def warning(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def error(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def critical(self, message: str, **kwargs: Any) -> None:
        pass
