"""Application Exceptions."""

from apps.characters.application.common.exceptions.base import ApplicationError

__all__ = ["ApplicationError"]
