"""
Excepciones de la suite.
"""
from saucedemo.shared.exceptions.base import AppException
from saucedemo.shared.exceptions.driver import (
    ElementInteractionError,
    SessionInitError,
    WaitTimeoutError,
)


__all__ = [
    "AppException",
    "ElementInteractionError",
    "SessionInitError",
    "WaitTimeoutError",
]
