"""
Excepciones relacionadas con el driver de Selenium y la interaccion con la pagina.
"""
from typing import Any, Optional

from saucedemo.shared.exceptions.base import AppException


class SessionInitError(AppException):
    """Excepcion cuando el navegador o el driver no pudieron iniciarse."""

    def __init__(self, reason: str):
        super().__init__(
            message=f"No se pudo iniciar la sesion del navegador: {reason}",
            error_code="SESSION_INIT_ERROR",
            details={"reason": reason}
        )


class WaitTimeoutError(AppException, TimeoutError):
    """
    Excepcion cuando una condicion de espera no se cumple dentro del timeout.
    Tambien es un TimeoutError.
    """

    def __init__(self, locator: Any, condition: str, timeout: float):
        self.locator = locator
        self.condition = condition
        self.timeout = timeout
        super().__init__(
            message=(
                f"Timeout ({timeout}s) esperando que el elemento {tuple(locator)} "
                f"este {condition}"
            ),
            error_code="WAIT_TIMEOUT",
            details={
                "locator": str(tuple(locator)),
                "condition": condition,
                "timeout": timeout
            }
        )


class ElementInteractionError(AppException):
    """Excepcion cuando una accion falla sobre un elemento obsoleto o no interactuable."""

    def __init__(self, locator: Any, action: str, reason: Optional[str] = None):
        self.locator = locator
        self.action = action
        message = f"No se pudo ejecutar '{action}' sobre el elemento {tuple(locator)}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(
            message=message,
            error_code="ELEMENT_INTERACTION_ERROR",
            details={"locator": str(tuple(locator)), "action": action}
        )
