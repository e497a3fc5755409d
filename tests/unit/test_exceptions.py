"""
Tests unitarios para las excepciones de la suite.
"""
from selenium.webdriver.common.by import By

from saucedemo.infrastructure.driver.pages.locators import Locator
from saucedemo.shared.exceptions import (
    AppException,
    ElementInteractionError,
    SessionInitError,
    WaitTimeoutError,
)


LOCATOR = Locator(By.ID, "user-name")


class TestWaitTimeoutError:
    """Tests para WaitTimeoutError."""

    def test_is_app_exception_and_timeout_error(self) -> None:
        error = WaitTimeoutError(LOCATOR, "visible", 10)

        assert isinstance(error, AppException)
        assert isinstance(error, TimeoutError)

    def test_message_contains_locator_and_timeout(self) -> None:
        error = WaitTimeoutError(LOCATOR, "visible", 10)

        assert "user-name" in str(error)
        assert "10" in str(error)
        assert error.error_code == "WAIT_TIMEOUT"

    def test_attributes(self) -> None:
        error = WaitTimeoutError(LOCATOR, "clickeable", 2.5)

        assert error.locator == LOCATOR
        assert error.condition == "clickeable"
        assert error.timeout == 2.5
        assert error.details["condition"] == "clickeable"


class TestSessionInitError:
    """Tests para SessionInitError."""

    def test_message_contains_reason(self) -> None:
        error = SessionInitError("chrome not reachable")

        assert "chrome not reachable" in str(error)
        assert error.error_code == "SESSION_INIT_ERROR"
        assert error.details == {"reason": "chrome not reachable"}


class TestElementInteractionError:
    """Tests para ElementInteractionError."""

    def test_message_with_reason(self) -> None:
        error = ElementInteractionError(LOCATOR, "click", "element not interactable")

        assert "click" in str(error)
        assert "element not interactable" in str(error)
        assert error.action == "click"
        assert error.locator == LOCATOR

    def test_message_without_reason(self) -> None:
        error = ElementInteractionError(LOCATOR, "type_text")

        assert str(error).endswith(str(tuple(LOCATOR)))
        assert error.error_code == "ELEMENT_INTERACTION_ERROR"
