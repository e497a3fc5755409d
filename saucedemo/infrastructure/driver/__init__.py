"""
Modulo de gestion del driver de Selenium.
Proporciona las clases y funciones para manejar el WebDriver y los page objects.
"""
from saucedemo.infrastructure.driver.browser_options import build_chrome_options
from saucedemo.infrastructure.driver.driver_manager import DriverManager, DriverSession
from saucedemo.infrastructure.driver.pages import BasePage, Locator, LoginLocators, LoginPage


__all__ = [
    "BasePage",
    "DriverManager",
    "DriverSession",
    "Locator",
    "LoginLocators",
    "LoginPage",
    "build_chrome_options",
]
