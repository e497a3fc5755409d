"""
Locators de las paginas de SauceDemo.

Un Locator es un par inmutable (estrategia, valor). Se resuelve contra la
pagina cargada en cada uso; nunca se cachea el elemento encontrado.
"""
from typing import NamedTuple

from selenium.webdriver.common.by import By


class Locator(NamedTuple):
    """Par (estrategia, valor) compatible con driver.find_element(*locator)."""

    by: str
    value: str

    def __str__(self) -> str:
        return f"{self.by}={self.value}"


class LoginLocators:
    """Locators de la pagina de login y del marcador post-login."""

    USERNAME_INPUT = Locator(By.ID, "user-name")
    PASSWORD_INPUT = Locator(By.ID, "password")
    LOGIN_BUTTON = Locator(By.ID, "login-button")
    ERROR_MESSAGE = Locator(By.XPATH, "//div[@class='error-message-container']//h3")
    PAGE_LOGO = Locator(By.XPATH, "//div[@class='login_logo']")
    INVENTORY_CONTAINER = Locator(By.CLASS_NAME, "inventory_container")
    PRODUCTS_TITLE = Locator(By.XPATH, "//span[@class='title'][contains(text(), 'Products')]")
