"""
Page objects de SauceDemo.
Cada page object encapsula los locators y acciones de una pantalla.
"""
from saucedemo.infrastructure.driver.pages.base_page import BasePage
from saucedemo.infrastructure.driver.pages.locators import Locator, LoginLocators
from saucedemo.infrastructure.driver.pages.login_page import LoginPage


__all__ = ["BasePage", "Locator", "LoginLocators", "LoginPage"]
