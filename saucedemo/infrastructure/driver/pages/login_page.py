"""
Page Object de la pagina de login de SauceDemo.
Agrupa los locators de la pantalla y las acciones de usuario sobre ella.
"""
from typing import Optional

from selenium.webdriver.remote.webdriver import WebDriver
from loguru import logger

from saucedemo.core.config import settings
from saucedemo.infrastructure.driver.pages.base_page import BasePage
from saucedemo.infrastructure.driver.pages.locators import LoginLocators


class LoginPage(BasePage):
    """
    Pagina de login de SauceDemo.

    No guarda estado propio: cada operacion resuelve sus locators contra
    la pagina cargada en ese momento.
    """

    def __init__(
        self,
        driver: WebDriver,
        timeout: Optional[float] = None,
        poll_frequency: Optional[float] = None,
        url: Optional[str] = None
    ):
        """
        Inicializa el page object.

        Args:
            driver: Instancia del WebDriver
            timeout: Timeout por defecto de las esperas (por defecto EXPLICIT_WAIT)
            poll_frequency: Intervalo de sondeo (por defecto POLL_FREQUENCY)
            url: URL de login (por defecto settings.BASE_URL)
        """
        super().__init__(driver, timeout, poll_frequency)
        self.url = url or settings.BASE_URL

    def open(self) -> None:
        """Abre la pagina de login y espera a que el campo de usuario este visible."""
        logger.info(f"Abriendo pagina de login: {self.url}")
        self.navigate_to(self.url)
        self.wait_visible(LoginLocators.USERNAME_INPUT)
        logger.info("Pagina de login abierta")

    def enter_username(self, username: str) -> None:
        logger.info(f"Ingresando usuario: {username}")
        self.type_text(LoginLocators.USERNAME_INPUT, username)

    def enter_password(self, password: str) -> None:
        logger.info("Ingresando password")
        self.type_text(LoginLocators.PASSWORD_INPUT, password)

    def submit(self) -> None:
        logger.info("Haciendo clic en el boton de login")
        self.click(LoginLocators.LOGIN_BUTTON)

    def login(self, username: str, password: str) -> None:
        """
        Realiza el flujo completo de login.
        Ingresa usuario, luego password y finalmente envia el formulario.

        Args:
            username: Nombre de usuario
            password: Password
        """
        logger.info(f"Realizando login con usuario: {username}")
        self.enter_username(username)
        self.enter_password(password)
        self.submit()

    def error_message(self) -> str:
        """Retorna el texto del banner de error."""
        return self.read_text(LoginLocators.ERROR_MESSAGE)

    def is_error_shown(self) -> bool:
        return self.is_displayed(LoginLocators.ERROR_MESSAGE)

    def is_login_page_shown(self) -> bool:
        return self.is_displayed(LoginLocators.PAGE_LOGO)

    def is_logged_in(self) -> bool:
        """
        Verifica si el login fue exitoso (titulo 'Products' visible).

        Un False no distingue entre "la pagina nunca cargo" y "el titulo nunca
        aparecio"; para diagnosticar conviene revisar current_url().
        """
        return self.is_displayed(LoginLocators.PRODUCTS_TITLE)

    def is_inventory_shown(self) -> bool:
        return self.is_displayed(LoginLocators.INVENTORY_CONTAINER)

    def username_field_value(self) -> str:
        return self.read_attribute(LoginLocators.USERNAME_INPUT, "value")

    def password_field_value(self) -> str:
        return self.read_attribute(LoginLocators.PASSWORD_INPUT, "value")

    def clear_fields(self) -> None:
        """Limpia los campos de usuario y password sin escribir texto nuevo."""
        logger.info("Limpiando campos de login")
        self.clear(LoginLocators.USERNAME_INPUT)
        self.clear(LoginLocators.PASSWORD_INPUT)
