"""
Pagina base con las operaciones genericas de espera y accion.

Todas las interacciones siguen el patron "esperar, luego actuar": el
elemento se resuelve con una espera explicita (visible, clickeable o
presente) y solo despues se escribe, se hace clic o se lee.
"""
from typing import Callable, Optional

from selenium.common.exceptions import (
    ElementClickInterceptedException,
    ElementNotInteractableException,
    InvalidElementStateException,
    StaleElementReferenceException,
    TimeoutException,
    WebDriverException,
)
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import WebDriverWait
from loguru import logger
from urllib3.exceptions import HTTPError

from saucedemo.core.config import settings
from saucedemo.infrastructure.driver.pages.locators import Locator
from saucedemo.shared.exceptions import ElementInteractionError, WaitTimeoutError


# Fallas de accion sobre un elemento ya resuelto
_INTERACTION_ERRORS = (
    StaleElementReferenceException,
    ElementNotInteractableException,
    InvalidElementStateException,
    ElementClickInterceptedException,
)


class BasePage:
    """
    Fachada de interaccion con la pagina.
    Encapsula las esperas explicitas y las acciones comunes a todos los page objects.
    """

    def __init__(
        self,
        driver: WebDriver,
        timeout: Optional[float] = None,
        poll_frequency: Optional[float] = None
    ):
        """
        Inicializa la pagina base.

        Args:
            driver: Instancia del WebDriver
            timeout: Timeout por defecto de las esperas; si es None se usa EXPLICIT_WAIT
            poll_frequency: Intervalo de sondeo; si es None se usa POLL_FREQUENCY
        """
        self._driver = driver
        self._timeout = settings.EXPLICIT_WAIT if timeout is None else timeout
        self._poll = settings.POLL_FREQUENCY if poll_frequency is None else poll_frequency
        self._wait = WebDriverWait(driver, self._timeout, poll_frequency=self._poll)

    @property
    def timeout(self) -> float:
        """Timeout por defecto de las esperas (segundos)."""
        return self._timeout

    @property
    def poll_frequency(self) -> float:
        return self._poll

    def _wait_for(
        self,
        condition: Callable,
        locator: Locator,
        description: str,
        timeout: Optional[float] = None
    ) -> WebElement:
        """
        Espera a que se cumpla una condicion sobre el locator.

        Args:
            condition: Fabrica de expected_conditions que recibe el locator
            locator: Locator del elemento
            description: Descripcion de la condicion (para logs y errores)
            timeout: Timeout puntual; si es None se usa el WebDriverWait de la pagina

        Returns:
            WebElement: El elemento una vez cumplida la condicion

        Raises:
            WaitTimeoutError: Si la condicion no se cumple dentro del timeout
        """
        wait = self._wait
        if timeout is None:
            timeout = self._timeout
        else:
            wait = WebDriverWait(self._driver, timeout, poll_frequency=self._poll)

        logger.debug(f"Esperando elemento {description}: {locator}")
        try:
            return wait.until(condition(locator))
        except TimeoutException as e:
            raise WaitTimeoutError(locator, description, timeout) from e

    def wait_visible(self, locator: Locator, timeout: Optional[float] = None) -> WebElement:
        """Espera a que el elemento este presente y visible."""
        return self._wait_for(EC.visibility_of_element_located, locator, "visible", timeout)

    def wait_clickable(self, locator: Locator, timeout: Optional[float] = None) -> WebElement:
        """Espera a que el elemento este visible y habilitado."""
        return self._wait_for(EC.element_to_be_clickable, locator, "clickeable", timeout)

    def wait_present(self, locator: Locator, timeout: Optional[float] = None) -> WebElement:
        """Espera a que el elemento exista en el DOM (no requiere visibilidad)."""
        return self._wait_for(EC.presence_of_element_located, locator, "presente", timeout)

    def type_text(self, locator: Locator, text: str) -> None:
        """
        Limpia el campo y escribe el texto.

        Raises:
            WaitTimeoutError: Si el campo no se vuelve visible
            ElementInteractionError: Si el campo queda obsoleto o no acepta texto
        """
        logger.debug(f"Escribiendo en {locator}")
        element = self.wait_visible(locator)
        try:
            element.clear()
            element.send_keys(text)
        except _INTERACTION_ERRORS as e:
            raise ElementInteractionError(locator, "type_text", e.msg) from e

    def clear(self, locator: Locator) -> None:
        """
        Vacia el campo sin escribir nada.

        Raises:
            WaitTimeoutError: Si el campo no se vuelve visible
            ElementInteractionError: Si el campo queda obsoleto o no puede vaciarse
        """
        logger.debug(f"Limpiando {locator}")
        element = self.wait_visible(locator)
        try:
            element.clear()
        except _INTERACTION_ERRORS as e:
            raise ElementInteractionError(locator, "clear", e.msg) from e

    def click(self, locator: Locator) -> None:
        """
        Hace clic en el elemento una vez clickeable.

        Raises:
            WaitTimeoutError: Si el elemento no se vuelve clickeable
            ElementInteractionError: Si el clic no puede despacharse
        """
        logger.debug(f"Haciendo clic en {locator}")
        element = self.wait_clickable(locator)
        try:
            element.click()
        except _INTERACTION_ERRORS as e:
            raise ElementInteractionError(locator, "click", e.msg) from e

    def read_text(self, locator: Locator) -> str:
        """Retorna el texto renderizado del elemento visible."""
        element = self.wait_visible(locator)
        try:
            return element.text
        except StaleElementReferenceException as e:
            raise ElementInteractionError(locator, "read_text", e.msg) from e

    def read_attribute(self, locator: Locator, name: str) -> str:
        """
        Retorna el valor actual de un atributo del elemento visible.

        Args:
            locator: Locator del elemento
            name: Nombre del atributo (ej: 'value')

        Returns:
            str: Valor del atributo, o "" si el elemento no lo tiene
        """
        element = self.wait_visible(locator)
        try:
            value = element.get_attribute(name)
        except StaleElementReferenceException as e:
            raise ElementInteractionError(locator, "read_attribute", e.msg) from e
        return value if value is not None else ""

    def is_displayed(self, locator: Locator, timeout: Optional[float] = None) -> bool:
        """
        Verifica si el elemento esta visible.

        Nunca lanza excepciones: un timeout, un elemento obsoleto, una falla
        del driver o una sesion caida (error HTTP contra el chromedriver) se
        reportan como False, para poder usarlo directamente en asserts.

        Args:
            locator: Locator del elemento
            timeout: Timeout puntual (por defecto el de la pagina)

        Returns:
            bool: True si el elemento se volvio visible dentro del timeout
        """
        try:
            return self.wait_visible(locator, timeout).is_displayed()
        except (WaitTimeoutError, ElementInteractionError, WebDriverException, HTTPError) as e:
            logger.debug(f"Elemento no visible: {locator} ({type(e).__name__})")
            return False

    def navigate_to(self, url: str) -> None:
        """Navega a la URL indicada."""
        logger.info(f"Navegando a: {url}")
        self._driver.get(url)
        logger.debug(f"Pagina cargada: {self._driver.title}")

    def current_url(self) -> str:
        """Retorna la URL actual del navegador."""
        return self._driver.current_url

    def page_title(self) -> str:
        """Retorna el titulo de la pagina actual."""
        return self._driver.title
