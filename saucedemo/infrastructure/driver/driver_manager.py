"""
Driver Manager - Gestion centralizada del WebDriver de Selenium.
Maneja el ciclo de vida del ChromeDriver para los escenarios de prueba.

Politica de instancia unica: en un proceso nunca conviven dos sesiones de
navegador vivas. Los workers paralelos (pytest-xdist) corren en procesos
separados y cada uno tiene su propia sesion.

Configuracion de headless:
- SELENIUM_HEADLESS=true: Modo headless (CI, sin GUI)
- SELENIUM_HEADLESS=false: Modo con GUI (desarrollo, para debugging)
"""
from contextlib import contextmanager
from datetime import datetime
from typing import Iterator, Optional
import threading
import uuid

from selenium import webdriver
from selenium.common.exceptions import WebDriverException
from loguru import logger
from urllib3.exceptions import HTTPError

from saucedemo.core.config import settings
from saucedemo.infrastructure.driver.browser_options import build_chrome_options
from saucedemo.infrastructure.driver.pages.login_page import LoginPage
from saucedemo.shared.exceptions import SessionInitError


def _quit_quietly(driver: webdriver.Chrome) -> None:
    """Cierra el navegador registrando (sin propagar) las fallas del driver."""
    try:
        driver.quit()
    except WebDriverException as e:
        logger.error(f"Error al cerrar driver: {e.msg or type(e).__name__}")


class DriverSession:
    """
    Representa una sesion activa de un driver de Selenium.
    Contiene el driver, los page objects y metadatos de la sesion.
    """

    def __init__(
        self,
        session_id: str,
        driver: webdriver.Chrome
    ):
        """
        Inicializa una sesion de driver con sus page objects.

        Args:
            session_id: Identificador unico de la sesion
            driver: Instancia del WebDriver de Chrome
        """
        self.session_id = session_id
        self.driver = driver
        self.created_at = datetime.now()
        self.is_active = True

        # Page objects para esta sesion (esperas de EXPLICIT_WAIT y POLL_FREQUENCY)
        self.login_page = LoginPage(driver)

    def close(self) -> None:
        """Cierra el driver y marca la sesion como inactiva."""
        if self.is_active:
            _quit_quietly(self.driver)
            logger.info(f"Driver cerrado para sesion {self.session_id}")
        self.is_active = False

    def is_responsive(self) -> bool:
        """
        Verifica que el navegador siga respondiendo.

        Returns:
            bool: True si la sesion esta activa y el driver responde
        """
        if not self.is_active:
            return False
        try:
            _ = self.driver.current_url
            return True
        except (WebDriverException, HTTPError):
            return False


class DriverManager:
    """
    Gestor centralizado del driver de Selenium.

    Mantiene a lo sumo una sesion viva por proceso. Se puede usar de dos formas:
    - Perezosa: acquire() construye la sesion en el primer uso y release() la cierra.
    - Explicita: session() crea la sesion al entrar y la libera al salir,
      incluso si el escenario falla.
    """

    _session: Optional[DriverSession] = None
    _lock = threading.Lock()

    @classmethod
    def acquire(cls) -> DriverSession:
        """
        Retorna la sesion viva o construye una nueva.

        Usa double-checked locking: llamadas concurrentes observan una sola
        construccion y reciben la misma sesion.

        Returns:
            DriverSession: La sesion viva

        Raises:
            SessionInitError: Si el navegador no pudo iniciarse
        """
        session = cls._session
        if session is None:
            with cls._lock:
                if cls._session is None:
                    logger.info("Inicializando WebDriver...")
                    cls._session = cls._build_session()
                session = cls._session
        return session

    @classmethod
    def create_session(cls) -> DriverSession:
        """
        Crea una nueva sesion de forma explicita.

        Si ya existe una sesion viva, la cierra primero.

        Returns:
            DriverSession: La sesion creada con el driver activo

        Raises:
            SessionInitError: Si el navegador no pudo iniciarse
        """
        with cls._lock:
            if cls._session is not None:
                logger.info(f"Cerrando sesion existente: {cls._session.session_id}")
                cls._session.close()
                cls._session = None
            cls._session = cls._build_session()
            return cls._session

    @classmethod
    def release(cls) -> bool:
        """
        Cierra la sesion viva y libera sus recursos.

        Returns:
            bool: True si se cerro una sesion, False si no habia ninguna
        """
        with cls._lock:
            session = cls._session
            cls._session = None
        if session is None:
            return False
        logger.info("Cerrando WebDriver...")
        session.close()
        return True

    @classmethod
    def is_live(cls) -> bool:
        """Indica si hay una sesion viva."""
        return cls._session is not None

    @classmethod
    def get_session(cls) -> Optional[DriverSession]:
        """Retorna la sesion viva o None."""
        return cls._session

    @classmethod
    @contextmanager
    def session(cls) -> Iterator[DriverSession]:
        """
        Context manager de adquisicion acotada.

        Ejemplo:
            with DriverManager.session() as session:
                session.login_page.open()
        """
        session = cls.create_session()
        try:
            yield session
        finally:
            cls.release()

    @classmethod
    def _build_session(cls) -> DriverSession:
        """Construye el driver y lo envuelve en una DriverSession."""
        driver = cls._create_driver()
        session = DriverSession(
            session_id=str(uuid.uuid4()),
            driver=driver
        )
        logger.info(f"Sesion creada: {session.session_id}")
        return session

    @classmethod
    def _create_driver(cls) -> webdriver.Chrome:
        """
        Crea e inicializa un nuevo WebDriver de Chrome.

        Aplica el implicit wait y el timeout de carga de pagina configurados.
        No hay reintentos: una falla de arranque se propaga al llamador.

        Returns:
            webdriver.Chrome: El navegador listo para usar

        Raises:
            SessionInitError: Si las opciones son invalidas o Chrome no pudo iniciarse
        """
        try:
            opts = build_chrome_options(settings)
        except ValueError as e:
            logger.error(f"Configuracion de navegador invalida: {e}")
            raise SessionInitError(str(e)) from e

        try:
            driver = webdriver.Chrome(options=opts)
        except WebDriverException as e:
            reason = e.msg or type(e).__name__
            logger.error(f"Error al iniciar Chrome: {reason}")
            raise SessionInitError(reason) from e

        try:
            driver.implicitly_wait(settings.IMPLICIT_WAIT)
            driver.set_page_load_timeout(settings.PAGE_LOAD_TIMEOUT)
        except WebDriverException as e:
            reason = e.msg or type(e).__name__
            logger.error(f"Error configurando el driver: {reason}")
            _quit_quietly(driver)
            raise SessionInitError(reason) from e

        logger.info("WebDriver inicializado")
        return driver
