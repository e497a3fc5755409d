"""
Opciones de arranque de Chrome.

Combina un conjunto fijo de flags (ventana maximizada, deteccion de
automatizacion desactivada, extensiones y popups desactivados) con los
flags que dependen de la configuracion (headless, incognito, tamano de ventana).
"""
from typing import List, Optional

from selenium.webdriver.chrome.options import Options
from loguru import logger

from saucedemo.core.config import Settings, settings


# Flags fijos, independientes del entorno
BASE_ARGUMENTS: List[str] = [
    "--start-maximized",
    "--disable-blink-features=AutomationControlled",
    "--disable-extensions",
    "--disable-plugins",
    "--disable-notifications",
    "--disable-popup-blocking",
    "--no-default-browser-check",
]

# Flags necesarios para correr sin GUI en contenedores / servidores de CI
HEADLESS_ARGUMENTS: List[str] = [
    "--headless=new",
    "--no-sandbox",
    "--disable-dev-shm-usage",
    "--disable-gpu",
]


def build_chrome_options(config: Optional[Settings] = None) -> Options:
    """
    Construye las opciones de Chrome a partir de la configuracion.

    Args:
        config: Configuracion a usar (por defecto la instancia global)

    Returns:
        Options: Opciones de Chrome listas para webdriver.Chrome(options=...)
    """
    if config is None:
        config = settings
    opts = Options()

    for argument in BASE_ARGUMENTS:
        opts.add_argument(argument)
    opts.add_argument(config.window_size_argument)

    # Oculta la barra "Chrome esta siendo controlado por software de prueba"
    opts.add_experimental_option("excludeSwitches", ["enable-automation"])

    if config.SELENIUM_HEADLESS:
        for argument in HEADLESS_ARGUMENTS:
            opts.add_argument(argument)
        logger.info("Chrome iniciando en modo headless")
    else:
        logger.info("Chrome iniciando con GUI")

    if config.SELENIUM_INCOGNITO:
        opts.add_argument("--incognito")
        logger.info("Chrome iniciando en modo incognito")

    logger.debug(f"Opciones de Chrome configuradas: {opts.arguments}")
    return opts
