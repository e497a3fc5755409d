"""
Manejadores de inicio y cierre de una corrida de pruebas.
"""
import sys
from typing import Optional

from loguru import logger

from saucedemo.core.config import settings
from saucedemo.infrastructure.driver.driver_manager import DriverManager


CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)

_started = False


def startup(log_file: Optional[str] = None) -> None:
    """
    Configura el logging y valida la configuracion.
    Debe llamarse una vez al inicio de la corrida; llamadas repetidas no hacen nada.

    Args:
        log_file: Archivo del log de la corrida (por defecto settings.LOG_FILE)
    """
    global _started
    if _started:
        return

    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=settings.LOG_LEVEL)
    logger.add(
        log_file or settings.LOG_FILE,
        rotation="50 MB",
        retention="10 days",
        level=settings.LOG_LEVEL
    )

    logger.info(f"Iniciando {settings.APP_NAME}")
    logger.info(f"Entorno: {settings.ENVIRONMENT}")
    logger.info(f"URL bajo prueba: {settings.BASE_URL}")

    for warning in _validate_config():
        logger.warning(f"CONFIG: {warning}")

    _started = True


def shutdown() -> None:
    """Libera la sesion de navegador que haya quedado viva."""
    if DriverManager.release():
        logger.warning("Se cerro una sesion de navegador que seguia viva al finalizar")
    logger.info("Corrida finalizada")


def _validate_config() -> list[str]:
    """Retorna advertencias sobre combinaciones de configuracion sospechosas."""
    warnings = []

    if settings.is_ci and not settings.SELENIUM_HEADLESS:
        warnings.append("ENVIRONMENT=ci sin SELENIUM_HEADLESS - Chrome necesitara un display")

    if settings.IMPLICIT_WAIT > 0:
        warnings.append(
            f"IMPLICIT_WAIT={settings.IMPLICIT_WAIT}s se suma a las esperas explicitas; "
            "los timeouts reales seran mayores que EXPLICIT_WAIT"
        )

    if settings.PAGE_LOAD_TIMEOUT < settings.EXPLICIT_WAIT:
        warnings.append("PAGE_LOAD_TIMEOUT es menor que EXPLICIT_WAIT")

    return warnings
