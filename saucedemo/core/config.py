"""
Configuracion central de la suite de pruebas.
Gestiona variables de entorno y valores por defecto del navegador.

Configuracion de desarrollo vs CI:
- ENVIRONMENT: 'development' o 'ci'
- En desarrollo: SELENIUM_HEADLESS=false para ver el navegador
- En CI: SELENIUM_HEADLESS=true (headless)
"""
import re

from pydantic_settings import BaseSettings
from pydantic import Field, computed_field, field_validator


_WINDOW_SIZE_PATTERN = re.compile(r"^\s*(\d+)\s*[xX,]\s*(\d+)\s*$")


class Settings(BaseSettings):
    """
    Clase de configuracion de la suite.
    Lee variables de entorno (y .env) y proporciona valores por defecto.

    Todos los tiempos se expresan en segundos.
    """

    # Configuracion general
    APP_NAME: str = Field(default="SauceDemo UI Tests")
    ENVIRONMENT: str = Field(default="development")

    # Aplicacion bajo prueba
    BASE_URL: str = Field(default="https://www.saucedemo.com/")

    # Selenium - Configurable para desarrollo (ver navegador) vs CI (headless)
    SELENIUM_HEADLESS: bool = Field(default=False)
    SELENIUM_INCOGNITO: bool = Field(default=False)
    SELENIUM_WINDOW_SIZE: str = Field(default="1920x1080")

    # Esperas
    # Un IMPLICIT_WAIT mayor a 0 se suma a cada espera explicita
    IMPLICIT_WAIT: float = Field(default=0, ge=0)
    EXPLICIT_WAIT: float = Field(default=10, gt=0)
    POLL_FREQUENCY: float = Field(default=0.5, gt=0)
    PAGE_LOAD_TIMEOUT: float = Field(default=30, gt=0)

    # Logging
    LOG_LEVEL: str = Field(default="INFO")
    LOG_FILE: str = Field(default="logs/tests.log")
    SCENARIO_LOG_DIR: str = Field(default="logs/scenarios")

    @field_validator("SELENIUM_WINDOW_SIZE")
    @classmethod
    def validate_window_size(cls, value: str) -> str:
        """
        Valida SELENIUM_WINDOW_SIZE al construir la configuracion.
        Acepta '1920x1080' o '1920,1080'.

        Raises:
            ValueError: Si no tiene el formato ANCHOxALTO
        """
        if not _WINDOW_SIZE_PATTERN.match(value):
            raise ValueError(
                f"SELENIUM_WINDOW_SIZE invalido: '{value}' "
                "(formato esperado: ANCHOxALTO)"
            )
        return value

    @computed_field
    @property
    def window_size_argument(self) -> str:
        """
        Retorna el argumento de Chrome para el tamano de ventana,
        normalizado a '--window-size=1920,1080'.

        Raises:
            ValueError: Si SELENIUM_WINDOW_SIZE fue reasignado con un formato invalido
        """
        match = _WINDOW_SIZE_PATTERN.match(self.SELENIUM_WINDOW_SIZE)
        if not match:
            raise ValueError(
                f"SELENIUM_WINDOW_SIZE invalido: '{self.SELENIUM_WINDOW_SIZE}' "
                "(formato esperado: ANCHOxALTO)"
            )
        width, height = match.groups()
        return f"--window-size={width},{height}"

    @computed_field
    @property
    def is_ci(self) -> bool:
        """Indica si la suite corre en integracion continua."""
        return self.ENVIRONMENT.lower() == "ci"

    class Config:
        """Configuracion de Pydantic."""
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"  # Ignorar campos extra del .env


# Instancia global de configuracion
settings = Settings()
