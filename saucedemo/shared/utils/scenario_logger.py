"""
ScenarioLogger - Un archivo de log por escenario de prueba.

Cada escenario obtiene su propio archivo con todo lo que los page objects y
el driver registraron mientras corria, delimitado por un banner de inicio y
otro de cierre con el resultado y la duracion.

Los mensajes se asignan al escenario por el campo extra "scenario_id", que
se fija con logger.contextualize() mientras el escenario corre.
"""
from datetime import datetime
from pathlib import Path
from typing import Dict, Optional
import re
import uuid

from loguru import logger

from saucedemo.core.config import settings


class ScenarioLogger:
    """
    Gestor de logs por escenario.

    Uso:
        scenario_id = ScenarioLogger.start("test_login_success")
        with logger.contextualize(scenario_id=scenario_id):
            ...  # todo lo logueado aqui va al archivo del escenario
        ScenarioLogger.finish(scenario_id, "passed")
    """

    LOG_TIMESTAMP_FORMAT = "%Y-%m-%d_%H-%M-%S"
    LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level} | {message}"

    _handlers: Dict[str, int] = {}
    _files: Dict[str, Path] = {}
    _started_at: Dict[str, datetime] = {}

    @classmethod
    def log_dir(cls) -> Path:
        return Path(settings.SCENARIO_LOG_DIR)

    @classmethod
    def start(cls, scenario_name: str) -> str:
        """
        Abre el archivo de log de un escenario.

        Args:
            scenario_name: Nombre del escenario (ej: nodeid de pytest)

        Returns:
            str: scenario_id para usar con logger.contextualize()
        """
        started_at = datetime.now()
        safe_name = re.sub(r"[^A-Za-z0-9_.-]+", "_", scenario_name).strip("_")
        short_id = uuid.uuid4().hex[:8]
        scenario_id = f"{safe_name}_{started_at.strftime(cls.LOG_TIMESTAMP_FORMAT)}_{short_id}"

        log_dir = cls.log_dir()
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / f"{scenario_id}.log"

        handler_id = logger.add(
            str(log_file),
            format=cls.LOG_FORMAT,
            filter=lambda record, sid=scenario_id: record["extra"].get("scenario_id") == sid,
            level="DEBUG"
        )

        cls._handlers[scenario_id] = handler_id
        cls._files[scenario_id] = log_file
        cls._started_at[scenario_id] = started_at

        scenario_logger = logger.bind(scenario_id=scenario_id)
        scenario_logger.info("=" * 60)
        scenario_logger.info(f"ESCENARIO INICIADO: {scenario_name}")
        scenario_logger.info(f"Timestamp: {started_at.isoformat()}")
        scenario_logger.info("=" * 60)

        return scenario_id

    @classmethod
    def finish(cls, scenario_id: str, outcome: str = "unknown") -> Optional[float]:
        """
        Escribe el banner de cierre y libera el handler del escenario.

        Args:
            scenario_id: ID retornado por start()
            outcome: Resultado del escenario (passed, failed, skipped...)

        Returns:
            float: Duracion del escenario en segundos, o None si no existia
        """
        handler_id = cls._handlers.pop(scenario_id, None)
        if handler_id is None:
            return None

        started_at = cls._started_at.pop(scenario_id)
        duration = (datetime.now() - started_at).total_seconds()

        scenario_logger = logger.bind(scenario_id=scenario_id)
        scenario_logger.info("=" * 60)
        scenario_logger.info(f"ESCENARIO FINALIZADO: {outcome.upper()} ({duration:.2f}s)")
        scenario_logger.info("=" * 60)

        logger.remove(handler_id)
        return duration

    @classmethod
    def get_log_file(cls, scenario_id: str) -> Optional[Path]:
        """Retorna la ruta del archivo de log del escenario."""
        return cls._files.get(scenario_id)
