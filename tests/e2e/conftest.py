"""
Fixtures de los escenarios e2e.

Cada escenario crea su propia sesion de navegador, abre la pagina de login
y la libera al terminar, pase lo que pase en el escenario.
"""
import pytest
from loguru import logger

from saucedemo.infrastructure.driver import DriverManager, LoginPage
from saucedemo.shared.utils.scenario_logger import ScenarioLogger


def _outcome(item) -> str:
    """Resultado del escenario a partir de los reportes guardados por el hook."""
    for when in ("setup", "call"):
        report = getattr(item, f"rep_{when}", None)
        if report is not None and not report.passed:
            return report.outcome
    return "passed"


@pytest.fixture
def scenario_log(request):
    """Registra todo lo logueado durante el escenario en su propio archivo."""
    scenario_id = ScenarioLogger.start(request.node.name)
    with logger.contextualize(scenario_id=scenario_id):
        yield scenario_id
        ScenarioLogger.finish(scenario_id, _outcome(request.node))


@pytest.fixture
def login_page(scenario_log) -> LoginPage:
    """Abre la pagina de login en una sesion nueva y la cierra al terminar."""
    logger.info("========== Setup del escenario ==========")
    with DriverManager.session() as session:
        session.login_page.open()
        yield session.login_page
        logger.info("========== Cleanup del escenario ==========")
