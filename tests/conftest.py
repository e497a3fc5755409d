"""
Configuracion de fixtures para pytest.
"""
import pytest

from saucedemo.core.events import startup, shutdown


def pytest_addoption(parser):
    """Opcion para habilitar los escenarios contra un navegador real."""
    parser.addoption(
        "--run-e2e",
        action="store_true",
        default=False,
        help="Ejecuta los escenarios e2e (requiere Chrome y acceso a la red)",
    )


def pytest_collection_modifyitems(config, items):
    """Omite los escenarios marcados como e2e si no se paso --run-e2e."""
    if config.getoption("--run-e2e"):
        return
    skip_e2e = pytest.mark.skip(reason="escenario e2e: usar --run-e2e para ejecutarlo")
    for item in items:
        if "e2e" in item.keywords:
            item.add_marker(skip_e2e)


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Guarda el reporte de cada fase en el item (rep_setup, rep_call, rep_teardown)."""
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)


@pytest.fixture(scope="session", autouse=True)
def test_run(request, tmp_path_factory):
    """
    Configura el logging al inicio de la corrida y libera el driver al final.

    Sin --run-e2e el log de la corrida va a un directorio temporal, no a LOG_FILE.
    """
    log_file = None
    if not request.config.getoption("--run-e2e"):
        log_file = str(tmp_path_factory.mktemp("logs") / "tests.log")
    startup(log_file)
    yield
    shutdown()
