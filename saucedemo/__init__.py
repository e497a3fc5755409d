"""
Suite de pruebas de UI para el flujo de login de SauceDemo.
Envuelve Selenium WebDriver detras de un Page Object Model.
"""

__version__ = "1.0.0"
