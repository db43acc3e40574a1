"""
api_mapper package

Konsolen-Werkzeug zur Pflege eines Inventars aus Datenpunkten und Applikationen
unter einem benannten System.

Schichtenarchitektur:
- domain.py: Records + Controller (Register, ID-Vergabe)
- persistence.py: JSON-Snapshot
- view.py: ASCII-Menüs
- controller.py: Menü-Orchestrierung
- config.py / logging_config.py: Settings und Logging
- main.py: Einstiegspunkt
"""

from .domain import Application, Controller, DataPoint, RecordNotFoundError

__all__ = ["Application", "Controller", "DataPoint", "RecordNotFoundError"]
