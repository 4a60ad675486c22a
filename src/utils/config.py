"""
Configuración global del simulador de tráfico.

Este módulo contiene las constantes y parámetros de configuración
utilizados en el proyecto, y la configuración de logging.
"""

import logging
from pathlib import Path
from typing import Optional, Union

# Rutas del proyecto
PROJECT_ROOT = Path(__file__).parent.parent.parent
RESULTS_DIR = PROJECT_ROOT / "experiments" / "results"


# Parámetros del simulador
class SimulatorConfig:
    """Configuración del simulador de tráfico."""

    # Tiempo: cada paso avanza un minuto de recorrido (velocidades en km/h).
    # Es una convención de unidades fija, no un parámetro.
    MINUTES_PER_HOUR = 60
    TICK_FRACTION = 1.0 / MINUTES_PER_HOUR
    DEFAULT_TICK_COUNT = 10

    # Ruteo
    EXIT_PROBABILITY = 0.2  # Probabilidad de salir de la red al final de una arista

    # Aleatoriedad
    DEFAULT_SEED = None  # None = semilla de entropía del sistema

    # IDs
    VEHICLE_ID_PREFIX = "Vehicle"


# Visualización
class VisualizationConfig:
    """Configuración de visualización."""

    FIGURE_SIZE = (10, 6)
    DPI = 100
    SAVE_FORMAT = "png"

    CHART_TITLE = "Number of Vehicles Over Time"
    X_LABEL = "Time Step"
    Y_LABEL = "Number of Vehicles"
    SERIES_NAME = "Vehicles in Network"
    SERIES_COLOR = "#1f77b4"


# Logging
class LoggingConfig:
    """Configuración de logging."""

    LOG_LEVEL = "INFO"
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    LOG_FILE = PROJECT_ROOT / "simulation.log"


def setup_logging(level: Optional[Union[str, int]] = None, to_file: bool = False,
                  log_file: Optional[Union[str, Path]] = None):
    """
    Configura el logger raíz con los valores de LoggingConfig.

    Args:
        level: Nivel de logging (default: LoggingConfig.LOG_LEVEL)
        to_file: Si True, también escribe en LoggingConfig.LOG_FILE
        log_file: Archivo de salida explícito (implica to_file)
    """
    handlers = [logging.StreamHandler()]
    if to_file or log_file:
        path = log_file or LoggingConfig.LOG_FILE
        handlers.append(logging.FileHandler(str(path), encoding='utf-8'))

    logging.basicConfig(
        level=level or LoggingConfig.LOG_LEVEL,
        format=LoggingConfig.LOG_FORMAT,
        handlers=handlers,
        force=True
    )


# Crear directorios si no existen
def ensure_directories():
    """Crea los directorios necesarios si no existen."""
    RESULTS_DIR.mkdir(parents=True, exist_ok=True)


if __name__ == "__main__":
    print(f"Directorio del proyecto: {PROJECT_ROOT}")
    print(f"Directorio de resultados: {RESULTS_DIR}")
    ensure_directories()
    print("Directorios verificados/creados correctamente")
