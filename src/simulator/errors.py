"""
Excepciones y advertencias del simulador de tráfico.
"""


class TrafficSimulationError(Exception):
    """Error base del simulador."""


class ConfigurationError(TrafficSimulationError, ValueError):
    """
    Configuración inválida de red o de inyección.

    Se detecta al construir los objetos, antes de iniciar la simulación.
    """


class EmptyOutcomesError(TrafficSimulationError):
    """Un nodo no tiene salidas con peso positivo."""


class NonPositiveRateWarning(UserWarning):
    """Tasa de inyección negativa; se trata como cero llegadas."""
