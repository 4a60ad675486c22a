"""
Configuración de inyección de vehículos.

Este módulo define dónde y con qué tasa entran vehículos a la red, y el
muestreo de llegadas según una distribución de Poisson.
"""

import logging
import warnings
from enum import Enum
from typing import Iterable, List, Optional

import numpy as np

from .errors import ConfigurationError, NonPositiveRateWarning
from .road_network import RoadNetwork

logger = logging.getLogger(__name__)


class VehicleType(Enum):
    """Tipos de vehículo (informativo, sin física diferenciada)."""
    CAR = "car"
    TRUCK = "truck"


class VehicleInjection:
    """
    Regla de inyección de vehículos sobre una arista.

    peak_hour y vehicle_type se conservan como datos de configuración
    pero no modifican la simulación.
    """

    def __init__(self, edge_id: str, rate: float, speed: float,
                 peak_hour: int = 0, vehicle_type: VehicleType = VehicleType.CAR):
        """
        Args:
            edge_id: ID de la arista donde entran los vehículos
            rate: Llegadas promedio por paso (<= 0 significa sin llegadas)
            speed: Velocidad inicial en km/h
            peak_hour: Hora pico (informativo)
            vehicle_type: Tipo de vehículo (informativo)

        Raises:
            ConfigurationError: Si la velocidad es negativa
        """
        if speed < 0:
            raise ConfigurationError(f"Velocidad de inyección negativa en {edge_id}: {speed}")
        if rate < 0:
            warnings.warn(
                f"Tasa de inyección negativa en {edge_id} ({rate}); se usa 0",
                NonPositiveRateWarning,
                stacklevel=2
            )

        self.edge_id = edge_id
        self.rate = float(rate)
        self.speed = float(speed)
        self.peak_hour = int(peak_hour)
        self.vehicle_type = vehicle_type

    @property
    def effective_rate(self) -> float:
        """Tasa usada para el muestreo (nunca negativa)."""
        return max(self.rate, 0.0)

    def __repr__(self) -> str:
        return (f"VehicleInjection(edge='{self.edge_id}', rate={self.rate}, "
                f"speed={self.speed}, peak_hour={self.peak_hour}, "
                f"type={self.vehicle_type.value})")


class RoadNetworkWithInjection:
    """
    Red vial junto con su lista ordenada de reglas de inyección.
    """

    def __init__(self, road_network: RoadNetwork,
                 injections: Optional[Iterable[VehicleInjection]] = None):
        """
        Args:
            road_network: Red vial
            injections: Reglas de inyección (puede haber varias por arista)

        Raises:
            ConfigurationError: Si una inyección referencia una arista que
                no existe en la red
        """
        self.road_network = road_network
        self.injections: List[VehicleInjection] = list(injections or [])

        for injection in self.injections:
            if not road_network.has_edge(injection.edge_id):
                raise ConfigurationError(
                    f"Inyección sobre arista inexistente: {injection.edge_id}"
                )

        logger.debug("Configuración de inyección: %d reglas sobre %d aristas",
                     len(self.injections), len({i.edge_id for i in self.injections}))

    def __repr__(self) -> str:
        return f"RoadNetworkWithInjection({self.road_network}, injections={len(self.injections)})"


class InjectionSampler:
    """
    Muestrea el número de llegadas por paso con una distribución de Poisson.

    Usa el generador aleatorio que se le pasa, nunca el estado global
    de numpy.
    """

    def __init__(self, rng: np.random.Generator):
        self.rng = rng

    def sample_count(self, rate: float) -> int:
        """
        Args:
            rate: Llegadas promedio por paso

        Returns:
            int: Número de vehículos a inyectar (>= 0)
        """
        return int(self.rng.poisson(max(rate, 0.0)))
