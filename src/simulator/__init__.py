"""
Simulador estocástico de tráfico vehicular.

Este módulo contiene el motor de simulación que modela:
- Red vial como grafo dirigido
- Inyección de vehículos según procesos de Poisson
- Movimiento de vehículos sobre las aristas
- Ruteo aleatorio ponderado al final de cada arista
"""

from .errors import (
    TrafficSimulationError, ConfigurationError, EmptyOutcomesError,
    NonPositiveRateWarning
)
from .road_network import RoadNetwork, Road, RoadKind, Highway, Street, Node, Edge
from .injection import (
    VehicleInjection, VehicleType, RoadNetworkWithInjection, InjectionSampler
)
from .vehicle import VehicleState, RoadNetworkState, VehicleIdGenerator
from .routing import RouteChooser
from .traffic_simulator import RoadTrafficSimulator, simulate

__all__ = [
    'TrafficSimulationError',
    'ConfigurationError',
    'EmptyOutcomesError',
    'NonPositiveRateWarning',
    'RoadNetwork',
    'Road',
    'RoadKind',
    'Highway',
    'Street',
    'Node',
    'Edge',
    'VehicleInjection',
    'VehicleType',
    'RoadNetworkWithInjection',
    'InjectionSampler',
    'VehicleState',
    'RoadNetworkState',
    'VehicleIdGenerator',
    'RouteChooser',
    'RoadTrafficSimulator',
    'simulate'
]
