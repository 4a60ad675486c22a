"""
Motor principal de simulación de tráfico vehicular.

Este módulo implementa el simulador por pasos discretos: en cada paso
se inyectan vehículos según procesos de Poisson, se avanzan los vehículos
sobre sus aristas y se resuelve, al final de cada arista, si el vehículo
sale de la red o continúa por otra arista.
"""

import logging
from typing import List, Optional

import numpy as np

from .injection import InjectionSampler, RoadNetworkWithInjection
from .road_network import RoadNetwork
from .routing import RouteChooser
from .vehicle import RoadNetworkState, VehicleIdGenerator, VehicleState
from src.utils.config import SimulatorConfig

logger = logging.getLogger(__name__)


class RoadTrafficSimulator:
    """
    Simulador de tráfico por pasos discretos.

    Cada instancia es dueña de su generador aleatorio y de su contador
    de IDs, de modo que dos simuladores con la misma semilla y las mismas
    entradas producen la misma secuencia de estados.
    """

    def __init__(self, seed: Optional[int] = SimulatorConfig.DEFAULT_SEED,
                 rng: Optional[np.random.Generator] = None,
                 exit_probability: float = SimulatorConfig.EXIT_PROBABILITY):
        """
        Inicializa el simulador.

        Args:
            seed: Semilla del generador aleatorio (ignorada si se pasa rng)
            rng: Generador de numpy a usar en lugar de crear uno nuevo
            exit_probability: Probabilidad de salir de la red al final
                de cada arista
        """
        self.rng = rng if rng is not None else np.random.default_rng(seed)

        self.injection_sampler = InjectionSampler(self.rng)
        self.route_chooser = RouteChooser(self.rng, exit_probability)
        self.id_generator = VehicleIdGenerator(SimulatorConfig.VEHICLE_ID_PREFIX)

        # Estadísticas de la última corrida
        self.total_vehicles_injected = 0
        self.total_vehicles_exited = 0

    def simulate(self, network_with_injection: RoadNetworkWithInjection,
                 tick_count: int) -> List[RoadNetworkState]:
        """
        Ejecuta la simulación durante un número de pasos.

        Args:
            network_with_injection: Red vial con su configuración de inyección
            tick_count: Número de pasos a simular

        Returns:
            Lista de tick_count estados, con timestamps 0..tick_count-1

        Raises:
            ValueError: Si tick_count es negativo
        """
        if tick_count < 0:
            raise ValueError(f"Número de pasos negativo: {tick_count}")

        self.reset()

        logger.info("Iniciando simulación: %d pasos, %d reglas de inyección",
                    tick_count, len(network_with_injection.injections))

        vehicles: List[VehicleState] = []
        history: List[RoadNetworkState] = []

        for tick in range(tick_count):
            vehicles = self.run_tick(vehicles, network_with_injection)
            history.append(RoadNetworkState(vehicles, tick))
            logger.debug("Paso %d: %d vehículos en la red", tick, len(vehicles))

        logger.info("Simulación completada: %d vehículos inyectados, %d salieron, %d en la red",
                    self.total_vehicles_injected, self.total_vehicles_exited, len(vehicles))

        return history

    def run_tick(self, vehicles: List[VehicleState],
                 network_with_injection: RoadNetworkWithInjection) -> List[VehicleState]:
        """
        Ejecuta un paso de simulación.

        La inyección ocurre antes del movimiento: los vehículos recién
        inyectados entran en la posición 0.0 y avanzan en este mismo paso.

        Args:
            vehicles: Vehículos en la red al final del paso anterior
            network_with_injection: Red vial con su configuración de inyección

        Returns:
            Vehículos en la red al final de este paso
        """
        # 1. Generar nuevos vehículos
        injected = self.inject(network_with_injection)

        # 2. Mover todos los vehículos, incluidos los nuevos
        return self.step(vehicles + injected, network_with_injection.road_network)

    def inject(self, network_with_injection: RoadNetworkWithInjection) -> List[VehicleState]:
        """
        Genera los vehículos que entran a la red en este paso.

        Args:
            network_with_injection: Red vial con su configuración de inyección

        Returns:
            Lista de nuevos vehículos, en el orden de las reglas de inyección
        """
        injected = []

        for injection in network_with_injection.injections:
            count = self.injection_sampler.sample_count(injection.effective_rate)
            for _ in range(count):
                injected.append(VehicleState(
                    vehicle_id=self.id_generator.next_id(),
                    edge_id=injection.edge_id,
                    position=0.0,
                    speed=injection.speed
                ))

        self.total_vehicles_injected += len(injected)
        return injected

    def step(self, vehicles: List[VehicleState], network: RoadNetwork) -> List[VehicleState]:
        """
        Avanza todos los vehículos un paso.

        Args:
            vehicles: Vehículos a mover
            network: Red vial

        Returns:
            Vehículos que siguen en la red, en el mismo orden
        """
        next_vehicles = []

        for vehicle in vehicles:
            moved = self.advance_vehicle(vehicle, network)
            if moved is None:
                self.total_vehicles_exited += 1
            else:
                next_vehicles.append(moved)

        return next_vehicles

    def advance_vehicle(self, vehicle: VehicleState,
                        network: RoadNetwork) -> Optional[VehicleState]:
        """
        Calcula el estado de un vehículo en el paso siguiente.

        Si el vehículo alcanza o supera el final de su arista, sale de la
        red o pasa a la siguiente arista en la posición 0.0, con la
        velocidad limitada por el máximo de la nueva arista.

        Args:
            vehicle: Estado actual del vehículo
            network: Red vial

        Returns:
            Nuevo estado, o None si el vehículo salió de la red
        """
        if not vehicle.is_on_network():
            return None

        edge = network.get_edge(vehicle.edge_id)
        if edge is None:
            logger.warning("Vehículo %s sobre arista inexistente %s; se elimina",
                           vehicle.id, vehicle.edge_id)
            return None

        new_position = vehicle.position + vehicle.speed * SimulatorConfig.TICK_FRACTION

        if new_position < edge.length:
            return vehicle.replace(position=new_position)

        # Llegó al final de la arista
        next_edge_id = self.route_chooser.choose_next_edge_id(network.get_destination_node(edge))
        if next_edge_id is None:
            logger.debug("Vehículo %s sale de la red en nodo %s", vehicle.id, edge.to_id)
            return None

        next_edge = network.get_edge(next_edge_id)
        if next_edge is None:
            logger.warning("Vehículo %s: arista elegida %s no existe en la red; se elimina",
                           vehicle.id, next_edge_id)
            return None

        return vehicle.replace(
            edge_id=next_edge.id,
            position=0.0,
            speed=min(vehicle.speed, next_edge.speed_limit)
        )

    def reset(self):
        """Reinicia contadores e IDs (el generador aleatorio no se reinicia)."""
        self.id_generator.reset()
        self.total_vehicles_injected = 0
        self.total_vehicles_exited = 0


def simulate(network_with_injection: RoadNetworkWithInjection, tick_count: int,
             seed: Optional[int] = SimulatorConfig.DEFAULT_SEED) -> List[RoadNetworkState]:
    """
    Ejecuta una simulación con un simulador nuevo.

    Args:
        network_with_injection: Red vial con su configuración de inyección
        tick_count: Número de pasos
        seed: Semilla del generador aleatorio

    Returns:
        Lista de estados de la red, uno por paso
    """
    return RoadTrafficSimulator(seed=seed).simulate(network_with_injection, tick_count)
