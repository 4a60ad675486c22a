"""
Estados de vehículos y snapshots de la red.

Un VehicleState es un valor inmutable: la simulación crea uno nuevo en
cada paso en lugar de modificar el anterior. Un RoadNetworkState agrupa
todos los vehículos presentes en la red al final de un paso.
"""

import itertools
from typing import FrozenSet, Iterable, List, Optional


class VehicleState:
    """
    Estado de un vehículo en un instante dado.

    edge_id es None cuando el vehículo salió de la red; esos estados
    nunca se guardan en un snapshot.
    """

    __slots__ = ('_id', '_edge_id', '_position', '_speed')

    def __init__(self, vehicle_id: str, edge_id: Optional[str], position: float,
                 speed: float):
        """
        Args:
            vehicle_id: Identificador único del vehículo
            edge_id: ID de la arista actual, o None si salió de la red
            position: Kilómetros desde el inicio de la arista
            speed: Velocidad en km/h
        """
        self._id = vehicle_id
        self._edge_id = edge_id
        self._position = float(position)
        self._speed = float(speed)

    @property
    def id(self) -> str:
        return self._id

    @property
    def edge_id(self) -> Optional[str]:
        return self._edge_id

    @property
    def position(self) -> float:
        return self._position

    @property
    def speed(self) -> float:
        return self._speed

    def is_on_network(self) -> bool:
        return self._edge_id is not None

    def replace(self, **changes) -> 'VehicleState':
        """
        Retorna una copia con los campos indicados modificados.

        Args:
            **changes: Cualquiera de edge_id, position, speed

        Returns:
            VehicleState: Nuevo estado (el original no cambia)
        """
        return VehicleState(
            vehicle_id=self._id,
            edge_id=changes.get('edge_id', self._edge_id),
            position=changes.get('position', self._position),
            speed=changes.get('speed', self._speed)
        )

    def _key(self):
        return (self._id, self._edge_id, self._position, self._speed)

    def __eq__(self, other) -> bool:
        if not isinstance(other, VehicleState):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        return f"Vehicle ID: {self._id}, Position: {self._position}, Speed: {self._speed}"

    def __repr__(self) -> str:
        return (f"VehicleState(id='{self._id}', edge='{self._edge_id}', "
                f"position={self._position:.3f}km, speed={self._speed:.1f}km/h)")


class RoadNetworkState:
    """
    Snapshot inmutable de la red al final de un paso de simulación.
    """

    def __init__(self, vehicle_states: Iterable[VehicleState], timestamp: int):
        """
        Args:
            vehicle_states: Vehículos presentes en la red
            timestamp: Índice del paso (desde 0)

        Raises:
            ValueError: Si hay IDs repetidos o vehículos fuera de la red
        """
        states = frozenset(vehicle_states)
        ids = set()
        for state in states:
            if not state.is_on_network():
                raise ValueError(f"Vehículo fuera de la red en snapshot: {state.id}")
            if state.id in ids:
                raise ValueError(f"ID de vehículo repetido en snapshot: {state.id}")
            ids.add(state.id)

        self._vehicle_states: FrozenSet[VehicleState] = states
        self._timestamp = int(timestamp)

    @property
    def vehicle_states(self) -> FrozenSet[VehicleState]:
        return self._vehicle_states

    @property
    def timestamp(self) -> int:
        return self._timestamp

    @property
    def vehicle_count(self) -> int:
        return len(self._vehicle_states)

    def get_vehicle(self, vehicle_id: str) -> Optional[VehicleState]:
        """Retorna el estado del vehículo con el ID dado, si está en la red."""
        for state in self._vehicle_states:
            if state.id == vehicle_id:
                return state
        return None

    def vehicles_on_edge(self, edge_id: str) -> List[VehicleState]:
        """Retorna los vehículos sobre una arista, ordenados por posición."""
        return sorted((s for s in self._vehicle_states if s.edge_id == edge_id),
                      key=lambda s: s.position)

    def __eq__(self, other) -> bool:
        if not isinstance(other, RoadNetworkState):
            return NotImplemented
        return (self._timestamp == other._timestamp and
                self._vehicle_states == other._vehicle_states)

    def __hash__(self) -> int:
        return hash((self._timestamp, self._vehicle_states))

    def __repr__(self) -> str:
        return f"RoadNetworkState(t={self._timestamp}, vehicles={len(self._vehicle_states)})"


class VehicleIdGenerator:
    """
    Generador de IDs únicos de vehículos ("Vehicle_1", "Vehicle_2", ...).

    Cada simulación usa su propio generador.
    """

    def __init__(self, prefix: str = "Vehicle"):
        self.prefix = prefix
        self.reset()

    def next_id(self) -> str:
        return f"{self.prefix}_{next(self._counter)}"

    def reset(self):
        """Reinicia la numeración desde 1."""
        self._counter = itertools.count(1)
