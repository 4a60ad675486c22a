"""
Modelo de red vial como grafo dirigido.

Este módulo implementa la representación inmutable de la red: rutas
(autopistas y calles), nodos de decisión con sus probabilidades de salida,
y aristas dirigidas entre nodos. Las referencias entre objetos se resuelven
por ID a través de la red, que es dueña de todos los nodos y aristas.
"""

from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple

import matplotlib.pyplot as plt
import networkx as nx

from .errors import ConfigurationError


class RoadKind(Enum):
    """Tipos de ruta."""
    HIGHWAY = "highway"
    STREET = "street"


class Road:
    """
    Ruta genérica de la red vial.

    Clase base de Highway y Street. El algoritmo de simulación sólo usa
    la longitud; las variantes difieren en atributos propios.
    """

    kind: RoadKind

    def __init__(self, road_id: str, length: float):
        """
        Args:
            road_id: Identificador único de la ruta
            length: Longitud en kilómetros (positiva)
        """
        if length <= 0:
            raise ConfigurationError(f"Longitud de ruta inválida: {road_id} ({length} km)")
        self._id = road_id
        self._length = float(length)

    @property
    def id(self) -> str:
        return self._id

    @property
    def length(self) -> float:
        """Longitud de la ruta en kilómetros."""
        return self._length

    def __eq__(self, other) -> bool:
        return type(self) is type(other) and self.__dict__ == other.__dict__

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._id, self._length))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id='{self._id}', length={self._length}km)"


class Highway(Road):
    """Autopista con varios carriles."""

    kind = RoadKind.HIGHWAY

    def __init__(self, road_id: str, length: float, lanes: int):
        super().__init__(road_id, length)
        if lanes < 1:
            raise ConfigurationError(f"Número de carriles inválido: {road_id} ({lanes})")
        self._lanes = int(lanes)

    @property
    def lanes(self) -> int:
        return self._lanes

    def __repr__(self) -> str:
        return f"Highway(id='{self.id}', length={self.length}km, lanes={self._lanes})"


class Street(Road):
    """Calle simple."""

    kind = RoadKind.STREET


class Node:
    """
    Punto de decisión (intersección) de la red.

    Cada nodo define las aristas por las que un vehículo puede continuar
    al llegar, con un peso relativo. Los pesos no necesitan sumar 1.
    """

    def __init__(self, node_id: str, latitude: float, longitude: float,
                 edge_outcomes: Optional[Dict[str, float]] = None):
        """
        Args:
            node_id: Identificador único del nodo
            latitude: Latitud
            longitude: Longitud
            edge_outcomes: Dict {edge_id: peso} con pesos no negativos
        """
        outcomes = dict(edge_outcomes or {})
        for edge_id, weight in outcomes.items():
            if weight < 0:
                raise ConfigurationError(
                    f"Peso negativo en nodo {node_id}: {edge_id} -> {weight}"
                )

        self._id = node_id
        self._latitude = float(latitude)
        self._longitude = float(longitude)
        self._edge_outcomes = outcomes

    @property
    def id(self) -> str:
        return self._id

    @property
    def latitude(self) -> float:
        return self._latitude

    @property
    def longitude(self) -> float:
        return self._longitude

    @property
    def edge_outcomes(self) -> Dict[str, float]:
        """Copia del mapeo {edge_id: peso}, en orden de definición."""
        return dict(self._edge_outcomes)

    def __repr__(self) -> str:
        return (f"Node(id='{self._id}', coords=({self._latitude:.4f}, {self._longitude:.4f}), "
                f"outcomes={self._edge_outcomes})")


class Edge:
    """
    Arista dirigida entre dos nodos, asociada a una ruta.

    Los nodos se referencian por ID; la red los resuelve.
    """

    def __init__(self, edge_id: str, from_id: str, to_id: str, road: Road,
                 speed_limit: float):
        """
        Args:
            edge_id: Identificador único de la arista
            from_id: ID del nodo de origen
            to_id: ID del nodo de destino
            road: Ruta asociada a la arista
            speed_limit: Límite de velocidad en km/h (positivo)
        """
        if speed_limit <= 0:
            raise ConfigurationError(f"Límite de velocidad inválido: {edge_id} ({speed_limit} km/h)")
        self._id = edge_id
        self._from_id = from_id
        self._to_id = to_id
        self._road = road
        self._speed_limit = float(speed_limit)

    @property
    def id(self) -> str:
        return self._id

    @property
    def from_id(self) -> str:
        return self._from_id

    @property
    def to_id(self) -> str:
        return self._to_id

    @property
    def road(self) -> Road:
        return self._road

    @property
    def speed_limit(self) -> float:
        return self._speed_limit

    @property
    def length(self) -> float:
        """Longitud de la arista (la de su ruta) en kilómetros."""
        return self._road.length

    def __str__(self) -> str:
        return f"Edge({self._id}: {self._from_id} → {self._to_id}, {self.length}km)"

    def __repr__(self) -> str:
        return (f"Edge(id='{self._id}', from='{self._from_id}', to='{self._to_id}', "
                f"road={self._road!r}, speed_limit={self._speed_limit})")


class RoadNetwork:
    """
    Red vial completa como grafo dirigido G = (V, E).

    Es dueña de los nodos y aristas, indexados por ID. No se modifica
    durante la simulación.
    """

    def __init__(self, nodes: Iterable[Node], edges: Iterable[Edge]):
        """
        Args:
            nodes: Nodos de la red (IDs únicos)
            edges: Aristas de la red (IDs únicos, extremos existentes)

        Raises:
            ConfigurationError: Si hay IDs duplicados o una arista referencia
                un nodo inexistente
        """
        self._nodes: Dict[str, Node] = {}
        self._edges: Dict[str, Edge] = {}
        self.graph = nx.DiGraph()

        for node in nodes:
            if node.id in self._nodes:
                raise ConfigurationError(f"Nodo duplicado: {node.id}")
            self._nodes[node.id] = node
            self.graph.add_node(node.id, lat=node.latitude, lon=node.longitude)

        for edge in edges:
            if edge.id in self._edges:
                raise ConfigurationError(f"Arista duplicada: {edge.id}")
            for endpoint in (edge.from_id, edge.to_id):
                if endpoint not in self._nodes:
                    raise ConfigurationError(
                        f"Arista {edge.id} referencia nodo inexistente: {endpoint}"
                    )
            self._edges[edge.id] = edge

            # Puede haber varias aristas entre el mismo par de nodos; el grafo
            # guarda la última, sólo se usa para estadísticas y dibujo
            self.graph.add_edge(
                edge.from_id, edge.to_id,
                edge_id=edge.id,
                length=edge.length,
                speed_limit=edge.speed_limit,
                road_kind=edge.road.kind.value
            )

    @property
    def nodes(self) -> Tuple[Node, ...]:
        return tuple(self._nodes.values())

    @property
    def edges(self) -> Tuple[Edge, ...]:
        return tuple(self._edges.values())

    def get_node(self, node_id: str) -> Optional[Node]:
        """Retorna el nodo con el ID dado."""
        return self._nodes.get(node_id)

    def get_edge(self, edge_id: str) -> Optional[Edge]:
        """Retorna la arista con el ID dado, o None si no existe."""
        return self._edges.get(edge_id)

    def has_edge(self, edge_id: str) -> bool:
        return edge_id in self._edges

    def get_destination_node(self, edge: Edge) -> Node:
        """Retorna el nodo al que llega la arista."""
        return self._nodes[edge.to_id]

    def get_outgoing_edges(self, node_id: str) -> List[Edge]:
        """
        Retorna las aristas que salen de un nodo.

        Args:
            node_id: ID del nodo

        Returns:
            Lista de aristas cuyo origen es el nodo
        """
        return [edge for edge in self._edges.values() if edge.from_id == node_id]

    def get_network_stats(self) -> Dict:
        """
        Calcula estadísticas de la red.

        Returns:
            dict: Diccionario con estadísticas de la red
        """
        total_length = sum(edge.length for edge in self._edges.values())
        avg_edge_length = total_length / len(self._edges) if self._edges else 0

        return {
            'num_nodes': len(self._nodes),
            'num_edges': len(self._edges),
            'total_length_km': total_length,
            'avg_edge_length_km': avg_edge_length,
            'num_highways': sum(1 for e in self._edges.values() if e.road.kind == RoadKind.HIGHWAY),
            'is_connected': nx.is_weakly_connected(self.graph) if self._nodes else False
        }

    def visualize(self, show_labels: bool = True, figsize: Tuple[int, int] = (12, 8)):
        """
        Dibuja la red vial.

        Args:
            show_labels: Si True, muestra IDs de nodos y aristas
            figsize: Tamaño de la figura

        Returns:
            Figura de matplotlib
        """
        fig = plt.figure(figsize=figsize)

        # Posiciones basadas en coordenadas GPS
        pos = {node_id: (data['lon'], data['lat'])
               for node_id, data in self.graph.nodes(data=True)}

        edge_colors = ['#FF6B6B' if data['road_kind'] == RoadKind.HIGHWAY.value else 'gray'
                       for _, _, data in self.graph.edges(data=True)]

        nx.draw_networkx_nodes(self.graph, pos, node_color='#4ECDC4',
                               node_size=500, alpha=0.9)
        nx.draw_networkx_edges(self.graph, pos, edge_color=edge_colors,
                               width=2, alpha=0.6, arrows=True,
                               arrowsize=20, arrowstyle='->')

        if show_labels:
            nx.draw_networkx_labels(self.graph, pos, font_size=8)
            edge_labels = {(u, v): data['edge_id'] for u, v, data in self.graph.edges(data=True)}
            nx.draw_networkx_edge_labels(self.graph, pos, edge_labels=edge_labels, font_size=7)

        plt.title("Red vial", fontsize=14, fontweight='bold')
        plt.xlabel("Longitud")
        plt.ylabel("Latitud")
        plt.grid(True, alpha=0.3)
        plt.tight_layout()

        return fig

    def __str__(self) -> str:
        return f"RoadNetwork({len(self._nodes)} nodes, {len(self._edges)} edges)"

    def __repr__(self) -> str:
        stats = self.get_network_stats()
        return (f"RoadNetwork(nodes={stats['num_nodes']}, edges={stats['num_edges']}, "
                f"length={stats['total_length_km']:.2f}km)")
