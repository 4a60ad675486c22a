"""
Red de ejemplo de tres nodos (París) usada por los scripts de demostración.

Algunas salidas de los nodos (edgeAC, edgeBA, edgeCB) no existen como
aristas: los vehículos que las eligen salen de la red.
"""

from .injection import RoadNetworkWithInjection, VehicleInjection, VehicleType
from .road_network import Edge, Highway, Node, RoadNetwork, Street


def build_sample_network() -> RoadNetwork:
    """Construye la red A → B → C → A."""
    node_a = Node("A", 48.8566, 2.3522, {"edgeAB": 0.8, "edgeAC": 0.2})
    node_b = Node("B", 48.8584, 2.2945, {"edgeBA": 0.5, "edgeBC": 0.5})
    node_c = Node("C", 48.8606, 2.3376, {"edgeCA": 0.3, "edgeCB": 0.7})

    road1 = Street("road1", 5.0)
    road2 = Highway("road2", 10.0, lanes=3)

    edges = [
        Edge("edgeAB", "A", "B", road1, 50.0),
        Edge("edgeBC", "B", "C", road2, 100.0),
        Edge("edgeCA", "C", "A", road1, 50.0),
    ]

    return RoadNetwork([node_a, node_b, node_c], edges)


def build_sample_network_with_injection() -> RoadNetworkWithInjection:
    """Red de ejemplo con inyección de autos en AB y camiones en BC."""
    network = build_sample_network()

    injections = [
        VehicleInjection("edgeAB", rate=2.0, speed=40.0, peak_hour=8,
                         vehicle_type=VehicleType.CAR),
        VehicleInjection("edgeBC", rate=1.0, speed=60.0, peak_hour=18,
                         vehicle_type=VehicleType.TRUCK),
    ]

    return RoadNetworkWithInjection(network, injections)
