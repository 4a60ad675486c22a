"""
Decisión de ruta al final de una arista.

Al llegar al final de su arista, un vehículo primero puede salir de la
red con probabilidad fija; si no sale, elige la siguiente arista entre
las salidas del nodo de destino, con probabilidad proporcional al peso.
"""

import logging
from typing import Dict, Optional

import numpy as np

from .errors import EmptyOutcomesError
from .road_network import Node
from src.utils.config import SimulatorConfig

logger = logging.getLogger(__name__)


class RouteChooser:
    """
    Elige la siguiente arista de un vehículo.
    """

    def __init__(self, rng: np.random.Generator,
                 exit_probability: float = SimulatorConfig.EXIT_PROBABILITY):
        """
        Args:
            rng: Generador aleatorio del simulador
            exit_probability: Probabilidad de salir de la red en cada
                llegada a un nodo (0.0 a 1.0)
        """
        if not 0.0 <= exit_probability <= 1.0:
            raise ValueError(f"Probabilidad de salida fuera de rango: {exit_probability}")
        self.rng = rng
        self.exit_probability = exit_probability

    def should_exit(self) -> bool:
        """Sortea si el vehículo sale de la red."""
        return self.rng.random() < self.exit_probability

    def weighted_random_choice(self, outcomes: Dict[str, float]) -> str:
        """
        Elige una clave con probabilidad proporcional a su peso.

        Recorre las opciones en orden acumulando pesos y retorna la primera
        cuyo peso acumulado alcanza el valor sorteado en [0, total).

        Args:
            outcomes: Dict {edge_id: peso}

        Returns:
            str: ID de la arista elegida

        Raises:
            EmptyOutcomesError: Si no hay opciones o los pesos suman 0
        """
        total_weight = sum(outcomes.values())
        if not outcomes or total_weight <= 0:
            raise EmptyOutcomesError(f"Sin salidas con peso positivo: {outcomes}")

        rand_value = self.rng.random() * total_weight
        cumulative_weight = 0.0
        last_candidate = None

        for outcome, weight in outcomes.items():
            if weight <= 0:
                continue
            cumulative_weight += weight
            last_candidate = outcome
            if rand_value <= cumulative_weight:
                return outcome

        # Error de redondeo en la suma acumulada
        return last_candidate

    def choose_next_edge_id(self, node: Node) -> Optional[str]:
        """
        Decide la continuación de un vehículo que llega a un nodo.

        Args:
            node: Nodo al que llegó el vehículo

        Returns:
            ID de la siguiente arista, o None si el vehículo sale de la red
        """
        if self.should_exit():
            return None

        try:
            return self.weighted_random_choice(node.edge_outcomes)
        except EmptyOutcomesError:
            logger.warning("Nodo %s sin salidas válidas; el vehículo sale de la red", node.id)
            return None
