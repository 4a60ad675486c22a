"""
Tests para la decisión de ruta.
"""

import pytest
import sys
from pathlib import Path

import numpy as np

# Agregar src al path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.simulator.errors import EmptyOutcomesError
from src.simulator.road_network import Node
from src.simulator.routing import RouteChooser


class FixedRng:
    """Generador con valores uniformes predefinidos."""

    def __init__(self, values):
        self.values = list(values)

    def random(self):
        return self.values.pop(0)


class TestWeightedRandomChoice:
    """Tests para la elección ponderada."""

    def test_cumulative_walk(self):
        """Se elige la primera opción cuyo peso acumulado alcanza el sorteo."""
        outcomes = {"a": 1.0, "b": 1.0, "c": 2.0}
        chooser = RouteChooser(FixedRng([0.0, 0.25, 0.3, 0.5, 0.99]))

        # total = 4: sorteos 0.0, 1.0, 1.2, 2.0, 3.96
        assert chooser.weighted_random_choice(outcomes) == "a"
        assert chooser.weighted_random_choice(outcomes) == "a"
        assert chooser.weighted_random_choice(outcomes) == "b"
        assert chooser.weighted_random_choice(outcomes) == "b"
        assert chooser.weighted_random_choice(outcomes) == "c"

    def test_singleton(self):
        """Con una sola opción siempre se elige esa."""
        chooser = RouteChooser(np.random.default_rng(1))
        assert all(chooser.weighted_random_choice({"edgeBC": 0.3}) == "edgeBC"
                   for _ in range(200))

    def test_zero_weight_never_chosen(self):
        """Opciones con peso cero nunca se eligen."""
        chooser = RouteChooser(FixedRng([0.0]))
        assert chooser.weighted_random_choice({"a": 0.0, "b": 1.0}) == "b"

    def test_distribution(self):
        """Las frecuencias siguen los pesos."""
        chooser = RouteChooser(np.random.default_rng(123))
        choices = [chooser.weighted_random_choice({"a": 3.0, "b": 1.0}) for _ in range(10000)]

        assert choices.count("a") / len(choices) == pytest.approx(0.75, abs=0.03)

    def test_empty_outcomes(self):
        """Sin opciones se lanza EmptyOutcomesError."""
        chooser = RouteChooser(np.random.default_rng(0))

        with pytest.raises(EmptyOutcomesError):
            chooser.weighted_random_choice({})

    def test_zero_total_weight(self):
        """Pesos que suman cero lanzan EmptyOutcomesError."""
        chooser = RouteChooser(np.random.default_rng(0))

        with pytest.raises(EmptyOutcomesError):
            chooser.weighted_random_choice({"a": 0.0, "b": 0.0})


class TestRouteChooser:
    """Tests para la decisión completa (salida + elección)."""

    def test_exit_probability_range(self):
        """Probabilidades fuera de [0, 1] se rechazan."""
        with pytest.raises(ValueError):
            RouteChooser(np.random.default_rng(0), exit_probability=1.5)

    def test_never_exit(self):
        """Con probabilidad de salida 0 siempre se continúa."""
        chooser = RouteChooser(np.random.default_rng(5), exit_probability=0.0)
        node = Node("B", 0, 0, {"edgeBA": 1.0})

        assert all(chooser.choose_next_edge_id(node) == "edgeBA" for _ in range(500))

    def test_always_exit(self):
        """Con probabilidad de salida 1 siempre se sale."""
        chooser = RouteChooser(np.random.default_rng(5), exit_probability=1.0)
        node = Node("B", 0, 0, {"edgeBA": 1.0})

        assert all(chooser.choose_next_edge_id(node) is None for _ in range(100))

    def test_exit_rate(self):
        """La tasa de salida se aproxima a la probabilidad configurada."""
        chooser = RouteChooser(np.random.default_rng(9))
        node = Node("B", 0, 0, {"edgeBA": 1.0})
        results = [chooser.choose_next_edge_id(node) for _ in range(10000)]

        assert results.count(None) / len(results) == pytest.approx(0.2, abs=0.02)

    def test_empty_node_forces_exit(self):
        """Un nodo sin salidas obliga al vehículo a salir."""
        chooser = RouteChooser(np.random.default_rng(0), exit_probability=0.0)

        assert chooser.choose_next_edge_id(Node("Z", 0, 0)) is None
        assert chooser.choose_next_edge_id(Node("Z", 0, 0, {"a": 0.0})) is None

    def test_exit_check_before_choice(self):
        """El sorteo de salida se hace antes que la elección ponderada."""
        # 0.1 < 0.2 → sale sin consumir un segundo sorteo
        rng = FixedRng([0.1, 0.5, 0.9])
        chooser = RouteChooser(rng)
        node = Node("B", 0, 0, {"x": 1.0, "y": 1.0})

        assert chooser.choose_next_edge_id(node) is None
        # 0.5 >= 0.2 → continúa; 0.9 * 2 = 1.8 → "y"
        assert chooser.choose_next_edge_id(node) == "y"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
