"""
Tests para métricas y presentación de resultados.
"""

import pytest
import sys
from pathlib import Path

# Agregar src al path
sys.path.insert(0, str(Path(__file__).parent.parent))

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from src.simulator import RoadNetworkState, RoadTrafficSimulator, VehicleState
from src.simulator.sample_network import build_sample_network_with_injection
from src.utils.metrics import MetricsCalculator
from src.utils.reporting import plot_vehicle_counts, print_simulation_results


def build_states():
    """Tres pasos con 1, 2 y 0 vehículos."""
    return [
        RoadNetworkState([VehicleState("Vehicle_1", "edgeAB", 0.0, 30.0)], 0),
        RoadNetworkState([
            VehicleState("Vehicle_1", "edgeAB", 0.5, 30.0),
            VehicleState("Vehicle_2", "edgeBC", 0.0, 60.0),
        ], 1),
        RoadNetworkState([], 2),
    ]


class TestMetricsCalculator:
    """Tests para la clase MetricsCalculator."""

    def test_vehicle_counts(self):
        """Test de conteo por paso."""
        counts = MetricsCalculator.vehicle_counts(build_states())
        assert list(counts) == [1, 2, 0]

    def test_count_statistics(self):
        """Test de promedio y máximo."""
        states = build_states()

        assert MetricsCalculator.average_vehicle_count(states) == pytest.approx(1.0)
        assert MetricsCalculator.max_vehicle_count(states) == 2

    def test_empty_run(self):
        """Métricas de una corrida vacía."""
        assert MetricsCalculator.average_vehicle_count([]) == 0.0
        assert MetricsCalculator.max_vehicle_count([]) == 0
        assert MetricsCalculator.average_speed([]) == 0.0
        assert MetricsCalculator.edge_occupancy([]) == {}

    def test_average_speed(self):
        """Velocidad promedio sobre pares (vehículo, paso)."""
        assert MetricsCalculator.average_speed(build_states()) == pytest.approx(40.0)

    def test_edge_occupancy(self):
        """Ocupación promedio por arista."""
        occupancy = MetricsCalculator.edge_occupancy(build_states())

        assert occupancy["edgeAB"] == pytest.approx(2 / 3)
        assert occupancy["edgeBC"] == pytest.approx(1 / 3)

    def test_unique_vehicles(self):
        """Vehículos distintos en la corrida."""
        assert MetricsCalculator.unique_vehicles(build_states()) == 2

    def test_dataframe(self):
        """Una fila por vehículo y paso."""
        df = MetricsCalculator.states_to_dataframe(build_states())

        assert list(df.columns) == ['timestamp', 'vehicle_id', 'edge_id', 'position_km', 'speed_kmh']
        assert len(df) == 3
        assert list(df['vehicle_id']) == ["Vehicle_1", "Vehicle_1", "Vehicle_2"]

    def test_summary(self):
        """Resumen de una corrida."""
        summary = MetricsCalculator.create_summary(build_states())

        assert summary['ticks'] == 3
        assert summary['final_vehicle_count'] == 0
        assert summary['max_vehicle_count'] == 2

    def test_summary_dataframe(self):
        """Resumen comparativo de varias corridas."""
        config = build_sample_network_with_injection()
        results = {
            f"seed={seed}": RoadTrafficSimulator(seed=seed).simulate(config, 20)
            for seed in (1, 2)
        }

        df = MetricsCalculator.create_summary_dataframe(results)

        assert list(df['Run']) == ["seed=1", "seed=2"]
        assert (df['Ticks'] == 20).all()


class TestReporting:
    """Tests para los adaptadores de presentación."""

    def test_console_output(self, capsys):
        """El volcado por consola muestra cada paso y vehículo."""
        print_simulation_results(build_states())
        output = capsys.readouterr().out

        assert "Simulation results for 3 time steps:" in output
        assert "Time Step 1:" in output
        assert "Vehicles in Network: 2" in output
        assert "- Vehicle ID: Vehicle_2, Position: 0.0, Speed: 60.0" in output

    def test_plot_vehicle_counts(self):
        """El gráfico tiene una serie con un punto por paso."""
        fig = plot_vehicle_counts(build_states())
        ax = fig.axes[0]

        assert ax.get_title() == "Number of Vehicles Over Time"
        assert list(ax.lines[0].get_ydata()) == [1, 2, 0]
        plt.close(fig)

    def test_plot_on_existing_axes(self):
        """Se puede dibujar sobre ejes existentes."""
        fig, ax = plt.subplots()
        result = plot_vehicle_counts(build_states(), ax=ax)

        assert result is fig
        plt.close(fig)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
