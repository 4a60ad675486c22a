"""
Presentación de resultados: volcado por consola y gráfico de vehículos.

Ambas funciones sólo leen la secuencia de estados producida por el
simulador.
"""

from typing import Sequence

import matplotlib.pyplot as plt

from .config import VisualizationConfig
from .metrics import MetricsCalculator


def print_simulation_results(states: Sequence):
    """
    Imprime, para cada paso, la cantidad de vehículos y el detalle de cada uno.

    Args:
        states: Estados de la red, en orden
    """
    print(f"Simulation results for {len(states)} time steps:")

    for state in states:
        print(f"Time Step {state.timestamp}:")
        print(f"  Vehicles in Network: {state.vehicle_count}")

        for vehicle in sorted(state.vehicle_states, key=lambda v: v.id):
            print(f"- Vehicle ID: {vehicle.id}, Position: {vehicle.position}, "
                  f"Speed: {vehicle.speed}")


def plot_vehicle_counts(states: Sequence, ax=None):
    """
    Grafica la cantidad de vehículos en la red por paso.

    Args:
        states: Estados de la red
        ax: Ejes de matplotlib donde dibujar (default: figura nueva)

    Returns:
        Figura de matplotlib
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=VisualizationConfig.FIGURE_SIZE,
                               dpi=VisualizationConfig.DPI)
    else:
        fig = ax.figure

    timestamps = [state.timestamp for state in states]
    counts = MetricsCalculator.vehicle_counts(states)

    ax.plot(timestamps, counts, marker='o',
            color=VisualizationConfig.SERIES_COLOR,
            label=VisualizationConfig.SERIES_NAME)

    ax.set_title(VisualizationConfig.CHART_TITLE, fontsize=14, fontweight='bold')
    ax.set_xlabel(VisualizationConfig.X_LABEL)
    ax.set_ylabel(VisualizationConfig.Y_LABEL)
    ax.grid(True, alpha=0.3)
    ax.legend()
    fig.tight_layout()

    return fig
