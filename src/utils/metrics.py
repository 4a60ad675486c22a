"""
Sistema de métricas y análisis de resultados.

Este módulo proporciona funciones para calcular métricas a partir de la
secuencia de estados de la red producida por una simulación.
"""

from typing import Dict, List, Sequence

import numpy as np
import pandas as pd


class MetricsCalculator:
    """
    Calculadora de métricas para simulaciones de tráfico.

    Proporciona métodos estáticos que reciben la lista de RoadNetworkState
    de una corrida.
    """

    @staticmethod
    def vehicle_counts(states: Sequence) -> np.ndarray:
        """
        Número de vehículos en la red en cada paso.

        Args:
            states: Estados de la red, en orden

        Returns:
            np.ndarray: Vector de enteros, uno por paso
        """
        return np.array([state.vehicle_count for state in states], dtype=int)

    @staticmethod
    def average_vehicle_count(states: Sequence) -> float:
        """Promedio de vehículos en la red por paso."""
        if not states:
            return 0.0

        return float(np.mean(MetricsCalculator.vehicle_counts(states)))

    @staticmethod
    def max_vehicle_count(states: Sequence) -> int:
        """Máximo de vehículos observado en un paso."""
        if not states:
            return 0

        return int(np.max(MetricsCalculator.vehicle_counts(states)))

    @staticmethod
    def average_speed(states: Sequence) -> float:
        """
        Calcula la velocidad promedio de los vehículos.

        Promedia sobre todos los pares (vehículo, paso) registrados.

        Args:
            states: Estados de la red

        Returns:
            float: Velocidad promedio en km/h
        """
        speeds = [v.speed for state in states for v in state.vehicle_states]
        if not speeds:
            return 0.0

        return float(np.mean(speeds))

    @staticmethod
    def edge_occupancy(states: Sequence) -> Dict[str, float]:
        """
        Calcula la ocupación promedio de cada arista.

        Args:
            states: Estados de la red

        Returns:
            dict: {edge_id: vehículos promedio por paso}
        """
        if not states:
            return {}

        totals: Dict[str, int] = {}
        for state in states:
            for vehicle in state.vehicle_states:
                totals[vehicle.edge_id] = totals.get(vehicle.edge_id, 0) + 1

        return {edge_id: total / len(states) for edge_id, total in totals.items()}

    @staticmethod
    def unique_vehicles(states: Sequence) -> int:
        """Número de vehículos distintos que estuvieron en la red."""
        return len({v.id for state in states for v in state.vehicle_states})

    @staticmethod
    def states_to_dataframe(states: Sequence) -> pd.DataFrame:
        """
        Convierte la secuencia de estados en una tabla.

        Args:
            states: Estados de la red

        Returns:
            pd.DataFrame: Una fila por vehículo y paso, con columnas
                timestamp, vehicle_id, edge_id, position_km, speed_kmh
        """
        columns = ['timestamp', 'vehicle_id', 'edge_id', 'position_km', 'speed_kmh']
        rows = [
            {
                'timestamp': state.timestamp,
                'vehicle_id': v.id,
                'edge_id': v.edge_id,
                'position_km': v.position,
                'speed_kmh': v.speed
            }
            for state in states
            for v in state.vehicle_states
        ]

        df = pd.DataFrame(rows, columns=columns)
        return df.sort_values(['timestamp', 'vehicle_id']).reset_index(drop=True)

    @staticmethod
    def create_summary(states: Sequence) -> Dict:
        """
        Retorna un diccionario con las métricas principales de una corrida.
        """
        return {
            'ticks': len(states),
            'avg_vehicle_count': MetricsCalculator.average_vehicle_count(states),
            'max_vehicle_count': MetricsCalculator.max_vehicle_count(states),
            'final_vehicle_count': states[-1].vehicle_count if states else 0,
            'unique_vehicles': MetricsCalculator.unique_vehicles(states),
            'avg_speed_kmh': MetricsCalculator.average_speed(states)
        }

    @staticmethod
    def create_summary_dataframe(results: Dict[str, List]) -> pd.DataFrame:
        """
        Crea un DataFrame con resumen comparativo de varias corridas.

        Args:
            results: Dict {nombre_corrida: lista de estados}

        Returns:
            pd.DataFrame: Una fila por corrida
        """
        data = []

        for run_name, states in results.items():
            summary = MetricsCalculator.create_summary(states)
            data.append({
                'Run': run_name,
                'Ticks': summary['ticks'],
                'Avg Vehicles': summary['avg_vehicle_count'],
                'Max Vehicles': summary['max_vehicle_count'],
                'Final Vehicles': summary['final_vehicle_count'],
                'Unique Vehicles': summary['unique_vehicles'],
                'Avg Speed (km/h)': summary['avg_speed_kmh']
            })

        return pd.DataFrame(data)
