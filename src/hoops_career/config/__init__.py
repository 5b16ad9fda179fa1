from .simulation_settings import SimulationSettings

__all__ = ['SimulationSettings']
