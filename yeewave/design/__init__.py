from yeewave.design.structures import Obstacle
from yeewave.design.sources import PointSource

__all__ = ['Obstacle', 'PointSource']
