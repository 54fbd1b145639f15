"""
Coordinate Factory - Coordinate Module

This module implements an immutable 2-D coordinate that is only ever built
through named factory methods, from Cartesian or from polar inputs.
"""

from .coordinate import Coordinate

__all__ = ['Coordinate']
