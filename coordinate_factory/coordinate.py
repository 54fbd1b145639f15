"""
Implementation of the Coordinate class for Coordinate Factory.

This class represents an immutable point in 2-D space. Instances are created
with the static factory methods from_xy() and from_angles(); the raw
constructor is not part of the public API.
"""

import math

_FACTORY_TOKEN = object()


class Coordinate:
    """
    An immutable point in the plane.

    Attributes:
        x (float): Horizontal offset from the origin.
        y (float): Vertical offset from the origin.
    """

    __slots__ = ('_x', '_y')

    def __init__(self, x: float, y: float, _token: object = None):
        """
        Store the components. Use from_xy() or from_angles() instead.

        Args:
            x (float): Horizontal component
            y (float): Vertical component
            _token (object): Construction token held by the factory methods

        Raises:
            TypeError: If called directly rather than through a factory method
        """
        if _token is not _FACTORY_TOKEN:
            raise TypeError(
                f"{type(self).__name__} must be created with from_xy() or from_angles()"
            )
        object.__setattr__(self, '_x', float(x))
        object.__setattr__(self, '_y', float(y))

    @classmethod
    def from_xy(cls, x: float, y: float) -> 'Coordinate':
        """
        Create a coordinate from Cartesian components.

        Args:
            x (float): Horizontal component
            y (float): Vertical component

        Returns:
            Coordinate: A new coordinate holding x and y unchanged

        Note:
            Integer inputs are converted with float(), so an integer outside
            the double range raises OverflowError.
        """
        return cls(x, y, _FACTORY_TOKEN)

    @classmethod
    def from_angles(cls, angle: float, distance: float) -> 'Coordinate':
        """
        Create a coordinate from polar components.

        Args:
            angle (float): Angle from the positive x axis, in radians
            distance (float): Distance from the origin; a negative value
                              lands on the opposite ray

        Returns:
            Coordinate: A new coordinate at (distance*cos(angle), distance*sin(angle))

        Note:
            Non-finite input produces NaN components instead of raising.
        """
        if math.isinf(angle):
            # math.cos/math.sin reject infinity with ValueError
            angle = math.nan
        return cls(distance * math.cos(angle), distance * math.sin(angle), _FACTORY_TOKEN)

    @property
    def x(self) -> float:
        """Horizontal component."""
        return self._x

    @property
    def y(self) -> float:
        """Vertical component."""
        return self._y

    def __setattr__(self, name: str, value: object) -> None:
        """Reject attribute assignment."""
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        """Reject attribute deletion."""
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        """Rebuild through from_xy() when copied or pickled."""
        return (type(self).from_xy, (self._x, self._y))

    def __str__(self) -> str:
        """Return the coordinate as 'X: <x>Y: <y>'."""
        return f"X: {self._x}Y: {self._y}"

    def __repr__(self) -> str:
        """Return string representation of the coordinate."""
        return f"{type(self).__name__}.from_xy({self._x!r}, {self._y!r})"
