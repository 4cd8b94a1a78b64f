"""
Planar value types shared by the projection and distance modules
"""

__all__ = ['Point', 'Rect', 'Size']

from typing import Tuple


class Point:
    """
    A location on a plane. Whether x/y are projected meters or pixels depends on where
    the point came from; the type does not track it.
    """

    __slots__ = ('_x', '_y')

    def __init__(self, x: float, y: float):
        self._x = float(x)
        self._y = float(y)

    def __eq__(self, other):
        if not isinstance(other, Point):
            return False

        return self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((self.x, self.y))

    def __iter__(self):
        yield self.x
        yield self.y

    def __repr__(self):
        return f'<Point({self.x}, {self.y})>'

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    def to_float(self) -> Tuple[float, float]:
        """Returns the point as an (x, y) tuple"""
        return self.x, self.y


class Size:
    """A planar extent"""

    __slots__ = ('_width', '_height')

    def __init__(self, width: float, height: float):
        self._width = float(width)
        self._height = float(height)

    def __eq__(self, other):
        if not isinstance(other, Size):
            return False

        return self.width == other.width and self.height == other.height

    def __hash__(self):
        return hash((self.width, self.height))

    def __repr__(self):
        return f'<Size({self.width}, {self.height})>'

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height


class Rect:
    """
    An axis-aligned rectangle, where the origin is the minimum (lowest x, lowest y) corner.

    Args:
        origin:
            The minimum corner of the rectangle

        size:
            The width and height of the rectangle
    """

    __slots__ = ('_origin', '_size')

    def __init__(self, origin: Point, size: Size):
        self._origin = origin
        self._size = size

    def __eq__(self, other):
        if not isinstance(other, Rect):
            return False

        return self.origin == other.origin and self.size == other.size

    def __hash__(self):
        return hash((self.origin, self.size))

    def __repr__(self):
        return (
            f'<Rect({self.origin.x}, {self.origin.y}, '
            f'{self.size.width}, {self.size.height})>'
        )

    @classmethod
    def from_center(cls, center: Point, size: Size) -> 'Rect':
        """Creates a Rect of the given size centered on a point"""
        return cls(
            Point(center.x - size.width / 2, center.y - size.height / 2),
            size
        )

    @property
    def origin(self) -> Point:
        return self._origin

    @property
    def size(self) -> Size:
        return self._size

    @property
    def min_x(self) -> float:
        return self.origin.x

    @property
    def min_y(self) -> float:
        return self.origin.y

    @property
    def max_x(self) -> float:
        return self.origin.x + self.size.width

    @property
    def max_y(self) -> float:
        return self.origin.y + self.size.height

    @property
    def center(self) -> Point:
        return Point(
            self.origin.x + self.size.width / 2,
            self.origin.y + self.size.height / 2
        )

    def contains(self, point: Point) -> bool:
        """
        Test whether a point lies within the rectangle. Points on the edge are
        considered contained.

        Args:
            point:
                A Point in the same coordinate space as the rectangle

        Returns:
            bool
        """
        return (
            self.min_x <= point.x <= self.max_x and
            self.min_y <= point.y <= self.max_y
        )
