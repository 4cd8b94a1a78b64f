"""
Representation of a specific point on earth
"""

__all__ = ['GeoCoordinate']

from typing import Tuple, Union

from mapprojection.utils.functions import clamp_latitude


class GeoCoordinate:
    """
    Representation of a coordinate on the globe (i.e., a lat/lon pair), in degrees.

    Values are stored as given. Latitudes outside of [-85, 85] are clamped by the projection
    functions rather than here, and longitudes are never wrapped around the antimeridian.
    """

    __slots__ = ('_latitude', '_longitude')

    def __init__(
        self,
        latitude: Union[float, int, str],
        longitude: Union[float, int, str],
    ):
        self._latitude = float(latitude)
        self._longitude = float(longitude)

    def __eq__(self, other):
        if not isinstance(other, GeoCoordinate):
            return False

        return (
            self.latitude == other.latitude and
            self.longitude == other.longitude
        )

    def __hash__(self):
        return hash((self.latitude, self.longitude))

    def __repr__(self):
        return f'<GeoCoordinate({self.latitude}, {self.longitude})>'

    @property
    def latitude(self) -> float:
        return self._latitude

    @property
    def longitude(self) -> float:
        return self._longitude

    def clamped(self) -> 'GeoCoordinate':
        """Returns a copy of this coordinate with latitude restricted to [-85, 85]"""
        latitude = clamp_latitude(self.latitude)
        if latitude == self.latitude:
            return self

        return GeoCoordinate(latitude, self.longitude)

    def to_float(self, reverse: bool = False) -> Tuple[float, float]:
        """
        Converts the coordinate to a tuple of floats (latitude, longitude).

        Args:
            reverse: (bool)
                (Default False) If True, reverses the coordinate order to (longitude, latitude)

        Returns:
            Tuple of (latitude, longitude)
        """
        if reverse:
            return self.longitude, self.latitude

        return self.latitude, self.longitude
