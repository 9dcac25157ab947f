"""ProfilePoint - A single sampled location on a cable profile."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ProfilePoint:
    """A sample on a cable profile.

    Attributes:
        x: Horizontal distance from the start anchor in meters
        y: Cable height in meters
        speed_kmh: Rider speed at this sample in km/h (travel profiles only)
    """

    x: float
    y: float
    speed_kmh: Optional[float] = None

    def to_dict(self) -> dict:
        data = {"x": self.x, "y": self.y}
        if self.speed_kmh is not None:
            data["speed"] = self.speed_kmh
        return data

    def __repr__(self) -> str:
        if self.speed_kmh is None:
            return f"ProfilePoint(x={self.x:.2f}, y={self.y:.3f})"
        return f"ProfilePoint(x={self.x:.2f}, y={self.y:.3f}, speed={self.speed_kmh:.1f}km/h)"
