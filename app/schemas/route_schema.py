from decimal import Decimal
from pydantic import BaseModel
from typing import Any, Dict


class Coordinate(BaseModel):
  latitude: float
  longitude: float

  def to_lon_lat(self) -> str:
    """Routing backends take "lon,lat"; user input is "lat,lon"."""
    return f"{format_number(self.longitude)},{format_number(self.latitude)}"

class RouteResult(BaseModel):
  distance_meters: float
  duration_seconds: float
  geometry: Dict[str, Any]

class RouteResponse(RouteResult):
  start_coords: str
  end_coords: str


def format_number(value: float) -> str:
  # 40.0 -> "40", -73.5 -> "-73.5", 1e-05 -> "0.00001"; never exponent notation
  if value == 0:
    return "0"
  return format(Decimal(repr(value)).normalize(), "f")
