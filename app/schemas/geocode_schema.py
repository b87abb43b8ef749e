from pydantic import BaseModel


class GeocodeResult(BaseModel):
  lat: float
  lon: float
  display_name: str
