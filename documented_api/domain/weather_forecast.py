from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class WeatherForecast:
    date: datetime
    temperature_c: int
    summary: str

    @property
    def temperature_f(self) -> int:
        # truncates toward zero
        return 32 + int(self.temperature_c / 0.5556)
