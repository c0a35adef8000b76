from __future__ import annotations

import random
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from documented_api.domain.weather_forecast import WeatherForecast

SUMMARIES = (
    "Freezing",
    "Bracing",
    "Chilly",
    "Cool",
    "Mild",
    "Warm",
    "Balmy",
    "Hot",
    "Sweltering",
    "Scorching",
)

MIN_TEMPERATURE_C = -20
MAX_TEMPERATURE_C = 55  # exclusive


def generate_forecasts(
    days: int = 5,
    rng: Optional[random.Random] = None,
    now: Optional[datetime] = None,
) -> List[WeatherForecast]:
    """
    Random forecasts for the next `days` days, starting tomorrow.
    """
    rng = rng or random.Random()
    now = now or datetime.now(timezone.utc)

    return [
        WeatherForecast(
            date=now + timedelta(days=index),
            temperature_c=rng.randrange(MIN_TEMPERATURE_C, MAX_TEMPERATURE_C),
            summary=rng.choice(SUMMARIES),
        )
        for index in range(1, days + 1)
    ]
