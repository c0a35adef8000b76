from __future__ import annotations

from typing import List

from documented_api.application.weather.forecast_service import generate_forecasts
from documented_api.domain.weather_forecast import WeatherForecast


async def list_weather_forecasts_usecase() -> List[WeatherForecast]:
    """
    Sample endpoint backing: five random forecasts, no storage involved.
    """
    return generate_forecasts(days=5)
