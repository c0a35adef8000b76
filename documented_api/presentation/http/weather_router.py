from __future__ import annotations

from datetime import datetime
from typing import List

from fastapi import APIRouter
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from documented_api.domain.weather_forecast import WeatherForecast
from documented_api.presentation.usecases.weather_forecast_list import (
    list_weather_forecasts_usecase,
)

from .openapi import problem_responses

router = APIRouter(
    prefix="/weatherforecast",
    tags=["v1"],
)


class WeatherForecastResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    date: datetime = Field(
        ...,
        description="The date of the forecast",
        examples=["2021-04-17T14:22:39Z"],
    )
    temperature_c: int = Field(
        ...,
        description="Forecasted temperature in Celsius",
        examples=[22],
    )
    temperature_f: int = Field(
        ...,
        description="Forecasted temperature in Fahrenheit",
        examples=[71],
    )
    summary: str = Field(
        ...,
        description="Friendly temperature description",
        examples=["Warm"],
    )

    @classmethod
    def from_domain(cls, forecast: WeatherForecast) -> "WeatherForecastResponse":
        return cls(
            date=forecast.date,
            temperature_c=forecast.temperature_c,
            temperature_f=forecast.temperature_f,
            summary=forecast.summary,
        )


@router.get(
    "",
    response_model=List[WeatherForecastResponse],
    summary="Get some random forecasts",
    description="Sample endpoint: five random forecasts for the next five days.",
    responses=problem_responses(500),
)
async def get_weather_forecast() -> List[WeatherForecastResponse]:
    forecasts = await list_weather_forecasts_usecase()
    return [WeatherForecastResponse.from_domain(f) for f in forecasts]
