from .listing import DEFAULT_ORDER, SortDirection, TodoOrder, TodoOrderField
from .todo import Todo
from .value_objects import FINISHED_STATUSES, TodoId, TodoStatus, is_finished
from .weather_forecast import WeatherForecast

__all__ = [
    "TodoId",
    "TodoStatus",
    "FINISHED_STATUSES",
    "is_finished",
    "Todo",
    "TodoOrder",
    "TodoOrderField",
    "SortDirection",
    "DEFAULT_ORDER",
    "WeatherForecast",
]
