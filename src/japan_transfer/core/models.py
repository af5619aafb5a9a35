"""Data models for Japanese transfer search."""

import time
from datetime import datetime
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

TagType = Literal["fast", "comfortable", "cheap", "car", "few_transfers"]
StationType = Literal["start", "end", "transfer"]
TransportType = Literal["train", "subway", "bus", "car", "taxi", "walk"]
WeatherCondition = Literal["sunny", "cloudy", "rainy", "snowy"]
ServiceType = Literal[
    "timetable", "map", "route_map", "floor_plan", "coupon", "gourmet", "exit_info"
]
SearchMode = Literal["departure", "arrival", "first", "last"]
SortOrder = Literal["rec", "time", "fast", "change", "cheap"]


class FrozenModel(BaseModel):
    """Base for value records that are read-only once extracted."""

    model_config = ConfigDict(frozen=True)


class RouteTag(FrozenModel):
    """Evaluation badge attached to a route (fast, comfortable, ...)."""

    type: TagType = Field(..., description="Tag category")
    label: str = Field(..., description="Display label as shown by the service")


class TimeInfo(FrozenModel):
    """Departure and arrival of a whole route.

    Empty strings mean the time could not be recovered from the page.
    """

    departure: str = Field("", description="Departure time (H:MM) or empty")
    arrival: str = Field("", description="Arrival time (H:MM) or empty")


class FareInfo(FrozenModel):
    """Total fare of a route."""

    total: int = Field(0, ge=0, description="Total fare in yen, 0 if unknown")
    additional_info: str | None = Field(
        None, description="Supplemental fare note following '＋'"
    )


class CO2Info(FrozenModel):
    """CO2 emission estimate of a route."""

    amount: str = Field(..., description="Emission amount with unit (e.g. '1.2kg')")
    reduction_rate: str | None = Field(
        None, description="Reduction percentage (e.g. '80%')"
    )
    comparison: str | None = Field(None, description="Comparison reference label")


class WeatherInfo(FrozenModel):
    """Weather forecast shown next to a station."""

    condition: WeatherCondition = Field(..., description="Weather condition")
    icon_url: str = Field(..., description="Weather icon URL")
    description: str = Field("", description="Weather description (icon alt text)")


class StationService(FrozenModel):
    """Link to a station related service (timetable, map, ...)."""

    type: ServiceType = Field(..., description="Service category")
    name: str = Field(..., description="Link text")
    url: str | None = Field(None, description="Link URL")


class StationInfo(FrozenModel):
    """A station stop in an itinerary."""

    name: str = Field(..., min_length=1, description="Station name")
    type: StationType = Field(..., description="Role of the station in the route")
    weather: WeatherInfo | None = Field(None, description="Weather information")
    platform: str | None = Field(None, description="Platform information")
    services: list[StationService] = Field(
        default_factory=list, description="Available station services"
    )

    def __str__(self) -> str:
        return self.name


class LegTimeInfo(FrozenModel):
    """Timing of a single transport leg."""

    departure: str = Field("", description="Departure time (H:MM) or empty")
    arrival: str = Field("", description="Arrival time (H:MM) or empty")
    duration: int = Field(0, ge=0, description="Leg duration in minutes")


class TransportInfo(FrozenModel):
    """A transport leg between two stations."""

    type: TransportType = Field(..., description="Transport category")
    line_name: str = Field(..., min_length=1, description="Line name as displayed")
    direction: str | None = Field(None, description="Bound-for direction")
    operator: str | None = Field(None, description="Operating company")
    time_info: LegTimeInfo = Field(
        default_factory=LegTimeInfo, description="Leg timing"
    )
    fare: int | None = Field(None, ge=0, description="Leg fare in yen")
    distance: str | None = Field(None, description="Leg distance (e.g. '6.8km')")

    def __str__(self) -> str:
        return self.line_name


class StationSegment(FrozenModel):
    """Itinerary segment holding a station."""

    type: Literal["station"] = "station"
    station: StationInfo


class TransportSegment(FrozenModel):
    """Itinerary segment holding a transport leg."""

    type: Literal["transport"] = "transport"
    transport: TransportInfo


RouteSegment = Annotated[
    StationSegment | TransportSegment, Field(discriminator="type")
]


class RouteNotice(FrozenModel):
    """Notice attached to a route (line changes and similar)."""

    type: Literal["route_change"] = Field("route_change", description="Notice type")
    title: str = Field(..., min_length=1, description="Notice title")
    description: str = Field("", description="Notice details, defaults to the title")

    @model_validator(mode="before")
    @classmethod
    def _default_description(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("description"):
            data = {**data, "description": data.get("title", "")}
        return data


class Route(FrozenModel):
    """Represents one itinerary option of a search result."""

    id: str = Field(..., description="Route identifier, unique within a result")
    route_number: int = Field(..., ge=1, description="1-based position in the page")
    tags: list[RouteTag] = Field(default_factory=list, description="Evaluation tags")
    time_info: TimeInfo = Field(default_factory=TimeInfo, description="Route times")
    fare_info: FareInfo = Field(default_factory=FareInfo, description="Route fare")
    total_time: int = Field(0, ge=0, description="Total duration in minutes")
    transfers: int = Field(0, ge=0, description="Number of transfers")
    total_distance: float | None = Field(None, ge=0, description="Distance in km")
    co2_info: CO2Info | None = Field(None, description="CO2 emission estimate")
    segments: list[RouteSegment] = Field(
        default_factory=list, description="Itinerary in travel order"
    )
    route_notices: list[RouteNotice] | None = Field(
        None, description="Route notices"
    )

    def __str__(self) -> str:
        return f"経路{self.route_number} ({self.total_time}分, {self.fare_info.total}円)"


class RouteSearchResult(FrozenModel):
    """All routes extracted from one results page."""

    routes: list[Route] = Field(default_factory=list, description="Routes in page order")
    search_time: str = Field(..., description="Extraction timestamp (ISO 8601)")


class SkippedRoute(FrozenModel):
    """A route block that could not be assembled."""

    route_number: int = Field(..., ge=1, description="1-based position in the page")
    block_id: str | None = Field(None, description="Markup id of the route block")
    reason: str = Field(..., description="Why the block was skipped")


class ExtractionOutcome(FrozenModel):
    """Extraction result together with per-route diagnostics."""

    result: RouteSearchResult
    skipped: list[SkippedRoute] = Field(
        default_factory=list, description="Route blocks dropped during assembly"
    )


class RouteDocument(FrozenModel):
    """Raw results page returned by the route search service."""

    final_url: str = Field(..., description="URL after redirects")
    body: str = Field(..., description="Markup text")


class RouteSearchQuery(BaseModel):
    """Request model for the route search service."""

    from_place: str = Field(..., description="Departure station or place name")
    to_place: str = Field(..., description="Arrival station or place name")
    search_datetime: datetime = Field(..., description="Search date and time")
    search_mode: SearchMode = Field(
        "departure", description="departure, arrival, first or last service"
    )
    sort: SortOrder = Field("time", description="Result sort order")

    def to_params(self) -> dict[str, str | int]:
        """Convert to route search query parameters."""
        cway = {"departure": 0, "arrival": 1, "first": 2, "last": 3}[self.search_mode]
        minute = self.search_datetime.minute

        return {
            "eki1": self.from_place,
            "eki2": self.to_place,
            "Dyy": self.search_datetime.year,
            "Dmm": self.search_datetime.month,
            "Ddd": self.search_datetime.day,
            "Dhh": self.search_datetime.hour,
            # The service takes minutes as separate tens and ones digits
            "Dmn1": minute // 10,
            "Dmn2": minute % 10,
            "Cway": cway,
            "via_on": -1,
            "Cfp": 1,
            "Czu": 2,
            "C7": 1,
            "C2": 0,
            "C3": 0,
            "C1": 0,
            "cartaxy": 1,
            "bikeshare": 1,
            "sort": self.sort,
            "C4": 5,
            "C5": 0,
            "C6": 2,
            "S": "検索",
            "Cmap1": "",
            "rf": "nr",
            "pg": 0,
            "eok1": "B-" if is_bus_stop_name(self.from_place) else "R-",
            "eok2": "B-" if is_bus_stop_name(self.to_place) else "R-",
            "Csg": 1,
        }


def is_bus_stop_name(name: str) -> bool:
    """Bus stops and ports are suggested with a bracketed operator suffix."""
    return "〔" in name or "［" in name


class SuggestQuery(BaseModel):
    """Request model for the place suggestion service."""

    query: str = Field(..., description="Partial place name")
    max_railway: int | None = Field(None, description="Max stations/airports")
    max_bus: int | None = Field(None, description="Max bus stops/ports")
    max_spots: int | None = Field(None, description="Max spots")
    kinds: str | None = Field(None, description="Facility kinds, e.g. 'R,B,S'")

    def to_params(self) -> dict[str, str | int]:
        """Convert to suggestion query parameters."""
        params: dict[str, str | int] = {"query": self.query, "format": "json"}
        if self.max_railway is not None:
            params["max_R"] = self.max_railway
        if self.max_bus is not None:
            params["max_B"] = self.max_bus
        if self.max_spots is not None:
            params["max_S"] = self.max_spots
        if self.kinds is not None:
            params["kinds"] = self.kinds
        params["_"] = int(time.time() * 1000)
        return params


class PlaceLocation(BaseModel):
    """Coordinates of a suggested place."""

    lon: str | float
    lat: str | float


class SuggestPlace(BaseModel):
    """A station, bus stop or spot returned by the suggestion service."""

    model_config = ConfigDict(populate_by_name=True)

    poi_name: str = Field(..., alias="poiName", description="Place name")
    node_kind: Literal["R", "B", "S"] = Field(..., alias="nodeKind")
    pref_name: str = Field("", alias="prefName", description="Prefecture name")
    city_name: str = Field("", alias="cityName", description="City name")
    poi_yomi: str = Field("", alias="poiYomi", description="Reading in kana")
    city_code: int | str | None = Field(None, alias="cityCode")
    location: PlaceLocation | None = None
    address: str | None = Field(None, description="Address (spots only)")

    def __str__(self) -> str:
        return self.poi_name


class SuggestResponse(BaseModel):
    """Response of the place suggestion service."""

    model_config = ConfigDict(populate_by_name=True)

    railway: list[SuggestPlace] = Field(default_factory=list, alias="R")
    bus: list[SuggestPlace] = Field(default_factory=list, alias="B")
    spots: list[SuggestPlace] = Field(default_factory=list, alias="S")
