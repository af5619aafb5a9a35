"""Formatting of place suggestions."""

from itertools import zip_longest

from .models import SuggestPlace, SuggestResponse


def interleave_places(response: SuggestResponse) -> list[SuggestPlace]:
    """Order suggestions as station, bus stop, spot, station, bus stop, ..."""
    places: list[SuggestPlace] = []
    for group in zip_longest(response.railway, response.bus, response.spots):
        places.extend(place for place in group if place is not None)
    return places


def format_place(place: SuggestPlace, only_name: bool = False) -> str:
    """Describe a place in one line.

    Example: 東京（東京都千代田区, citycode: 13101, 緯度: 35.681167, 経度: 139.767125, よみ: とうきょう）
    """
    if only_name:
        return place.poi_name

    area = f"{place.pref_name}{place.city_name}"
    if place.node_kind == "S" and place.address:
        area += f" {place.address}"

    city_code = place.city_code if place.city_code is not None else "不明"
    lat = place.location.lat if place.location else "不明"
    lon = place.location.lon if place.location else "不明"

    return (
        f"{place.poi_name}（{area}, citycode: {city_code}, "
        f"緯度: {lat}, 経度: {lon}, よみ: {place.poi_yomi}）"
    )
