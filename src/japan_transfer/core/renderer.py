"""Plain-text report of route search results."""

from .models import (
    CO2Info,
    Route,
    RouteSearchResult,
    StationInfo,
    StationSegment,
    TransportInfo,
    TransportSegment,
)

TAG_LABELS = {
    "fast": "⚡早い",
    "comfortable": "😌楽",
    "cheap": "💰安い",
    "car": "🚗車",
}

STATION_LABELS = {
    "start": "🚩 **出発**",
    "end": "🏁 **到着**",
    "transfer": "🔄 **乗換**",
}

WEATHER_ICONS = {
    "sunny": "☀️",
    "cloudy": "☁️",
    "rainy": "🌧️",
    "snowy": "❄️",
}
DEFAULT_WEATHER_ICON = "🌤️"

TRANSPORT_ICONS = {
    "train": "🚃",
    "subway": "🚇",
    "bus": "🚌",
    "car": "🚗",
    "taxi": "🚕",
    "walk": "🚶",
}
DEFAULT_TRANSPORT_ICON = "🚃"


def format_duration(minutes: int) -> str:
    """Format minutes as '1時間5分' or '22分'."""
    hours, rest = divmod(minutes, 60)
    return f"{hours}時間{rest}分" if hours > 0 else f"{rest}分"


def format_distance(km: float) -> str:
    # 12.0 is shown as "12"
    return str(int(km)) if float(km).is_integer() else str(km)


def format_route_heading(route: Route) -> str:
    """Heading line; unknown endpoint times are left out rather than blanked."""
    heading = f"## 🛤️ 経路{route.route_number}"
    departure = route.time_info.departure
    arrival = route.time_info.arrival

    if departure and arrival:
        return f"{heading}: {departure} → {arrival}"
    if departure:
        return f"{heading}: {departure}発"
    if arrival:
        return f"{heading}: {arrival}着"
    return heading


def format_basic_info(route: Route) -> str:
    parts = []
    if route.total_time:
        parts.append(f"⏱️ 所要時間: {format_duration(route.total_time)}")
    parts.append(f"🔄 乗換: {route.transfers}回")
    if route.fare_info.total:
        parts.append(f"💰 運賃: {route.fare_info.total:,}円")
    if route.total_distance:
        parts.append(f"📏 距離: {format_distance(route.total_distance)}km")
    return " | ".join(parts)


def format_co2(co2: CO2Info) -> str:
    line = f"🌱 CO2排出量: {co2.amount}"
    if co2.reduction_rate:
        line += f" ({co2.comparison or ''}{co2.reduction_rate}削減)"
    return line


def format_station(station: StationInfo) -> str:
    line = f"{STATION_LABELS[station.type]}: {station.name}"
    if station.platform:
        line += f" ({station.platform})"
    if station.weather:
        line += f" {WEATHER_ICONS.get(station.weather.condition, DEFAULT_WEATHER_ICON)}"
    return line


def format_transport(transport: TransportInfo) -> str:
    icon = TRANSPORT_ICONS.get(transport.type, DEFAULT_TRANSPORT_ICON)
    line = f"{icon} {transport.line_name}"

    timing = []
    if transport.time_info.departure and transport.time_info.arrival:
        timing.append(f"{transport.time_info.departure}-{transport.time_info.arrival}")
    if transport.time_info.duration:
        timing.append(f"{transport.time_info.duration}分")
    if timing:
        line += f" ({', '.join(timing)})"

    if transport.fare:
        line += f" 💰{transport.fare}円"
    if transport.distance:
        line += f" 📏{transport.distance}"

    return f"  {line}"


def render_route(route: Route) -> list[str]:
    """Render one route block as report lines."""
    lines = [format_route_heading(route), format_basic_info(route)]

    if route.tags:
        labels = [TAG_LABELS.get(tag.type, tag.label) for tag in route.tags]
        lines.append(f"🏷️ {' '.join(labels)}")

    if route.co2_info:
        lines.append(format_co2(route.co2_info))

    lines.append("")

    if route.segments:
        lines.append("### 📍 経路詳細")
        for segment in route.segments:
            if isinstance(segment, StationSegment):
                lines.append(format_station(segment.station))
            elif isinstance(segment, TransportSegment):
                lines.append(format_transport(segment.transport))

    if route.route_notices:
        lines.append("")
        lines.append("### ⚠️ 注意事項")
        for notice in route.route_notices:
            line = f"- {notice.title}"
            if notice.description and notice.description != notice.title:
                line += f": {notice.description}"
            lines.append(line)

    lines.extend(["", "---", ""])
    return lines


def render_route_search(
    result: RouteSearchResult,
    source_url: str,
    origin: str,
    destination: str,
    query_datetime: str,
) -> str:
    """Render a search result as a line-oriented report.

    Args:
        result: Extracted search result
        source_url: URL the results page was fetched from
        origin: Departure place name as requested
        destination: Arrival place name as requested
        query_datetime: Requested search date and time

    Returns:
        Report text, lines separated by '\\n'
    """
    lines = [
        f"🚃 **{origin}** から **{destination}** への経路検索結果",
        f"📅 検索日時: {query_datetime}",
        f"🔗 検索URL: {source_url}",
        f"⏰ 検索実行時刻: {result.search_time}",
        "",
    ]

    if not result.routes:
        lines.append("❌ 該当する経路が見つかりませんでした。")
        return "\n".join(lines)

    lines.append(f"📋 **{len(result.routes)}件の経路が見つかりました**")
    lines.append("")

    for route in result.routes:
        lines.extend(render_route(route))

    return "\n".join(lines)
