"""Field extractors for Jorudan route search result pages.

Each extractor takes one fragment of the page (a route block or an
itinerary row) and returns the recovered value, or an empty sentinel
("", 0 or None) when the field is not present. Where the page has been
seen in several formats, the patterns are tried in order and the first
match wins.
"""

import re

from .document import DocumentNode
from .models import (
    CO2Info,
    FareInfo,
    LegTimeInfo,
    RouteNotice,
    RouteSegment,
    RouteTag,
    ServiceType,
    StationInfo,
    StationSegment,
    StationService,
    StationType,
    TimeInfo,
    TransportInfo,
    TransportSegment,
    TransportType,
    WeatherCondition,
    WeatherInfo,
)

# (09:05)発 → (09:40)着, then 09:05発 → 09:40着
TIME_WINDOW_PATTERNS = (
    re.compile(r"\((\d{1,2}:\d{2})\)発.*?\((\d{1,2}:\d{2})\)着"),
    re.compile(r"(\d{1,2}:\d{2})発.*?(\d{1,2}:\d{2})着"),
)

# (20:51)-(20:58) or 20:51-20:58
LEG_TIME_PATTERN = re.compile(r"\(?(\d{1,2}:\d{2})\)?-\(?(\d{1,2}:\d{2})\)?")

FARE_PATTERN = re.compile(r"(\d[\d,]*)円")
TRANSFER_PATTERN = re.compile(r"(\d+)回")
DISTANCE_PATTERN = re.compile(r"(\d+\.?\d*)km")
CO2_AMOUNT_PATTERN = re.compile(r"(\d+\.?\d*[a-zA-Z]+)")
CO2_REDUCTION_PATTERN = re.compile(r"(\d+\.?\d*%)\s*削減")
OPERATOR_PATTERN = re.compile(r"\[(.*?)\]")

SUPPLEMENT_MARK = "＋"
DISTANCE_LABEL = "距離"
CO2_COMPARISON = "自動車比"
BOUND_FOR_MARK = "行"

TRANSPORT_ICONS: tuple[tuple[str, TransportType], ...] = (
    ("nr2.gif", "subway"),
    ("nr5.gif", "bus"),
    ("nr13.gif", "car"),
)

WEATHER_KEYWORDS: tuple[tuple[str, WeatherCondition], ...] = (
    ("cloudy", "cloudy"),
    ("rainy", "rainy"),
    ("snowy", "snowy"),
)

SERVICE_CLASS_KEYWORDS: tuple[tuple[str, ServiceType], ...] = (
    ("time", "timetable"),
    ("rosenzu", "route_map"),
    ("kounai", "floor_plan"),
    ("coupon", "coupon"),
    ("gourmet", "gourmet"),
)


def _to_int(digits: str) -> int:
    return int(digits.replace(",", ""))


def parse_time_window(text: str) -> TimeInfo:
    """Parse a route's departure/arrival pair."""
    for pattern in TIME_WINDOW_PATTERNS:
        match = pattern.search(text)
        if match:
            return TimeInfo(departure=match.group(1), arrival=match.group(2))
    return TimeInfo(departure="", arrival="")


def parse_duration(text: str) -> int:
    """Parse a duration such as '3時間59分', '22分' or '2時間' into minutes."""
    match = re.search(r"(\d+)時間(\d+)分", text)
    if match:
        return int(match.group(1)) * 60 + int(match.group(2))

    match = re.search(r"(\d+)分", text)
    if match:
        return int(match.group(1))

    match = re.search(r"(\d+)時間", text)
    if match:
        return int(match.group(1)) * 60

    return 0


def parse_transfer_count(text: str) -> int:
    """Parse a transfer count such as '2回'."""
    match = TRANSFER_PATTERN.search(text)
    return int(match.group(1)) if match else 0


def parse_fare(amount_text: str, full_text: str | None = None) -> FareInfo:
    """Parse a total fare and split off the supplemental fare note.

    Args:
        amount_text: Text holding the total amount (e.g. '1,234円')
        full_text: Whole fare cell, searched for the '＋' note. Defaults to
            amount_text.
    """
    if full_text is None:
        full_text = amount_text

    match = FARE_PATTERN.search(amount_text)
    total = _to_int(match.group(1)) if match else 0

    additional_info = None
    if SUPPLEMENT_MARK in full_text:
        additional_info = full_text.split(SUPPLEMENT_MARK)[1].strip() or None

    return FareInfo(total=total, additional_info=additional_info)


def parse_co2(text: str) -> CO2Info | None:
    """Parse a CO2 estimate such as '1.2kg 自動車比 80%削減'."""
    if not text:
        return None

    amount_match = CO2_AMOUNT_PATTERN.search(text)
    if not amount_match:
        return None

    reduction_match = CO2_REDUCTION_PATTERN.search(text)
    return CO2Info(
        amount=amount_match.group(1),
        reduction_rate=reduction_match.group(1) if reduction_match else None,
        comparison=CO2_COMPARISON if CO2_COMPARISON in text else None,
    )


def split_operator(line_name: str) -> str | None:
    """Operating company written as '[...]' inside the line name."""
    match = OPERATOR_PATTERN.search(line_name)
    return match.group(1) if match else None


def split_direction(line_name: str) -> str | None:
    """Bound-for direction written as '（...行）' inside the line name."""
    if BOUND_FOR_MARK not in line_name:
        return None
    parts = line_name.split("（")
    if len(parts) < 2:
        return None
    return parts[1].replace("）", "")


def extract_route_tags(block: DocumentNode) -> list[RouteTag]:
    """Extract evaluation badges (fast, comfortable, car) from a route block."""
    tags: list[RouteTag] = []

    for badge in block.select(".hyouka"):
        title = badge.attr("title") or ""
        text = badge.text

        if title == "早い" or text == "早":
            tags.append(RouteTag(type="fast", label="早い"))
        elif title == "楽" or text == "楽":
            tags.append(RouteTag(type="comfortable", label="楽"))
        elif badge.has_class("hyouka_car"):
            tags.append(RouteTag(type="car", label="車"))

    return tags


def extract_time_info(block: DocumentNode) -> TimeInfo:
    return parse_time_window(block.text_of(".data_tm"))


def extract_fare_info(block: DocumentNode) -> FareInfo:
    """Extract the total fare, preferring the emphasized total cell."""
    amount = block.select(".data_line_1 .data_total dd b")
    if amount:
        return parse_fare(
            "".join(node.text for node in amount),
            block.text_of(".data_line_1 .data_total dd"),
        )

    return parse_fare(block.text_of(".data_total dd"))


def extract_total_time(block: DocumentNode) -> int:
    return parse_duration(block.text_of(".data_total-time dd"))


def extract_transfers(block: DocumentNode) -> int:
    return parse_transfer_count(block.text_of(".data_norikae-num dd"))


def extract_distance(block: DocumentNode) -> float | None:
    """Extract the total distance from the definition labelled '距離'."""
    text = "".join(
        definition.text_of("dd")
        for definition in block.select("dl")
        if definition.text_of("dt").strip() == DISTANCE_LABEL
    )
    match = DISTANCE_PATTERN.search(text)
    return float(match.group(1)) if match else None


def extract_co2_info(block: DocumentNode) -> CO2Info | None:
    return parse_co2(block.text_of(".data_norikae-eco dd"))


def extract_weather(row: DocumentNode) -> WeatherInfo | None:
    """Extract the weather icon next to a station."""
    icon = row.select_one(".tenki")
    src = icon.attr("src") if icon is not None else None
    if not src:
        return None

    condition: WeatherCondition = "sunny"
    for keyword, candidate in WEATHER_KEYWORDS:
        if keyword in src:
            condition = candidate
            break

    return WeatherInfo(
        condition=condition, icon_url=src, description=icon.attr("alt") or ""
    )


def extract_station_services(row: DocumentNode) -> list[StationService]:
    """Extract station service links (timetable, maps, coupons, ...)."""
    services: list[StationService] = []

    for link in row.select(".nrk-route-tbl__ekilink a"):
        class_name = link.attr("class") or ""
        text = link.text

        service_type: ServiceType = "map"
        for keyword, candidate in SERVICE_CLASS_KEYWORDS:
            if keyword in class_name:
                service_type = candidate
                break
        else:
            if "出口" in text:
                service_type = "exit_info"

        services.append(
            StationService(type=service_type, name=text, url=link.attr("href"))
        )

    return services


def extract_station_info(row: DocumentNode) -> StationInfo | None:
    """Extract a station row. Rows without a station name yield None."""
    name = row.text_of(".nm strong").strip()
    if not name:
        return None

    station_type: StationType = "transfer"
    if row.has_class("eki_s"):
        station_type = "start"
    elif row.has_class("eki_e"):
        station_type = "end"

    platform = row.text_of(".ph div").strip() or None

    return StationInfo(
        name=name,
        type=station_type,
        weather=extract_weather(row),
        platform=platform,
        services=extract_station_services(row),
    )


def classify_transport(row: DocumentNode) -> TransportType:
    """Infer the transport type from the row marker or the line icon.

    Rows with no recognized marker are assumed to be trains.
    """
    if row.has_class("k_walk"):
        return "walk"

    icon_src = row.attr_of(".gf img", "src") or ""
    for filename, transport_type in TRANSPORT_ICONS:
        if filename in icon_src:
            return transport_type

    return "train"


def parse_leg_times(text: str) -> LegTimeInfo:
    """Parse a leg's '(20:51)-(20:58) 7分' timing cell."""
    departure = arrival = ""
    match = LEG_TIME_PATTERN.search(text)
    if match:
        departure, arrival = match.group(1), match.group(2)

    return LegTimeInfo(
        departure=departure, arrival=arrival, duration=parse_duration(text)
    )


def extract_transport_info(row: DocumentNode) -> TransportInfo | None:
    """Extract a transport row. Rows without a line name yield None."""
    line_name = row.text_of(".rn a, .rn div").strip()
    if not line_name:
        return None

    fare_match = FARE_PATTERN.search(row.text_of(".fr"))
    distance = row.text_of(".km").strip() or None

    return TransportInfo(
        type=classify_transport(row),
        line_name=line_name,
        direction=split_direction(line_name),
        operator=split_operator(line_name),
        time_info=parse_leg_times(row.text_of(".tm")),
        fare=_to_int(fare_match.group(1)) if fare_match else None,
        distance=distance,
    )


def extract_segments(block: DocumentNode) -> list[RouteSegment]:
    """Extract the itinerary (stations and transport legs) of a route block."""
    segments: list[RouteSegment] = []

    for row in block.select(".route table tr"):
        # Header rows
        if row.select("th"):
            continue

        if row.has_class("eki"):
            station = extract_station_info(row)
            if station:
                segments.append(StationSegment(station=station))

        if row.has_class("rosen"):
            transport = extract_transport_info(row)
            if transport:
                segments.append(TransportSegment(transport=transport))

    return segments


def extract_route_notices(block: DocumentNode) -> list[RouteNotice]:
    """Extract notices such as line changes attached to a route."""
    notices: list[RouteNotice] = []

    for row in block.select(".nrb_unk tr"):
        title = row.text_of("td").strip()
        if title:
            notices.append(
                RouteNotice(type="route_change", title=title, description=title)
            )

    return notices
