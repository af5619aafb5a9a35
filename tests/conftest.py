"""Test configuration and fixtures."""

from datetime import datetime, timezone

import pytest

from japan_transfer.core.models import (
    CO2Info,
    FareInfo,
    LegTimeInfo,
    Route,
    RouteNotice,
    RouteSearchResult,
    RouteTag,
    StationInfo,
    StationSegment,
    TimeInfo,
    TransportInfo,
    TransportSegment,
    WeatherInfo,
)

FIXED_SEARCH_TIME = datetime(2025, 7, 10, 0, 5, 30, 123000, tzinfo=timezone.utc)


@pytest.fixture
def fixed_clock():
    """Clock returning a fixed extraction time."""
    return lambda: FIXED_SEARCH_TIME


@pytest.fixture
def sample_jorudan_response():
    """Sample Jorudan route search results page with two routes."""
    return """
    <html><body>
    <div id="results" class="js_routeBlocks">
      <div class="bk_result" id="Bk_route1">
        <div class="hyouka" title="早い">早</div>
        <div class="hyouka">楽</div>
        <div class="data">
          <div class="data_line_1">
            <dl class="data_tm"><dt>発着時間</dt><dd>(09:05)発 → (10:40)着</dd></dl>
            <dl class="data_total"><dt>運賃</dt><dd><b>1,234円</b>＋特急料金 500円</dd></dl>
          </div>
          <dl class="data_total-time"><dt>所要時間</dt><dd>1時間35分</dd></dl>
          <dl class="data_norikae-num"><dt>乗換</dt><dd>1回</dd></dl>
          <dl><dt>距離</dt><dd>45.6km</dd></dl>
          <dl class="data_norikae-eco"><dt>CO2</dt><dd>2.3kg 自動車比 85%削減</dd></dl>
        </div>
        <div class="route">
          <table>
            <tr><th>駅</th><th>路線</th></tr>
            <tr class="eki eki_s">
              <td class="nm"><strong>東京</strong></td>
              <td><img class="tenki" src="https://example.com/tenki/cloudy.png" alt="くもり"></td>
              <td class="ph"><div>5番線</div></td>
              <td class="nrk-route-tbl__ekilink"><a class="time" href="/time/tokyo">時刻表</a><a href="/exit/tokyo">出口案内</a><a class="map" href="/map/tokyo">地図</a></td>
            </tr>
            <tr class="rosen">
              <td class="gf"><img src="https://example.com/img/nr1.gif"></td>
              <td class="rn"><div>ＪＲ中央線快速（高尾行）</div></td>
              <td class="tm">(09:05)-(09:20) 15分</td>
              <td class="fr">220円</td>
              <td class="km">10.3km</td>
            </tr>
            <tr class="eki">
              <td class="nm"><strong>新宿</strong></td>
            </tr>
            <tr class="rosen">
              <td class="gf"><img src="https://example.com/img/nr2.gif"></td>
              <td class="rn"><a href="/line/marunouchi">丸ノ内線[東京メトロ]</a></td>
              <td class="tm">(09:25)-(10:40) 1時間15分</td>
              <td class="fr">1,014円</td>
              <td class="km">35.3km</td>
            </tr>
            <tr class="eki eki_e">
              <td class="nm"><strong>荻窪</strong></td>
              <td><img class="tenki" src="https://example.com/tenki/sunny.png" alt="晴れ"></td>
            </tr>
          </table>
        </div>
        <div class="nrb_unk">
          <table><tr><td>新宿駅で乗換時間が短くなっています</td></tr></table>
        </div>
      </div>
      <div class="bk_result" id="Bk_route2">
        <div class="hyouka hyouka_car">車</div>
        <dl class="data_tm"><dt>発着時間</dt><dd>09:10発 → 11:00着</dd></dl>
        <dl class="data_total"><dt>運賃</dt><dd>980円</dd></dl>
        <dl class="data_total-time"><dt>所要時間</dt><dd>1時間50分</dd></dl>
        <dl class="data_norikae-num"><dt>乗換</dt><dd>0回</dd></dl>
        <div class="route">
          <table>
            <tr class="eki eki_s">
              <td class="nm"><strong>東京駅八重洲口〔都営バス〕</strong></td>
            </tr>
            <tr class="rosen">
              <td class="gf"><img src="https://example.com/img/nr5.gif"></td>
              <td class="rn"><div>都営バス 東98</div></td>
              <td class="tm">09:10-10:45 1時間35分</td>
              <td class="fr">210円</td>
            </tr>
            <tr class="rosen k_walk">
              <td class="rn"><div>徒歩</div></td>
              <td class="tm">15分</td>
            </tr>
            <tr class="eki eki_e">
              <td class="nm"><strong>荻窪</strong></td>
            </tr>
          </table>
        </div>
      </div>
    </div>
    </body></html>
    """


@pytest.fixture
def empty_jorudan_response():
    """Results page with no route blocks."""
    return '<html><body><div id="results" class="js_routeBlocks"></div></body></html>'


@pytest.fixture
def non_results_response():
    """A page that is not a route search results page."""
    return "<html><body><p>駅名が見つかりませんでした</p></body></html>"


@pytest.fixture
def sample_route():
    """A fully populated route."""
    return Route(
        id="Bk_route1",
        route_number=1,
        tags=[RouteTag(type="fast", label="早い")],
        time_info=TimeInfo(departure="09:05", arrival="10:40"),
        fare_info=FareInfo(total=1234, additional_info="特急料金 500円"),
        total_time=95,
        transfers=1,
        total_distance=12.0,
        co2_info=CO2Info(amount="2.3kg", reduction_rate="85%", comparison="自動車比"),
        segments=[
            StationSegment(
                station=StationInfo(
                    name="東京",
                    type="start",
                    platform="5番線",
                    weather=WeatherInfo(
                        condition="cloudy", icon_url="https://example.com/cloudy.png"
                    ),
                )
            ),
            TransportSegment(
                transport=TransportInfo(
                    type="train",
                    line_name="ＪＲ中央線快速",
                    time_info=LegTimeInfo(departure="09:05", arrival="09:20", duration=15),
                    fare=220,
                    distance="10.3km",
                )
            ),
            StationSegment(station=StationInfo(name="新宿", type="end")),
        ],
        route_notices=[RouteNotice(title="遅延が発生しています")],
    )


@pytest.fixture
def minimal_route():
    """A route with only duration and transfer count known."""
    return Route(id="route_1", route_number=1, total_time=22, transfers=0)


@pytest.fixture
def sample_result(sample_route):
    """Search result holding one route."""
    return RouteSearchResult(
        routes=[sample_route], search_time="2025-07-10T00:05:30.123Z"
    )


@pytest.fixture
def sample_suggest_data():
    """Sample place suggestion response."""
    return {
        "R": [
            {
                "poiName": "東京",
                "nodeKind": "R",
                "prefName": "東京都",
                "cityName": "千代田区",
                "poiYomi": "とうきょう",
                "cityCode": 13101,
                "location": {"lon": "139.767125", "lat": "35.681167"},
            },
            {
                "poiName": "東京テレポート",
                "nodeKind": "R",
                "prefName": "東京都",
                "cityName": "江東区",
                "poiYomi": "とうきょうてれぽーと",
                "cityCode": 13108,
                "location": {"lon": "139.779", "lat": "35.627"},
            },
        ],
        "B": [
            {
                "poiName": "東京駅八重洲口〔都営バス〕",
                "nodeKind": "B",
                "prefName": "東京都",
                "cityName": "中央区",
                "poiYomi": "とうきょうえきやえすぐち",
            }
        ],
        "S": [
            {
                "poiName": "東京タワー",
                "nodeKind": "S",
                "prefName": "東京都",
                "cityName": "港区",
                "poiYomi": "とうきょうたわー",
                "address": "芝公園4-2-8",
            }
        ],
    }
