"""Unit tests for place suggestion formatting."""

from japan_transfer.core.models import SuggestPlace, SuggestResponse
from japan_transfer.core.places import format_place, interleave_places


class TestPlaces:
    """Test place ordering and descriptions."""

    def test_interleave_places(self, sample_suggest_data):
        """Test station, bus stop, spot interleaving."""
        response = SuggestResponse.model_validate(sample_suggest_data)
        names = [place.poi_name for place in interleave_places(response)]
        assert names == ["東京", "東京駅八重洲口〔都営バス〕", "東京タワー", "東京テレポート"]

    def test_interleave_empty(self):
        assert interleave_places(SuggestResponse()) == []

    def test_format_station(self, sample_suggest_data):
        place = SuggestPlace.model_validate(sample_suggest_data["R"][0])
        assert format_place(place) == (
            "東京（東京都千代田区, citycode: 13101, 緯度: 35.681167, "
            "経度: 139.767125, よみ: とうきょう）"
        )

    def test_format_spot_with_unknowns(self, sample_suggest_data):
        """Test that spots include their address and unknown values are marked."""
        place = SuggestPlace.model_validate(sample_suggest_data["S"][0])
        assert format_place(place) == (
            "東京タワー（東京都港区 芝公園4-2-8, citycode: 不明, 緯度: 不明, "
            "経度: 不明, よみ: とうきょうたわー）"
        )

    def test_format_name_only(self, sample_suggest_data):
        place = SuggestPlace.model_validate(sample_suggest_data["B"][0])
        assert format_place(place, only_name=True) == "東京駅八重洲口〔都営バス〕"
