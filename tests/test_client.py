"""Tests for TagCodecClient — dict-returning codec API."""

import json

import pytest

from chestmeta import config
from chestmeta.client import TagCodecClient, _resolve_order
from chestmeta.exceptions import CliError


class TestResolveOrder:
    def test_none(self):
        assert _resolve_order(None) is None

    def test_int(self):
        assert _resolve_order(-4) == -4

    def test_numeric_string(self):
        assert _resolve_order(" 12 ") == 12

    @pytest.mark.parametrize("bad", ["abc", "1.5", 2**31, -(2**31) - 1, "2147483648", True])
    def test_rejects(self, bad):
        with pytest.raises(CliError):
            _resolve_order(bad)


class TestParseName:
    def test_end_to_end(self):
        result = TagCodecClient().parse_name(
            "Storage |5| |cat:Ores| |ignore|", location_name="Mine"
        )
        assert result == {
            "display_name": "Storage",
            "category": "Ores",
            "order": 5,
            "ignored": True,
            "location_name": "Mine",
            "group": "Ores",
            "raw_name": "Storage |5| |ignore| |cat:Ores|",
        }

    def test_result_is_json_serializable(self):
        json.dumps(TagCodecClient().parse_name("Box |1|"))

    def test_sentinel_without_default_keeps_sentinel(self):
        assert TagCodecClient().parse_name("Chest")["display_name"] == "Chest"

    def test_client_default_name(self):
        client = TagCodecClient(default_name="Chest #1")
        assert client.parse_name("Chest")["display_name"] == "Chest #1"

    def test_call_default_name_wins(self):
        client = TagCodecClient(default_name="Chest #1")
        assert client.parse_name("Chest", default_name="Chest #9")["display_name"] == "Chest #9"

    def test_location_from_config(self, monkeypatch):
        monkeypatch.setattr(config, "DEFAULT_LOCATION", "Farm")
        assert TagCodecClient().parse_name("Box")["group"] == "Farm"

    def test_custom_sentinel(self):
        client = TagCodecClient(default_name="Crate #2", unnamed="Crate")
        assert client.parse_name("Crate")["display_name"] == "Crate #2"
        assert client.parse_name("Chest")["display_name"] == "Chest"


class TestGroupName:
    def test_category(self):
        result = TagCodecClient().group_name("Box |cat:Tools|", location_name="Mine")
        assert result == {"group": "Tools", "from_category": True}

    def test_blank_category_uses_location(self):
        result = TagCodecClient().group_name("Box |cat:  |", location_name="Mine")
        assert result == {"group": "Mine", "from_category": False}


class TestInspectName:
    def test_reports_discarded(self):
        result = TagCodecClient().inspect_name("Box |junk| |1|", location_name="Mine")
        assert result["discarded_count"] == 1
        assert [t["status"] for t in result["tags"]] == ["discarded", "applied"]
        assert result["meta"]["order"] == 1


class TestListTags:
    def test_registry(self):
        result = TagCodecClient().list_tags()
        assert result["count"] == 3
        assert [t["name"] for t in result["tags"]] == ["order", "ignore", "cat"]

    def test_single_tag_by_name(self):
        result = TagCodecClient().list_tags("cat")
        assert result["count"] == 1
        assert result["tags"][0]["kind"] == "category"

    def test_unknown_tag_name(self):
        with pytest.raises(CliError, match="Valid tags: order, ignore, cat"):
            TagCodecClient().list_tags("sort")


class TestComposeName:
    def test_all_fields(self):
        result = TagCodecClient().compose_name("Box", category="Tools", order="3", ignored=True)
        assert result["raw_name"] == "Box |3| |ignore| |cat:Tools|"
        assert result["meta"]["group"] == "Tools"

    def test_name_only(self):
        assert TagCodecClient().compose_name("  Box  ")["raw_name"] == "Box"

    def test_blank_name_rejected(self):
        with pytest.raises(CliError, match="Name cannot be empty"):
            TagCodecClient().compose_name("   ")

    @pytest.mark.parametrize("name", ["|5|", " |cat:Ores| |ignore| ", "|5||junk|"])
    def test_name_of_only_tags_rejected(self, name):
        with pytest.raises(CliError, match="Name cannot be empty"):
            TagCodecClient().compose_name(name, order=1)

    def test_tags_in_name_are_stripped(self):
        result = TagCodecClient().compose_name("Box |9|", order=2)
        assert result["raw_name"] == "Box |2|"

    def test_bad_order_rejected(self):
        with pytest.raises(CliError):
            TagCodecClient().compose_name("Box", order="abc")

    def test_location_used_for_group(self):
        result = TagCodecClient().compose_name("Box", location_name="Mine")
        assert result["meta"]["group"] == "Mine"


class TestUpdateName:
    def test_full_replace_clears_omitted_fields(self):
        result = TagCodecClient().update_name("Storage |5| |cat:Ores| |ignore|", category="Ores")
        assert result["raw_name"] == "Storage |cat:Ores|"
        assert result["changed"] is True
        assert result["meta"]["order"] is None
        assert result["meta"]["ignored"] is False

    def test_same_fields_unchanged(self):
        result = TagCodecClient().update_name("Storage |5| |cat:Ores|", category="Ores", order=5)
        assert result["raw_name"] == "Storage |5| |cat:Ores|"
        assert result["changed"] is False

    def test_canonicalizes_order_of_tags(self):
        result = TagCodecClient().update_name(
            "Storage |cat:Ores| |ignore| |5|", category="Ores", order=5, ignored=True
        )
        assert result["raw_name"] == "Storage |5| |ignore| |cat:Ores|"
        assert result["changed"] is True

    def test_drops_unknown_tags(self):
        result = TagCodecClient().update_name("Box |junk|")
        assert result["raw_name"] == "Box"
        assert result["previous_raw_name"] == "Box |junk|"

    def test_rename(self):
        result = TagCodecClient().update_name("Box |2|", name="Crate", order=2)
        assert result["raw_name"] == "Crate |2|"

    def test_uncustomized_container(self):
        client = TagCodecClient(default_name="Chest #4")
        result = client.update_name("Chest", order=1)
        assert result["raw_name"] == "Chest #4 |1|"

    def test_bad_order_raises_before_anything(self):
        with pytest.raises(CliError):
            TagCodecClient().update_name("Box", order="x")
