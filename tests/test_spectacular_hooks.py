from config.spectacular_hooks import ALL_TAGS
from config.spectacular_hooks import assign_group_tag
from config.spectacular_hooks import group_tags


def test_assign_group_tag():
    assert assign_group_tag("/api/v1/events/{event_id}/") == "Events"
    assert assign_group_tag("/api/events") == "Events"
    assert assign_group_tag("/api/v1/grid/") == "Grid"
    assert assign_group_tag("/health/") is None


def test_group_tags_overwrites_operation_tags():
    schema = {
        "paths": {
            "/api/v1/events/": {
                "post": {"tags": ["api"]},
                "parameters": [],
            },
            "/api/v1/grid/": {"get": {"tags": ["api"]}},
            "/other/": {"get": {"tags": ["other"]}},
        },
        "tags": [{"name": "Events"}],
    }

    result = group_tags(schema)

    assert result["paths"]["/api/v1/events/"]["post"]["tags"] == ["Events"]
    assert result["paths"]["/api/v1/grid/"]["get"]["tags"] == ["Grid"]
    assert result["paths"]["/other/"]["get"]["tags"] == ["other"]
    assert [t["name"] for t in result["tags"]] == ALL_TAGS


def test_unversioned_and_v1_paths_each_get_one_tag():
    schema = {
        "paths": {
            "/api/events": {"post": {"tags": ["api", "events"]}},
            "/api/v1/events/": {"post": {"tags": ["api_v1"]}},
            "/api/events/{event_id}": {"get": {"tags": ["api"]}},
            "/api/v1/events/{event_id}/": {"get": {"tags": ["api_v1"]}},
            "/api/grid": {"get": {}},
            "/api/v1/grid/": {"get": {}},
        },
    }

    result = group_tags(schema)

    tags = {
        (path, method): op["tags"]
        for path, item in result["paths"].items()
        for method, op in item.items()
    }
    assert tags == {
        ("/api/events", "post"): ["Events"],
        ("/api/v1/events/", "post"): ["Events"],
        ("/api/events/{event_id}", "get"): ["Events"],
        ("/api/v1/events/{event_id}/", "get"): ["Events"],
        ("/api/grid", "get"): ["Grid"],
        ("/api/v1/grid/", "get"): ["Grid"],
    }
    assert [t["name"] for t in result["tags"]] == ["Events", "Grid", "Meta"]
