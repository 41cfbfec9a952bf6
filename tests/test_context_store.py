from warpmap.locations.context_store import ContextStore
from warpmap.locations.contracts import LocationContext, LocationType


def test_store_lookup_and_membership() -> None:
    farm = LocationContext(id="Farm", type=LocationType.OUTDOORS, root="Farm")
    store = ContextStore({"Farm": farm})

    assert store.get("Farm") == farm
    assert store.get("Town") is None
    assert store.get(None) is None
    assert store.contains("Farm")
    assert not store.contains("")
    assert "Farm" in store
    assert 42 not in store
    assert store.ids() == ["Farm"]
    assert len(store) == 1


def test_store_payload_is_json_ready() -> None:
    store = ContextStore(
        {
            "Coop": LocationContext(
                id="Coop",
                type=LocationType.BUILDING,
                root="Farm",
                parent="Farm",
                warp=(64, 16),
            )
        }
    )
    payload = store.to_payload()

    assert payload["Coop"]["type"] == "building"
    assert payload["Coop"]["warp"] == [64, 16]
    assert payload["Coop"]["children"] == []
