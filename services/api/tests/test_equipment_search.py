"""Tests for the equipment search endpoints."""
import pytest


async def _names(client, **params):
    response = await client.get("/api/equipment-search/search", params=params)
    assert response.status_code == 200, response.text
    return [item["equipmentName"] for item in response.json()["data"]]


@pytest.mark.asyncio
async def test_city_search_matches_aliases_and_excludes_other_cities(client, add_equipment):
    """Searching chennai finds madras and velachery listings but not bangalore or coimbatore."""
    await add_equipment(equipment_name="Crane A", location="Chennai")
    await add_equipment(equipment_name="Crane B", location="Old Madras Port")
    await add_equipment(equipment_name="Crane C", location="VELACHERY")
    await add_equipment(equipment_name="Crane D", location="Bangalore")
    await add_equipment(equipment_name="Crane E", location="Coimbatore")

    names = await _names(client, location="chennai")
    assert set(names) == {"Crane A", "Crane B", "Crane C"}


@pytest.mark.asyncio
async def test_state_search_covers_its_cities(client, add_equipment):
    await add_equipment(equipment_name="Roller", location="Coimbatore")
    await add_equipment(equipment_name="Loader", location="Madras")
    await add_equipment(equipment_name="Dozer", location="Mumbai")

    names = await _names(client, location="Tamil Nadu")
    assert set(names) == {"Roller", "Loader"}


@pytest.mark.asyncio
async def test_unknown_location_is_substring_matched(client, add_equipment):
    await add_equipment(equipment_name="Pump", location="Springfield Industrial Park")
    await add_equipment(equipment_name="Generator", location="Chennai")

    assert await _names(client, location="springfield") == ["Pump"]


@pytest.mark.asyncio
async def test_no_filters_returns_active_newest_first(client, add_equipment):
    await add_equipment(equipment_name="Oldest")
    await add_equipment(equipment_name="Hidden", is_active=False)
    await add_equipment(equipment_name="Newest")

    response = await client.get("/api/equipment-search/search")
    body = response.json()

    assert body["success"] is True
    assert body["count"] == 2
    assert [item["equipmentName"] for item in body["data"]] == ["Newest", "Oldest"]
    assert body["filters"] == {"search": None, "location": None, "availability": "all"}
    assert body["processingTime"].endswith("ms")


@pytest.mark.asyncio
async def test_keyword_and_availability_filters(client, add_equipment):
    await add_equipment(equipment_name="Tower Crane", availability="available")
    await add_equipment(equipment_name="Mobile Crane", availability="on-hire")
    await add_equipment(equipment_name="Forklift", equipment_type="Lifting", description="3 ton crane-rated")
    await add_equipment(equipment_name="Concrete Mixer")

    assert set(await _names(client, search="CRANE")) == {"Tower Crane", "Mobile Crane", "Forklift"}
    assert await _names(client, search="crane", availability="on-hire") == ["Mobile Crane"]


@pytest.mark.asyncio
async def test_keyword_wildcards_are_literal(client, add_equipment):
    await add_equipment(equipment_name="Pump 100%")
    await add_equipment(equipment_name="Pump 1000")

    assert await _names(client, search="100%") == ["Pump 100%"]


@pytest.mark.asyncio
async def test_invalid_availability_is_rejected(client):
    response = await client.get("/api/equipment-search/search", params={"availability": "sold"})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_availability_all_means_no_filter(client, add_equipment):
    await add_equipment(equipment_name="A", availability="available")
    await add_equipment(equipment_name="B", availability="on-hire")

    assert len(await _names(client, availability="all")) == 2


@pytest.mark.asyncio
async def test_images_are_decoded_and_malformed_json_degrades(client, add_equipment):
    await add_equipment(equipment_name="Good", equipment_images='["/uploads/1.jpg", "/uploads/2.jpg"]')
    await add_equipment(equipment_name="Broken", equipment_images="[not json")
    await add_equipment(equipment_name="Empty", equipment_images=None)

    response = await client.get("/api/equipment-search/search")
    images = {item["equipmentName"]: item["equipmentImages"] for item in response.json()["data"]}

    assert images == {
        "Good": ["/uploads/1.jpg", "/uploads/2.jpg"],
        "Broken": [],
        "Empty": [],
    }


@pytest.mark.asyncio
async def test_locations_are_distinct_sorted_and_active_only(client, add_equipment):
    await add_equipment(location="Pune")
    await add_equipment(location="Chennai")
    await add_equipment(location="Pune")
    await add_equipment(location="   ")
    await add_equipment(location="Dubai", is_active=False)

    response = await client.get("/api/equipment-search/locations")
    body = response.json()
    assert body["data"] == ["Chennai", "Pune"]
    assert body["count"] == 2


@pytest.mark.asyncio
async def test_stats(client, add_equipment):
    await add_equipment(location="Pune", equipment_type="Crane", availability="available")
    await add_equipment(location="Pune", equipment_type="Loader", availability="on-hire")
    await add_equipment(location="Chennai", equipment_type="Crane", availability="available")
    await add_equipment(location="Delhi", is_active=False)

    response = await client.get("/api/equipment-search/stats")
    assert response.json()["data"] == {
        "total": 3,
        "available": 2,
        "onHire": 1,
        "locations": 2,
        "types": 2,
    }


@pytest.mark.asyncio
async def test_stats_on_empty_store(client):
    response = await client.get("/api/equipment-search/stats")
    assert response.json()["data"]["total"] == 0
    assert response.json()["data"]["onHire"] == 0


@pytest.mark.asyncio
async def test_get_by_id(client, add_equipment):
    item = await add_equipment(equipment_name="Backhoe", equipment_images='["/a.jpg"]')
    hidden = await add_equipment(equipment_name="Hidden", is_active=False)

    response = await client.get(f"/api/equipment-search/{item.id}")
    assert response.status_code == 200
    assert response.json()["data"]["equipmentName"] == "Backhoe"
    assert response.json()["data"]["equipmentImages"] == ["/a.jpg"]

    assert (await client.get(f"/api/equipment-search/{hidden.id}")).status_code == 404
    assert (await client.get("/api/equipment-search/99999")).status_code == 404
