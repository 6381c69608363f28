"""
Unit tests for the in-memory storage engine and fixture seeding.
"""

import threading
from datetime import date

from backend.app.db.storage import MemStorage
from backend.app.db.seed import seed_fixtures


def make_tour(storage, **overrides):
    data = {
        "customer_name": "Great Company",
        "shipment_date": "2025-06-01",
        "location_from": "Berlin",
        "location_to": "Hamburg",
    }
    data.update(overrides)
    return storage.create_tour(data)


def test_ids_increase_and_are_never_reused(storage):
    first = make_tour(storage)
    second = make_tour(storage)
    assert (first.id, second.id) == (1, 2)

    assert storage.delete_tour(second.id) is True
    third = make_tour(storage)
    assert third.id == 3


def test_driver_and_tour_counters_are_independent(storage):
    driver = storage.create_driver({"name": "Anna", "location": "Berlin"})
    tour = make_tour(storage)
    assert driver.id == 1
    assert tour.id == 1


def test_create_tour_defaults_driver_to_none(storage):
    tour = make_tour(storage)
    assert tour.driver_id is None


def test_update_merges_only_supplied_fields(storage):
    tour = make_tour(storage, driver_id=4)
    updated = storage.update_tour(tour.id, {"customer_name": "Other Co"})

    assert updated.customer_name == "Other Co"
    assert updated.location_from == "Berlin"
    assert updated.driver_id == 4


def test_update_with_explicit_none_unassigns(storage):
    tour = make_tour(storage, driver_id=4)
    updated = storage.update_tour(tour.id, {"driver_id": None})
    assert updated.driver_id is None
    assert storage.get_tour(tour.id).driver_id is None


def test_update_missing_record_returns_none(storage):
    assert storage.update_tour(99, {"customer_name": "X"}) is None
    assert storage.update_driver(99, {"name": "X"}) is None


def test_delete_reports_whether_record_existed(storage):
    tour = make_tour(storage)
    assert storage.delete_tour(tour.id) is True
    assert storage.delete_tour(tour.id) is False
    assert storage.get_tour(tour.id) is None


def test_returned_records_are_copies(storage):
    driver = storage.create_driver({"name": "Anna", "location": "Berlin"})
    driver.location = "Hamburg"
    assert storage.get_driver(driver.id).location == "Berlin"


def test_drivers_by_location_is_case_insensitive(storage):
    storage.create_driver({"name": "Anna", "location": "Berlin"})
    storage.create_driver({"name": "Ben", "location": "BERLIN"})
    storage.create_driver({"name": "Cem", "location": "Munich"})

    names = [d.name for d in storage.get_drivers_by_location("berlin")]
    assert names == ["Anna", "Ben"]


def test_concurrent_creates_get_unique_ids(storage):
    def worker():
        for _ in range(50):
            storage.create_driver({"name": "Anna", "location": "Berlin"})

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    ids = [d.id for d in storage.get_drivers()]
    assert len(ids) == 400
    assert len(set(ids)) == 400


def test_reset_clears_records_and_counters(storage):
    storage.create_driver({"name": "Anna", "location": "Berlin"})
    make_tour(storage)
    storage.reset()

    assert storage.get_drivers() == []
    assert storage.get_tours() == []
    assert storage.create_driver({"name": "Ben", "location": "Bonn"}).id == 1


def test_seed_fixtures():
    storage = MemStorage()
    seed_fixtures(storage, today=date(2025, 6, 1))

    drivers = storage.get_drivers()
    tours = storage.get_tours()
    assert [d.location for d in drivers] == ["Berlin", "Hamburg", "Munich"]
    assert [t.shipment_date for t in tours] == ["2025-06-01", "2025-06-08", "2025-06-15"]
    assert [t.driver_id for t in tours] == [1, 2, None]
