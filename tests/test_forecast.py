import random

from agrimarket.services.marketplace.forecast_service import FORECAST_LABELS, ForecastGenerator


class OnionOnly:
    def select(self, crop_types):
        return [c for c in crop_types if c.name == "Onion"]


def test_top_crops_are_first_three(seeded_store):
    report = ForecastGenerator(seeded_store, rng=random.Random(1)).get_forecast_data()

    assert report.labels == FORECAST_LABELS
    assert len(report.labels) == 6
    assert [d.crop_name for d in report.datasets] == ["Rice", "Wheat", "Tomato"]
    assert [d.crop_id for d in report.datasets] == [1, 2, 3]


def test_fixed_and_random_curves(seeded_store):
    report = ForecastGenerator(seeded_store, rng=random.Random(1)).get_forecast_data()
    by_name = {d.crop_name: d.data for d in report.datasets}

    assert by_name["Tomato"] == [30, 45, 60, 70, 65, 55]
    assert by_name["Rice"] == [50, 55, 52, 50, 48, 45]
    assert len(by_name["Wheat"]) == 6
    assert all(20 <= v <= 69 for v in by_name["Wheat"])


def test_selection_strategy_is_pluggable(seeded_store):
    report = ForecastGenerator(seeded_store, selection=OnionOnly()).get_forecast_data()
    assert [d.crop_name for d in report.datasets] == ["Onion"]
    assert report.datasets[0].data == [20, 25, 40, 50, 65, 70]


def test_demand_groups_are_static(seeded_store, empty_store):
    for store in (seeded_store, empty_store):
        groups = ForecastGenerator(store).get_forecast_data().demand_groups
        assert set(groups.high) == {"Green Chillies", "Tomato", "Eggplant"}
        assert groups.moderate == ["Rice", "Onion", "Cauliflower"]
        assert groups.low == ["Potato", "Cabbage", "Carrots"]


def test_empty_catalog_gives_empty_datasets(empty_store):
    report = ForecastGenerator(empty_store).get_forecast_data()
    assert report.datasets == []
    assert report.labels == FORECAST_LABELS


def test_same_seed_same_forecast(seeded_store):
    first = ForecastGenerator(seeded_store, rng=random.Random(7)).get_forecast_data()
    second = ForecastGenerator(seeded_store, rng=random.Random(7)).get_forecast_data()
    assert first.model_dump() == second.model_dump()


def test_wire_format_is_camel_case(seeded_store):
    body = ForecastGenerator(seeded_store, rng=random.Random(1)).get_forecast_data().model_dump(by_alias=True)
    assert set(body) == {"labels", "datasets", "demandGroups"}
    assert set(body["datasets"][0]) == {"cropId", "cropName", "data"}
