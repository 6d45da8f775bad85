import pytest

from conftest import build_store, clinic_record, ids
from core.exceptions import ClinicNotFound
from modules.pydantic_model.query import ClinicFilters, NearbyQuery, Pagination, SortKey
from modules.services import clinic_query


def test_parse_district():
    assert clinic_query.parse_district("台北市信義區信義路1段100號") == "信義區"
    assert clinic_query.parse_district("新北市板橋區文化路1段1號") == "板橋區"
    assert clinic_query.parse_district("台北市信義路1段100號") is None
    assert clinic_query.parse_district("") is None


@pytest.mark.parametrize("filters, expected", [
    ({}, [1, 2, 3, 4, 5]),
    ({"type": "診所"}, [1, 3, 5]),
    ({"minRating": 4.5}, [1, 3]),
    ({"department": "家醫科"}, [1, 2, 5]),
    ({"service": "預防注射"}, [1]),
    ({"feature": "parking"}, [1, 3]),
    ({"feature": "nightClinic"}, []),
    ({"district": "信義區"}, [1, 3]),
    ({"address": "松仁路"}, [3]),
    ({"specialty": "骨科"}, [3]),
    ({"specialty": "內科"}, [1, 2]),
    ({"type": "診所", "minRating": 4.5, "feature": "parking", "district": "信義區"}, [1, 3]),
    ({"type": "牙醫診所", "district": "信義區"}, []),
])
def test_filter_clinics(store, filters, expected):
    result = clinic_query.filter_clinics(store, ClinicFilters(**filters))
    assert ids(result) == expected


@pytest.mark.parametrize("filters", [
    {},
    {"department": "家醫科"},
    {"minRating": 3.0, "feature": "parking"},
    {"district": "信義區", "specialty": "小兒科"},
])
def test_filter_is_subset_and_idempotent(store, filters):
    criteria = ClinicFilters(**filters)
    once = clinic_query.filter_clinics(store, criteria)
    twice = clinic_query.filter_clinics(once, criteria)

    assert set(ids(once)) <= set(ids(store))
    assert ids(twice) == ids(once)


def test_address_filter_is_case_sensitive():
    store = build_store([clinic_record(1, "Taipei City Xinyi Rd", 25.0, 121.5, 4.0, 1)])
    assert ids(clinic_query.filter_clinics(store, ClinicFilters(address="Xinyi"))) == [1]
    assert ids(clinic_query.filter_clinics(store, ClinicFilters(address="xinyi"))) == []


def test_sort_by_rating_is_descending_and_stable(store):
    result = clinic_query.sort_clinics(list(store), SortKey.RATING)
    # 1 and 3 share 4.8 and keep their input order
    assert ids(result) == [1, 3, 4, 2, 5]

    reversed_input = clinic_query.sort_clinics(list(store)[::-1], SortKey.RATING)
    assert ids(reversed_input) == [3, 1, 4, 2, 5]


def test_sort_by_reviews(store):
    result = clinic_query.sort_clinics(list(store), SortKey.REVIEWS)
    assert ids(result) == [2, 4, 1, 3, 5]


def test_no_sort_keeps_order(store):
    assert ids(clinic_query.sort_clinics(list(store), None)) == [1, 2, 3, 4, 5]


@pytest.mark.parametrize("page, limit, expected", [
    (1, 2, [1, 2]),
    (2, 2, [3, 4]),
    (3, 2, [5]),
    (4, 2, []),
    (1, 10, [1, 2, 3, 4, 5]),
])
def test_paginate(store, page, limit, expected):
    result = clinic_query.paginate(list(store), Pagination(page=page, limit=limit))
    assert result.total == 5
    assert result.page == page
    assert result.limit == limit
    assert ids(result.data) == expected
    assert len(result.data) == min(limit, max(0, result.total - (page - 1) * limit))


def test_pages_reconstruct_sorted_sequence(store):
    ordered = clinic_query.sort_clinics(list(store), SortKey.REVIEWS)
    pages = [
        clinic_query.paginate(ordered, Pagination(page=page, limit=2)).data
        for page in range(1, 4)
    ]
    assert [clinic.id for page in pages for clinic in page] == ids(ordered)


def test_find_clinic(store):
    assert clinic_query.find_clinic(store, 3).name == "康健診所3"

    with pytest.raises(ClinicNotFound) as excinfo:
        clinic_query.find_clinic(store, 999)
    assert excinfo.value.clinic_id == 999


def test_list_departments_deduplicates_in_first_seen_order(store):
    assert clinic_query.list_departments(store) == ["家醫科", "內科", "小兒科", "中醫科"]


def test_list_districts_is_sorted(store):
    assert clinic_query.list_districts(store) == sorted(["信義區", "大安區", "中山區", "前鎮區"])


def test_list_districts_skips_addresses_without_district():
    store = build_store([clinic_record(1, "台北市信義路1段100號", 25.0, 121.5, 4.0, 1)])
    assert clinic_query.list_districts(store) == []


def test_search_doctors_by_name(store):
    doctors = clinic_query.search_doctors(store, name="李")
    assert [(d.name, d.clinic_id) for d in doctors] == [("李醫生1A", 1), ("李醫生4A", 4)]
    assert doctors[0].clinic_name == "康健診所1"


def test_search_doctors_by_specialty_includes_directors(store):
    doctors = clinic_query.search_doctors(store, specialty="家醫科")
    assert [d.name for d in doctors] == ["張醫生1", "張醫生5"]
    assert doctors[0].title == "院長"


def test_search_doctors_combines_name_and_specialty(store):
    doctors = clinic_query.search_doctors(store, name="張", specialty="內科")
    assert [d.name for d in doctors] == ["張醫生1"]


def test_search_doctors_without_filters_returns_all_staff(store):
    assert len(clinic_query.search_doctors(store)) == 7


def test_find_nearby_sorted_within_radius(store):
    query = NearbyQuery(lat=25.0330, lng=121.5654, radius=3)
    result = clinic_query.find_nearby(store, query)

    assert ids(result) == [1, 3, 2, 4]
    assert result[0].distance == pytest.approx(0.0, abs=1e-9)
    distances = [clinic.distance for clinic in result]
    assert distances == sorted(distances)
    assert all(distance <= 3 for distance in distances)


def test_find_nearby_default_radius(store):
    result = clinic_query.find_nearby(store, NearbyQuery(lat=25.0330, lng=121.5654))
    assert ids(result) == [1, 3]


def test_find_nearby_keeps_clinic_fields(store):
    result = clinic_query.find_nearby(store, NearbyQuery(lat=25.0330, lng=121.5654, radius=0.1))
    assert ids(result) == [1]
    assert result[0].contact.address == "台北市信義區信義路1段100號"
    assert result[0].model_dump(by_alias=True)["openingHours"] == {"weekday": "09:00-21:00"}


def test_find_nearby_empty_store():
    assert clinic_query.find_nearby(build_store([]), NearbyQuery(lat=25.0, lng=121.5)) == []
