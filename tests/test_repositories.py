import asyncio

import pytest

from app.v1_0.repositories import (
    AdminRepository,
    GenreRepository,
    ListingRepository,
    LicenseRepository,
    OriginRepository,
    ProviderRepository,
    TitleRepository,
    ViewerRepository,
)
from app.v1_0.schemas import ListParams, LicenseFilters, StatusFilters, TitleFilters


def test_list_params_default_to_show_all():
    params = ListParams()
    assert params.effective_show_all is True
    assert params.effective_page == 1


def test_list_params_with_page_are_paged():
    params = ListParams(page=2)
    assert params.effective_show_all is False
    assert params.effective_page == 2


def test_list_params_explicit_show_all_false_without_page():
    params = ListParams(show_all=False)
    assert params.effective_show_all is False
    assert params.effective_page == 1


def test_list_params_blank_search_is_dropped():
    assert ListParams(q="   ").q is None
    assert ListParams(q=" drama ").q == "drama"


def test_titles_all_filters(plain_sql):
    spec = TitleRepository().build_spec(
        ListParams(page=2, size=5, q="korea", sort="name", order="desc"),
        TitleFilters(status="deleted", type="Series", origin_id=3, genre_id=9),
    )

    base = plain_sql(spec.base_query)
    assert "t.is_deleted = true" in base
    assert "(t.name ILIKE $1 OR o.country ILIKE $1 OR o.language ILIKE $1)" in base
    assert "t.type = $2" in base
    assert "o.origin_id = $3" in base
    assert "tgf.genre_id = $4" in base
    assert spec.params == ("%korea%", "Series", 3, 9)
    assert spec.base_query.endswith("ORDER BY t.name DESC")
    assert spec.count_query.startswith("SELECT COUNT(DISTINCT t.title_id) AS count")
    assert "tgf.genre_id = $4" in plain_sql(spec.count_query)
    assert (spec.page, spec.page_size, spec.show_all) == (2, 5, False)


def test_titles_default_to_active_only(plain_sql):
    spec = TitleRepository().build_spec(ListParams())
    assert "WHERE t.is_deleted = false GROUP BY t.title_id" in plain_sql(spec.base_query)
    assert spec.params == ()
    assert spec.show_all is True


def test_licenses_expiring_window(plain_sql):
    spec = LicenseRepository().build_spec(
        ListParams(q="acme"),
        LicenseFilters(filter="expiring"),
    )

    base = plain_sql(spec.base_query)
    assert "(t.name ILIKE $1 OR cp.name ILIKE $1)" in base
    assert "l.is_active = true" in base
    assert "CURRENT_DATE + make_interval(days => $2)" in base
    assert spec.params == ("%acme%", 30)


def test_licenses_inactive_filter_has_no_params():
    spec = LicenseRepository().build_spec(ListParams(), LicenseFilters(filter="inactive"))
    assert "l.is_active = false" in spec.count_query
    assert spec.params == ()


def test_grouped_lists_count_the_base_table_only(plain_sql):
    for repo, table in (
        (GenreRepository(), "genre g"),
        (OriginRepository(), "origin o"),
        (ProviderRepository(), "contentprovider cp"),
    ):
        spec = repo.build_spec(ListParams(q="x"))
        assert f"FROM {table} WHERE" in plain_sql(spec.count_query)
        assert "GROUP BY" in spec.base_query
        assert spec.params == ("%x%",)


def test_admins_and_viewers_search_columns(plain_sql):
    admins = AdminRepository().build_spec(ListParams(q="root"), StatusFilters())
    viewers = ViewerRepository().build_spec(ListParams(q="root"))

    assert "a.role ILIKE $1" in plain_sql(admins.base_query)
    assert "WHERE (username ILIKE $1 OR email ILIKE $1) ORDER BY" in plain_sql(viewers.base_query)


def test_list_paginated_runs_through_the_store(make_store):
    store = make_store([{"genre_id": i, "name": f"g{i}", "title_count": 0} for i in range(1, 13)])

    page = asyncio.run(GenreRepository().list_paginated(ListParams(page=2, size=5), store))

    assert [r["genre_id"] for r in page.data] == [6, 7, 8, 9, 10]
    assert (page.total, page.total_pages) == (12, 3)
    assert any(q.endswith("LIMIT 5 OFFSET 5") for q in store.queries)


def test_listing_repository_requires_apply_filters():
    class Unfiltered(ListingRepository):
        select = "g.genre_id"
        from_ = "genre g"
        sortable = {"genre_id": "g.genre_id"}
        default_sort = "genre_id"

    with pytest.raises(TypeError):
        Unfiltered()
