from datetime import date

from fastapi import status
from fastapi.testclient import TestClient

PREFIX = "/api/v1"


def title_row(i):
    return {
        "title_id": i,
        "name": f"Title {i}",
        "type": "Movie",
        "original_release_date": date(2020, 1, i),
        "is_original": False,
        "season_count": None,
        "episode_count": None,
        "is_deleted": False,
        "country": "Japan",
        "language": "Japanese",
        "origin_id": 1,
        "genres": ["Drama"],
    }


def test_health(client):
    resp = client.get("/api/ready")
    assert resp.status_code == 200
    assert resp.json()["message"] == "ready"


def test_titles_paged(client, use_store, make_store):
    use_store(make_store([title_row(i) for i in range(1, 4)]))

    resp = client.get(f"{PREFIX}/titles/page", params={"page": 1, "size": 2})

    assert resp.status_code == status.HTTP_200_OK
    body = resp.json()
    assert (body["total"], body["total_pages"], body["page"], body["page_size"]) == (3, 2, 1, 2)
    assert [t["title_id"] for t in body["data"]] == [1, 2]
    assert body["data"][0]["original_release_date"] == "2020-01-01"
    assert body["has_next"] is True


def test_titles_without_page_show_everything(client, use_store, make_store):
    store = use_store(make_store([title_row(i) for i in range(1, 4)]))

    body = client.get(f"{PREFIX}/titles/page").json()

    assert len(body["data"]) == 3
    assert (body["page"], body["total_pages"]) == (1, 1)
    assert all("LIMIT" not in q for q in store.queries)


def test_titles_filters_reach_the_query(client, use_store, make_store):
    store = use_store(make_store([]))

    resp = client.get(
        f"{PREFIX}/titles/page",
        params={"page": 1, "q": "tokyo", "type": "Series", "genre": 4, "status": "deleted"},
    )

    assert resp.status_code == 200
    assert resp.json()["total_pages"] == 0
    data_sql, params = store.calls[0]
    assert "t.is_deleted = true" in data_sql
    assert params == ("%tokyo%", "Series", 4)


def test_unknown_sort_field_is_bad_request(client, use_store, make_store):
    store = use_store(make_store([]))

    resp = client.get(f"{PREFIX}/titles/page", params={"sort": "t.name; DROP TABLE title"})

    assert resp.status_code == status.HTTP_400_BAD_REQUEST
    assert store.calls == []


def test_invalid_paging_input_is_rejected(client, use_store, make_store):
    use_store(make_store([]))

    assert client.get(f"{PREFIX}/viewers/page", params={"size": 0}).status_code == 422
    assert client.get(f"{PREFIX}/viewers/page", params={"page": 0}).status_code == 422
    assert client.get(f"{PREFIX}/viewers/page", params={"order": "sideways"}).status_code == 422


def test_store_failure_gives_generic_error(client, use_store, make_store):
    use_store(make_store([], fail_on="count"))

    resp = client.get(f"{PREFIX}/licenses/page", params={"page": 1})

    assert resp.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert resp.json() == {"detail": "Failed to load licenses"}


def test_licenses_expiring(client, use_store, make_store):
    row = {
        "license_id": 7,
        "start_date": date(2024, 1, 1),
        "end_date": date(2024, 2, 1),
        "is_active": True,
        "is_deleted": False,
        "title_id": 1,
        "title_name": "Title 1",
        "provider_id": 2,
        "provider_name": "Acme Media",
        "days_remaining": 12,
    }
    store = use_store(make_store([row]))

    body = client.get(f"{PREFIX}/licenses/page", params={"filter": "expiring", "showAll": "true"}).json()

    assert body["data"][0]["provider_name"] == "Acme Media"
    assert store.calls[0][1] == (30,)


def test_genres_sorted_by_count(client, use_store, make_store):
    store = use_store(make_store([{"genre_id": 1, "name": "Drama", "title_count": 4}]))

    resp = client.get(f"{PREFIX}/genres/page", params={"sort": "title_count", "order": "desc"})

    assert resp.status_code == 200
    assert resp.json()["data"] == [{"genre_id": 1, "name": "Drama", "title_count": 4}]
    assert any(q.endswith("ORDER BY title_count DESC") for q in store.queries)


def test_providers_admins_origins(client, use_store, make_store):
    use_store(make_store([
        {"provider_id": 1, "name": "Acme", "email": None, "phone": None, "is_deleted": False, "license_count": 2},
    ]))
    assert client.get(f"{PREFIX}/providers/page").json()["total"] == 1

    use_store(make_store([
        {"admin_id": 1, "username": "root", "email": "root@example.com", "role": "owner",
         "created_date": date(2023, 5, 1), "is_deleted": False},
    ]))
    assert client.get(f"{PREFIX}/admins/page", params={"q": "root"}).json()["data"][0]["role"] == "owner"

    use_store(make_store([{"origin_id": 1, "country": "Japan", "language": "Japanese", "title_count": 3}]))
    assert client.get(f"{PREFIX}/origins/page").json()["data"][0]["country"] == "Japan"


def test_title_filter_options(client, use_store, make_store):
    use_store(make_store(lookups={
        "SELECT DISTINCT type": [{"type": "Movie"}, {"type": "Series"}],
        "SELECT origin_id": [{"origin_id": 1, "country": "Japan", "language": "Japanese"}],
        "SELECT genre_id": [{"genre_id": 2, "name": "Anime"}],
    }))

    body = client.get(f"{PREFIX}/titles/filters").json()

    assert body == {
        "types": ["Movie", "Series"],
        "origins": [{"origin_id": 1, "country": "Japan", "language": "Japanese"}],
        "genres": [{"genre_id": 2, "name": "Anime"}],
    }


def test_title_filter_options_failure(client, use_store, make_store):
    use_store(make_store(fail_on="data"))

    resp = client.get(f"{PREFIX}/titles/filters")

    assert resp.status_code == 500
    assert resp.json()["detail"] == "Failed to load title filters"


def test_shutdown_disposes_the_engine(monkeypatch):
    import app.main as main_module

    disposed = []

    async def fake_dispose():
        disposed.append(True)

    monkeypatch.setattr(main_module, "dispose_engine", fake_dispose)

    with TestClient(main_module.create_app()) as c:
        assert c.get("/api/ready").status_code == 200
        assert disposed == []

    assert disposed == [True]


def test_cors_allows_only_reads(client):
    resp = client.options(
        "/api/ready",
        headers={"Origin": "http://localhost:3000", "Access-Control-Request-Method": "POST"},
    )
    assert resp.status_code == 400
