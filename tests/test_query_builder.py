import pytest
from sqlalchemy import literal_column, text

from app.storage.database import InvalidListRequest
from app.v1_0.repositories import ListQueryBuilder
from app.v1_0.repositories.base_repository import equals, search_predicate, status_predicate
from app.v1_0.repositories.query_builder import param

SORTABLE = {"admin_id": "a.admin_id", "username": "a.username"}


def builder(**kw):
    opts = dict(
        select="a.admin_id, a.username",
        from_="admin a",
        sortable=SORTABLE,
        default_sort="admin_id",
    )
    opts.update(kw)
    return ListQueryBuilder(**opts)


def test_no_predicates_matches_everything(plain_sql):
    spec = builder().build()

    assert plain_sql(spec.base_query) == "SELECT a.admin_id, a.username FROM admin a ORDER BY a.admin_id ASC"
    assert plain_sql(spec.count_query) == "SELECT COUNT(*) AS count FROM admin a"
    assert spec.params == ()


def test_placeholders_are_numbered_in_insertion_order(plain_sql):
    qb = (
        builder()
        .where(status_predicate("a", "active"))
        .where(search_predicate("ann", "a.username", "a.email"))
        .where(equals("a.role", "role", "editor"), literal_column("a.admin_id") > param("min_id", 10))
    )

    spec = qb.build()

    assert (
        "WHERE a.is_deleted = false AND (a.username ILIKE $1 OR a.email ILIKE $1) "
        "AND a.role = $2 AND a.admin_id > $3"
    ) in plain_sql(spec.base_query)
    assert spec.params == ("%ann%", "editor", 10)


def test_binds_carry_asyncpg_casts():
    spec = builder().where(equals("a.role", "role", "editor"), equals("a.admin_id", "id", 3)).build()

    assert "a.role = $1::VARCHAR" in spec.base_query
    assert "a.admin_id = $2::INTEGER" in spec.base_query


def test_base_and_count_share_predicate_and_params(plain_sql):
    spec = builder(count_expr="COUNT(DISTINCT a.admin_id)").where(equals("a.role", "role", "owner")).build()

    where = "WHERE a.role = $1"
    assert where in plain_sql(spec.base_query)
    assert where in plain_sql(spec.count_query)
    assert plain_sql(spec.count_query).startswith("SELECT COUNT(DISTINCT a.admin_id) AS count")
    assert spec.params == ("owner",)


def test_caller_text_is_only_ever_a_parameter(plain_sql):
    term = "x' OR 1=1; DROP TABLE admin; --"
    spec = builder().where(search_predicate(term, "a.username")).build()

    assert "DROP TABLE" not in spec.base_query
    assert "DROP TABLE" not in spec.count_query
    assert spec.params == (f"%{term}%",)


def test_braces_in_sql_and_values_are_kept_verbatim(plain_sql):
    spec = builder().where(text("a.tags @> '{drama}'"), equals("a.role", "role", "{0}")).build()

    assert "WHERE a.tags @> '{drama}' AND a.role = $1" in plain_sql(spec.base_query)
    assert spec.params == ("{0}",)


def test_text_criteria_bind_their_own_values(plain_sql):
    spec = builder().where(
        equals("a.role", "role", "owner"),
        text("a.created_date > CURRENT_DATE - make_interval(days => :days)").bindparams(param("days", 7)),
    ).build()

    assert "make_interval(days => $2)" in plain_sql(spec.count_query)
    assert spec.params == ("owner", 7)


def test_group_by_and_count_from(plain_sql):
    spec = builder(
        from_="admin a\nLEFT JOIN audit x ON x.admin_id = a.admin_id",
        count_from="admin a",
        group_by="a.admin_id, a.username",
    ).build()

    assert "GROUP BY a.admin_id, a.username ORDER BY" in plain_sql(spec.base_query)
    assert "LEFT JOIN" not in spec.count_query
    assert "GROUP BY" not in spec.count_query


def test_paging_fields_are_carried_into_query_spec():
    spec = builder().build(page=4, page_size=25, show_all=True)
    assert (spec.page, spec.page_size, spec.show_all) == (4, 25, True)


@pytest.mark.parametrize("key", ["username", "a.username"])
def test_order_by_accepts_key_or_whitelisted_column(key):
    spec = builder().order_by(key, "desc").build()
    assert spec.base_query.endswith("ORDER BY a.username DESC")


def test_order_by_none_keeps_default_column():
    spec = builder().order_by(None, "DESC").build()
    assert spec.base_query.endswith("ORDER BY a.admin_id DESC")


@pytest.mark.parametrize("key", ["password", "a.username; DROP TABLE admin", "1"])
def test_order_by_rejects_unknown_columns(key):
    with pytest.raises(InvalidListRequest):
        builder().order_by(key)


def test_order_by_rejects_unknown_direction():
    with pytest.raises(InvalidListRequest):
        builder().order_by("username", "ASC, (SELECT 1)")


def test_default_sort_must_be_sortable():
    with pytest.raises(ValueError):
        builder(default_sort="email")
