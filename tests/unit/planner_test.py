"""Unit tests for request planning and wire parameters."""

from __future__ import annotations

from contentql.core.planner import FetchRequest, plan, to_query_params
from contentql.models import Join, Prop


def _blog_query(**params: object) -> Join:
    return Join(
        key="blog",
        children=(
            Prop(key="id"),
            Prop(key="title"),
            Join(key="author", children=(Prop(key="name"),)),
            Join(key="hero_image", children=(Prop(key="url"),), params={"width": 100}),
        ),
        params=dict(params),
    )


class TestPlan:
    def test_selects_immediate_children_only(self) -> None:
        request = plan(_blog_query())
        assert request.collection == "blog"
        assert request.selected_fields == ("id", "title", "author", "hero_image")

    def test_duplicate_children_are_selected_once(self) -> None:
        request = plan(Join(key="blog", children=(Prop(key="title"), Prop(key="title"))))
        assert request.selected_fields == ("title",)

    def test_identifier_filter_is_remapped(self) -> None:
        request = plan(_blog_query(id="abc"))
        assert request.params == {"sys.id": "abc"}

    def test_limit_skip_order_pass_through(self) -> None:
        request = plan(_blog_query(limit=4, skip=8, order="-sys.createdAt"))
        assert request.params == {"limit": 4, "skip": 8, "order": "-sys.createdAt"}

    def test_other_filters_are_left_as_given(self) -> None:
        request = plan(_blog_query(**{"fields.slug": "hello"}))
        assert request.params == {"fields.slug": "hello"}

    def test_collection_name_is_camel_cased(self) -> None:
        assert plan(Join(key="blog_post")).collection == "blogPost"


class TestToQueryParams:
    def test_renders_wire_parameters(self) -> None:
        query = to_query_params(plan(_blog_query(id="abc", limit=4)))
        assert query == {
            "content_type": "blog",
            "include": "10",
            "select": "sys.id,fields.title,fields.author,fields.heroImage",
            "sys.id": "abc",
            "limit": "4",
        }

    def test_omits_select_without_children(self) -> None:
        query = to_query_params(FetchRequest(collection="blog"))
        assert query == {"content_type": "blog", "include": "10"}

    def test_formats_lists_and_booleans(self) -> None:
        query = to_query_params(
            FetchRequest(collection="blog", params={"sys.id[in]": ["a", "b"], "fields.published": True})
        )
        assert query["sys.id[in]"] == "a,b"
        assert query["fields.published"] == "true"
