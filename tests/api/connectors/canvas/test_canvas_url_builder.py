"""Testes da montagem de URL (path + query allow-list)."""

from __future__ import annotations

import pytest

from api.connectors.canvas.errors import MissingRequiredParameter
from api.connectors.canvas.registry import (
    EndpointSpec,
    HttpMethod,
    ParameterLocation,
    ParameterSpec,
)
from api.connectors.canvas.url_builder import build_query, build_url, flatten_query
from api.connectors.canvas.urls import CANVAS_URLS

SUBMISSION = EndpointSpec(
    "GET_SUBMISSION",
    HttpMethod.GET,
    lambda course_id, user_id: f"courses/{course_id}/submissions/{user_id}",
    (
        ParameterSpec("course_id", True, ParameterLocation.PATH),
        ParameterSpec("user_id", True, ParameterLocation.PATH),
        ParameterSpec("include", False, ParameterLocation.QUERY),
        ParameterSpec("comment", False, ParameterLocation.FORM),
    ),
)


class TestBuildUrl:
    """Testes de build_url."""

    def test_renders_path_parameters_by_name(self) -> None:
        assert build_url(SUBMISSION, {"user_id": 7, "course_id": 3}) == (
            "courses/3/submissions/7"
        )

    def test_static_template_called_without_arguments(self) -> None:
        assert build_url(CANVAS_URLS.get("LIST_ACCOUNTS"), {}) == "accounts"

    def test_drops_undeclared_query_parameters(self) -> None:
        params = {
            "course_id": 3,
            "user_id": 7,
            "include": "user",
            "as_user_id": "1",
            "comment": "form-only",
        }
        assert build_url(SUBMISSION, params) == "courses/3/submissions/7?include=user"

    def test_paging_parameters_always_allowed(self) -> None:
        url = build_url(CANVAS_URLS.get("LIST_ACCOUNTS"), {"page": 2, "per_page": 10})
        assert url == "accounts?page=2&per_page=10"

    def test_no_question_mark_when_query_empty(self) -> None:
        assert "?" not in build_url(SUBMISSION, {"course_id": 1, "user_id": 2, "x": 1})

    def test_path_values_are_encoded(self) -> None:
        url = build_url(SUBMISSION, {"course_id": "A/B C?", "user_id": "self"})
        assert url == "courses/A%2FB%20C%3F/submissions/self"

    def test_sis_identifiers_keep_colon_and_at(self) -> None:
        url = build_url(
            SUBMISSION,
            {"course_id": "sis_course_id:ABC", "user_id": "sis_login_id:ana@escola.br"},
        )
        assert url == "courses/sis_course_id:ABC/submissions/sis_login_id:ana@escola.br"

    def test_missing_path_parameter_raises(self) -> None:
        with pytest.raises(MissingRequiredParameter) as exc_info:
            build_url(SUBMISSION, {"course_id": 1})
        assert exc_info.value.missing == ["user_id"]


class TestBuildQuery:
    """Testes de codificação da query string."""

    def test_list_values_use_brackets(self) -> None:
        endpoint = CANVAS_URLS.get("LIST_YOUR_COURSES")
        query = build_query(endpoint, {"include": ["term", "teachers"]})
        assert query == "include%5B%5D=term&include%5B%5D=teachers"

    def test_booleans_are_lowercase(self) -> None:
        endpoint = CANVAS_URLS.get("GET_SUB_ACCOUNTS_OF_ACCOUNT")
        assert build_query(endpoint, {"account_id": 1, "recursive": True}) == "recursive=true"

    def test_flatten_nested_mappings(self) -> None:
        pairs = flatten_query({"b": {"y": 2, "x": 1}, "a": "z"})
        assert pairs == [("a", "z"), ("b[x]", "1"), ("b[y]", "2")]
