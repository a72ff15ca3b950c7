"""Registro de endpoints Canvas (subconjunto gerado da documentação da API).

Arquivo produzido pelo gerador offline; editar apenas via regeneração.
Cada URI é uma função que recebe os parâmetros de path por nome.
"""

from __future__ import annotations

from .registry import (
    EndpointRegistry,
    EndpointSpec,
    HttpMethod,
    ParameterLocation,
    ParameterSpec,
)


def _path(name: str) -> ParameterSpec:
    return ParameterSpec(name, required=True, location=ParameterLocation.PATH)


def _query(name: str, required: bool = False) -> ParameterSpec:
    return ParameterSpec(name, required=required, location=ParameterLocation.QUERY)


def _form(name: str, required: bool = False) -> ParameterSpec:
    return ParameterSpec(name, required=required, location=ParameterLocation.FORM)


_EXTERNAL_TOOL_FORM = (
    _form("name", required=True),
    _form("privacy_level", required=True),
    _form("consumer_key", required=True),
    _form("shared_secret", required=True),
    _form("description"),
    _form("url"),
    _form("domain"),
    _form("config_type"),
    _form("config_xml"),
    _form("config_url"),
)


ENDPOINTS: tuple[EndpointSpec, ...] = (
    # Accounts
    EndpointSpec(
        "LIST_ACCOUNTS",
        HttpMethod.GET,
        lambda: "accounts",
        (_query("include"),),
    ),
    EndpointSpec(
        "GET_SINGLE_ACCOUNT",
        HttpMethod.GET,
        lambda id: f"accounts/{id}",
        (_path("id"),),
    ),
    EndpointSpec(
        "GET_SUB_ACCOUNTS_OF_ACCOUNT",
        HttpMethod.GET,
        lambda account_id: f"accounts/{account_id}/sub_accounts",
        (_path("account_id"), _query("recursive")),
    ),
    # Courses
    EndpointSpec(
        "LIST_YOUR_COURSES",
        HttpMethod.GET,
        lambda: "courses",
        (
            _query("enrollment_type"),
            _query("enrollment_role"),
            _query("enrollment_state"),
            _query("include"),
            _query("state"),
        ),
    ),
    EndpointSpec(
        "GET_SINGLE_COURSE_COURSES",
        HttpMethod.GET,
        lambda id: f"courses/{id}",
        (_path("id"), _query("include")),
    ),
    EndpointSpec(
        "CREATE_NEW_COURSE",
        HttpMethod.POST,
        lambda account_id: f"accounts/{account_id}/courses",
        (
            _path("account_id"),
            _form("course[name]"),
            _form("course[course_code]"),
            _form("offer"),
            _form("enroll_me"),
        ),
    ),
    EndpointSpec(
        "UPDATE_COURSE",
        HttpMethod.PUT,
        lambda id: f"courses/{id}",
        (
            _path("id"),
            _form("course[name]"),
            _form("course[course_code]"),
            _form("offer"),
        ),
    ),
    EndpointSpec(
        "REMOVE_COURSE_FROM_FAVORITES",
        HttpMethod.DELETE,
        lambda id: f"users/self/favorites/courses/{id}",
        (_path("id"),),
    ),
    # Assignments
    EndpointSpec(
        "LIST_ASSIGNMENTS",
        HttpMethod.GET,
        lambda course_id: f"courses/{course_id}/assignments",
        (
            _path("course_id"),
            _query("include"),
            _query("search_term"),
            _query("bucket"),
            _query("order_by"),
        ),
    ),
    EndpointSpec(
        "CREATE_ASSIGNMENT",
        HttpMethod.POST,
        lambda course_id: f"courses/{course_id}/assignments",
        (
            _path("course_id"),
            _form("assignment[name]", required=True),
            _form("assignment[points_possible]"),
            _form("assignment[submission_types]"),
            _form("assignment[due_at]"),
        ),
    ),
    # Files
    EndpointSpec(
        "LIST_FOLDERS",
        HttpMethod.GET,
        lambda id: f"folders/{id}/folders",
        (_path("id"),),
    ),
    EndpointSpec(
        "LIST_FILES_FOLDERS",
        HttpMethod.GET,
        lambda id: f"folders/{id}/files",
        (
            _path("id"),
            _query("content_types"),
            _query("search_term"),
            _query("include"),
            _query("sort"),
            _query("order"),
        ),
    ),
    # Activity stream / todo
    EndpointSpec(
        "HIDE_STREAM_ITEM",
        HttpMethod.DELETE,
        lambda id: f"users/self/activity_stream/{id}",
        (_path("id"),),
    ),
    EndpointSpec(
        "LIST_COUNTS_FOR_TODO_ITEMS",
        HttpMethod.GET,
        lambda: "users/self/todo_item_count",
        (_query("include"),),
    ),
    # Discussion topics
    EndpointSpec(
        "SUBSCRIBE_TO_TOPIC_COURSES",
        HttpMethod.PUT,
        lambda course_id, topic_id: (
            f"courses/{course_id}/discussion_topics/{topic_id}/subscribed"
        ),
        (_path("course_id"), _path("topic_id")),
    ),
    EndpointSpec(
        "UNSUBSCRIBE_FROM_TOPIC_COURSES",
        HttpMethod.DELETE,
        lambda course_id, topic_id: (
            f"courses/{course_id}/discussion_topics/{topic_id}/subscribed"
        ),
        (_path("course_id"), _path("topic_id")),
    ),
    EndpointSpec(
        "MARK_TOPIC_AS_UNREAD_COURSES",
        HttpMethod.DELETE,
        lambda course_id, topic_id: (
            f"courses/{course_id}/discussion_topics/{topic_id}/read"
        ),
        (_path("course_id"), _path("topic_id")),
    ),
    EndpointSpec(
        "MARK_ENTRY_AS_READ_GROUPS",
        HttpMethod.PUT,
        lambda group_id, topic_id, entry_id: (
            f"groups/{group_id}/discussion_topics/{topic_id}/entries/{entry_id}/read"
        ),
        (
            _path("group_id"),
            _path("topic_id"),
            _path("entry_id"),
            _query("forced_read_state"),
        ),
    ),
    EndpointSpec(
        "LIST_EXTERNAL_FEEDS_COURSES",
        HttpMethod.GET,
        lambda course_id: f"courses/{course_id}/external_feeds",
        (_path("course_id"),),
    ),
    EndpointSpec(
        "REORDER_PINNED_TOPICS_COURSES",
        HttpMethod.POST,
        lambda course_id: f"courses/{course_id}/discussion_topics/reorder",
        (_path("course_id"), _form("order", required=True)),
    ),
    # Groups
    EndpointSpec(
        "CREATE_GROUP_GROUP_CATEGORIES",
        HttpMethod.POST,
        lambda group_category_id: f"group_categories/{group_category_id}/groups",
        (
            _path("group_category_id"),
            _form("name"),
            _form("description"),
            _form("is_public"),
            _form("join_level"),
        ),
    ),
    EndpointSpec(
        "EXPORT_CONTENT_GROUPS",
        HttpMethod.POST,
        lambda group_id: f"groups/{group_id}/content_exports",
        (
            _path("group_id"),
            _query("export_type", required=True),
            _query("skip_notifications"),
            _query("select"),
        ),
    ),
    # Content migrations
    EndpointSpec(
        "GET_MIGRATION_ISSUE_COURSES",
        HttpMethod.GET,
        lambda course_id, content_migration_id, id: (
            f"courses/{course_id}/content_migrations/{content_migration_id}"
            f"/migration_issues/{id}"
        ),
        (_path("course_id"), _path("content_migration_id"), _path("id")),
    ),
    # Polls
    EndpointSpec(
        "GET_SINGLE_POLL_CHOICE",
        HttpMethod.GET,
        lambda poll_id, id: f"polls/{poll_id}/poll_choices/{id}",
        (_path("poll_id"), _path("id")),
    ),
    # Grading standards
    EndpointSpec(
        "CREATE_NEW_GRADING_STANDARD_COURSES",
        HttpMethod.POST,
        lambda course_id: f"courses/{course_id}/grading_standards",
        (
            _path("course_id"),
            _form("title", required=True),
            _form("grading_scheme_entry[name]", required=True),
            _form("grading_scheme_entry[value]", required=True),
        ),
    ),
    # External tools
    EndpointSpec(
        "CREATE_EXTERNAL_TOOL_COURSES",
        HttpMethod.POST,
        lambda course_id: f"courses/{course_id}/external_tools",
        (_path("course_id"), *_EXTERNAL_TOOL_FORM),
    ),
    EndpointSpec(
        "CREATE_EXTERNAL_TOOL_ACCOUNTS",
        HttpMethod.POST,
        lambda account_id: f"accounts/{account_id}/external_tools",
        (_path("account_id"), *_EXTERNAL_TOOL_FORM),
    ),
    # Submissions
    EndpointSpec(
        "GET_SINGLE_SUBMISSION_SECTIONS",
        HttpMethod.GET,
        lambda section_id, assignment_id, user_id: (
            f"sections/{section_id}/assignments/{assignment_id}/submissions/{user_id}"
        ),
        (
            _path("section_id"),
            _path("assignment_id"),
            _path("user_id"),
            _query("include"),
        ),
    ),
    # Peer reviews
    EndpointSpec(
        "DELETE_PEER_REVIEW_SECTIONS",
        HttpMethod.DELETE,
        lambda section_id, assignment_id, submission_id: (
            f"sections/{section_id}/assignments/{assignment_id}"
            f"/submissions/{submission_id}/peer_reviews"
        ),
        (
            _path("section_id"),
            _path("assignment_id"),
            _path("submission_id"),
            _query("user_id", required=True),
        ),
    ),
)


CANVAS_URLS = EndpointRegistry(ENDPOINTS)


__all__ = ["CANVAS_URLS", "ENDPOINTS"]
