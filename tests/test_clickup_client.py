"""Tests for the ClickUp client, using httpx.MockTransport."""

import json

import httpx
import pytest

from playbooks_mcp.clickup_client import ClickUpClient, ClickUpError

BASE_URL = "https://api.clickup.com/api/v2"


def make_client(routes, calls=None, **kwargs):
    """
    Client whose requests are answered from a {(method, path): response} map

    A response is either a JSON-able object (200) or an (status, body) tuple.
    """
    def handler(request):
        if calls is not None:
            calls.append(request)
        key = (request.method, request.url.path)
        if key not in routes:
            return httpx.Response(404, json={"err": "not found"})
        response = routes[key]
        if isinstance(response, tuple):
            status, body = response
            return httpx.Response(status, json=body)
        return httpx.Response(200, json=response)

    return ClickUpClient("pk_test_token", base_url=BASE_URL,
                         transport=httpx.MockTransport(handler), **kwargs)


def test_get_docs_fetches_content_in_order():
    calls = []
    client = make_client({
        ("POST", "/api/v2/docs/search"): {"docs": [
            {"id": "d1", "name": "First", "date_created": 1700000000000,
             "creator": 7, "folder": {"id": "98107928", "name": "Playbooks"}},
            {"id": "d2", "name": "Second"},
        ]},
        ("GET", "/api/v2/docs/d1/pages"): [
            {"content": "Page one"},
            {"content": {"markdown": "Page two"}},
        ],
        ("GET", "/api/v2/docs/d2/pages"): {"pages": [{"content": {"text": "Plain text"}}]},
    }, calls=calls)

    docs = client.get_docs("98107928")

    assert [doc.id for doc in docs] == ["d1", "d2"]
    assert docs[0].content == "Page one\n\nPage two"
    assert docs[0].date_created == "1700000000000"
    assert docs[0].creator.id == "7"
    assert docs[0].folder.name == "Playbooks"
    assert docs[1].content == "Plain text"
    assert docs[1].folder.id == "98107928"
    assert docs[1].folder.name == "Unknown"

    search = calls[0]
    assert search.headers["Authorization"] == "pk_test_token"
    assert json.loads(search.content) == {"folder_id": "98107928", "include_closed": True}


def test_get_docs_uses_given_folder_name():
    client = make_client({
        ("POST", "/api/v2/docs/search"): {"docs": [{"id": "d1", "name": "First"}]},
        ("GET", "/api/v2/docs/d1/pages"): [],
    })

    docs = client.get_docs("55", folder_name="Runbooks")

    assert docs[0].folder.name == "Runbooks"
    assert docs[0].content == ""


def test_get_docs_keeps_doc_when_pages_fail():
    client = make_client({
        ("POST", "/api/v2/docs/search"): {"docs": [{"id": "d1", "name": "Broken"}]},
        ("GET", "/api/v2/docs/d1/pages"): (500, {"err": "boom"}),
    })

    docs = client.get_docs("98107928")

    assert len(docs) == 1
    assert docs[0].name == "Broken"
    assert docs[0].content == ""


def test_get_docs_skips_docs_without_id():
    client = make_client({
        ("POST", "/api/v2/docs/search"): {"docs": [{"name": "No id"}, {"id": "d1"}]},
        ("GET", "/api/v2/docs/d1/pages"): [],
    })

    assert [doc.id for doc in client.get_docs("1")] == ["d1"]


def test_get_docs_returns_empty_on_auth_failure():
    client = make_client({
        ("POST", "/api/v2/docs/search"): (401, {"err": "Token invalid"}),
    })

    assert client.get_docs("98107928") == []


def test_get_docs_returns_empty_on_non_object_body():
    client = make_client({("POST", "/api/v2/docs/search"): []})
    assert client.get_docs("98107928") == []


def test_get_docs_skips_malformed_doc_and_keeps_siblings():
    client = make_client({
        ("POST", "/api/v2/docs/search"): {"docs": [
            {"id": "d1", "name": 123},
            "not-a-doc",
            {"id": "d2", "name": "Valid"},
        ]},
        ("GET", "/api/v2/docs/d1/pages"): [],
        ("GET", "/api/v2/docs/d2/pages"): [{"content": "text"}, "stray"],
    })

    docs = client.get_docs("98107928")

    assert [doc.id for doc in docs] == ["d2"]
    assert docs[0].content == "text"


def test_get_docs_handles_missing_docs_key():
    client = make_client({("POST", "/api/v2/docs/search"): {}})
    assert client.get_docs("98107928") == []


def test_request_error_carries_status_code():
    client = make_client({("GET", "/api/v2/team"): (401, {"err": "Token invalid"})})

    with pytest.raises(ClickUpError) as exc_info:
        client.get_workspaces()

    assert exc_info.value.status_code == 401
    assert "401" in str(exc_info.value)


def test_transport_error_becomes_clickup_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    client = ClickUpClient("pk_test_token", base_url=BASE_URL, transport=httpx.MockTransport(handler))

    with pytest.raises(ClickUpError) as exc_info:
        client.get_workspaces()

    assert exc_info.value.status_code is None


def test_get_folders_sends_archived_flag():
    calls = []
    client = make_client({
        ("GET", "/api/v2/space/s1/folder"): {"folders": [{"id": "f1", "name": "Playbooks"}]},
    }, calls=calls)

    assert client.get_folders("s1") == [{"id": "f1", "name": "Playbooks"}]
    assert calls[0].url.params["archived"] == "false"


def test_get_all_docs_walks_folders_and_deduplicates():
    client = make_client({
        ("GET", "/api/v2/team/w1/space"): {"spaces": [{"id": "s1"}, {"id": "s2"}]},
        ("GET", "/api/v2/space/s1/folder"): {"folders": [
            {"id": "f1", "name": "Playbooks"},
            {"id": "f2", "name": "Archive"},
        ]},
        ("GET", "/api/v2/space/s2/folder"): {"folders": []},
        ("POST", "/api/v2/docs/search"): {"docs": [{"id": "d1", "name": "Shared"}]},
        ("GET", "/api/v2/docs/d1/pages"): [{"content": "text"}],
    }, workspace_id="w1")

    docs = client.get_all_docs()

    assert [doc.id for doc in docs] == ["d1"]
    assert docs[0].folder.id == "f1"
    assert docs[0].folder.name == "Playbooks"


def test_get_all_docs_filters_space():
    calls = []
    client = make_client({
        ("GET", "/api/v2/team/w1/space"): {"spaces": [{"id": "s1"}, {"id": "s2"}]},
        ("GET", "/api/v2/space/s2/folder"): {"folders": []},
    }, calls=calls, workspace_id="w1", space_id="s2")

    assert client.get_all_docs() == []
    assert "/api/v2/space/s1/folder" not in [call.url.path for call in calls]


def test_get_all_docs_uses_every_workspace_when_unset():
    client = make_client({
        ("GET", "/api/v2/team"): {"teams": [{"id": "w1"}, {"id": "w2"}]},
        ("GET", "/api/v2/team/w1/space"): {"spaces": []},
        ("GET", "/api/v2/team/w2/space"): {"spaces": [{"id": "s9"}]},
        ("GET", "/api/v2/space/s9/folder"): {"folders": [{"id": "f9", "name": "Docs"}]},
        ("POST", "/api/v2/docs/search"): {"docs": [{"id": "d9", "name": "Nine"}]},
        ("GET", "/api/v2/docs/d9/pages"): [],
    })

    docs = client.get_all_docs()

    assert [doc.id for doc in docs] == ["d9"]
    assert docs[0].folder.name == "Docs"


def test_get_all_docs_returns_empty_on_error():
    client = make_client({("GET", "/api/v2/team"): (500, {"err": "down"})})
    assert client.get_all_docs() == []


def test_find_playbooks_folder_prefers_playbooks_folder():
    client = make_client({
        ("GET", "/api/v2/team"): {"teams": [{"id": "w1"}]},
        ("GET", "/api/v2/team/w1/space"): {"spaces": [{"id": "s1"}]},
        ("GET", "/api/v2/space/s1/folder"): {"folders": [
            {"id": "f1", "name": "RPNet Clients"},
            {"id": "f2", "name": "Playbooks"},
        ]},
    })

    assert client.find_playbooks_folder() == {"id": "f2", "name": "Playbooks"}


def test_find_playbooks_folder_falls_back_to_rpnet():
    client = make_client({
        ("GET", "/api/v2/team"): {"teams": [{"id": "w1"}]},
        ("GET", "/api/v2/team/w1/space"): {"spaces": [{"id": "s1"}]},
        ("GET", "/api/v2/space/s1/folder"): {"folders": [{"id": "f1", "name": "RPNet"}]},
    })

    assert client.find_playbooks_folder() == {"id": "f1", "name": "RPNet"}


def test_find_playbooks_folder_none():
    client = make_client({
        ("GET", "/api/v2/team"): {"teams": [{"id": "w1"}]},
        ("GET", "/api/v2/team/w1/space"): {"spaces": [{"id": "s1"}]},
        ("GET", "/api/v2/space/s1/folder"): {"folders": [{"id": "f2", "name": "Playbooks"}]},
    })

    assert client.find_playbooks_folder() is None


def test_find_playbooks_folder_none_on_error():
    client = make_client({("GET", "/api/v2/team"): (403, {"err": "forbidden"})})
    assert client.find_playbooks_folder() is None


def test_client_closes_as_context_manager():
    with make_client({}) as client:
        pass

    assert client._http.is_closed
