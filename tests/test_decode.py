import pytest

from clockify_api.decode import decode_many, decode_one
from clockify_api.errors import DecodeError
from clockify_api.types import Client, Project, Task, Workspace


def test_decode_one():
    client = decode_one(Client, b'{"id": "c1", "name": "Acme", "workspaceId": "ws1"}')
    assert client.id == "c1"
    assert client.name == "Acme"
    assert client.archived is False


def test_decode_ignores_unknown_fields():
    client = decode_one(Client, b'{"id": "c1", "name": "Acme", "currencyId": "EUR"}')
    assert client.name == "Acme"


def test_empty_listing_is_empty_list():
    assert decode_many(Client, b"[]") == []
    assert decode_many(Client, b"null") == []


def test_decode_many_keeps_order():
    clients = decode_many(Client, b'[{"name": "A"}, {"name": "B"}, {"name": "C"}]')
    assert [c.name for c in clients] == ["A", "B", "C"]


def test_invalid_json():
    with pytest.raises(DecodeError) as exc_info:
        decode_one(Client, b"<html>")
    assert exc_info.value.stage == "json unmarshal"
    assert str(exc_info.value).startswith("json unmarshal: ")


def test_type_mismatch_names_field():
    with pytest.raises(DecodeError) as exc_info:
        decode_one(Client, b'{"id": "c1", "name": 5}')
    assert exc_info.value.field == "name"
    assert exc_info.value.expected == "str"
    assert str(exc_info.value) == "unmarshal field name of type str"


def test_nested_type_mismatch_names_path():
    with pytest.raises(DecodeError) as exc_info:
        decode_one(Project, b'{"id": "p1", "hourlyRate": {"amount": "a lot"}}')
    assert exc_info.value.field == "hourlyRate.amount"
    assert exc_info.value.expected == "int"


def test_list_type_mismatch_names_index():
    with pytest.raises(DecodeError) as exc_info:
        decode_many(Client, b'[{"name": "A"}, {"name": ["B"]}]')
    assert exc_info.value.field == "1.name"


def test_listing_rejects_object():
    with pytest.raises(DecodeError) as exc_info:
        decode_many(Client, b'{"name": "A"}')
    assert exc_info.value.expected == "list"


def test_workspace_settings():
    ws = decode_one(
        Workspace,
        b"""{
            "id": "ws1",
            "name": "Test Workspace",
            "hourlyRate": {"amount": 5000, "currency": "USD"},
            "memberships": [{"userId": "u1", "membershipType": "WORKSPACE"}],
            "workspaceSettings": {
                "forceProjects": true,
                "lockTimeEntries": "2020-01-01T00:00:00Z",
                "round": {"minutes": "15", "round": "Round to nearest"}
            }
        }""",
    )
    assert ws.hourlyRate.amount == 5000
    assert ws.memberships[0].userId == "u1"
    assert ws.workspaceSettings.forceProjects is True
    assert ws.workspaceSettings.lockTimeEntries.year == 2020
    assert ws.workspaceSettings.round.minutes == "15"


def test_null_keeps_zero_value():
    client = decode_one(Client, b'{"id": "c1", "name": "A", "archived": null}')
    assert client.archived is False

    projects = decode_many(
        Project,
        b'[{"id": "p1", "billable": null, "archived": null, "memberships": null, '
        b'"tasks": null, "customFields": null}]',
    )
    assert projects[0].billable is False
    assert projects[0].archived is False
    assert projects[0].memberships == []
    assert projects[0].tasks == []
    assert projects[0].customFields == []


def test_null_lists_on_workspace_and_task():
    ws = decode_one(
        Workspace,
        b'{"id": "ws1", "memberships": null, "workspaceSettings": {"adminOnlyPages": null}}',
    )
    assert ws.memberships == []
    assert ws.workspaceSettings.adminOnlyPages == []

    task = decode_one(Task, b'{"id": "t1", "assigneeIds": null, "userGroupIds": null}')
    assert task.assigneeIds == []
    assert task.userGroupIds == []


def test_null_defaults_are_not_shared():
    first = decode_one(Project, b'{"memberships": null}')
    second = decode_one(Project, b'{"memberships": null}')
    first.memberships.append("x")
    assert second.memberships == []
