"""Unit tests for member and group member invitation endpoints."""
from tests.conftest import TEST_BASE_URL, TEST_ITWIN_ID, TEST_TOKEN, StubResponse

INVITATIONS_URL = f"{TEST_BASE_URL}/{TEST_ITWIN_ID}/members/invitations"
GROUP_INVITATIONS_URL = f"{TEST_BASE_URL}/{TEST_ITWIN_ID}/groups/group-1/invitations"

INVITATION = {
    "id": "inv-1",
    "email": "bob@external.test",
    "invitedByEmail": "alice@example.com",
    "status": "Pending",
    "createdDate": "2026-01-01T00:00:00Z",
    "expirationDate": "2026-01-08T00:00:00Z",
    "roles": [{"id": "role-1", "displayName": "Reviewer"}],
}


def test_query_member_invitations(client, session):
    session.queue(StubResponse(200, {"invitations": [INVITATION], "_links": {}}))
    response = client.member_invitations.query_itwin_member_invitations(TEST_TOKEN, TEST_ITWIN_ID)
    assert session.last_call["url"] == INVITATIONS_URL
    assert response.data == [INVITATION]


def test_query_member_invitations_paginated(client, session):
    session.queue(StubResponse(200, {"invitations": []}))
    client.member_invitations.query_itwin_member_invitations(TEST_TOKEN, TEST_ITWIN_ID, skip=3)
    assert session.last_call["url"] == f"{INVITATIONS_URL}?$skip=3"


def test_get_member_invitation(client, session):
    session.queue(StubResponse(200, {"invitation": INVITATION}))
    response = client.member_invitations.get_itwin_member_invitation(TEST_TOKEN, TEST_ITWIN_ID, "inv-1")
    assert session.last_call["url"] == f"{INVITATIONS_URL}/inv-1"
    assert response.data["status"] == "Pending"


def test_delete_member_invitation(client, session):
    session.queue(StubResponse(204))
    response = client.member_invitations.delete_itwin_member_invitation(TEST_TOKEN, TEST_ITWIN_ID, "inv-1")
    assert session.last_call["method"] == "DELETE"
    assert response.status == 204


def test_query_group_member_invitations(client, session):
    session.queue(StubResponse(200, {"invitations": [INVITATION]}))
    response = client.group_member_invitations.query_itwin_group_member_invitations(
        TEST_TOKEN, TEST_ITWIN_ID, "group-1", top=10, skip=0
    )
    assert session.last_call["url"] == f"{GROUP_INVITATIONS_URL}?$top=10&$skip=0"
    assert response.data == [INVITATION]


def test_delete_group_member_invitation(client, session):
    session.queue(StubResponse(204))
    client.group_member_invitations.delete_itwin_group_member_invitation(
        TEST_TOKEN, TEST_ITWIN_ID, "group-1", "inv-1"
    )
    assert session.last_call["method"] == "DELETE"
    assert session.last_call["url"] == f"{GROUP_INVITATIONS_URL}/inv-1"


def test_invitation_listings_expose_next_page(client, session):
    links = {"next": {"href": "n"}}
    session.queue(
        StubResponse(200, {"invitations": [INVITATION], "_links": links}),
        StubResponse(200, {"invitations": [INVITATION], "_links": links}),
    )
    member_invitations = client.member_invitations.query_itwin_member_invitations(TEST_TOKEN, TEST_ITWIN_ID, top=1)
    group_invitations = client.group_member_invitations.query_itwin_group_member_invitations(
        TEST_TOKEN, TEST_ITWIN_ID, "group-1", top=1
    )
    assert member_invitations.next_link == "n"
    assert group_invitations.next_link == "n"
