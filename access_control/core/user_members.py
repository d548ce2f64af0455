"""Access Control user membership operations."""
from __future__ import annotations
from typing import List, Optional

from .client import BaseClient
from .models import AddUserMember, AddUserMemberResponse, APIResponse, UserMember


class UserMembersClient:
    """Client for the user members of an iTwin.

    Member listings may contain placeholder records for users deleted upstream
    (``email``, ``givenName``, ``surname`` and ``organization`` set to None).
    They are returned as-is.
    """

    def __init__(self, client: BaseClient):
        """Initialize user members client.

        Args:
            client: Shared Access Control HTTP client
        """
        self.client = client

    def _members_url(self, itwin_id: str) -> str:
        return f"{self.client.base_url}/{itwin_id}/members/users"

    def query_itwin_user_members(
        self,
        access_token: str,
        itwin_id: str,
        top: Optional[int] = None,
        skip: Optional[int] = None,
    ) -> APIResponse[List[UserMember]]:
        """List user members, optionally paginated.

        Args:
            access_token: Caller access token
            itwin_id: iTwin ID
            top: Maximum number of members to return
            skip: Number of members to skip

        Returns:
            APIResponse whose data is the list of user members
        """
        url = self._members_url(itwin_id) + self.client.pagination_query(top, skip)
        return self.client.send_request(access_token, "GET", url, extract=lambda payload: payload.get("members"))

    def get_itwin_user_member(self, access_token: str, itwin_id: str, member_id: str) -> APIResponse[UserMember]:
        """Retrieve a user member (404 ``TeamMemberNotFound`` when absent)."""
        url = f"{self._members_url(itwin_id)}/{member_id}"
        return self.client.send_request(access_token, "GET", url, extract=lambda payload: payload.get("member"))

    def add_itwin_user_members(
        self,
        access_token: str,
        itwin_id: str,
        members: List[AddUserMember],
        custom_message: Optional[str] = None,
    ) -> APIResponse[AddUserMemberResponse]:
        """Add users to an iTwin.

        The service decides per user whether a membership is created right away
        (internal users, listed under ``members``) or an invitation is sent
        (external users, listed under ``invitations``).

        Args:
            access_token: Caller access token
            itwin_id: iTwin ID
            members: ``{"email": ..., "roleIds": [...]}`` entries
            custom_message: Optional text included in invitation emails

        Returns:
            APIResponse whose data is ``{"members": [...], "invitations": [...]}``
        """
        body = {"members": list(members)}
        if custom_message is not None:
            body["customMessage"] = custom_message
        return self.client.send_request(access_token, "POST", self._members_url(itwin_id), body)

    def update_itwin_user_member(
        self,
        access_token: str,
        itwin_id: str,
        member_id: str,
        role_ids: List[str],
    ) -> APIResponse[UserMember]:
        """Replace the roles held by a user member."""
        url = f"{self._members_url(itwin_id)}/{member_id}"
        return self.client.send_request(
            access_token, "PATCH", url, {"roleIds": list(role_ids)}, extract=lambda payload: payload.get("member")
        )

    def remove_itwin_user_member(self, access_token: str, itwin_id: str, member_id: str) -> APIResponse[None]:
        url = f"{self._members_url(itwin_id)}/{member_id}"
        return self.client.send_request(access_token, "DELETE", url)
