"""Access Control group membership operations.

Group members are groups that have been granted roles on an iTwin.
"""
from __future__ import annotations
from typing import List, Optional

from .client import BaseClient
from .models import APIResponse, GroupMember, GroupMemberAssignment


class GroupMembersClient:
    """Client for the group members of an iTwin."""

    def __init__(self, client: BaseClient):
        self.client = client

    def _members_url(self, itwin_id: str) -> str:
        return f"{self.client.base_url}/{itwin_id}/members/groups"

    def query_itwin_group_members(
        self,
        access_token: str,
        itwin_id: str,
        top: Optional[int] = None,
        skip: Optional[int] = None,
    ) -> APIResponse[List[GroupMember]]:
        """List group members, optionally paginated.

        Args:
            access_token: Caller access token
            itwin_id: iTwin ID
            top: Maximum number of members to return
            skip: Number of members to skip

        Returns:
            APIResponse whose data is the list of group members
        """
        url = self._members_url(itwin_id) + self.client.pagination_query(top, skip)
        return self.client.send_request(access_token, "GET", url, extract=lambda payload: payload.get("members"))

    def get_itwin_group_member(self, access_token: str, itwin_id: str, member_id: str) -> APIResponse[GroupMember]:
        url = f"{self._members_url(itwin_id)}/{member_id}"
        return self.client.send_request(access_token, "GET", url, extract=lambda payload: payload.get("member"))

    def add_itwin_group_members(
        self,
        access_token: str,
        itwin_id: str,
        members: List[GroupMemberAssignment],
    ) -> APIResponse[List[GroupMember]]:
        """Grant roles to groups.

        Args:
            access_token: Caller access token
            itwin_id: iTwin ID
            members: ``{"groupId": ..., "roleIds": [...]}`` assignments

        Returns:
            APIResponse with status 201 and the resulting group members
        """
        body = {"members": list(members)}
        return self.client.send_request(
            access_token, "POST", self._members_url(itwin_id), body, extract=lambda payload: payload.get("members")
        )

    def update_itwin_group_member(
        self,
        access_token: str,
        itwin_id: str,
        member_id: str,
        role_ids: List[str],
    ) -> APIResponse[GroupMember]:
        """Replace the roles held by a group member."""
        url = f"{self._members_url(itwin_id)}/{member_id}"
        return self.client.send_request(
            access_token, "PATCH", url, {"roleIds": list(role_ids)}, extract=lambda payload: payload.get("member")
        )

    def remove_itwin_group_member(self, access_token: str, itwin_id: str, member_id: str) -> APIResponse[None]:
        url = f"{self._members_url(itwin_id)}/{member_id}"
        return self.client.send_request(access_token, "DELETE", url)
