"""Access Control group member invitation operations."""
from __future__ import annotations
from typing import List, Optional

from .client import BaseClient
from .models import APIResponse, MemberInvitation


class GroupMemberInvitationsClient:
    """Client for invitations sent to external users added to a group."""

    def __init__(self, client: BaseClient):
        self.client = client

    def _invitations_url(self, itwin_id: str, group_id: str) -> str:
        return f"{self.client.base_url}/{itwin_id}/groups/{group_id}/invitations"

    def query_itwin_group_member_invitations(
        self,
        access_token: str,
        itwin_id: str,
        group_id: str,
        top: Optional[int] = None,
        skip: Optional[int] = None,
    ) -> APIResponse[List[MemberInvitation]]:
        """List the pending invitations of a group.

        Args:
            access_token: Caller access token
            itwin_id: iTwin ID
            group_id: Group ID
            top: Maximum number of invitations to return
            skip: Number of invitations to skip
        """
        url = self._invitations_url(itwin_id, group_id) + self.client.pagination_query(top, skip)
        return self.client.send_request(access_token, "GET", url, extract=lambda payload: payload.get("invitations"))

    def delete_itwin_group_member_invitation(
        self, access_token: str, itwin_id: str, group_id: str, invitation_id: str
    ) -> APIResponse[None]:
        url = f"{self._invitations_url(itwin_id, group_id)}/{invitation_id}"
        return self.client.send_request(access_token, "DELETE", url)
