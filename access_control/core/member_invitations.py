"""Access Control member invitation operations."""
from __future__ import annotations
from typing import List, Optional

from .client import BaseClient
from .models import APIResponse, MemberInvitation


class MemberInvitationsClient:
    """Client for pending invitations to join an iTwin."""

    def __init__(self, client: BaseClient):
        self.client = client

    def _invitations_url(self, itwin_id: str) -> str:
        return f"{self.client.base_url}/{itwin_id}/members/invitations"

    def query_itwin_member_invitations(
        self,
        access_token: str,
        itwin_id: str,
        top: Optional[int] = None,
        skip: Optional[int] = None,
    ) -> APIResponse[List[MemberInvitation]]:
        url = self._invitations_url(itwin_id) + self.client.pagination_query(top, skip)
        return self.client.send_request(access_token, "GET", url, extract=lambda payload: payload.get("invitations"))

    def get_itwin_member_invitation(
        self, access_token: str, itwin_id: str, invitation_id: str
    ) -> APIResponse[MemberInvitation]:
        url = f"{self._invitations_url(itwin_id)}/{invitation_id}"
        return self.client.send_request(access_token, "GET", url, extract=lambda payload: payload.get("invitation"))

    def delete_itwin_member_invitation(self, access_token: str, itwin_id: str, invitation_id: str) -> APIResponse[None]:
        url = f"{self._invitations_url(itwin_id)}/{invitation_id}"
        return self.client.send_request(access_token, "DELETE", url)
