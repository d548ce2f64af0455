"""Access Control owner membership operations."""
from __future__ import annotations
from typing import List, Optional

from .client import BaseClient
from .models import AddOwnerMemberResponse, APIResponse, OwnerMember


class OwnerMembersClient:
    """Client for the owners of an iTwin."""

    def __init__(self, client: BaseClient):
        self.client = client

    def _owners_url(self, itwin_id: str) -> str:
        return f"{self.client.base_url}/{itwin_id}/members/owners"

    def query_itwin_owner_members(
        self,
        access_token: str,
        itwin_id: str,
        top: Optional[int] = None,
        skip: Optional[int] = None,
    ) -> APIResponse[List[OwnerMember]]:
        """List owners, optionally paginated.

        Owners whose identity was deleted upstream come back with null
        identity fields and are not filtered out.
        """
        url = self._owners_url(itwin_id) + self.client.pagination_query(top, skip)
        return self.client.send_request(access_token, "GET", url, extract=lambda payload: payload.get("members"))

    def add_itwin_owner_member(self, access_token: str, itwin_id: str, email: str) -> APIResponse[AddOwnerMemberResponse]:
        """Add an owner by email.

        Returns:
            APIResponse whose data is ``{"member": ..., "invitation": ...}``;
            exactly one of them is set depending on whether the user is internal
        """
        return self.client.send_request(access_token, "POST", self._owners_url(itwin_id), {"email": email})

    def remove_itwin_owner_member(self, access_token: str, itwin_id: str, member_id: str) -> APIResponse[None]:
        url = f"{self._owners_url(itwin_id)}/{member_id}"
        return self.client.send_request(access_token, "DELETE", url)
