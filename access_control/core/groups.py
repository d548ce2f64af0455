"""Access Control group management operations."""
from __future__ import annotations
from typing import List

from .client import BaseClient
from .models import APIResponse, Group, GroupUpdate


class GroupsClient:
    """Client for the groups of an iTwin.

    A group bundles users (``members``) and IMS groups (``imsGroups``) so that
    roles can be granted to all of them at once through group membership.
    """

    def __init__(self, client: BaseClient):
        self.client = client

    def _groups_url(self, itwin_id: str) -> str:
        return f"{self.client.base_url}/{itwin_id}/groups"

    def get_itwin_groups(self, access_token: str, itwin_id: str) -> APIResponse[List[Group]]:
        """List the groups of an iTwin."""
        return self.client.send_request(
            access_token, "GET", self._groups_url(itwin_id), extract=lambda payload: payload.get("groups")
        )

    def get_itwin_group(self, access_token: str, itwin_id: str, group_id: str) -> APIResponse[Group]:
        """Retrieve a group (404 ``GroupNotFound`` when it does not exist)."""
        url = f"{self._groups_url(itwin_id)}/{group_id}"
        return self.client.send_request(access_token, "GET", url, extract=lambda payload: payload.get("group"))

    def create_itwin_group(self, access_token: str, itwin_id: str, group: Group) -> APIResponse[Group]:
        """Create a group.

        Args:
            access_token: Caller access token
            itwin_id: iTwin ID
            group: ``name`` and ``description`` of the new group

        Returns:
            APIResponse with status 201 and the created group
        """
        return self.client.send_request(
            access_token, "POST", self._groups_url(itwin_id), group, extract=lambda payload: payload.get("group")
        )

    def update_itwin_group(self, access_token: str, itwin_id: str, group_id: str, group: GroupUpdate) -> APIResponse[Group]:
        """Patch a group.

        ``members`` is a list of user emails and ``imsGroups`` a list of IMS
        group names; both replace the current values when supplied.
        """
        url = f"{self._groups_url(itwin_id)}/{group_id}"
        return self.client.send_request(access_token, "PATCH", url, group, extract=lambda payload: payload.get("group"))

    def delete_itwin_group(self, access_token: str, itwin_id: str, group_id: str) -> APIResponse[None]:
        url = f"{self._groups_url(itwin_id)}/{group_id}"
        return self.client.send_request(access_token, "DELETE", url)
