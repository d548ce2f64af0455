"""Access Control role management operations."""
from __future__ import annotations
from typing import List, Mapping, Optional

from .client import BaseClient
from .models import APIResponse, Role


class RolesClient:
    """Client for the roles of an iTwin."""

    def __init__(self, client: BaseClient):
        """Initialize roles client.

        Args:
            client: Shared Access Control HTTP client
        """
        self.client = client

    def _roles_url(self, itwin_id: str) -> str:
        return f"{self.client.base_url}/{itwin_id}/roles"

    def get_itwin_roles(
        self,
        access_token: str,
        itwin_id: str,
        headers: Optional[Mapping[str, str]] = None,
    ) -> APIResponse[List[Role]]:
        """List the roles defined on an iTwin.

        Args:
            access_token: Caller access token
            itwin_id: iTwin ID
            headers: Optional extra request headers

        Returns:
            APIResponse whose data is the list of roles
        """
        return self.client.send_request(
            access_token,
            "GET",
            self._roles_url(itwin_id),
            extract=lambda payload: payload.get("roles"),
            headers=headers,
        )

    def get_itwin_role(self, access_token: str, itwin_id: str, role_id: str) -> APIResponse[Role]:
        """Retrieve a single role (404 ``RoleNotFound`` when it does not exist)."""
        url = f"{self._roles_url(itwin_id)}/{role_id}"
        return self.client.send_request(access_token, "GET", url, extract=lambda payload: payload.get("role"))

    def create_itwin_role(self, access_token: str, itwin_id: str, role: Role) -> APIResponse[Role]:
        """Create a role.

        Args:
            access_token: Caller access token
            itwin_id: iTwin ID
            role: Role fields, typically ``displayName`` and ``description``

        Returns:
            APIResponse with status 201 and the created role, including its ``id``
        """
        return self.client.send_request(
            access_token, "POST", self._roles_url(itwin_id), role, extract=lambda payload: payload.get("role")
        )

    def update_itwin_role(self, access_token: str, itwin_id: str, role_id: str, role: Role) -> APIResponse[Role]:
        """Patch a role; only the supplied fields are changed."""
        url = f"{self._roles_url(itwin_id)}/{role_id}"
        return self.client.send_request(access_token, "PATCH", url, role, extract=lambda payload: payload.get("role"))

    def delete_itwin_role(self, access_token: str, itwin_id: str, role_id: str) -> APIResponse[None]:
        url = f"{self._roles_url(itwin_id)}/{role_id}"
        return self.client.send_request(access_token, "DELETE", url)
