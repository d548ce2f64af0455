"""Access Control permission listing."""
from __future__ import annotations
from typing import List

from .client import BaseClient
from .models import APIResponse, Permission


class PermissionsClient:
    """Client for the permissions endpoints."""

    def __init__(self, client: BaseClient):
        self.client = client

    def get_permissions(self, access_token: str) -> APIResponse[List[Permission]]:
        """List every permission the service defines."""
        url = f"{self.client.base_url}/permissions"
        return self.client.send_request(
            access_token, "GET", url, extract=lambda payload: payload.get("permissions")
        )

    def get_itwin_permissions(self, access_token: str, itwin_id: str) -> APIResponse[List[Permission]]:
        """List the permissions the caller holds on an iTwin."""
        url = f"{self.client.base_url}/{itwin_id}/permissions"
        return self.client.send_request(
            access_token, "GET", url, extract=lambda payload: payload.get("permissions")
        )
