"""Access Control share operations.

A share grants anonymous, read-only access to an iTwin through a share key
until its expiration.
"""
from __future__ import annotations
from typing import List, Optional

from .client import BaseClient
from .models import APIResponse, NewShare, ShareContract


class ITwinSharesClient:
    """Client for iTwin shares."""

    def __init__(self, client: BaseClient):
        self.client = client

    def _shares_url(self, itwin_id: str) -> str:
        return f"{self.client.base_url}/{itwin_id}/shares"

    def create_itwin_share(
        self,
        access_token: str,
        itwin_id: str,
        share: Optional[NewShare] = None,
    ) -> APIResponse[ShareContract]:
        """Create a share.

        Omitted fields are defaulted by the service (``shareContract`` becomes
        ``"Default"`` and an expiration is assigned). An ``expiration`` must be
        a future ISO-8601 timestamp, otherwise the service answers 422.

        Args:
            access_token: Caller access token
            itwin_id: iTwin ID
            share: Optional ``shareContract`` and ``expiration``

        Returns:
            APIResponse with status 201 and the created share
        """
        body = dict(share) if share else {}
        return self.client.send_request(
            access_token, "POST", self._shares_url(itwin_id), body, extract=lambda payload: payload.get("share")
        )

    def get_itwin_share(self, access_token: str, itwin_id: str, share_id: str) -> APIResponse[ShareContract]:
        """Retrieve a share (404 ``ShareNotFound`` when absent)."""
        url = f"{self._shares_url(itwin_id)}/{share_id}"
        return self.client.send_request(access_token, "GET", url, extract=lambda payload: payload.get("share"))

    def get_itwin_shares(self, access_token: str, itwin_id: str) -> APIResponse[List[ShareContract]]:
        return self.client.send_request(
            access_token, "GET", self._shares_url(itwin_id), extract=lambda payload: payload.get("shares")
        )

    def revoke_itwin_share(self, access_token: str, itwin_id: str, share_id: str) -> APIResponse[None]:
        url = f"{self._shares_url(itwin_id)}/{share_id}"
        return self.client.send_request(access_token, "DELETE", url)
