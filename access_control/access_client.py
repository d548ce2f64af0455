"""AccessControlClient facade aggregating every resource client."""
from __future__ import annotations
from typing import Optional

import requests

from .config import AccessControlSettings
from .core.client import BaseClient
from .core.group_member_invitations import GroupMemberInvitationsClient
from .core.group_members import GroupMembersClient
from .core.groups import GroupsClient
from .core.jobs import ITwinJobsClient
from .core.member_invitations import MemberInvitationsClient
from .core.owner_members import OwnerMembersClient
from .core.permissions import PermissionsClient
from .core.roles import RolesClient
from .core.shares import ITwinSharesClient
from .core.user_members import UserMembersClient


class AccessControlClient:
    """Single entry point to the iTwin Access Control API.

    All resource clients share one ``BaseClient`` and therefore one HTTP
    session.

    Usage:
        with AccessControlClient(host_prefix="qa-") as client:
            response = client.roles.get_itwin_roles(token, itwin_id)
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        host_prefix: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.http = BaseClient(base_url, host_prefix=host_prefix, timeout=timeout, session=session)
        self.permissions = PermissionsClient(self.http)
        self.roles = RolesClient(self.http)
        self.groups = GroupsClient(self.http)
        self.user_members = UserMembersClient(self.http)
        self.group_members = GroupMembersClient(self.http)
        self.owner_members = OwnerMembersClient(self.http)
        self.member_invitations = MemberInvitationsClient(self.http)
        self.group_member_invitations = GroupMemberInvitationsClient(self.http)
        self.itwin_jobs = ITwinJobsClient(self.http)
        self.itwin_shares = ITwinSharesClient(self.http)

    @classmethod
    def from_settings(
        cls, settings: AccessControlSettings, session: Optional[requests.Session] = None
    ) -> "AccessControlClient":
        return cls(
            settings.base_url,
            host_prefix=settings.host_prefix,
            timeout=settings.timeout,
            session=session,
        )

    @property
    def base_url(self) -> str:
        return self.http.base_url

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "AccessControlClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
