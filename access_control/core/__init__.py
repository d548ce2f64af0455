"""iTwin Access Control API client library.

Architecture:
- client.py: HTTP dispatch, request options and response envelope mapping
- models.py: APIResponse envelope and entity shapes
- exceptions.py: Caller-side errors raised before a request is sent
- permissions.py, roles.py, groups.py: permission, role and group endpoints
- group_members.py, user_members.py, owner_members.py: membership endpoints
- member_invitations.py, group_member_invitations.py: invitation endpoints
- jobs.py, shares.py: bulk jobs and share keys

Usage:
    from access_control.core import BaseClient, RolesClient

    client = BaseClient()
    roles = RolesClient(client)
    response = roles.get_itwin_roles(token, itwin_id)
    if response.error:
        print(response.status, response.error["code"])
"""
from .client import (
    BaseClient,
    DEFAULT_BASE_URL,
    ACCEPT_HEADER,
    apply_host_prefix,
)
from .exceptions import (
    AccessControlError,
    InvalidRequestError,
    MissingAccessTokenError,
)
from .models import (
    APIResponse,
    ApiError,
    ErrorDetail,
    INTERNAL_SERVER_ERROR,
    Link,
    Links,
    RESULT_MODES,
    ResultMode,
    Permission,
    Role,
    Group,
    GroupUpdate,
    GroupUser,
    GroupMember,
    GroupMemberAssignment,
    UserMember,
    OwnerMember,
    AddUserMember,
    AddUserMemberResponse,
    AddOwnerMemberResponse,
    MemberInvitation,
    ITwinJob,
    ITwinJobAction,
    ITwinJobActions,
    ShareContract,
    NewShare,
)
from .permissions import PermissionsClient
from .roles import RolesClient
from .groups import GroupsClient
from .group_members import GroupMembersClient
from .user_members import UserMembersClient
from .owner_members import OwnerMembersClient
from .member_invitations import MemberInvitationsClient
from .group_member_invitations import GroupMemberInvitationsClient
from .jobs import ITwinJobsClient
from .shares import ITwinSharesClient

__all__ = [
    # Client
    "BaseClient",
    "DEFAULT_BASE_URL",
    "ACCEPT_HEADER",
    "apply_host_prefix",

    # Exceptions
    "AccessControlError",
    "InvalidRequestError",
    "MissingAccessTokenError",

    # Envelope and entities
    "APIResponse",
    "ApiError",
    "ErrorDetail",
    "INTERNAL_SERVER_ERROR",
    "Link",
    "Links",
    "RESULT_MODES",
    "ResultMode",
    "Permission",
    "Role",
    "Group",
    "GroupUpdate",
    "GroupUser",
    "GroupMember",
    "GroupMemberAssignment",
    "UserMember",
    "OwnerMember",
    "AddUserMember",
    "AddUserMemberResponse",
    "AddOwnerMemberResponse",
    "MemberInvitation",
    "ITwinJob",
    "ITwinJobAction",
    "ITwinJobActions",
    "ShareContract",
    "NewShare",

    # Resource clients
    "PermissionsClient",
    "RolesClient",
    "GroupsClient",
    "GroupMembersClient",
    "UserMembersClient",
    "OwnerMembersClient",
    "MemberInvitationsClient",
    "GroupMemberInvitationsClient",
    "ITwinJobsClient",
    "ITwinSharesClient",
]
