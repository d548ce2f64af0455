"""Response envelope and entity shapes of the Access Control API.

Entities are plain dictionaries decoded from JSON; the ``TypedDict`` declarations
describe the shapes the service returns and are never enforced at runtime.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Literal, Optional, TypeVar, TypedDict

T = TypeVar("T")

Permission = str

ResultMode = Literal["minimal", "representation"]
RESULT_MODES = ("minimal", "representation")

ITwinJobStatus = Literal["Active", "Completed", "PartialCompleted", "Failed"]
MemberInvitationStatus = Literal["Pending", "Accepted"]


# ─────────────────────────────────────────────────────────────────────────────
# Errors
# ─────────────────────────────────────────────────────────────────────────────
class _ErrorDetailRequired(TypedDict):
    code: str
    message: str


class ErrorDetail(_ErrorDetailRequired, total=False):
    target: str


class _ApiErrorRequired(TypedDict):
    code: str
    message: str


class ApiError(_ApiErrorRequired, total=False):
    details: List[ErrorDetail]
    target: str


INTERNAL_SERVER_ERROR: ApiError = {
    "code": "InternalServerError",
    "message": "An internal exception happened while calling the service",
}


# ─────────────────────────────────────────────────────────────────────────────
# Paging
# ─────────────────────────────────────────────────────────────────────────────
class Link(TypedDict):
    href: str


class Links(TypedDict, total=False):
    self: Link
    prev: Link
    next: Link


# ─────────────────────────────────────────────────────────────────────────────
# Envelope
# ─────────────────────────────────────────────────────────────────────────────
@dataclass
class APIResponse(Generic[T]):
    """Uniform result of every client call.

    ``data`` holds the decoded payload on success and is ``None`` whenever
    ``error`` is populated. ``status`` is the HTTP status code, or 500 when the
    call failed locally or the service faulted. ``links`` carries the
    ``_links`` paging object of an unwrapped collection response, when present.
    """
    status: int
    data: Optional[T] = None
    error: Optional[ApiError] = None
    headers: Dict[str, str] = field(default_factory=dict)
    links: Optional[Links] = None

    @property
    def next_link(self) -> Optional[str]:
        """``href`` of the next page, or None on the last page."""
        if not self.links:
            return None
        return (self.links.get("next") or {}).get("href")

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300 and self.error is None

    @classmethod
    def internal_error(cls) -> "APIResponse[Any]":
        return cls(status=500, error=dict(INTERNAL_SERVER_ERROR))


# ─────────────────────────────────────────────────────────────────────────────
# Entities
# ─────────────────────────────────────────────────────────────────────────────
class Role(TypedDict, total=False):
    id: str
    displayName: str
    description: str
    permissions: List[Permission]


class GroupUser(TypedDict, total=False):
    id: str
    email: Optional[str]
    givenName: Optional[str]
    surname: Optional[str]
    organization: Optional[str]


class Group(TypedDict, total=False):
    id: str
    name: str
    description: str
    members: List[GroupUser]
    imsGroups: List[str]


class UserMember(GroupUser, total=False):
    # identity fields are None for users deleted upstream
    roles: List[Role]


OwnerMember = GroupUser


class GroupMember(TypedDict, total=False):
    id: str
    groupName: str
    groupDescription: str
    roles: List[Role]


class GroupMemberAssignment(TypedDict):
    groupId: str
    roleIds: List[str]


class AddUserMember(TypedDict):
    email: str
    roleIds: List[str]


class MemberInvitation(TypedDict, total=False):
    id: str
    email: str
    invitedByEmail: str
    status: MemberInvitationStatus
    createdDate: str
    expirationDate: str
    roles: List[Role]


class AddUserMemberResponse(TypedDict):
    members: List[UserMember]
    invitations: List[MemberInvitation]


class AddOwnerMemberResponse(TypedDict):
    member: Optional[OwnerMember]
    invitation: Optional[MemberInvitation]


class ITwinJob(TypedDict, total=False):
    id: str
    itwinId: str
    status: ITwinJobStatus
    # only present with the "representation" result mode
    error: List[ErrorDetail]


class ITwinJobAction(TypedDict, total=False):
    email: str
    roleIds: List[str]


class ITwinJobActions(TypedDict, total=False):
    assignRoles: List[ITwinJobAction]
    unassignRoles: List[ITwinJobAction]
    removeMembers: List[ITwinJobAction]
    options: Dict[str, Any]


class ShareContract(TypedDict, total=False):
    id: str
    iTwinId: str
    shareKey: str
    shareContract: str
    expiration: str


class NewShare(TypedDict, total=False):
    shareContract: str
    expiration: Optional[str]


class GroupUpdate(TypedDict, total=False):
    name: str
    description: str
    # user emails and IMS group names
    members: List[str]
    imsGroups: List[str]
