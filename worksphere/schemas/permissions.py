from pydantic import BaseModel

from worksphere.models.enums import Role
from worksphere.rbac.perms import RolePermissions

class RolePermissionsOut(BaseModel):
    role: Role
    level: int
    permissions: RolePermissions
    restriction_message: str
    can_receive_assignments: bool

class MemberIn(BaseModel):
    id: str
    name: str | None = None
    email: str | None = None
    role: Role | None = None

class AssignableMembersIn(BaseModel):
    members: list[MemberIn]
    project_id: str | None = None
    # omit to keep the project scope open to the whole org
    project_member_ids: list[str] | None = None

class AssignableMembersOut(BaseModel):
    members: list[MemberIn]
    restriction_message: str
