from fastapi import APIRouter, Depends

from worksphere.models.enums import Role
from worksphere.rbac.deps import CallerContext, get_caller
from worksphere.rbac.perms import (
    ProjectContext,
    can_receive_task_assignments,
    get_assignable_members,
    get_assignment_restriction_message,
    get_role_level,
    get_role_permissions,
)
from worksphere.schemas.permissions import AssignableMembersIn, AssignableMembersOut, RolePermissionsOut

router = APIRouter(prefix="/permissions", tags=["permissions"])

def _describe(role: Role) -> RolePermissionsOut:
    return RolePermissionsOut(
        role=role,
        level=get_role_level(role),
        permissions=get_role_permissions(role),
        restriction_message=get_assignment_restriction_message(role),
        can_receive_assignments=can_receive_task_assignments(role),
    )

@router.get("/me", response_model=RolePermissionsOut)
def my_permissions(caller: CallerContext = Depends(get_caller)) -> RolePermissionsOut:
    return _describe(caller.role)

# path param is validated against Role, so unknown roles are a 422 here
@router.get("/{role}", response_model=RolePermissionsOut)
def role_permissions(role: Role) -> RolePermissionsOut:
    return _describe(role)

@router.post("/assignable-members", response_model=AssignableMembersOut)
def assignable_members(
    payload: AssignableMembersIn,
    caller: CallerContext = Depends(get_caller),
) -> AssignableMembersOut:
    ctx = None
    if payload.project_id is not None or payload.project_member_ids is not None:
        ctx = ProjectContext(
            project_id=payload.project_id,
            member_ids=frozenset(payload.project_member_ids) if payload.project_member_ids is not None else None,
        )

    members = get_assignable_members(payload.members, caller.role, caller.user_id, ctx)
    return AssignableMembersOut(
        members=members,
        restriction_message=get_assignment_restriction_message(caller.role),
    )
