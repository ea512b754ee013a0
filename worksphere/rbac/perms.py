"""
Role-based permission rules for task assignment and other capabilities.

Everything here is pure: no I/O, no state, and nothing raises. Unknown or
missing roles resolve to the member permission set and hierarchy level 0.
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from worksphere.models.enums import AssignmentScope, Role

M = TypeVar("M")

class RolePermissions(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    can_assign_tasks_to_self: bool
    can_assign_tasks_to_others: bool
    can_create_tasks: bool
    can_edit_own_tasks: bool
    can_edit_other_tasks: bool
    can_delete_tasks: bool
    can_manage_projects: bool
    can_invite_members: bool
    can_manage_members: bool
    assignment_scope: AssignmentScope

@dataclass(frozen=True)
class ProjectContext:
    project_id: Any = None
    # None means membership is unknown and the project scope stays permissive
    member_ids: frozenset | None = None

ROLE_HIERARCHY: dict[Role, int] = {
    Role.viewer: 0,
    Role.member: 1,
    Role.admin: 2,
    Role.owner: 3,
}

_ALL = dict(
    can_assign_tasks_to_self=True,
    can_assign_tasks_to_others=True,
    can_create_tasks=True,
    can_edit_own_tasks=True,
    can_edit_other_tasks=True,
    can_delete_tasks=True,
    can_manage_projects=True,
    can_invite_members=True,
    can_manage_members=True,
)
_NONE = {k: False for k in _ALL}

ROLE_PERMISSIONS: dict[Role, RolePermissions] = {
    Role.viewer: RolePermissions(
        **{**_NONE, "can_assign_tasks_to_self": True},
        assignment_scope=AssignmentScope.self_,
    ),
    Role.member: RolePermissions(
        **{
            **_NONE,
            "can_assign_tasks_to_self": True,
            "can_create_tasks": True,
            "can_edit_own_tasks": True,
        },
        assignment_scope=AssignmentScope.self_,
    ),
    Role.admin: RolePermissions(**_ALL, assignment_scope=AssignmentScope.project),
    Role.owner: RolePermissions(**_ALL, assignment_scope=AssignmentScope.organization),
}

ASSIGNMENT_RECEIVERS: frozenset[Role] = frozenset({Role.member, Role.admin, Role.owner})

def parse_role(value: Any) -> Role | None:
    if isinstance(value, Role):
        return value
    if not isinstance(value, str):
        return None
    try:
        return Role(value.lower())
    except ValueError:
        return None

def get_role_permissions(role: Any) -> RolePermissions:
    return ROLE_PERMISSIONS.get(parse_role(role), ROLE_PERMISSIONS[Role.member])

def can_assign_task_to_user(
    user_role: Any,
    current_user_id: Any,
    target_user_id: Any,
    project_context: ProjectContext | None = None,
) -> bool:
    perms = get_role_permissions(user_role)

    # self-assignment skips the "others" check entirely
    if current_user_id == target_user_id:
        return perms.can_assign_tasks_to_self

    if not perms.can_assign_tasks_to_others:
        return False

    scope = perms.assignment_scope
    if scope == AssignmentScope.self_:
        return current_user_id == target_user_id
    if scope == AssignmentScope.project:
        if project_context is None or project_context.member_ids is None:
            return True
        return target_user_id in project_context.member_ids
    if scope == AssignmentScope.organization:
        return True
    return False

def _member_id(member: Any) -> Any:
    if isinstance(member, Mapping):
        return member.get("id")
    return getattr(member, "id", None)

def get_assignable_members(
    all_members: Iterable[M],
    user_role: Any,
    current_user_id: Any,
    project_context: ProjectContext | None = None,
) -> list[M]:
    return [
        m
        for m in all_members
        if can_assign_task_to_user(user_role, current_user_id, _member_id(m), project_context)
    ]

def get_assignment_restriction_message(user_role: Any) -> str:
    scope = get_role_permissions(user_role).assignment_scope

    if scope == AssignmentScope.self_:
        if parse_role(user_role) == Role.viewer:
            return "Viewers can only assign tasks to themselves"
        return "Members can only assign tasks to themselves"
    if scope == AssignmentScope.project:
        return "Admins can assign tasks to project team members"
    if scope == AssignmentScope.organization:
        return "Owners can assign tasks to any organization member"
    return "Task assignment not available for your role"

def can_receive_task_assignments(user_role: Any) -> bool:
    return parse_role(user_role) in ASSIGNMENT_RECEIVERS

def get_role_level(role: Any) -> int:
    r = parse_role(role)
    if r is None:
        return 0
    return ROLE_HIERARCHY[r]

def has_minimum_role(user_role: Any, required_role: Any) -> bool:
    return get_role_level(user_role) >= get_role_level(required_role)

def has_capability(role: Any, capability: str) -> bool:
    perms = get_role_permissions(role)
    name = capability
    if name not in RolePermissions.model_fields:
        # accept the camelCase spelling the front end uses
        name = next(
            (f for f, info in RolePermissions.model_fields.items() if info.alias == capability),
            capability,
        )
    if name == "assignment_scope" or name not in RolePermissions.model_fields:
        return False
    return bool(getattr(perms, name))
