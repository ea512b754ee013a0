from fastapi import Depends, Header, HTTPException

from worksphere.models.enums import Role
from worksphere.rbac.perms import RolePermissions, get_role_permissions, has_capability, parse_role

class CallerContext:
    def __init__(self, user_id: str, role: Role):
        self.user_id = user_id
        self.role = role

    @property
    def permissions(self) -> RolePermissions:
        return get_role_permissions(self.role)

# identity is resolved upstream by the gateway and forwarded as headers
def get_caller(
    x_user_id: str | None = Header(default=None),
    x_user_role: str | None = Header(default=None),
) -> CallerContext:
    if not x_user_id:
        raise HTTPException(status_code=401, detail="missing x-user-id")

    role = parse_role(x_user_role)
    if role is None:
        raise HTTPException(status_code=403, detail="unknown role")

    return CallerContext(user_id=x_user_id, role=role)

def require_capability(capability: str):
    if capability not in RolePermissions.model_fields:
        raise RuntimeError(f"unknown capability: {capability}")

    def _checker(caller: CallerContext = Depends(get_caller)) -> CallerContext:
        if not has_capability(caller.role, capability):
            raise HTTPException(status_code=403, detail="forbidden")
        return caller

    return _checker
