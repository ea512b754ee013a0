#!/usr/bin/env python3
from __future__ import annotations

import argparse

from rich import print

from worksphere.models.enums import Role
from worksphere.rbac.perms import RolePermissions, get_role_level, get_role_permissions

def main() -> int:
    ap = argparse.ArgumentParser()
    ap.add_argument("--camel", action="store_true", help="use the front-end flag names")
    args = ap.parse_args()

    flags = [f for f in RolePermissions.model_fields if f != "assignment_scope"]
    names = [RolePermissions.model_fields[f].alias if args.camel else f for f in flags]

    # print markdown table
    print("| role | level | " + " | ".join(names) + " | scope |")
    print("|:---|---:|" + ":---:|" * len(names) + ":---|")
    for role in Role:
        p = get_role_permissions(role)
        cells = ["Y" if getattr(p, f) else "-" for f in flags]
        print(f"| {role.value} | {get_role_level(role)} | " + " | ".join(cells) + f" | {p.assignment_scope.value} |")

    return 0

if __name__ == "__main__":
    raise SystemExit(main())
