#!/usr/bin/env python
# scripts/issue_admin_token.py
"""Print a bearer token for local admin calls to the branding API."""
import os
import sys

from nextmove.core.security import create_access_token


def main():
    sub = os.getenv("ADMIN_SUB", "local-admin")
    role = os.getenv("ADMIN_ROLE", "admin")
    print(create_access_token(sub, role))
    return 0


if __name__ == "__main__":
    sys.exit(main())
