"""User type enum for role-based access control."""

from enum import Enum as PyEnum


class UserType(str, PyEnum):
    """
    Actor roles as issued by the auth service in the 'userType' claim.

    - SUPER_ADMIN - Platform operator, sees and acts on every tenant's data
    - BUSINESS_ADMIN - Administers a single business (tenant)
    - BUSINESS_USER - Works inside a single business (tenant)

    Only SUPER_ADMIN is exempt from tenant scoping.
    """

    SUPER_ADMIN = "super_admin"
    BUSINESS_ADMIN = "business_admin"
    BUSINESS_USER = "business_user"
