"""Role-based authorization rules shared by every workflow entry point."""

from __future__ import annotations

from leavedesk.models.enums import Role

_DECIDERS = frozenset({Role.ADMIN, Role.HR})
_USER_MANAGERS = frozenset({Role.ADMIN, Role.HR})


def can_decide(role: str) -> bool:
    """Whether the role may approve or deny leave and overtime requests."""
    return role in _DECIDERS


def can_manage_users(role: str) -> bool:
    """Whether the role may list, activate and edit accounts."""
    return role in _USER_MANAGERS
