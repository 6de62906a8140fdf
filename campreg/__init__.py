"""
Campreg - Core logic for the summer camp registration service.

This package contains:
- models: Registration record, status and tri-state answer types
- scoring: AI fit scoring (prompt, model call, response parsing)
- messaging: WhatsApp approval messages (phone normalization, UltraMsg client)
- identity: Caller session resolution and the admin allow-list
- repository: PocketBase access to the registrations collection
"""

from campreg.errors import RegistrationError
from campreg.models import Registration, RegistrationStatus, TriState

__all__ = [
    "Registration",
    "RegistrationError",
    "RegistrationStatus",
    "TriState",
]
