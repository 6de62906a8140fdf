"""
API Routers - Organized endpoint handlers for the registration API.

Each router handles a specific workflow:
- scoring: AI fit score for an applicant
- notifications: One-time WhatsApp approval message
- registrations: Public form submission and admin management
"""
