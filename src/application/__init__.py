"""Application layer - request-boundary orchestration.

Structure:
- services/: AuthorizationGuard (audited enforcement) and resource owner
  identifier extraction

The application layer orchestrates domain logic but contains no business rules.
"""
