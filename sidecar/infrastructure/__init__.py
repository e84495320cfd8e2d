"""Infrastructure Layer for Sidecar.

Key modules:
- database: clause state, operator whitelist, sanitizer registry and the
  clause builder
- security: input sanitizers for field names and values
- config: environment-driven builder defaults
"""
