"""
API layer for the NEXTRA backend.

Exposes the HTTP endpoints under /api (detection logs, verified users,
name match check, health).
"""
