"""
NEXTRA security backend root package.

This package contains the FastAPI app entry point (main.py), API routes,
domain models, JSON file storage for detection logs and verified users, and
photo upload storage.
"""
