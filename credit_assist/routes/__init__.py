"""
FastAPI routers for all API endpoints.

Each module defines a router for one area (AI flows, bills, registration,
chat, auth, dashboard). Flow and workflow errors are raised as-is and mapped
to HTTP responses by the exception handlers in main.py.
"""
