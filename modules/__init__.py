"""
Feature modules for the Quill backend.

Each module is self-contained with its own:
- interfaces.py: Protocol definitions for the module's public API
- models.py: Pydantic models for data transfer
- repository.py: Supabase table access
- service.py: Business logic implementation
- routes.py: FastAPI route handlers
- exceptions.py: Module-specific exceptions

Modules:
- auth: accounts, password hashing, bearer tokens
- blogs: blog posts and the ownership guard
"""
