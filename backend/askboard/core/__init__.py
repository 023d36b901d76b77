"""
Core application modules.
Contains essential infrastructure components:
- bootstrap: Default admin creation on first start
- db: Database configuration and connection management
- security: Password hashing and JWT bearer tokens
"""
