"""
Shared module package.

Contains cross-cutting concerns:
- Error handling and mapping
- Security middleware and rate limiting
- Logging configuration
"""
