"""
Shared module package.

Contains cross-cutting concerns used by every resource:
- Error envelopes and the dispatch adapter
- Security middleware
- Rate limiting
- Logging configuration
"""
