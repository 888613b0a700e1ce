"""
Utility modules for the storefront widgets.

Cross-cutting concerns:
- Storage: JSON review collections and CSV exports
"""
