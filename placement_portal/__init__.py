"""
Placement Portal
Backend for the university placement-and-feedback portal.

Architecture:
- MongoDB: job notifications, course feedback, placement feedback
- FastAPI: REST endpoints consumed by the HTML forms and review dashboards
- One shared validation module for forms and API
"""

__version__ = "1.0.0"
