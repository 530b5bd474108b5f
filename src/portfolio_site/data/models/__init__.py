"""ORM models package for database tables.

This package provides SQLAlchemy ORM models representing database tables:
- Experience: Work history entries shown on the public page
- Education: Academic background entries
- Project: Portfolio projects linking out to external sites
- AdminUser: The single admin credential

All models inherit from the shared Base declarative class defined in data.db.
"""

from portfolio_site.data.db import Base
from portfolio_site.data.models.admin_user import AdminUser
from portfolio_site.data.models.education import Education
from portfolio_site.data.models.experience import Experience
from portfolio_site.data.models.project import Project

__all__ = ["AdminUser", "Base", "Education", "Experience", "Project"]
