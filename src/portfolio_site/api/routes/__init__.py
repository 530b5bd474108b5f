"""Route handlers for the API."""

from portfolio_site.api.routes import auth, education, experience, health, pages, projects

__all__ = [
    "auth",
    "education",
    "experience",
    "health",
    "pages",
    "projects",
]
