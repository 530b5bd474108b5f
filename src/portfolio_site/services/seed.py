"""Sample content inserted into empty tables for demos and local development."""

from __future__ import annotations

import logging

from portfolio_site.data.db import Database
from portfolio_site.data.models import Education, Experience

logger = logging.getLogger(__name__)

DEMO_EXPERIENCES = (
    {
        "title": "Full Stack Software Developer",
        "company": "AlgoVerse",
        "location": "Dhaka, Bangladesh",
        "start_date": "Oct 2023",
        "end_date": "Present",
        "description": [
            "Developed and deployed robust full-stack applications using React, ASP.NET, "
            "C#, and Node.js",
            "Architected containerized applications using Docker",
            "Integrated AI APIs into core features",
            "Implemented real-time communication using Socket.io",
            "Developed cross-platform mobile applications using Flutter",
        ],
    },
    {
        "title": "Senior Software Engineer",
        "company": "Zentorra",
        "location": "Dhaka, Bangladesh",
        "start_date": "Aug 2024",
        "end_date": "May 2025",
        "description": [
            "Contributed to scalable software solutions and advanced system design",
            "Collaborated with cross-functional teams to deliver high-quality features",
        ],
    },
)

DEMO_EDUCATION = (
    {
        "degree": "Bachelor of Science in Computer Science",
        "institution": "BRAC University",
        "location": "Dhaka",
        "year": "2023",
    },
)


def seed_demo_content(db: Database) -> dict[str, int]:
    """Insert the sample rows into tables that are still empty.

    Returns:
        Number of rows inserted per table.
    """
    inserted = {"experience": 0, "education": 0}
    with db.session() as session:
        if session.query(Experience.id).first() is None:
            session.add_all(Experience(**row) for row in DEMO_EXPERIENCES)
            inserted["experience"] = len(DEMO_EXPERIENCES)
        if session.query(Education.id).first() is None:
            session.add_all(Education(**row) for row in DEMO_EDUCATION)
            inserted["education"] = len(DEMO_EDUCATION)

    if any(inserted.values()):
        logger.info("Seeded demo content: %s", inserted)
    return inserted
