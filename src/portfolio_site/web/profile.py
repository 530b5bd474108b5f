"""Static personal content shown on the public page."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Skill:
    icon: str
    title: str
    description: str


@dataclass(frozen=True, slots=True)
class SiteProfile:
    """Owner details rendered in the header, hero and contact sections."""

    name: str = "Iftakhar Rahat"
    email: str = "iftakharrahat71@gmail.com"
    phone: str = "01716399471"
    address: str = "Dhaka, 1212, Bangladesh"
    avatar: str = "/static/img/avatar.svg"
    headline_lead: str = "Building digital"
    headline_accent: str = "products, brands,"
    headline_tail: str = "and experience."
    social_links: tuple[tuple[str, str], ...] = (
        ("LinkedIn", "https://linkedin.com"),
        ("GitHub", "https://github.com/IftakharRahat"),
    )
    skills: tuple[Skill, ...] = field(
        default_factory=lambda: (
            Skill(
                "🎨",
                "UX & UI",
                "Designing interfaces that are intuitive, efficient, and enjoyable to use.",
            ),
            Skill(
                "📱",
                "Web & Mobile App",
                "Transforming ideas into exceptional web and mobile app experiences.",
            ),
            Skill(
                "✨",
                "Design & Creative",
                "Bringing your vision to life with the latest technology and trends.",
            ),
            Skill(
                "💻",
                "Development",
                "Building robust, scalable solutions with modern frameworks.",
            ),
        )
    )


DEFAULT_PROFILE = SiteProfile()

# Number of experience logos in the brand strip under the hero.
BRAND_STRIP_SIZE = 5
