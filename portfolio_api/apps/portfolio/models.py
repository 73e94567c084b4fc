"""
Portfolio content models
Column names mirror the existing database; the admin UI sends them verbatim.
Columns typed as text with a "[]" default hold JSON arrays (see common/fields.py).
"""
from sqlmodel import SQLModel, Field, Relationship
from sqlalchemy import DateTime
from typing import Optional
from datetime import datetime

from portfolio_api.common.fields import utc_now


class Profile(SQLModel, table=True):
    """
    Owner profile (singleton)
    Table: profile
    """
    __tablename__ = "profile"

    id: Optional[int] = Field(default=None, primary_key=True)
    fullName: str
    greeting: Optional[str] = Field(default=None)
    role: str = Field(default="[]")
    bio: str = Field(default="")
    shortBio: Optional[str] = Field(default=None)
    heroImage: Optional[str] = Field(default=None)
    aboutImage: Optional[str] = Field(default=None)
    resumeUrl: Optional[str] = Field(default=None)
    location: Optional[str] = Field(default=None)
    email: Optional[str] = Field(default=None)
    phone: Optional[str] = Field(default=None)
    stats_project_count: Optional[str] = Field(default=None)
    stats_exp_years: Optional[str] = Field(default=None)
    map_embed_url: Optional[str] = Field(default=None)


class SocialLink(SQLModel, table=True):
    """
    Social link model
    Table: social_link
    """
    __tablename__ = "social_link"

    id: Optional[int] = Field(default=None, primary_key=True)
    platform: str
    url: str
    icon: Optional[str] = Field(default=None)


class ProjectCategory(SQLModel, table=True):
    __tablename__ = "project_category"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(unique=True)
    slug: str = Field(unique=True)


class Project(SQLModel, table=True):
    """
    Portfolio project
    Table: project
    """
    __tablename__ = "project"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str
    slug: Optional[str] = Field(default=None, unique=True)
    description: str = Field(default="")
    content: str = Field(default="")
    coverImage: Optional[str] = Field(default=None)
    videoUrl: Optional[str] = Field(default=None)
    demoUrl: Optional[str] = Field(default=None)
    repoUrl: Optional[str] = Field(default=None)
    tech: str = Field(default="[]")
    categoryId: Optional[int] = Field(
        default=None, foreign_key="project_category.id", ondelete="SET NULL", index=True
    )
    gallery: str = Field(default="[]")
    is_published: bool = Field(default=True)
    order: int = Field(default=0)
    createdAt: datetime = Field(default_factory=utc_now, sa_type=DateTime())
    updatedAt: datetime = Field(default_factory=utc_now, sa_type=DateTime())

    category: Optional[ProjectCategory] = Relationship()


class SkillCategory(SQLModel, table=True):
    __tablename__ = "skill_category"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(unique=True)
    slug: str = Field(unique=True)


class Skill(SQLModel, table=True):
    """
    Skill model
    Table: skill
    percentage is expected in 0-100 but not enforced.
    """
    __tablename__ = "skill"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    percentage: int = Field(default=0)
    categoryId: Optional[int] = Field(
        default=None, foreign_key="skill_category.id", ondelete="SET NULL", index=True
    )

    category: Optional[SkillCategory] = Relationship()


class Experience(SQLModel, table=True):
    __tablename__ = "experience"

    id: Optional[int] = Field(default=None, primary_key=True)
    role: str
    company: str
    description: str
    type: str = Field(default="work")
    startDate: datetime = Field(sa_type=DateTime())
    endDate: Optional[datetime] = Field(default=None, sa_type=DateTime())
    isCurrent: bool = Field(default=False)
    location: Optional[str] = Field(default=None)
    image: Optional[str] = Field(default=None)


class Education(SQLModel, table=True):
    __tablename__ = "education"

    id: Optional[int] = Field(default=None, primary_key=True)
    institution: str
    degree: str
    field: str
    startDate: datetime = Field(sa_type=DateTime())
    endDate: Optional[datetime] = Field(default=None, sa_type=DateTime())
    gpa: Optional[str] = Field(default=None)
    logo: Optional[str] = Field(default=None)
    coverImage: Optional[str] = Field(default=None)
    location: Optional[str] = Field(default=None)
    mapUrl: Optional[str] = Field(default=None)
    description: Optional[str] = Field(default=None)
    gallery: Optional[str] = Field(default="[]")
    attachments: Optional[str] = Field(default="[]")


class CertificateCategory(SQLModel, table=True):
    __tablename__ = "certificate_category"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(unique=True)
    slug: str = Field(unique=True)


class Certificate(SQLModel, table=True):
    __tablename__ = "certificate"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    issuer: str
    issueDate: datetime = Field(sa_type=DateTime())
    credentialUrl: Optional[str] = Field(default=None)
    image: Optional[str] = Field(default=None)
    categoryId: Optional[int] = Field(
        default=None, foreign_key="certificate_category.id", ondelete="SET NULL", index=True
    )

    category: Optional[CertificateCategory] = Relationship()


class Message(SQLModel, table=True):
    """
    Contact form submission
    Table: message
    Only isRead is expected to change after creation.
    """
    __tablename__ = "message"

    id: Optional[int] = Field(default=None, primary_key=True)
    senderName: str
    email: str
    subject: str
    message: str
    isRead: bool = Field(default=False)
    createdAt: datetime = Field(default_factory=utc_now, sa_type=DateTime())


class WaTemplate(SQLModel, table=True):
    __tablename__ = "wa_template"

    id: Optional[int] = Field(default=None, primary_key=True)
    template_name: str
    template_content: str
    category: str = Field(default="General")
    is_active: bool = Field(default=True)


class SiteSettings(SQLModel, table=True):
    """
    Site-wide settings (singleton)
    Table: site_settings
    """
    __tablename__ = "site_settings"

    id: Optional[int] = Field(default=None, primary_key=True)
    theme: str = Field(default="dark")
    seoTitle: str = Field(default="My Portfolio")
    seoDesc: Optional[str] = Field(default=None)
    cdn_url: Optional[str] = Field(default=None)
    maintenanceMode: bool = Field(default=False)
    maintenance_end_time: Optional[datetime] = Field(default=None, sa_type=DateTime())
    ai_provider: Optional[str] = Field(default="gemini")


class HomeContent(SQLModel, table=True):
    __tablename__ = "home_content"

    id: Optional[int] = Field(default=None, primary_key=True)
    greeting_id: str = Field(default="Halo")
    roles_id: str = Field(default="[]")
    heroImage: Optional[str] = Field(default=None)


class AboutContent(SQLModel, table=True):
    __tablename__ = "about_content"

    id: Optional[int] = Field(default=None, primary_key=True)
    short_description_id: Optional[str] = Field(default=None)
    long_description_id: Optional[str] = Field(default=None)
    aboutImage: Optional[str] = Field(default=None)
