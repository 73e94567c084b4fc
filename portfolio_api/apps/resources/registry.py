"""
Resource registry
Maps every external (kebab-case) resource name to its table model and read/write behavior
"""
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple, Type

from sqlmodel import SQLModel

from portfolio_api.apps.authentication.models import User
from portfolio_api.apps.blog.models import BlogCategory, BlogPost, BlogComment
from portfolio_api.apps.portfolio.models import (
    Profile,
    SocialLink,
    ProjectCategory,
    Project,
    SkillCategory,
    Skill,
    Experience,
    Education,
    CertificateCategory,
    Certificate,
    Message,
    WaTemplate,
    SiteSettings,
    HomeContent,
    AboutContent,
)


class ResourceKind(str, Enum):
    USERS = "users"
    PROFILE = "profile"
    SOCIAL_LINKS = "social-links"
    PROJECTS = "projects"
    PROJECT_CATEGORIES = "project-categories"
    BLOG_POSTS = "blog-posts"
    BLOG_CATEGORIES = "blog-categories"
    BLOG_COMMENTS = "blog-comments"
    SKILLS = "skills"
    SKILL_CATEGORIES = "skill-categories"
    EXPERIENCE = "experience"
    EDUCATION = "education"
    CERTIFICATES = "certificates"
    CERTIFICATE_CATEGORIES = "certificate-categories"
    MESSAGES = "messages"
    WA_TEMPLATES = "wa-templates"
    SETTINGS = "settings"
    HOME_CONTENT = "home-content"
    ABOUT_CONTENT = "about-content"


@dataclass(frozen=True)
class ResourceSpec:
    """
    kind: external resource name
    model: SQLModel table class
    relations: relationship attributes eagerly loaded and nested on reads
    singleton: one logical row, addressed without an id
    public: GETs may be cached by the edge in production
    json_array_fields: text columns holding JSON arrays
    """
    kind: ResourceKind
    model: Type[SQLModel]
    relations: Tuple[str, ...] = ()
    singleton: bool = False
    public: bool = False
    json_array_fields: Tuple[str, ...] = ()

    @property
    def name(self) -> str:
        return self.kind.value

    def has_column(self, name: str) -> bool:
        return name in self.model.__table__.columns


_SPECS = (
    ResourceSpec(ResourceKind.USERS, User),
    ResourceSpec(ResourceKind.PROFILE, Profile, singleton=True, public=True, json_array_fields=("role",)),
    ResourceSpec(ResourceKind.SOCIAL_LINKS, SocialLink, public=True),
    ResourceSpec(
        ResourceKind.PROJECTS, Project,
        relations=("category",), public=True, json_array_fields=("tech", "gallery"),
    ),
    ResourceSpec(ResourceKind.PROJECT_CATEGORIES, ProjectCategory, public=True),
    ResourceSpec(
        ResourceKind.BLOG_POSTS, BlogPost,
        relations=("category",), public=True, json_array_fields=("tags",),
    ),
    ResourceSpec(ResourceKind.BLOG_CATEGORIES, BlogCategory, public=True),
    ResourceSpec(ResourceKind.BLOG_COMMENTS, BlogComment, relations=("post",)),
    ResourceSpec(ResourceKind.SKILLS, Skill, relations=("category",), public=True),
    ResourceSpec(ResourceKind.SKILL_CATEGORIES, SkillCategory, public=True),
    ResourceSpec(ResourceKind.EXPERIENCE, Experience, public=True),
    ResourceSpec(ResourceKind.EDUCATION, Education, json_array_fields=("gallery", "attachments")),
    ResourceSpec(ResourceKind.CERTIFICATES, Certificate, relations=("category",), public=True),
    ResourceSpec(ResourceKind.CERTIFICATE_CATEGORIES, CertificateCategory, public=True),
    ResourceSpec(ResourceKind.MESSAGES, Message),
    ResourceSpec(ResourceKind.WA_TEMPLATES, WaTemplate),
    ResourceSpec(ResourceKind.SETTINGS, SiteSettings, singleton=True, public=True),
    ResourceSpec(
        ResourceKind.HOME_CONTENT, HomeContent,
        singleton=True, public=True, json_array_fields=("roles_id",),
    ),
    ResourceSpec(ResourceKind.ABOUT_CONTENT, AboutContent, singleton=True, public=True),
)

REGISTRY: Dict[ResourceKind, ResourceSpec] = {spec.kind: spec for spec in _SPECS}

PUBLIC_RESOURCES = frozenset(spec.name for spec in _SPECS if spec.public)


def lookup(name: Optional[str]) -> Optional[ResourceSpec]:
    """Return the spec for an external resource name, or None when unknown."""
    try:
        return REGISTRY[ResourceKind(name)]
    except ValueError:
        return None
