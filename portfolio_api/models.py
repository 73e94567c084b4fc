"""
Import every table model so SQLModel.metadata is complete
(used by Alembic, table creation and tests)
"""
from portfolio_api.apps.authentication.models import User
from portfolio_api.apps.blog.models import BlogCategory, BlogPost, BlogComment, BlogLike
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

__all__ = [
    'User',
    'BlogCategory', 'BlogPost', 'BlogComment', 'BlogLike',
    'Profile', 'SocialLink', 'ProjectCategory', 'Project', 'SkillCategory', 'Skill',
    'Experience', 'Education', 'CertificateCategory', 'Certificate', 'Message',
    'WaTemplate', 'SiteSettings', 'HomeContent', 'AboutContent',
]
