"""Initial schema

Revision ID: 0001
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from alembic import op
import sqlalchemy as sa
import sqlmodel


# revision identifiers, used by Alembic.
revision = '0001'
down_revision = None
branch_labels = None
depends_on = None

String = sqlmodel.sql.sqltypes.AutoString


def upgrade():
    op.create_table('user',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('email', String(), nullable=False),
        sa.Column('password', String(), nullable=False),
        sa.Column('name', String(), nullable=True),
        sa.Column('avatar', String(), nullable=True),
        sa.Column('isActive', sa.Boolean(), nullable=False),
        sa.Column('createdAt', sa.DateTime(), nullable=False),
        sa.Column('updatedAt', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_user_email'), 'user', ['email'], unique=True)

    op.create_table('profile',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('fullName', String(), nullable=False),
        sa.Column('greeting', String(), nullable=True),
        sa.Column('role', String(), nullable=False),
        sa.Column('bio', String(), nullable=False),
        sa.Column('shortBio', String(), nullable=True),
        sa.Column('heroImage', String(), nullable=True),
        sa.Column('aboutImage', String(), nullable=True),
        sa.Column('resumeUrl', String(), nullable=True),
        sa.Column('location', String(), nullable=True),
        sa.Column('email', String(), nullable=True),
        sa.Column('phone', String(), nullable=True),
        sa.Column('stats_project_count', String(), nullable=True),
        sa.Column('stats_exp_years', String(), nullable=True),
        sa.Column('map_embed_url', String(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )

    op.create_table('social_link',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('platform', String(), nullable=False),
        sa.Column('url', String(), nullable=False),
        sa.Column('icon', String(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )

    # Category tables
    for table_name in ('project_category', 'skill_category', 'certificate_category'):
        op.create_table(table_name,
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('name', String(), nullable=False),
            sa.Column('slug', String(), nullable=False),
            sa.PrimaryKeyConstraint('id'),
            sa.UniqueConstraint('name'),
            sa.UniqueConstraint('slug')
        )

    op.create_table('project',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', String(), nullable=False),
        sa.Column('slug', String(), nullable=True),
        sa.Column('description', String(), nullable=False),
        sa.Column('content', String(), nullable=False),
        sa.Column('coverImage', String(), nullable=True),
        sa.Column('videoUrl', String(), nullable=True),
        sa.Column('demoUrl', String(), nullable=True),
        sa.Column('repoUrl', String(), nullable=True),
        sa.Column('tech', String(), nullable=False),
        sa.Column('categoryId', sa.Integer(), nullable=True),
        sa.Column('gallery', String(), nullable=False),
        sa.Column('is_published', sa.Boolean(), nullable=False),
        sa.Column('order', sa.Integer(), nullable=False),
        sa.Column('createdAt', sa.DateTime(), nullable=False),
        sa.Column('updatedAt', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['categoryId'], ['project_category.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('slug')
    )
    op.create_index(op.f('ix_project_categoryId'), 'project', ['categoryId'], unique=False)

    op.create_table('skill',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', String(), nullable=False),
        sa.Column('percentage', sa.Integer(), nullable=False),
        sa.Column('categoryId', sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(['categoryId'], ['skill_category.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_skill_categoryId'), 'skill', ['categoryId'], unique=False)

    op.create_table('experience',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('role', String(), nullable=False),
        sa.Column('company', String(), nullable=False),
        sa.Column('description', String(), nullable=False),
        sa.Column('type', String(), nullable=False),
        sa.Column('startDate', sa.DateTime(), nullable=False),
        sa.Column('endDate', sa.DateTime(), nullable=True),
        sa.Column('isCurrent', sa.Boolean(), nullable=False),
        sa.Column('location', String(), nullable=True),
        sa.Column('image', String(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )

    op.create_table('education',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('institution', String(), nullable=False),
        sa.Column('degree', String(), nullable=False),
        sa.Column('field', String(), nullable=False),
        sa.Column('startDate', sa.DateTime(), nullable=False),
        sa.Column('endDate', sa.DateTime(), nullable=True),
        sa.Column('gpa', String(), nullable=True),
        sa.Column('logo', String(), nullable=True),
        sa.Column('coverImage', String(), nullable=True),
        sa.Column('location', String(), nullable=True),
        sa.Column('mapUrl', String(), nullable=True),
        sa.Column('description', String(), nullable=True),
        sa.Column('gallery', String(), nullable=True),
        sa.Column('attachments', String(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )

    op.create_table('certificate',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', String(), nullable=False),
        sa.Column('issuer', String(), nullable=False),
        sa.Column('issueDate', sa.DateTime(), nullable=False),
        sa.Column('credentialUrl', String(), nullable=True),
        sa.Column('image', String(), nullable=True),
        sa.Column('categoryId', sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(['categoryId'], ['certificate_category.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_certificate_categoryId'), 'certificate', ['categoryId'], unique=False)

    op.create_table('message',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('senderName', String(), nullable=False),
        sa.Column('email', String(), nullable=False),
        sa.Column('subject', String(), nullable=False),
        sa.Column('message', String(), nullable=False),
        sa.Column('isRead', sa.Boolean(), nullable=False),
        sa.Column('createdAt', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )

    op.create_table('wa_template',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('template_name', String(), nullable=False),
        sa.Column('template_content', String(), nullable=False),
        sa.Column('category', String(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )

    # site_settings starts with its original columns; 0002 adds the later ones
    op.create_table('site_settings',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('theme', String(), nullable=False),
        sa.Column('seoTitle', String(), nullable=False),
        sa.Column('maintenanceMode', sa.Boolean(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )

    op.create_table('home_content',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('greeting_id', String(), nullable=False),
        sa.Column('roles_id', String(), nullable=False),
        sa.Column('heroImage', String(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )

    op.create_table('about_content',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('short_description_id', String(), nullable=True),
        sa.Column('long_description_id', String(), nullable=True),
        sa.Column('aboutImage', String(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )

    op.create_table('blog_category',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', String(), nullable=False),
        sa.Column('slug', String(), nullable=False),
        sa.Column('description', String(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name'),
        sa.UniqueConstraint('slug')
    )

    op.create_table('blog_post',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('categoryId', sa.Integer(), nullable=True),
        sa.Column('title', String(), nullable=False),
        sa.Column('slug', String(), nullable=False),
        sa.Column('excerpt', String(), nullable=True),
        sa.Column('content', String(), nullable=False),
        sa.Column('coverImage', String(), nullable=True),
        sa.Column('tags', String(), nullable=False),
        sa.Column('is_published', sa.Boolean(), nullable=False),
        sa.Column('published_at', sa.DateTime(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.Column('views', sa.Integer(), nullable=False),
        sa.Column('likes', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['categoryId'], ['blog_category.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_blog_post_categoryId'), 'blog_post', ['categoryId'], unique=False)
    op.create_index(op.f('ix_blog_post_slug'), 'blog_post', ['slug'], unique=True)

    op.create_table('blog_comment',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('postId', sa.Integer(), nullable=False),
        sa.Column('name', String(), nullable=False),
        sa.Column('email', String(), nullable=False),
        sa.Column('content', String(), nullable=False),
        sa.Column('avatar', String(), nullable=True),
        sa.Column('createdAt', sa.DateTime(), nullable=False),
        sa.Column('isApproved', sa.Boolean(), nullable=False),
        sa.ForeignKeyConstraint(['postId'], ['blog_post.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_blog_comment_postId'), 'blog_comment', ['postId'], unique=False)

    op.create_table('blog_like',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('postId', sa.Integer(), nullable=False),
        sa.Column('ipHash', String(), nullable=True),
        sa.Column('createdAt', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['postId'], ['blog_post.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_blog_like_postId'), 'blog_like', ['postId'], unique=False)
    op.create_index(op.f('ix_blog_like_ipHash'), 'blog_like', ['ipHash'], unique=False)


def downgrade():
    op.drop_index(op.f('ix_blog_like_ipHash'), table_name='blog_like')
    op.drop_index(op.f('ix_blog_like_postId'), table_name='blog_like')
    op.drop_table('blog_like')
    op.drop_index(op.f('ix_blog_comment_postId'), table_name='blog_comment')
    op.drop_table('blog_comment')
    op.drop_index(op.f('ix_blog_post_slug'), table_name='blog_post')
    op.drop_index(op.f('ix_blog_post_categoryId'), table_name='blog_post')
    op.drop_table('blog_post')
    op.drop_table('blog_category')
    op.drop_table('about_content')
    op.drop_table('home_content')
    op.drop_table('site_settings')
    op.drop_table('wa_template')
    op.drop_table('message')
    op.drop_index(op.f('ix_certificate_categoryId'), table_name='certificate')
    op.drop_table('certificate')
    op.drop_table('education')
    op.drop_table('experience')
    op.drop_index(op.f('ix_skill_categoryId'), table_name='skill')
    op.drop_table('skill')
    op.drop_index(op.f('ix_project_categoryId'), table_name='project')
    op.drop_table('project')
    for table_name in ('certificate_category', 'skill_category', 'project_category'):
        op.drop_table(table_name)
    op.drop_table('social_link')
    op.drop_table('profile')
    op.drop_index(op.f('ix_user_email'), table_name='user')
    op.drop_table('user')
