"""Add SEO description, CDN, maintenance end time and AI provider to site_settings

Revision ID: 0002
Revises: 0001
Create Date: 2026-10-19 09:10:00.000000

"""
from alembic import op
import sqlalchemy as sa
import sqlmodel


# revision identifiers, used by Alembic.
revision = '0002'
down_revision = '0001'
branch_labels = None
depends_on = None

NEW_COLUMNS = (
    ('seoDesc', sqlmodel.sql.sqltypes.AutoString(), None),
    ('cdn_url', sqlmodel.sql.sqltypes.AutoString(), None),
    ('maintenance_end_time', sa.DateTime(), None),
    ('ai_provider', sqlmodel.sql.sqltypes.AutoString(), sa.text("'gemini'")),
)


def _existing_columns():
    inspector = sa.inspect(op.get_bind())
    return {column['name'] for column in inspector.get_columns('site_settings')}


def upgrade():
    # Some deployed databases already received these columns by hand
    existing = _existing_columns()
    for name, type_, server_default in NEW_COLUMNS:
        if name not in existing:
            op.add_column('site_settings', sa.Column(name, type_, nullable=True, server_default=server_default))


def downgrade():
    existing = _existing_columns()
    with op.batch_alter_table('site_settings') as batch_op:
        for name, _, _ in reversed(NEW_COLUMNS):
            if name in existing:
                batch_op.drop_column(name)
