"""Normalize JSON-array text columns

Older rows hold double-encoded arrays ("\"[\\\"a\\\"]\"") or arbitrary text.
Every value is rewritten as a plain JSON array.

Revision ID: 0003
Revises: 0002
Create Date: 2026-10-19 09:20:00.000000

"""
import json

from alembic import op
import sqlalchemy as sa

from portfolio_api.common.fields import parse_json_array


# revision identifiers, used by Alembic.
revision = '0003'
down_revision = '0002'
branch_labels = None
depends_on = None

JSON_ARRAY_COLUMNS = {
    'profile': ('role',),
    'project': ('tech', 'gallery'),
    'blog_post': ('tags',),
    'education': ('gallery', 'attachments'),
    'home_content': ('roles_id',),
}


def upgrade():
    bind = op.get_bind()
    for table_name, columns in JSON_ARRAY_COLUMNS.items():
        table = sa.table(table_name, sa.column('id', sa.Integer()), *[sa.column(name, sa.Text()) for name in columns])
        rows = bind.execute(sa.select(table)).mappings().all()
        for row in rows:
            values = {}
            for name in columns:
                normalized = json.dumps(parse_json_array(row[name]))
                if normalized != row[name]:
                    values[name] = normalized
            if values:
                bind.execute(sa.update(table).where(table.c.id == row['id']).values(**values))


def downgrade():
    # Normalized values are valid input for the old readers as well
    pass
