"""seed_tags

Revision ID: 9b41e6d20c58
Revises: 3f2a9c1d7b4e
Create Date: 2026-10-05 10:31:02.118406

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "9b41e6d20c58"
down_revision: Union[str, Sequence[str], None] = "3f2a9c1d7b4e"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

# Keep in sync with askboard.persistence.repository.inmemory.store.DEFAULT_TAGS
TAGS = [
    ("javascript", "#f7df1e", "Questions about JavaScript"),
    ("python", "#3776ab", "Questions about Python"),
    ("react", "#61dafb", "Questions about React"),
    ("node.js", "#339933", "Questions about Node.js"),
    ("sql", "#336791", "Questions about SQL and databases"),
    ("css", "#1572b6", "Questions about CSS and styling"),
    ("html", "#e34f26", "Questions about HTML"),
    ("typescript", "#3178c6", "Questions about TypeScript"),
]


def upgrade() -> None:
    """Seed the tag catalogue."""
    tags_table = sa.table(
        "tags",
        sa.column("name", sa.String),
        sa.column("color", sa.String),
        sa.column("description", sa.String),
    )

    op.bulk_insert(
        tags_table,
        [
            {"name": name, "color": color, "description": description}
            for name, color, description in TAGS
        ],
    )


def downgrade() -> None:
    """Remove seeded tags."""
    tags_table = sa.table("tags", sa.column("name", sa.String))
    op.execute(
        tags_table.delete().where(tags_table.c.name.in_([name for name, _, _ in TAGS]))
    )
