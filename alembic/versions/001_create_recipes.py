"""Create recipes table

Revision ID: 001_create_recipes
Revises: 
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "001_create_recipes"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "recipes",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("recipe_name", sa.String(200), nullable=False),
        sa.Column("servings", sa.Text, nullable=False),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("ingredients", postgresql.ARRAY(sa.Text), nullable=False, server_default="{}"),
        sa.Column("procedure", sa.Text, nullable=False),
        sa.Column("estimated_time", sa.Text, nullable=False),
        sa.Column("calories", sa.Text, nullable=False),
        sa.Column("nutritional_info", postgresql.JSONB, nullable=False, server_default=sa.text("'{}'")),
        sa.Column("vegan", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("categories", postgresql.ARRAY(sa.String(80)), nullable=False, server_default="{}"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_recipes_vegan", "recipes", ["vegan"])
    op.create_index(
        "ix_recipes_categories", "recipes", ["categories"], postgresql_using="gin"
    )


def downgrade() -> None:
    op.drop_index("ix_recipes_categories", table_name="recipes")
    op.drop_index("ix_recipes_vegan", table_name="recipes")
    op.drop_table("recipes")
