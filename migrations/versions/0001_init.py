"""init users and items

Revision ID: 0001_init
Revises: 
Create Date: 2026-10-19 00:00:00.000000
"""

from alembic import op
import sqlalchemy as sa

revision = "0001_init"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
	op.create_table(
		"users",
		sa.Column("id", sa.Integer(), primary_key=True),
		sa.Column("email", sa.String(), nullable=False),
		sa.Column("password_hash", sa.String(), nullable=False),
		sa.Column("created_at", sa.DateTime(), nullable=True),
	)
	op.create_index("ix_users_email", "users", ["email"], unique=True)
	op.create_index("ix_users_id", "users", ["id"], unique=False)

	op.create_table(
		"items",
		sa.Column("id", sa.Integer(), primary_key=True),
		sa.Column("name", sa.String(), nullable=False),
		sa.Column("price", sa.Integer(), nullable=False),
		sa.Column("description", sa.Text(), nullable=True),
		sa.Column("sold_out", sa.Boolean(), nullable=False, server_default=sa.false()),
		sa.Column("owner_id", sa.Integer(), nullable=False),
		sa.Column("created_at", sa.DateTime(), nullable=True),
		sa.Column("updated_at", sa.DateTime(), nullable=True),
		sa.ForeignKeyConstraint(["owner_id"], ["users.id"]),
	)
	op.create_index("ix_items_id", "items", ["id"], unique=False)
	op.create_index("ix_items_owner_id", "items", ["owner_id"], unique=False)


def downgrade() -> None:
	op.drop_index("ix_items_owner_id", table_name="items")
	op.drop_index("ix_items_id", table_name="items")
	op.drop_table("items")
	op.drop_index("ix_users_id", table_name="users")
	op.drop_index("ix_users_email", table_name="users")
	op.drop_table("users")
