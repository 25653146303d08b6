"""add user role

Revision ID: 9b2e4c61d8a3
Revises: 3f1c9a7d2b40
Create Date: 2026-10-20 09:41:07.220815

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "9b2e4c61d8a3"
down_revision: Union[str, Sequence[str], None] = "3f1c9a7d2b40"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE user_role AS ENUM ('USER', 'ADMIN');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    # Existing users become regular users
    op.add_column(
        "users",
        sa.Column(
            "role",
            postgresql.ENUM("USER", "ADMIN", name="user_role", create_type=False),
            nullable=False,
            server_default="USER",
        ),
    )
    op.create_index("idx_users_created_at", "users", [sa.text("created_at DESC")])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_users_created_at", table_name="users")
    op.drop_column("users", "role")
    op.execute("DROP TYPE IF EXISTS user_role")
