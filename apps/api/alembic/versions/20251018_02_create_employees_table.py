"""Create employees table with a unique email constraint"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


revision = "20251018_02"
down_revision = "20251018_01"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "employees",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("first_name", sa.String(length=50), nullable=False),
        sa.Column("last_name", sa.String(length=50), nullable=False),
        sa.Column("email", sa.String(length=100), nullable=False),
        sa.Column("position", sa.String(length=100), nullable=False),
        sa.Column("department", sa.String(length=100), nullable=False),
        sa.Column("salary", sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column("hire_date", sa.Date(), nullable=False),
        sa.Column("phone", sa.String(length=20), nullable=True),
        sa.Column("address", sa.String(length=200), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.UniqueConstraint("email", name="uq_employees_email"),
        sa.CheckConstraint("salary >= 0", name="ck_employees_salary_non_negative"),
    )
    op.create_index("ix_employees_created_at", "employees", ["created_at"])
    op.create_index("ix_employees_department", "employees", ["department"])


def downgrade() -> None:
    op.drop_index("ix_employees_department", table_name="employees")
    op.drop_index("ix_employees_created_at", table_name="employees")
    op.drop_table("employees")
