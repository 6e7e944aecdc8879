"""Create departments and employees tables

Revision ID: 001_initial
Revises: 
Create Date: 2025-12-31

This migration:
1. Creates the departments table keyed by department code
2. Creates the employees table referencing departments.code
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "departments",
        sa.Column("code", sa.String(10), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("floor", sa.Integer(), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("code"),
        sa.UniqueConstraint("name", name="uq_departments_name"),
    )

    op.create_table(
        "employees",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("email", sa.String(100), nullable=False),
        sa.Column("phone_number", sa.String(10), nullable=True),
        sa.Column("dob", sa.Date(), nullable=True),
        sa.Column("major", sa.String(100), nullable=True),
        sa.Column("city", sa.String(100), nullable=True),
        sa.Column("department", sa.String(10), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name="uq_employees_email"),
        sa.ForeignKeyConstraint(
            ["department"],
            ["departments.code"],
            name="fk_employee_department",
        ),
    )

    op.create_index(
        "ix_employees_department",
        "employees",
        ["department"],
    )


def downgrade() -> None:
    op.drop_index("ix_employees_department", table_name="employees")
    op.drop_table("employees")
    op.drop_table("departments")
