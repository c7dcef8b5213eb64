"""transactions and fills

Revision ID: 0002
Revises: 0001
Create Date: 2022-07-01 00:00:01

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "0002"
down_revision = "0001"
branch_labels = None
depends_on = None


def upgrade() -> None:
    # No ON DELETE action: removing a referenced account or bucket must fail.
    op.create_table(
        "transactions",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("amount", sa.Float(), nullable=False),
        sa.Column("date", sa.DateTime(), nullable=False),
        sa.Column("account_id", sa.Integer(), sa.ForeignKey("accounts.id"), nullable=False),
        sa.Column("bucket_id", sa.Integer(), sa.ForeignKey("buckets.id"), nullable=True),
        sqlite_autoincrement=True,
    )
    op.create_index("ix_transactions_account_id", "transactions", ["account_id"])
    op.create_index("ix_transactions_bucket_id", "transactions", ["bucket_id"])
    op.create_index("ix_transactions_date", "transactions", ["date"])

    op.create_table(
        "fills",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("amount", sa.Float(), nullable=False),
        sa.Column("date", sa.DateTime(), nullable=False),
        sa.Column("bucket_id", sa.Integer(), sa.ForeignKey("buckets.id"), nullable=False),
        sqlite_autoincrement=True,
    )
    op.create_index("ix_fills_bucket_id", "fills", ["bucket_id"])
    op.create_index("ix_fills_date", "fills", ["date"])


def downgrade() -> None:
    op.drop_index("ix_fills_date", table_name="fills")
    op.drop_index("ix_fills_bucket_id", table_name="fills")
    op.drop_table("fills")
    op.drop_index("ix_transactions_date", table_name="transactions")
    op.drop_index("ix_transactions_bucket_id", table_name="transactions")
    op.drop_index("ix_transactions_account_id", table_name="transactions")
    op.drop_table("transactions")
