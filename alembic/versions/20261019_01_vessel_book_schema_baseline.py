"""Vessel book schema baseline

Revision ID: 20261019_01
Revises: None
Create Date: 2026-10-19
"""
# pylint: disable=no-member,invalid-name,wrong-import-order

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "20261019_01"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""

    op.execute("CREATE EXTENSION IF NOT EXISTS pgcrypto")

    op.create_table(
        "counterparty",
        sa.Column("counterparty_id", postgresql.UUID(as_uuid=True), primary_key=True, server_default=sa.text("gen_random_uuid()")),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("created_at_utc", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("now()")),
        sa.UniqueConstraint("name", name="uq_counterparty_name"),
    )

    op.create_table(
        "vessel",
        sa.Column("vessel_id", postgresql.UUID(as_uuid=True), primary_key=True, server_default=sa.text("gen_random_uuid()")),
        sa.Column("parent_vessel_id", postgresql.UUID(as_uuid=True), sa.ForeignKey("vessel.vessel_id"), nullable=True),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("product", sa.Text(), nullable=False),
        sa.Column("total_volume", sa.Numeric(20, 6), nullable=False),
        sa.Column("purchase_premium", sa.Numeric(20, 6), nullable=True),
        sa.Column("purchase_flat_price", sa.Numeric(20, 6), nullable=True),
        sa.Column("supplier", sa.Text(), nullable=True),
        sa.Column("incoterm", sa.Text(), nullable=False, server_default=sa.text("'CFR'")),
        sa.Column("freight_rate", sa.Numeric(20, 6), nullable=True),
        sa.Column("created_at_utc", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("now()")),
        sa.CheckConstraint("total_volume >= 0", name="ck_vessel_total_volume_non_negative"),
        sa.CheckConstraint("incoterm in ('CFR', 'FOB')", name="ck_vessel_incoterm"),
    )
    op.create_index("ix_vessel_parent_vessel_id", "vessel", ["parent_vessel_id"])
    op.create_index("ix_vessel_created_at_utc", "vessel", ["created_at_utc"])

    op.create_table(
        "purchase_hedge",
        sa.Column("purchase_hedge_id", postgresql.UUID(as_uuid=True), primary_key=True, server_default=sa.text("gen_random_uuid()")),
        sa.Column("vessel_id", postgresql.UUID(as_uuid=True), sa.ForeignKey("vessel.vessel_id", ondelete="CASCADE"), nullable=False),
        sa.Column("covered_volume", sa.Numeric(20, 6), nullable=False),
        sa.Column("futures_price", sa.Numeric(20, 6), nullable=False),
        sa.Column("contract_count", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column("hedged_at_utc", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("now()")),
        sa.CheckConstraint("covered_volume >= 0", name="ck_purchase_hedge_covered_volume_non_negative"),
        sa.CheckConstraint("contract_count >= 0", name="ck_purchase_hedge_contract_count_non_negative"),
    )
    op.create_index("ix_purchase_hedge_vessel_id", "purchase_hedge", ["vessel_id"])

    op.create_table(
        "sale",
        sa.Column("sale_id", postgresql.UUID(as_uuid=True), primary_key=True, server_default=sa.text("gen_random_uuid()")),
        sa.Column("vessel_id", postgresql.UUID(as_uuid=True), sa.ForeignKey("vessel.vessel_id", ondelete="CASCADE"), nullable=False),
        sa.Column("counterparty_id", postgresql.UUID(as_uuid=True), sa.ForeignKey("counterparty.counterparty_id"), nullable=False),
        sa.Column("deal_type", sa.Text(), nullable=False),
        sa.Column("volume", sa.Numeric(20, 6), nullable=False),
        sa.Column("premium", sa.Numeric(20, 6), nullable=True),
        sa.Column("flat_price", sa.Numeric(20, 6), nullable=True),
        sa.Column("price_reference", sa.Text(), nullable=True),
        sa.Column("deal_date", sa.Date(), nullable=False, server_default=sa.text("CURRENT_DATE")),
        sa.CheckConstraint("deal_type in ('premium', 'flat')", name="ck_sale_deal_type"),
        sa.CheckConstraint("volume >= 0", name="ck_sale_volume_non_negative"),
    )
    op.create_index("ix_sale_vessel_id", "sale", ["vessel_id"])
    op.create_index("ix_sale_counterparty_id", "sale", ["counterparty_id"])

    op.create_table(
        "sale_hedge",
        sa.Column("sale_hedge_id", postgresql.UUID(as_uuid=True), primary_key=True, server_default=sa.text("gen_random_uuid()")),
        sa.Column("sale_id", postgresql.UUID(as_uuid=True), sa.ForeignKey("sale.sale_id", ondelete="CASCADE"), nullable=False),
        sa.Column("covered_volume", sa.Numeric(20, 6), nullable=False),
        sa.Column("futures_price", sa.Numeric(20, 6), nullable=False),
        sa.Column("contract_count", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column("hedged_at_utc", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("now()")),
        sa.CheckConstraint("covered_volume >= 0", name="ck_sale_hedge_covered_volume_non_negative"),
        sa.CheckConstraint("contract_count >= 0", name="ck_sale_hedge_contract_count_non_negative"),
    )
    op.create_index("ix_sale_hedge_sale_id", "sale_hedge", ["sale_id"])


def downgrade() -> None:
    """Downgrade schema."""

    op.drop_index("ix_sale_hedge_sale_id", table_name="sale_hedge")
    op.drop_table("sale_hedge")

    op.drop_index("ix_sale_counterparty_id", table_name="sale")
    op.drop_index("ix_sale_vessel_id", table_name="sale")
    op.drop_table("sale")

    op.drop_index("ix_purchase_hedge_vessel_id", table_name="purchase_hedge")
    op.drop_table("purchase_hedge")

    op.drop_index("ix_vessel_created_at_utc", table_name="vessel")
    op.drop_index("ix_vessel_parent_vessel_id", table_name="vessel")
    op.drop_table("vessel")

    op.drop_table("counterparty")
