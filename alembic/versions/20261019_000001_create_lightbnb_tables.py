"""Create LightBnB tables

Revision ID: 20261019_000001
Revises: None
Create Date: 2026-10-19

Users, properties, reservations and property_reviews.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "20261019_000001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password", sa.String(255), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name="uq_users_email"),
    )

    op.create_table(
        "properties",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("owner_id", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("thumbnail_photo_url", sa.String(255), nullable=False),
        sa.Column("cover_photo_url", sa.String(255), nullable=False),
        sa.Column("cost_per_night", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("street", sa.String(255), nullable=False),
        sa.Column("city", sa.String(255), nullable=False),
        sa.Column("province", sa.String(255), nullable=False),
        sa.Column("post_code", sa.String(255), nullable=False),
        sa.Column("country", sa.String(255), nullable=False),
        sa.Column("parking_spaces", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("number_of_bathrooms", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("number_of_bedrooms", sa.Integer(), nullable=False, server_default="0"),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["owner_id"], ["users.id"], name="fk_properties_owner_id", ondelete="CASCADE"),
    )
    op.create_index("ix_properties_owner_id", "properties", ["owner_id"])

    op.create_table(
        "reservations",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=False),
        sa.Column("property_id", sa.Integer(), nullable=False),
        sa.Column("guest_id", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["property_id"], ["properties.id"], name="fk_reservations_property_id", ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["guest_id"], ["users.id"], name="fk_reservations_guest_id", ondelete="CASCADE"),
    )
    op.create_index("ix_reservations_property_id", "reservations", ["property_id"])
    op.create_index("ix_reservations_guest_id", "reservations", ["guest_id"])

    op.create_table(
        "property_reviews",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("guest_id", sa.Integer(), nullable=False),
        sa.Column("property_id", sa.Integer(), nullable=False),
        sa.Column("reservation_id", sa.Integer(), nullable=False),
        sa.Column("rating", sa.SmallInteger(), nullable=False, server_default="0"),
        sa.Column("message", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["guest_id"], ["users.id"], name="fk_property_reviews_guest_id", ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["property_id"], ["properties.id"], name="fk_property_reviews_property_id", ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["reservation_id"], ["reservations.id"], name="fk_property_reviews_reservation_id", ondelete="CASCADE"),
    )
    op.create_index("ix_property_reviews_property_id", "property_reviews", ["property_id"])


def downgrade() -> None:
    op.drop_index("ix_property_reviews_property_id", table_name="property_reviews")
    op.drop_table("property_reviews")
    op.drop_index("ix_reservations_guest_id", table_name="reservations")
    op.drop_index("ix_reservations_property_id", table_name="reservations")
    op.drop_table("reservations")
    op.drop_index("ix_properties_owner_id", table_name="properties")
    op.drop_table("properties")
    op.drop_table("users")
