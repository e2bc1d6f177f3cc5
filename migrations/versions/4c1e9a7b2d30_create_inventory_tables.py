"""create_inventory_tables

Revision ID: 4c1e9a7b2d30
Revises:
Create Date: 2026-10-17 10:12:41.530218

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4c1e9a7b2d30'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True)),
    ]


def upgrade():
    op.create_table(
        'stores',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('store_name', sa.String(100), nullable=False),
        sa.Column('address', sa.String(255)),
        *_timestamps(),
    )
    op.create_index('ix_stores_id', 'stores', ['id'])

    op.create_table(
        'locations',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('store_id', sa.Integer(), sa.ForeignKey('stores.id'), nullable=False),
        sa.Column('location_name', sa.String(100), nullable=False),
        *_timestamps(),
    )
    op.create_index('ix_locations_id', 'locations', ['id'])
    op.create_index('ix_locations_store_id', 'locations', ['store_id'])

    op.create_table(
        'products',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('product_name', sa.String(255), nullable=False),
        sa.Column('product_code', sa.String(50)),
        sa.Column('container_type', sa.String(50)),
        sa.Column('container_size', sa.Numeric(10, 3)),
        sa.Column('container_unit', sa.String(20)),
        sa.Column('container_size_base_unit', sa.Numeric(12, 3)),
        sa.Column('container_size_base_unit_type', sa.String(10)),
        sa.Column('case_size', sa.Integer()),
        sa.Column('wholesale_price', sa.Numeric(10, 2)),
        sa.Column('full_weight', sa.Numeric(10, 3)),
        sa.Column('empty_weight', sa.Numeric(10, 3)),
        sa.Column('full_weight_unit', sa.String(20)),
        *_timestamps(),
    )
    op.create_index('ix_products_id', 'products', ['id'])
    op.create_index('ix_products_product_code', 'products', ['product_code'])

    op.create_table(
        'products_by_store',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('product_id', sa.Integer(), sa.ForeignKey('products.id', ondelete='CASCADE'), nullable=False),
        sa.Column('store_id', sa.Integer(), sa.ForeignKey('stores.id', ondelete='CASCADE'), nullable=False),
        sa.Column('par', sa.Numeric(10, 2)),
        sa.Column('reorder_point', sa.Numeric(10, 2)),
        sa.Column('order_by_the', sa.String(20)),
        *_timestamps(),
        sa.UniqueConstraint('product_id', 'store_id', name='uq_products_by_store'),
    )
    op.create_index('ix_products_by_store_id', 'products_by_store', ['id'])
    op.create_index('ix_products_by_store_store_id', 'products_by_store', ['store_id'])

    op.create_table(
        'inventories',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('store_id', sa.Integer(), sa.ForeignKey('stores.id'), nullable=False),
        sa.Column('location_id', sa.Integer(), sa.ForeignKey('locations.id')),
        sa.Column('inventory_type', sa.String(20), nullable=False),
        sa.Column('inventory_date', sa.Date(), nullable=False),
        sa.Column('status', sa.String(20), nullable=False),
        sa.Column('total_ws_value', sa.Numeric(12, 2), nullable=False),
        sa.Column('total_losses_value', sa.Numeric(12, 2), nullable=False),
        *_timestamps(),
    )
    op.create_index('ix_inventories_id', 'inventories', ['id'])
    op.create_index('ix_inventories_store_id', 'inventories', ['store_id'])
    op.create_index(
        'uq_inventories_active_location',
        'inventories',
        ['location_id'],
        unique=True,
        postgresql_where=sa.text("status = 'Unlocked'"),
        sqlite_where=sa.text("status = 'Unlocked'"),
    )

    op.create_table(
        'inventory_items',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('inventory_id', sa.Integer(), sa.ForeignKey('inventories.id', ondelete='CASCADE'), nullable=False),
        sa.Column('product_id', sa.Integer(), sa.ForeignKey('products.id'), nullable=False),
        sa.Column('location_id', sa.Integer(), sa.ForeignKey('locations.id')),
        sa.Column('display_order', sa.Integer(), nullable=False),
        sa.Column('quantity_type', sa.String(20)),
        sa.Column('quantity', sa.Numeric(12, 3), nullable=False),
        sa.Column('case_size', sa.Integer()),
        sa.Column('weight_oz', sa.Numeric(10, 3)),
        sa.Column('full_weight', sa.Numeric(10, 3)),
        sa.Column('empty_weight', sa.Numeric(10, 3)),
        sa.Column('net_weight', sa.Numeric(10, 3)),
        sa.Column('wholesale_value', sa.Numeric(12, 2), nullable=False),
        *_timestamps(),
    )
    op.create_index('ix_inventory_items_id', 'inventory_items', ['id'])
    op.create_index('ix_inventory_items_inventory_id', 'inventory_items', ['inventory_id'])

    op.create_table(
        'inventory_losses',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('inventory_id', sa.Integer(), sa.ForeignKey('inventories.id', ondelete='CASCADE'), nullable=False),
        sa.Column('product_id', sa.Integer(), sa.ForeignKey('products.id'), nullable=False),
        sa.Column('quantity', sa.Numeric(12, 3), nullable=False),
        sa.Column('unit', sa.String(20), nullable=False),
        sa.Column('reason', sa.Text(), nullable=False),
        sa.Column('net_weight', sa.Numeric(10, 3)),
        sa.Column('loss_value', sa.Numeric(12, 2), nullable=False),
        *_timestamps(),
    )
    op.create_index('ix_inventory_losses_id', 'inventory_losses', ['id'])
    op.create_index('ix_inventory_losses_inventory_id', 'inventory_losses', ['inventory_id'])


def downgrade():
    op.drop_table('inventory_losses')
    op.drop_table('inventory_items')
    op.drop_index('uq_inventories_active_location', table_name='inventories')
    op.drop_table('inventories')
    op.drop_table('products_by_store')
    op.drop_table('products')
    op.drop_table('locations')
    op.drop_table('stores')
