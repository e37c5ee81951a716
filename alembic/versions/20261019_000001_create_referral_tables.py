"""Create users and referrals tables.

Revision ID: 20261019_000001
Revises:
Create Date: 2026-10-19

Users carry their own referral code, the code of their direct referrer and
per-level earnings buckets. Referrals are immutable award records.
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '20261019_000001'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    """Create users and referrals tables."""
    op.create_table(
        'users',
        sa.Column('id', sa.String(length=64), nullable=False),
        sa.Column('username', sa.String(length=255), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column(
            'password_hash',
            sa.String(length=255),
            nullable=False,
            server_default='',
        ),
        sa.Column(
            'is_admin', sa.Boolean(), nullable=False, server_default=sa.false()
        ),
        sa.Column('referral_code', sa.String(length=20), nullable=False),
        sa.Column(
            'referred_by',
            sa.String(length=20),
            nullable=True,
            comment='Referral code of the direct referrer',
        ),
        sa.Column(
            'total_earnings',
            sa.DECIMAL(precision=18, scale=8),
            nullable=False,
            server_default='0',
        ),
        sa.Column(
            'level1_earnings',
            sa.DECIMAL(precision=18, scale=8),
            nullable=False,
            server_default='0',
        ),
        sa.Column(
            'level2_earnings',
            sa.DECIMAL(precision=18, scale=8),
            nullable=False,
            server_default='0',
        ),
        sa.Column(
            'level3_earnings',
            sa.DECIMAL(precision=18, scale=8),
            nullable=False,
            server_default='0',
        ),
        sa.Column(
            'level4_plus_earnings',
            sa.DECIMAL(precision=18, scale=8),
            nullable=False,
            server_default='0',
        ),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint(
            'total_earnings >= 0',
            name='check_user_total_earnings_non_negative',
        ),
    )
    op.create_index('ix_users_username', 'users', ['username'], unique=True)
    op.create_index('ix_users_email', 'users', ['email'], unique=True)
    op.create_index(
        'ix_users_referral_code', 'users', ['referral_code'], unique=True
    )
    op.create_index('ix_users_referred_by', 'users', ['referred_by'])

    op.create_table(
        'referrals',
        sa.Column('id', sa.String(length=64), nullable=False),
        sa.Column('referrer_id', sa.String(length=64), nullable=False),
        sa.Column('referred_id', sa.String(length=64), nullable=False),
        sa.Column(
            'level',
            sa.Integer(),
            nullable=False,
            comment='1 = direct referrer',
        ),
        sa.Column(
            'earnings', sa.DECIMAL(precision=18, scale=8), nullable=False
        ),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(
        'ix_referrals_referrer_id', 'referrals', ['referrer_id']
    )
    op.create_index(
        'ix_referrals_referred_id', 'referrals', ['referred_id']
    )
    op.create_index(
        'idx_referrals_referrer_created',
        'referrals',
        ['referrer_id', 'created_at'],
    )


def downgrade() -> None:
    """Drop referrals and users tables."""
    op.drop_index('idx_referrals_referrer_created', table_name='referrals')
    op.drop_index('ix_referrals_referred_id', table_name='referrals')
    op.drop_index('ix_referrals_referrer_id', table_name='referrals')
    op.drop_table('referrals')

    op.drop_index('ix_users_referred_by', table_name='users')
    op.drop_index('ix_users_referral_code', table_name='users')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_index('ix_users_username', table_name='users')
    op.drop_table('users')
