"""Initial schema: animals, breeding, vaccinations, milk, finance, health, notifications

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-17 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001_initial_schema'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps(with_updated: bool = True) -> list[sa.Column]:
    columns = [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]
    if with_updated:
        columns.append(
            sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False)
        )
    return columns


def upgrade() -> None:
    """Create every table of the farm schema."""

    # --- animals ---
    op.create_table(
        'animals',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('account_id', sa.Uuid(), nullable=False),
        sa.Column('ear_tag', sa.String(length=64), nullable=False),
        sa.Column('species', sa.String(length=16), nullable=False),
        sa.Column('breed', sa.String(length=128), nullable=False),
        sa.Column('gender', sa.String(length=8), nullable=False),
        sa.Column('birth_date', sa.Date(), nullable=False),
        sa.Column('mother_ear_tag', sa.String(length=64), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('profile_image_url', sa.String(length=1024), nullable=True),
        sa.Column('status', sa.String(length=16), nullable=False, server_default='active'),
        sa.Column('sold_to', sa.String(length=255), nullable=True),
        sa.Column('sold_date', sa.Date(), nullable=True),
        sa.Column('sold_price', sa.DECIMAL(12, 2), nullable=True),
        sa.Column('death_date', sa.Date(), nullable=True),
        sa.Column('death_reason', sa.Text(), nullable=True),
        *_timestamps(),
        sa.Column('version', sa.Integer(), nullable=False, server_default='1'),
        sa.PrimaryKeyConstraint('id', name='pk_animals'),
        sa.UniqueConstraint('account_id', 'ear_tag', name='ux_animals_account_ear_tag'),
    )
    op.create_index('ix_animals_account_id', 'animals', ['account_id'])
    op.create_index('ix_animals_account_status', 'animals', ['account_id', 'status'])

    # --- vaccinations ---
    op.create_table(
        'vaccinations',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('account_id', sa.Uuid(), nullable=False),
        sa.Column('animal_id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('next_date', sa.Date(), nullable=True),
        sa.Column('completed', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('notes', sa.Text(), nullable=True),
        *_timestamps(),
        sa.Column('version', sa.Integer(), nullable=False, server_default='1'),
        sa.PrimaryKeyConstraint('id', name='pk_vaccinations'),
        sa.ForeignKeyConstraint(
            ['animal_id'], ['animals.id'],
            name='fk_vaccinations_animal_id_animals', ondelete='CASCADE',
        ),
    )
    op.create_index('ix_vaccinations_account_next_date', 'vaccinations', ['account_id', 'next_date'])
    op.create_index('ix_vaccinations_account_animal', 'vaccinations', ['account_id', 'animal_id'])

    # --- inseminations ---
    op.create_table(
        'inseminations',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('account_id', sa.Uuid(), nullable=False),
        sa.Column('animal_id', sa.Uuid(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('method', sa.String(length=16), nullable=False),
        sa.Column('expected_birth_date', sa.Date(), nullable=False),
        sa.Column('actual_birth_date', sa.Date(), nullable=True),
        sa.Column('is_pregnant', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('notes', sa.Text(), nullable=True),
        *_timestamps(),
        sa.Column('version', sa.Integer(), nullable=False, server_default='1'),
        sa.PrimaryKeyConstraint('id', name='pk_inseminations'),
        sa.ForeignKeyConstraint(
            ['animal_id'], ['animals.id'],
            name='fk_inseminations_animal_id_animals', ondelete='CASCADE',
        ),
    )
    op.create_index(
        'ix_inseminations_account_animal_date', 'inseminations', ['account_id', 'animal_id', 'date']
    )
    op.create_index('ix_inseminations_account_pregnant', 'inseminations', ['account_id', 'is_pregnant'])

    # --- pregnancy_reminders ---
    op.create_table(
        'pregnancy_reminders',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('account_id', sa.Uuid(), nullable=False),
        sa.Column('insemination_id', sa.Uuid(), nullable=False),
        sa.Column('reminder_type', sa.String(length=16), nullable=False),
        sa.Column('reminder_date', sa.Date(), nullable=False),
        sa.Column('is_sent', sa.Boolean(), nullable=False, server_default=sa.false()),
        *_timestamps(with_updated=False),
        sa.PrimaryKeyConstraint('id', name='pk_pregnancy_reminders'),
        sa.ForeignKeyConstraint(
            ['insemination_id'], ['inseminations.id'],
            name='fk_pregnancy_reminders_insemination_id_inseminations', ondelete='CASCADE',
        ),
    )
    op.create_index(
        'ix_pregnancy_reminders_account_sent_date',
        'pregnancy_reminders',
        ['account_id', 'is_sent', 'reminder_date'],
    )

    # --- transactions ---
    op.create_table(
        'transactions',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('account_id', sa.Uuid(), nullable=False),
        sa.Column('type', sa.String(length=8), nullable=False),
        sa.Column('category', sa.String(length=32), nullable=False),
        sa.Column('amount', sa.DECIMAL(12, 2), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('animal_id', sa.Uuid(), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        *_timestamps(),
        sa.Column('version', sa.Integer(), nullable=False, server_default='1'),
        sa.PrimaryKeyConstraint('id', name='pk_transactions'),
        sa.ForeignKeyConstraint(
            ['animal_id'], ['animals.id'],
            name='fk_transactions_animal_id_animals', ondelete='SET NULL',
        ),
    )
    op.create_index('ix_transactions_account_date', 'transactions', ['account_id', 'date'])
    op.create_index(
        'ix_transactions_account_type_category', 'transactions', ['account_id', 'type', 'category']
    )

    # --- milk_productions ---
    op.create_table(
        'milk_productions',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('account_id', sa.Uuid(), nullable=False),
        sa.Column('animal_id', sa.Uuid(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('morning_amount', sa.DECIMAL(10, 2), nullable=False, server_default='0'),
        sa.Column('evening_amount', sa.DECIMAL(10, 2), nullable=False, server_default='0'),
        sa.Column('total_amount', sa.DECIMAL(10, 2), nullable=False),
        sa.Column('quality', sa.String(length=16), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        *_timestamps(),
        sa.Column('version', sa.Integer(), nullable=False, server_default='1'),
        sa.PrimaryKeyConstraint('id', name='pk_milk_productions'),
        sa.ForeignKeyConstraint(
            ['animal_id'], ['animals.id'],
            name='fk_milk_productions_animal_id_animals', ondelete='CASCADE',
        ),
        sa.UniqueConstraint(
            'account_id', 'animal_id', 'date', name='ux_milk_productions_account_animal_date'
        ),
    )
    op.create_index('ix_milk_productions_account_id', 'milk_productions', ['account_id'])
    op.create_index('ix_milk_productions_date', 'milk_productions', ['date'])

    # --- health_records ---
    op.create_table(
        'health_records',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('account_id', sa.Uuid(), nullable=False),
        sa.Column('animal_id', sa.Uuid(), nullable=False),
        sa.Column('record_type', sa.String(length=32), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('vet_name', sa.String(length=255), nullable=True),
        sa.Column('cost', sa.DECIMAL(12, 2), nullable=True),
        sa.Column('medications', sa.JSON(), nullable=True),
        sa.Column('follow_up_date', sa.Date(), nullable=True),
        *_timestamps(),
        sa.Column('version', sa.Integer(), nullable=False, server_default='1'),
        sa.PrimaryKeyConstraint('id', name='pk_health_records'),
        sa.ForeignKeyConstraint(
            ['animal_id'], ['animals.id'],
            name='fk_health_records_animal_id_animals', ondelete='CASCADE',
        ),
    )
    op.create_index('ix_health_records_account_date', 'health_records', ['account_id', 'date'])

    # --- profiles ---
    op.create_table(
        'profiles',
        sa.Column('account_id', sa.Uuid(), nullable=False),
        sa.Column('full_name', sa.String(length=255), nullable=True),
        sa.Column('farm_name', sa.String(length=255), nullable=True),
        sa.Column('phone', sa.String(length=32), nullable=True),
        sa.Column('notification_email', sa.String(length=320), nullable=True),
        sa.Column('email_notifications_enabled', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('whatsapp_notifications_enabled', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('notification_preferences', sa.JSON(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('account_id', name='pk_profiles'),
    )

    # --- notification_logs ---
    op.create_table(
        'notification_logs',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('account_id', sa.Uuid(), nullable=False),
        sa.Column('notification_type', sa.String(length=64), nullable=False),
        sa.Column('channel', sa.String(length=16), nullable=False),
        sa.Column('target', sa.String(length=320), nullable=False),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('status', sa.String(length=16), nullable=False),
        sa.Column('provider_message_id', sa.String(length=255), nullable=True),
        sa.Column('error_message', sa.Text(), nullable=True),
        sa.Column('sent_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id', name='pk_notification_logs'),
    )
    op.create_index(
        'ix_notification_logs_account_sent_at', 'notification_logs', ['account_id', 'sent_at']
    )

    # --- account_settings ---
    op.create_table(
        'account_settings',
        sa.Column('account_id', sa.Uuid(), nullable=False),
        sa.Column('milk_price_per_liter', sa.DECIMAL(10, 2), nullable=False),
        sa.Column('currency', sa.String(length=8), nullable=False, server_default='TRY'),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('account_id', name='pk_account_settings'),
    )


def downgrade() -> None:
    """Drop every table in reverse dependency order."""
    op.drop_table('account_settings')
    op.drop_index('ix_notification_logs_account_sent_at', table_name='notification_logs')
    op.drop_table('notification_logs')
    op.drop_table('profiles')
    op.drop_index('ix_health_records_account_date', table_name='health_records')
    op.drop_table('health_records')
    op.drop_index('ix_milk_productions_date', table_name='milk_productions')
    op.drop_index('ix_milk_productions_account_id', table_name='milk_productions')
    op.drop_table('milk_productions')
    op.drop_index('ix_transactions_account_type_category', table_name='transactions')
    op.drop_index('ix_transactions_account_date', table_name='transactions')
    op.drop_table('transactions')
    op.drop_index('ix_pregnancy_reminders_account_sent_date', table_name='pregnancy_reminders')
    op.drop_table('pregnancy_reminders')
    op.drop_index('ix_inseminations_account_pregnant', table_name='inseminations')
    op.drop_index('ix_inseminations_account_animal_date', table_name='inseminations')
    op.drop_table('inseminations')
    op.drop_index('ix_vaccinations_account_animal', table_name='vaccinations')
    op.drop_index('ix_vaccinations_account_next_date', table_name='vaccinations')
    op.drop_table('vaccinations')
    op.drop_index('ix_animals_account_status', table_name='animals')
    op.drop_index('ix_animals_account_id', table_name='animals')
    op.drop_table('animals')
