"""initial shelter schema with seeded roles and economic statuses

Revision ID: 1f2e3d4c5b6a
Revises:
Create Date: 2026-10-18 00:00:00.000000

"""
from typing import Sequence, Union
from uuid import uuid4

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '1f2e3d4c5b6a'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _audit_columns() -> list[sa.Column]:
    return [
        sa.Column('deleted', sa.Boolean(), nullable=False, server_default=sa.text('false')),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def upgrade() -> None:
    roles = op.create_table(
        'roles',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=50), nullable=False),
        *_audit_columns(),
        sa.PrimaryKeyConstraint('id', name='pk_roles'),
        sa.UniqueConstraint('name', name='ux_roles_name'),
    )
    op.create_table(
        'users',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('hashed_password', sa.String(length=255), nullable=False),
        sa.Column('role_id', sa.Uuid(), nullable=False),
        *_audit_columns(),
        sa.PrimaryKeyConstraint('id', name='pk_users'),
        sa.ForeignKeyConstraint(['role_id'], ['roles.id'], name='fk_users_role_id_roles'),
        sa.UniqueConstraint('email', name='ux_users_email'),
    )
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=False)
    op.create_index(op.f('ix_users_role_id'), 'users', ['role_id'], unique=False)

    statuses = op.create_table(
        'economic_statuses',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('level', sa.String(length=50), nullable=False),
        *_audit_columns(),
        sa.PrimaryKeyConstraint('id', name='pk_economic_statuses'),
        sa.UniqueConstraint('level', name='ux_economic_statuses_level'),
    )
    op.create_table(
        'clients',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('phone', sa.String(length=30), nullable=False),
        sa.Column('birth_date', sa.Date(), nullable=False),
        sa.Column('gender', sa.String(length=20), nullable=False),
        sa.Column('address', sa.String(length=255), nullable=True),
        sa.Column('economic_status_id', sa.Uuid(), nullable=True),
        *_audit_columns(),
        sa.PrimaryKeyConstraint('id', name='pk_clients'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], name='fk_clients_user_id_users'),
        sa.ForeignKeyConstraint(
            ['economic_status_id'],
            ['economic_statuses.id'],
            name='fk_clients_economic_status_id_economic_statuses',
        ),
        sa.UniqueConstraint('user_id', name='ux_clients_user_id'),
    )

    op.create_table(
        'species',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        *_audit_columns(),
        sa.PrimaryKeyConstraint('id', name='pk_species'),
    )
    op.create_index(op.f('ix_species_name'), 'species', ['name'], unique=False)
    op.create_table(
        'breeds',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('species_id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        *_audit_columns(),
        sa.PrimaryKeyConstraint('id', name='pk_breeds'),
        sa.ForeignKeyConstraint(['species_id'], ['species.id'], name='fk_breeds_species_id_species'),
    )
    op.create_index(op.f('ix_breeds_name'), 'breeds', ['name'], unique=False)
    op.create_index(op.f('ix_breeds_species_id'), 'breeds', ['species_id'], unique=False)
    op.create_table(
        'diseases',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('severity', sa.String(length=100), nullable=False),
        *_audit_columns(),
        sa.PrimaryKeyConstraint('id', name='pk_diseases'),
    )
    op.create_index(op.f('ix_diseases_name'), 'diseases', ['name'], unique=False)
    op.create_table(
        'personalities',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        *_audit_columns(),
        sa.PrimaryKeyConstraint('id', name='pk_personalities'),
    )
    op.create_index(op.f('ix_personalities_name'), 'personalities', ['name'], unique=False)
    op.create_table(
        'characteristics',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('personality_id', sa.Uuid(), nullable=True),
        sa.Column('color', sa.String(length=100), nullable=True),
        sa.Column('size', sa.String(length=50), nullable=True),
        sa.Column('weight', sa.Numeric(8, 2), nullable=True),
        sa.Column('fur', sa.String(length=100), nullable=True),
        sa.Column('sex', sa.String(length=20), nullable=True),
        sa.Column('age', sa.Integer(), nullable=True),
        sa.Column('sterilized', sa.Boolean(), nullable=False, server_default=sa.text('false')),
        *_audit_columns(),
        sa.PrimaryKeyConstraint('id', name='pk_characteristics'),
        sa.ForeignKeyConstraint(
            ['personality_id'],
            ['personalities.id'],
            name='fk_characteristics_personality_id_personalities',
        ),
    )
    op.create_index(
        op.f('ix_characteristics_personality_id'), 'characteristics', ['personality_id'], unique=False
    )
    op.create_table(
        'animals',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('species_id', sa.Uuid(), nullable=False),
        sa.Column('breed_id', sa.Uuid(), nullable=False),
        sa.Column('disease_id', sa.Uuid(), nullable=True),
        sa.Column('characteristic_id', sa.Uuid(), nullable=True),
        sa.Column('health_status', sa.Boolean(), nullable=True),
        sa.Column('entry_date', sa.Date(), nullable=True),
        sa.Column('adopted', sa.Boolean(), nullable=False, server_default=sa.text('false')),
        sa.Column('photos', sa.JSON(), nullable=False),
        sa.Column('information', sa.Text(), nullable=True),
        sa.Column('status', sa.Boolean(), nullable=False, server_default=sa.text('true')),
        *_audit_columns(),
        sa.PrimaryKeyConstraint('id', name='pk_animals'),
        sa.ForeignKeyConstraint(['species_id'], ['species.id'], name='fk_animals_species_id_species'),
        sa.ForeignKeyConstraint(['breed_id'], ['breeds.id'], name='fk_animals_breed_id_breeds'),
        sa.ForeignKeyConstraint(['disease_id'], ['diseases.id'], name='fk_animals_disease_id_diseases'),
        sa.ForeignKeyConstraint(
            ['characteristic_id'],
            ['characteristics.id'],
            name='fk_animals_characteristic_id_characteristics',
        ),
    )
    op.create_index(op.f('ix_animals_name'), 'animals', ['name'], unique=False)
    op.create_index(op.f('ix_animals_species_id'), 'animals', ['species_id'], unique=False)
    op.create_index(op.f('ix_animals_breed_id'), 'animals', ['breed_id'], unique=False)

    # Seed the closed role set and the economic levels
    op.bulk_insert(
        roles,
        [{'id': uuid4(), 'name': name, 'deleted': False} for name in ('admin', 'moderator', 'user')],
    )
    op.bulk_insert(
        statuses,
        [
            {'id': uuid4(), 'level': level, 'deleted': False}
            for level in ('Ninguno', 'Bajo', 'Medio Bajo', 'Medio', 'Medio Alto', 'Alto')
        ],
    )


def downgrade() -> None:
    op.drop_index(op.f('ix_animals_breed_id'), table_name='animals')
    op.drop_index(op.f('ix_animals_species_id'), table_name='animals')
    op.drop_index(op.f('ix_animals_name'), table_name='animals')
    op.drop_table('animals')
    op.drop_index(op.f('ix_characteristics_personality_id'), table_name='characteristics')
    op.drop_table('characteristics')
    op.drop_index(op.f('ix_personalities_name'), table_name='personalities')
    op.drop_table('personalities')
    op.drop_index(op.f('ix_diseases_name'), table_name='diseases')
    op.drop_table('diseases')
    op.drop_index(op.f('ix_breeds_species_id'), table_name='breeds')
    op.drop_index(op.f('ix_breeds_name'), table_name='breeds')
    op.drop_table('breeds')
    op.drop_index(op.f('ix_species_name'), table_name='species')
    op.drop_table('species')
    op.drop_table('clients')
    op.drop_table('economic_statuses')
    op.drop_index(op.f('ix_users_role_id'), table_name='users')
    op.drop_index(op.f('ix_users_email'), table_name='users')
    op.drop_table('users')
    op.drop_table('roles')
