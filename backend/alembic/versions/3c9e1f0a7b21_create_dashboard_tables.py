"""create companies, cycles, matrices, teams and dashboard analytics

Revision ID: 3c9e1f0a7b21
Revises:
Create Date: 2026-10-18 00:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op


# revision identifiers, used by Alembic.
revision: str = '3c9e1f0a7b21'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    ]


def upgrade() -> None:
    op.create_table(
        'companies',
        sa.Column('id', sa.String(64), primary_key=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('document_number', sa.String(50)),
        sa.Column('size', sa.String(20)),
        sa.Column('industry', sa.String(100)),
        sa.Column('website', sa.String(255)),
        sa.Column('phone', sa.String(50)),
        sa.Column('legal_name', sa.String(255)),
        sa.Column('description', sa.Text()),
        *_timestamps(),
    )
    op.create_index('ix_companies_email', 'companies', ['email'])

    op.create_table(
        'performance_cycles',
        sa.Column('id', sa.String(64), primary_key=True),
        sa.Column('tenant_id', sa.String(64), sa.ForeignKey('companies.id'), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('description', sa.Text()),
        sa.Column('is_active', sa.Boolean()),
        sa.Column('is_time_sensitive', sa.Boolean()),
        sa.Column('start_date', sa.Date()),
        sa.Column('end_date', sa.Date()),
        *_timestamps(),
    )
    op.create_index('ix_performance_cycles_tenant_id', 'performance_cycles', ['tenant_id'])

    op.create_table(
        'assessment_matrices',
        sa.Column('id', sa.String(64), primary_key=True),
        sa.Column('tenant_id', sa.String(64), sa.ForeignKey('companies.id'), nullable=False),
        sa.Column('performance_cycle_id', sa.String(64), sa.ForeignKey('performance_cycles.id')),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('description', sa.Text()),
        sa.Column('pillar_map', sa.JSON()),
        *_timestamps(),
    )
    op.create_index('ix_assessment_matrices_tenant_id', 'assessment_matrices', ['tenant_id'])
    op.create_index('ix_assessment_matrices_performance_cycle_id', 'assessment_matrices', ['performance_cycle_id'])

    op.create_table(
        'teams',
        sa.Column('id', sa.String(64), primary_key=True),
        sa.Column('tenant_id', sa.String(64), sa.ForeignKey('companies.id'), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('description', sa.Text()),
        sa.Column('department_id', sa.String(64)),
        *_timestamps(),
    )
    op.create_index('ix_teams_tenant_id', 'teams', ['tenant_id'])

    op.create_table(
        'dashboard_analytics',
        sa.Column('id', sa.String(64), primary_key=True),
        sa.Column('company_id', sa.String(64), nullable=False),
        sa.Column('performance_cycle_id', sa.String(64)),
        sa.Column('assessment_matrix_id', sa.String(64), nullable=False),
        sa.Column('scope', sa.String(32), nullable=False),
        sa.Column('team_id', sa.String(64)),
        sa.Column('general_average', sa.Float(), nullable=False),
        sa.Column('employee_count', sa.Integer(), nullable=False),
        sa.Column('completion_percentage', sa.Float(), nullable=False),
        sa.Column('last_updated', sa.DateTime(timezone=True), nullable=False),
        sa.Column('company_name', sa.String(255)),
        sa.Column('performance_cycle_name', sa.String(255)),
        sa.Column('assessment_matrix_name', sa.String(255)),
        sa.Column('team_name', sa.String(255)),
        sa.Column('analytics_data_json', sa.Text()),
    )
    op.create_index('ix_dashboard_analytics_company_id', 'dashboard_analytics', ['company_id'])
    op.create_index('ix_dashboard_analytics_performance_cycle_id', 'dashboard_analytics', ['performance_cycle_id'])
    op.create_index('ix_dashboard_analytics_assessment_matrix_id', 'dashboard_analytics', ['assessment_matrix_id'])
    op.create_index(
        'uq_dashboard_analytics_slot',
        'dashboard_analytics',
        ['assessment_matrix_id', 'scope', sa.text("coalesce(team_id, '')")],
        unique=True,
    )


def downgrade() -> None:
    op.drop_table('dashboard_analytics')
    op.drop_table('teams')
    op.drop_table('assessment_matrices')
    op.drop_table('performance_cycles')
    op.drop_table('companies')
