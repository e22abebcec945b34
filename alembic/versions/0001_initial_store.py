"""initial_store

Revision ID: 0001_initial_store
Revises:
Create Date: 2026-10-16

Create the six tables of the local store: jobs, candidates, timelines,
assessments, assessment_responses and meta.
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001_initial_store'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create all store tables and their lookup indexes."""
    
    op.create_table(
        'jobs',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('slug', sa.String(length=200), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False),
        sa.Column('tags', sa.JSON(), nullable=False),
        sa.Column('order', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.BigInteger(), nullable=False),
        sa.Column('updated_at', sa.BigInteger(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_jobs_slug', 'jobs', ['slug'], unique=True)
    op.create_index('ix_jobs_status', 'jobs', ['status'])
    op.create_index('ix_jobs_order', 'jobs', ['order'])
    op.create_index('ix_jobs_created_at', 'jobs', ['created_at'])
    
    op.create_table(
        'candidates',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('job_id', sa.Integer(), nullable=True),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('stage', sa.String(length=20), nullable=False),
        sa.Column('created_at', sa.BigInteger(), nullable=False),
        sa.Column('updated_at', sa.BigInteger(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_candidates_job_id', 'candidates', ['job_id'])
    op.create_index('ix_candidates_email', 'candidates', ['email'])
    op.create_index('ix_candidates_stage', 'candidates', ['stage'])
    op.create_index('ix_candidates_created_at', 'candidates', ['created_at'])
    
    op.create_table(
        'timelines',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('candidate_id', sa.Integer(), nullable=False),
        sa.Column('type', sa.String(length=20), nullable=False),
        sa.Column('from', sa.String(length=20), nullable=True),
        sa.Column('to', sa.String(length=20), nullable=True),
        sa.Column('note', sa.Text(), nullable=True),
        sa.Column('at', sa.BigInteger(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_timelines_candidate_id', 'timelines', ['candidate_id'])
    op.create_index('ix_timelines_at', 'timelines', ['at'])
    
    op.create_table(
        'assessments',
        sa.Column('id', sa.Integer(), autoincrement=False, nullable=False),
        sa.Column('job_id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=300), nullable=False),
        sa.Column('sections', sa.JSON(), nullable=False),
        sa.Column('updated_at', sa.BigInteger(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_assessments_job_id', 'assessments', ['job_id'])
    op.create_index('ix_assessments_updated_at', 'assessments', ['updated_at'])
    
    op.create_table(
        'assessment_responses',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('job_id', sa.Integer(), nullable=False),
        sa.Column('candidate_id', sa.Integer(), nullable=False),
        sa.Column('responses', sa.JSON(), nullable=False),
        sa.Column('submitted_at', sa.BigInteger(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_assessment_responses_job_id', 'assessment_responses', ['job_id'])
    op.create_index('ix_assessment_responses_candidate_id', 'assessment_responses', ['candidate_id'])
    op.create_index('ix_assessment_responses_submitted_at', 'assessment_responses', ['submitted_at'])
    
    op.create_table(
        'meta',
        sa.Column('key', sa.String(length=100), nullable=False),
        sa.Column('value', sa.JSON(), nullable=True),
        sa.PrimaryKeyConstraint('key')
    )


def downgrade() -> None:
    """Drop all store tables."""
    op.drop_table('meta')
    op.drop_table('assessment_responses')
    op.drop_table('assessments')
    op.drop_table('timelines')
    op.drop_table('candidates')
    op.drop_table('jobs')
