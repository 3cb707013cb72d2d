"""004: create jobs table

Revision ID: 004
Revises: 003
Create Date: 2026-10-01
"""
from typing import Sequence, Union

from alembic import op

revision: str = "004"
down_revision: Union[str, None] = "003"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute("""
        CREATE TABLE jobs (
            id                      VARCHAR(64)     PRIMARY KEY DEFAULT gen_random_uuid()::text,
            title                   VARCHAR(200)    NOT NULL,
            description             TEXT            NOT NULL,
            budget_paise            BIGINT          NOT NULL,
            posted_by               VARCHAR(64)     NOT NULL,
            poster_name             VARCHAR(128)    NOT NULL,
            status                  VARCHAR(16)     NOT NULL DEFAULT 'active',
            category                VARCHAR(32)     NOT NULL,
            roles_responsibilities  TEXT,
            start_date              DATE,
            end_date                DATE,
            start_time              TIME,
            end_time                TIME,
            created_at              TIMESTAMPTZ     NOT NULL DEFAULT NOW(),
            updated_at              TIMESTAMPTZ     NOT NULL DEFAULT NOW(),
            CONSTRAINT ck_jobs_budget_gt_0 CHECK (budget_paise > 0),
            CONSTRAINT ck_jobs_status CHECK (status IN ('active', 'completed', 'cancelled')),
            CONSTRAINT ck_jobs_category CHECK (category IN (
                'tutor', 'reception', 'catering', 'marketing', 'hotel-care',
                'customer-service', 'admin', 'events', 'photography', 'delivery'
            )),
            CONSTRAINT ck_jobs_date_window CHECK (
                start_date IS NULL OR end_date IS NULL OR start_date <= end_date
            )
        );
    """)
    op.execute("CREATE INDEX idx_jobs_status_created ON jobs (status, created_at DESC);")
    op.execute("""
        CREATE TRIGGER trg_jobs_updated_at
            BEFORE UPDATE ON jobs
            FOR EACH ROW EXECUTE FUNCTION fn_touch_updated_at();
    """)


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS jobs CASCADE;")
