"""005: create applications and negotiations

Revision ID: 005
Revises: 004
Create Date: 2026-10-01

One row per (job, finder) per table. Jobs are never deleted while referenced
(ON DELETE RESTRICT).
"""
from typing import Sequence, Union

from alembic import op

revision: str = "005"
down_revision: Union[str, None] = "004"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute("""
        CREATE TABLE applications (
            id              VARCHAR(64)     PRIMARY KEY DEFAULT gen_random_uuid()::text,
            job_id          VARCHAR(64)     NOT NULL REFERENCES jobs (id) ON DELETE RESTRICT,
            finder_id       VARCHAR(64)     NOT NULL,
            finder_name     VARCHAR(128)    NOT NULL,
            status          VARCHAR(16)     NOT NULL DEFAULT 'pending',
            message         TEXT            NOT NULL,
            contact_email   VARCHAR(255)    NOT NULL DEFAULT '',
            contact_phone   VARCHAR(32)     NOT NULL DEFAULT '',
            distance        VARCHAR(64)     NOT NULL DEFAULT '',
            time_to_reach   VARCHAR(64)     NOT NULL DEFAULT '',
            applied_at      TIMESTAMPTZ     NOT NULL DEFAULT NOW(),
            updated_at      TIMESTAMPTZ     NOT NULL DEFAULT NOW(),
            CONSTRAINT uq_applications_job_finder UNIQUE (job_id, finder_id),
            CONSTRAINT ck_applications_status CHECK (
                status IN ('pending', 'approved', 'rejected')
            ),
            CONSTRAINT ck_applications_message CHECK (LENGTH(TRIM(message)) > 0)
        );
    """)
    op.execute(
        "CREATE INDEX idx_applications_finder ON applications (finder_id, applied_at DESC);"
    )

    op.execute("""
        CREATE TABLE negotiations (
            id                      VARCHAR(64)     PRIMARY KEY DEFAULT gen_random_uuid()::text,
            job_id                  VARCHAR(64)     NOT NULL REFERENCES jobs (id) ON DELETE RESTRICT,
            finder_id               VARCHAR(64)     NOT NULL,
            finder_name             VARCHAR(128)    NOT NULL,
            proposed_amount_paise   BIGINT          NOT NULL,
            status                  VARCHAR(16)     NOT NULL DEFAULT 'pending',
            message                 TEXT            NOT NULL,
            contact_email           VARCHAR(255)    NOT NULL DEFAULT '',
            contact_phone           VARCHAR(32)     NOT NULL DEFAULT '',
            distance                VARCHAR(64)     NOT NULL DEFAULT '',
            time_to_reach           VARCHAR(64)     NOT NULL DEFAULT '',
            created_at              TIMESTAMPTZ     NOT NULL DEFAULT NOW(),
            updated_at              TIMESTAMPTZ     NOT NULL DEFAULT NOW(),
            CONSTRAINT uq_negotiations_job_finder UNIQUE (job_id, finder_id),
            CONSTRAINT ck_negotiations_amount_gt_0 CHECK (proposed_amount_paise > 0),
            CONSTRAINT ck_negotiations_status CHECK (
                status IN ('pending', 'accepted', 'rejected')
            ),
            CONSTRAINT ck_negotiations_message CHECK (LENGTH(TRIM(message)) > 0)
        );
    """)
    op.execute(
        "CREATE INDEX idx_negotiations_finder ON negotiations (finder_id, created_at DESC);"
    )

    for table in ("applications", "negotiations"):
        op.execute(f"""
            CREATE TRIGGER trg_{table}_updated_at
                BEFORE UPDATE ON {table}
                FOR EACH ROW EXECUTE FUNCTION fn_touch_updated_at();
        """)


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS negotiations CASCADE;")
    op.execute("DROP TABLE IF EXISTS applications CASCADE;")
