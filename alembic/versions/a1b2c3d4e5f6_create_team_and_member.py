"""create_team_and_member

Revision ID: a1b2c3d4e5f6
Revises:
Create Date: 2026-10-18 10:00:00.000000

팀/회원 테이블 생성: team, member.
Create team and member tables. member.team_id is the owning side of the
association and stays nullable for members without a team.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'a1b2c3d4e5f6'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # team — 팀 (name은 사실상 고유하지만 제약 없음)
    op.create_table(
        'team',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(255), nullable=False),
    )

    # member — 회원 (team 삭제 연쇄 없음)
    op.create_table(
        'member',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('username', sa.String(255), nullable=True),
        sa.Column('age', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('team_id', sa.Integer(), sa.ForeignKey('team.id'), nullable=True),
    )

    # 검색 조건 인덱스 — Indexes backing the search predicates and the join
    op.create_index('ix_member_team_id', 'member', ['team_id'])
    op.create_index('ix_member_age', 'member', ['age'])


def downgrade() -> None:
    op.drop_index('ix_member_age', table_name='member')
    op.drop_index('ix_member_team_id', table_name='member')
    op.drop_table('member')
    op.drop_table('team')
