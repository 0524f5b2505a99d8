"""회원 SQLAlchemy ORM 모델 정의.

Member ORM model definition.
Member owns the association to Team through a nullable team_id foreign key,
so members without a team are allowed.

Tables:
    - member: 회원 (Members, optionally assigned to a team)
"""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class Member(Base):
    """회원 모델.

    Member model. Created by explicit inserts, mutated by bulk updates and
    removed by bulk deletes. Deleting a member never deletes its team.

    Attributes:
        id: 고유 식별자 (Auto-increment primary key)
        username: 회원 이름, NULL 허용 (Username, nullable)
        age: 나이 (Age)
        team_id: 소속 팀 FK, 미배정이면 NULL (Team foreign key, NULL when unassigned)

    Relationships:
        team: 소속 팀 (Owning many-to-one reference to Team)
    """

    __tablename__ = "member"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str | None] = mapped_column(String(255), nullable=True)
    age: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0", index=True)
    # 소속 팀 FK — 팀 삭제와 무관하게 회원 유지 (ondelete 없음)
    team_id: Mapped[int | None] = mapped_column(Integer, ForeignKey("team.id"), nullable=True, index=True)

    team = relationship("Team")

    def __repr__(self) -> str:
        # team은 지연 로딩이므로 repr에서 접근하지 않음 (never touch the lazy relationship)
        return f"Member(id={self.id}, username={self.username!r}, age={self.age})"
