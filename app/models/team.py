"""팀 SQLAlchemy ORM 모델 정의.

Team ORM model definition.
Team is the non-owning side of the Member-Team association; the foreign key
lives on the member table.

Tables:
    - team: 팀 (Teams that members may belong to)
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class Team(Base):
    """팀 모델.

    Team model. Created before its members and never deleted.

    Attributes:
        id: 고유 식별자 (Auto-increment primary key)
        name: 팀 이름 (Team name, unique in practice but not constrained)

    Relationships:
        members: 소속 회원 목록, 읽기 전용 (Members of this team, read-only view)
    """

    __tablename__ = "team"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    # 읽기 전용 역방향 관계 — 소속 회원 조회는 member_repository.find_by_team_name 사용
    # Read-only inverse side; list members through member_repository.find_by_team_name
    members = relationship("Member", viewonly=True)

    def __repr__(self) -> str:
        return f"Team(id={self.id}, name={self.name!r})"
