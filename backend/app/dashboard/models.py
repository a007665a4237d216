import enum
from datetime import datetime

from sqlalchemy import DateTime, Float, Index, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base, generate_id, utcnow


class AnalyticsScope(str, enum.Enum):
    ASSESSMENT_MATRIX = "ASSESSMENT_MATRIX"
    TEAM = "TEAM"


class DashboardAnalytics(Base):
    """One precomputed aggregate, overwritten wholesale whenever it is recomputed.

    ``analytics_data_json`` holds the nested pillar/category/word-cloud blob as
    text; it is decoded on every read and may be absent or corrupt.
    """

    __tablename__ = "dashboard_analytics"

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=generate_id)
    company_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    performance_cycle_id: Mapped[str | None] = mapped_column(String(64), index=True)
    assessment_matrix_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    scope: Mapped[str] = mapped_column(String(32), nullable=False)
    team_id: Mapped[str | None] = mapped_column(String(64))

    general_average: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    employee_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    completion_percentage: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    last_updated: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)

    company_name: Mapped[str | None] = mapped_column(String(255))
    performance_cycle_name: Mapped[str | None] = mapped_column(String(255))
    assessment_matrix_name: Mapped[str | None] = mapped_column(String(255))
    team_name: Mapped[str | None] = mapped_column(String(255))

    analytics_data_json: Mapped[str | None] = mapped_column(Text)


# One row per matrix/scope/team slot. team_id is NULL on the matrix-level row,
# so it is coalesced: NULLs never collide in a plain unique constraint.
Index(
    "uq_dashboard_analytics_slot",
    DashboardAnalytics.assessment_matrix_id,
    DashboardAnalytics.scope,
    func.coalesce(DashboardAnalytics.team_id, ""),
    unique=True,
)
