from sqlalchemy import JSON, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base, TimestampMixin, generate_id


class AssessmentMatrix(TimestampMixin, Base):
    """Pillar/category questionnaire layout for one performance cycle.

    Its ``tenant_id`` is the single source of truth for who may read the
    dashboard analytics computed against it.
    """

    __tablename__ = "assessment_matrices"

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=generate_id)
    tenant_id: Mapped[str] = mapped_column(String(64), ForeignKey("companies.id"), nullable=False, index=True)
    performance_cycle_id: Mapped[str | None] = mapped_column(
        String(64), ForeignKey("performance_cycles.id"), index=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    pillar_map: Mapped[dict | None] = mapped_column(JSON, default=dict)
