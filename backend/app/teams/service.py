from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.teams.models import Team
from app.teams.schemas import TeamCreate


async def create_team(db: AsyncSession, data: TeamCreate) -> Team:
    team = Team(**data.model_dump())
    db.add(team)
    await db.commit()
    await db.refresh(team)
    return team


async def get_teams(db: AsyncSession, tenant_id: str) -> list[Team]:
    result = await db.execute(
        select(Team).where(Team.tenant_id == tenant_id).order_by(Team.name.asc())
    )
    return list(result.scalars().all())


async def get_team_by_id(db: AsyncSession, team_id: str) -> Team | None:
    result = await db.execute(select(Team).where(Team.id == team_id))
    return result.scalar_one_or_none()


async def delete_team(db: AsyncSession, team: Team) -> None:
    await db.delete(team)
    await db.commit()
