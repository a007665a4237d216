from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.errors import NotFoundError, require_param
from app.teams.schemas import TeamCreate, TeamResponse
from app.teams.service import create_team, delete_team, get_team_by_id, get_teams

router = APIRouter(prefix="/teams", tags=["teams"])


@router.post("", response_model=TeamResponse, status_code=status.HTTP_201_CREATED)
async def create(
    data: TeamCreate,
    db: AsyncSession = Depends(get_db),
):
    team = await create_team(db, data)
    return TeamResponse.model_validate(team)


@router.get("", response_model=list[TeamResponse])
async def list_teams(
    tenant_id: str | None = Query(None, alias="tenantId"),
    db: AsyncSession = Depends(get_db),
):
    tenant_id = require_param(tenant_id, "tenantId")
    teams = await get_teams(db, tenant_id)
    return [TeamResponse.model_validate(t) for t in teams]


@router.get("/{team_id}", response_model=TeamResponse)
async def get_team(
    team_id: str,
    db: AsyncSession = Depends(get_db),
):
    team = await get_team_by_id(db, team_id)
    if not team:
        raise NotFoundError("Team not found")
    return TeamResponse.model_validate(team)


@router.delete("/{team_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete(
    team_id: str,
    db: AsyncSession = Depends(get_db),
):
    team = await get_team_by_id(db, team_id)
    if not team:
        raise NotFoundError("Team not found")
    await delete_team(db, team)
