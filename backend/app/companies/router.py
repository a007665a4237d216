from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.companies.schemas import CompanyCreate, CompanyResponse, CompanyUpdate
from app.companies.service import create_company, get_company_by_id, update_company
from app.database import get_db
from app.errors import NotFoundError

router = APIRouter(prefix="/companies", tags=["companies"])


@router.post("", response_model=CompanyResponse, status_code=status.HTTP_201_CREATED)
async def create(
    data: CompanyCreate,
    db: AsyncSession = Depends(get_db),
):
    company = await create_company(db, data)
    return CompanyResponse.model_validate(company)


@router.get("/{company_id}", response_model=CompanyResponse)
async def get_company(
    company_id: str,
    db: AsyncSession = Depends(get_db),
):
    company = await get_company_by_id(db, company_id)
    if not company:
        raise NotFoundError("Company not found")
    return CompanyResponse.model_validate(company)


@router.patch("/{company_id}", response_model=CompanyResponse)
async def update(
    company_id: str,
    data: CompanyUpdate,
    db: AsyncSession = Depends(get_db),
):
    company = await get_company_by_id(db, company_id)
    if not company:
        raise NotFoundError("Company not found")

    updated = await update_company(db, company, data)
    return CompanyResponse.model_validate(updated)
