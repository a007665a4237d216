from datetime import datetime

from pydantic import EmailStr, Field

from app.schemas import CamelModel

COMPANY_SIZE_PATTERN = "^(micro|small|medium|big)$"


class CompanyBase(CamelModel):
    name: str = Field(min_length=1, max_length=255)
    email: EmailStr
    document_number: str = Field(min_length=1, max_length=50)
    description: str = Field(min_length=1)
    size: str = Field(pattern=COMPANY_SIZE_PATTERN)
    industry: str = Field(min_length=1, max_length=100)
    legal_name: str | None = Field(None, max_length=255)
    website: str | None = Field(None, max_length=255)
    phone: str | None = Field(None, max_length=50)


class CompanyCreate(CompanyBase):
    pass


class CompanyUpdate(CamelModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    email: EmailStr | None = None
    description: str | None = None
    size: str | None = Field(None, pattern=COMPANY_SIZE_PATTERN)
    industry: str | None = Field(None, max_length=100)
    legal_name: str | None = Field(None, max_length=255)
    website: str | None = Field(None, max_length=255)
    phone: str | None = Field(None, max_length=50)


class CompanyResponse(CamelModel):
    id: str
    name: str
    email: str
    document_number: str | None
    description: str | None
    size: str | None
    industry: str | None
    legal_name: str | None
    website: str | None
    phone: str | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
