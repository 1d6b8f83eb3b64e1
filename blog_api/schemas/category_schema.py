from pydantic import BaseModel, Field, field_validator
from datetime import datetime

class CategoryRef(BaseModel):
    id: str
    name: str

    model_config = {"from_attributes": True}

class CategoryCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name must not be blank")
        return v

class CategoryOut(CategoryRef):
    created_at: datetime
