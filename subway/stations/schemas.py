from pydantic import BaseModel, Field, field_validator

class StationCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        v = v.strip()
        if not v:
            raise ValueError('Station name must not be blank')
        return v
