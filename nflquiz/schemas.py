"""Pydantic schemas for JSON data validation."""

from datetime import date

from pydantic import BaseModel, Field, field_validator


class QBEntry(BaseModel):
    """Quarterback row in qb_data.json."""

    name: str = Field(..., min_length=1)
    athleteId: str = Field(..., pattern=r'^\d+$')
    teamAbbr: str = Field(..., min_length=2, max_length=3, pattern=r'^[a-z]+$')

    class Config:
        extra = 'forbid'


class QBDataFile(BaseModel):
    """Complete qb_data.json file structure."""

    lastUpdated: str
    qbs: list[QBEntry]

    @field_validator('lastUpdated')
    @classmethod
    def validate_date(cls, v):
        """Ensure lastUpdated is an ISO date (YYYY-MM-DD)."""
        try:
            date.fromisoformat(v)
        except ValueError:
            raise ValueError(f'lastUpdated must be an ISO date, got {v!r}')
        return v

    class Config:
        extra = 'forbid'


class QuizConfig(BaseModel):
    """Quiz and data collection settings."""

    season: int | None = Field(None, ge=2000, le=2100)
    qb_data_path: str = 'data/qb_data.json'
    api_delay_seconds: float = Field(0.1, ge=0, le=30)
    api_max_retries: int = Field(3, ge=1, le=10)
    api_timeout_seconds: float = Field(30, gt=0, le=300)
    log_dir: str = 'logs'
    log_level: str = Field('INFO', pattern=r'^(DEBUG|INFO|WARNING|ERROR)$')

    class Config:
        extra = 'forbid'
