"""Pydantic schemas for configuration and exported leaderboard files."""

from pydantic import BaseModel, Field, field_validator

VALID_GROUPS = {'A', 'B', 'C', 'D'}


class GroupInfo(BaseModel):
    """Display name and canonical roster of one group."""

    name: str = Field(..., min_length=1)
    members: list[str] = Field(..., min_length=4, max_length=4)

    class Config:
        extra = 'forbid'
        frozen = True


class LeagueConfig(BaseModel):
    """League configuration settings."""

    sheet_url: str = Field(..., pattern=r'^https?://')
    request_timeout: float = Field(30, gt=0, le=300)
    group_size: int = Field(4, ge=1, le=10)
    groups: dict[str, GroupInfo]

    @field_validator('groups')
    @classmethod
    def validate_groups(cls, v):
        """Ensure group identifiers are A-D."""
        if not v:
            raise ValueError('At least one group is required')
        for group_id in v:
            if group_id not in VALID_GROUPS:
                raise ValueError(f'Invalid group: {group_id}')
        return v

    @property
    def group_ids(self) -> list[str]:
        """Group identifiers in assignment order."""
        return sorted(self.groups)

    @property
    def max_players(self) -> int:
        return len(self.groups) * self.group_size

    class Config:
        extra = 'forbid'
        frozen = True


class PlayerRow(BaseModel):
    """Player line in an exported leaderboard file."""

    rank: int = Field(..., ge=1)
    name: str = Field(..., min_length=1)
    group: str = Field(..., pattern=r'^[A-D]$')
    group_name: str
    total: float
    weekly_scores: list[str]

    class Config:
        extra = 'forbid'


class LeaderboardFile(BaseModel):
    """Complete leaderboard.json file structure."""

    updated_at: str
    week_headers: list[str]
    total_birdies: int = Field(0, ge=0)
    birdie_king: str = ''
    players: list[PlayerRow]

    class Config:
        extra = 'forbid'
