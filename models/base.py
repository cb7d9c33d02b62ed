from pydantic import BaseModel, ConfigDict


class BaseLeagueModel(BaseModel):
    """Common config: assignments are re-validated, so in-place score edits stay typed."""
    model_config = ConfigDict(validate_assignment=True)
