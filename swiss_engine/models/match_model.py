from typing import Optional

from pydantic import BaseModel, Field, model_validator

class MatchModel(BaseModel):
    id: Optional[str] = None # None until the caller persists the record
    tournament_id: str
    round_number: int = Field(ge=1)

    player1_id: str
    player2_id: Optional[str] = None # None signals a bye

    winner_id: Optional[str] = None # None signals unplayed or a double loss
    is_bye: bool = False

    score_p1: int = Field(default=0, ge=0)
    score_p2: int = Field(default=0, ge=0)

    class Config:
        from_attributes = True

    @model_validator(mode="after")
    def check_players(self):
        if self.is_bye:
            if self.player2_id is not None:
                raise ValueError("A bye match cannot have a second player")
            if self.winner_id != self.player1_id:
                raise ValueError("A bye match must be won by player1")
            return self

        if self.player2_id is None:
            raise ValueError("A played match needs two players")
        if self.player1_id == self.player2_id:
            raise ValueError("A player cannot be paired against themselves")
        if self.winner_id is not None and self.winner_id not in (self.player1_id, self.player2_id):
            raise ValueError("Winner must be one of the players in the match")
        return self

    @property
    def is_decisive(self) -> bool:
        return not self.is_bye and self.winner_id is not None
