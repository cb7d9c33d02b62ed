import unicodedata

from pydantic import Field
from typing import Optional

from .base import BaseLeagueModel


def collation_key(name: str) -> tuple:
    """Locale-style ordering for names, matching PostgreSQL's ``und-x-icu`` collation.

    Letters compare first ignoring accents and case, then accents break ties,
    then case with lowercase first.
    """
    decomposed = unicodedata.normalize("NFKD", name.casefold())
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return (base, decomposed, name.swapcase())


class Player(BaseLeagueModel):
    """A golfer. Players exist independently of seasons; rosters link the two."""
    id: str
    name: str
    email: Optional[str] = None
    handicap_index: Optional[float] = Field(None, ge=-10, le=54)

    @property
    def name_key(self) -> tuple:
        """Ordering key shared by every store."""
        return (*collation_key(self.name), self.id)

    def display_handicap(self) -> str:
        if self.handicap_index is None:
            return "N/A"
        return f"{self.handicap_index:.1f}"
