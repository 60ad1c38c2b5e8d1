from __future__ import annotations

from collections import abc

from pydantic import Field

from libtwitch.models.base import KrakenModel, id_field


class Game(KrakenModel):
    """Represents a Twitch game/category."""

    id: int | None = id_field()
    name: str
    giantbomb_id: int | None = None
    popularity: int | None = None
    localized_name: str | None = None
    locale: str | None = None
    box: dict[str, str] = Field(default_factory=dict)
    logo: dict[str, str] = Field(default_factory=dict)

    def __str__(self) -> str:
        return self.name


class TopGame(KrakenModel):
    game: Game
    viewers: int = 0
    channels: int = 0


class TopGames(KrakenModel):
    """
    Games sorted by current viewer count.

    Iterating yields the TopGame entries:
        for entry in top_games:
            print(f"{entry.game.name}: {entry.viewers}")
    """

    total: int = Field(default=0, alias="_total")
    top: list[TopGame] = Field(default_factory=list)

    def __iter__(self) -> abc.Iterator[TopGame]:  # type: ignore[override]
        return iter(self.top)
