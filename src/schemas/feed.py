"""Cadence feed schema."""

from pydantic import BaseModel, Field, model_validator

from .article import ResolvedArticle

CADENCE_MIN = 1
CADENCE_MAX = 7


class CadenceFeed(BaseModel):
    """Articles published on one cadence, most recent first.

    Attributes:
        cadence: Days between consecutive articles (1-7)
        articles: Resolved articles in strictly descending date order
    """

    cadence: int = Field(ge=CADENCE_MIN, le=CADENCE_MAX)
    articles: list[ResolvedArticle] = []

    @model_validator(mode="after")
    def _check_descending(self) -> "CadenceFeed":
        dates = [a.date for a in self.articles]
        for newer, older in zip(dates, dates[1:]):
            if newer <= older:
                raise ValueError(
                    f"articles must be in descending date order: {newer} before {older}"
                )
        return self
