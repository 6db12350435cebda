from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class SearchStatus(str, Enum):
    IDLE = "idle"
    SEARCHING = "searching"
    SUCCESS = "success"
    EMPTY = "empty"
    FAILED = "failed"


class Candidate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="idMeal")


class DetailRecord(BaseModel):
    """
    lookup.php 가 돌려주는 레시피 원본 레코드입니다.
    idMeal, strMeal 외의 필드는 없거나 null 일 수 있습니다.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="idMeal")
    name: str = Field(alias="strMeal")
    thumbnail_url: str | None = Field(default=None, alias="strMealThumb")
    instructions: str | None = Field(default=None, alias="strInstructions")
    category: str | None = Field(default=None, alias="strCategory")
    area: str | None = Field(default=None, alias="strArea")
    tags: str | None = Field(default=None, alias="strTags")


class DisplayRecipe(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    thumbnail: str | None = None
    summary: str = ""
    category: str | None = None
    area: str | None = None
    tags: str | None = None


class SearchState(BaseModel):
    model_config = ConfigDict(frozen=True)

    query: str = ""
    status: SearchStatus = SearchStatus.IDLE
    loading: bool = False
    error: str | None = None
    results: List[DisplayRecipe] = []


class DiscoverRequest(BaseModel):
    ingredients: str


class RecipeCard(BaseModel):
    id: str
    name: str
    thumbnail: str | None
    category: str
    area: str | None
    summary: str


class SearchScreen(BaseModel):
    title: str
    subtitle: str
    input_label: str
    input_placeholder: str
    button_label: str
    loading_text: str | None
    error: str | None
    cards: List[RecipeCard]
    state: SearchState
