import textwrap

from app.models.recipe.discover_models import DisplayRecipe, RecipeCard, SearchScreen, SearchState

TITLE = "MadRecipe"
SUBTITLE = "Find delicious recipes instantly"
INPUT_LABEL = "Enter ingredients (comma or space separated)"
INPUT_PLACEHOLDER = "e.g. chicken, rice, tomato"
BUTTON_LABEL = "Find Recipes"
BUTTON_LABEL_LOADING = "Searching..."
LOADING_TEXT = "Finding perfect recipes..."

DEFAULT_CATEGORY = "Main Course"
SUMMARY_MAX_LINES = 3
SUMMARY_LINE_WIDTH = 40


def clip_summary(summary: str, max_lines: int = SUMMARY_MAX_LINES, width: int = SUMMARY_LINE_WIDTH) -> str:
    """
    카드에 표시할 요약을 최대 max_lines 줄로 자릅니다. 잘린 경우 '...' 으로 끝납니다.
    """
    if not summary:
        return ""
    lines = textwrap.wrap(summary, width=width, max_lines=max_lines, placeholder="...")
    return " ".join(lines)


def build_card(recipe: DisplayRecipe) -> RecipeCard:
    return RecipeCard(
        id=recipe.id,
        name=recipe.name,
        thumbnail=recipe.thumbnail or None,
        category=recipe.category or DEFAULT_CATEGORY,
        area=recipe.area or None,
        summary=clip_summary(recipe.summary),
    )


def build_screen(state: SearchState) -> SearchScreen:
    """
    현재 검색 상태로 화면에 필요한 정보를 구성합니다.
    로딩 중이면 로딩 문구를, 오류가 있으면 오류 문구를, 결과가 있으면 카드 목록을 채웁니다.
    """
    return SearchScreen(
        title=TITLE,
        subtitle=SUBTITLE,
        input_label=INPUT_LABEL,
        input_placeholder=INPUT_PLACEHOLDER,
        button_label=BUTTON_LABEL_LOADING if state.loading else BUTTON_LABEL,
        loading_text=LOADING_TEXT if state.loading else None,
        error=state.error,
        cards=[build_card(recipe) for recipe in state.results],
        state=state,
    )
