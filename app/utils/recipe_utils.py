from app.models.recipe.discover_models import DetailRecord, DisplayRecipe

SUMMARY_SENTENCES = 2


def summarize_instructions(instructions: str | None) -> str:
    """
    조리 방법의 앞 두 문장으로 짧은 요약을 만듭니다.
    '.' 기준으로만 자르기 때문에 약어나 소수점은 구분하지 않습니다.
    """
    text = instructions or ""
    summary = ".".join(text.split(".")[:SUMMARY_SENTENCES]).strip()
    if summary and not summary.endswith("."):
        summary += "."
    return summary


def reduce_detail(detail: DetailRecord) -> DisplayRecipe:
    return DisplayRecipe(
        id=detail.id,
        name=detail.name,
        thumbnail=detail.thumbnail_url,
        summary=summarize_instructions(detail.instructions),
        category=detail.category,
        area=detail.area,
        tags=detail.tags,
    )
