from app.exceptions import EmptyInputError


def normalize_query(raw: str) -> str:
    """
    사용자가 입력한 재료 문자열의 앞뒤 공백을 제거합니다.
    쉼표나 공백으로 구분된 여러 재료도 그대로 전달합니다.

    Raises:
        EmptyInputError: 공백을 제거한 결과가 빈 문자열인 경우
    """
    query = (raw or "").strip()
    if not query:
        raise EmptyInputError()
    return query
