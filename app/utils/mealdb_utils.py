import asyncio
import logging
from typing import List

import httpx
from pydantic import ValidationError

from app.config import MAX_RESULTS
from app.exceptions import FetchError, SearchNetworkError
from app.models.recipe.discover_models import Candidate, DetailRecord


async def search_by_ingredient(client: httpx.AsyncClient, query: str, limit: int = MAX_RESULTS) -> List[Candidate]:
    """
    filter.php 로 재료가 들어간 레시피 ID 목록을 조회합니다.

    Args:
        client: TheMealDB base_url 이 설정된 HTTP 클라이언트
        query: 정규화된 검색어 (URL 인코딩은 httpx 가 처리)
        limit: 반환할 최대 후보 수

    Returns:
        List[Candidate]: 서버 순서를 유지한 최대 limit 개의 후보. 결과가 없으면 빈 리스트

    Raises:
        SearchNetworkError: 전송 실패, 오류 응답, JSON 이 아니거나 형식이 맞지 않는 응답
    """
    try:
        response = await client.get("/filter.php", params={"i": query})
        response.raise_for_status()
        data = response.json()
    except (httpx.HTTPError, ValueError) as e:
        logging.warning(f"Filter request failed for '{query}': {e}")
        raise SearchNetworkError() from e

    if not isinstance(data, dict):
        logging.warning(f"Unexpected filter payload for '{query}': {data!r}")
        raise SearchNetworkError()

    # meals 가 없거나 null 이면 정상적인 빈 결과
    meals = data.get("meals")
    if not meals:
        return []

    if not isinstance(meals, list):
        logging.warning(f"Unexpected filter payload for '{query}': {meals!r}")
        raise SearchNetworkError()

    try:
        return [Candidate.model_validate(meal) for meal in meals[:limit]]
    except ValidationError as e:
        logging.warning(f"Malformed filter entry for '{query}': {e}")
        raise SearchNetworkError() from e


async def lookup_meal(client: httpx.AsyncClient, meal_id: str) -> DetailRecord:
    """
    lookup.php 로 레시피 상세 정보를 조회합니다. meals 의 첫 번째 항목만 사용합니다.
    """
    try:
        response = await client.get("/lookup.php", params={"i": meal_id})
        response.raise_for_status()
        data = response.json()
        meals = data.get("meals") if isinstance(data, dict) else None
        if not meals or not isinstance(meals, list):
            raise FetchError()
        return DetailRecord.model_validate(meals[0])
    except FetchError:
        logging.warning(f"Lookup for meal {meal_id} returned no record")
        raise
    except (httpx.HTTPError, ValueError) as e:
        logging.warning(f"Lookup request failed for meal {meal_id}: {e}")
        raise FetchError() from e


async def fetch_details(client: httpx.AsyncClient, candidates: List[Candidate]) -> List[DetailRecord]:
    """
    모든 후보의 상세 정보를 동시에 요청하고 전부 끝날 때까지 기다립니다.
    하나라도 실패하면 부분 결과 없이 전체가 FetchError 로 실패합니다.
    결과 순서는 candidates 순서와 같습니다.
    """
    results = await asyncio.gather(
        *(lookup_meal(client, candidate.id) for candidate in candidates),
        return_exceptions=True,
    )

    for candidate, result in zip(candidates, results):
        if isinstance(result, BaseException):
            logging.error(f"Detail fetch aborted by meal {candidate.id}: {result!r}")
            raise result

    return list(results)
