import logging

import httpx

from app.exceptions import (
    EmptyInputError, FetchError, NO_RESULTS_MESSAGE, NETWORK_ERROR_MESSAGE, SearchInProgressError,
    SearchNetworkError
)
from app.models.recipe.discover_models import SearchState, SearchStatus
from app.utils.mealdb_utils import fetch_details, search_by_ingredient
from app.utils.recipe_utils import reduce_detail
from app.utils.text_utils import normalize_query


class SearchController:
    """
    재료 검색 화면의 상태를 소유하는 단일 컨트롤러입니다.

    상태 전이:
        idle --search--> searching --> success | empty | failed
    검색이 진행 중일 때 들어온 새 검색 요청은 SearchInProgressError 로 거절합니다.
    """

    def __init__(self, client: httpx.AsyncClient):
        self._client = client
        self._state = SearchState()

    @property
    def state(self) -> SearchState:
        return self._state

    @property
    def busy(self) -> bool:
        return self._state.loading

    async def search(self, raw_input: str) -> SearchState:
        if self.busy:
            logging.info(f"Rejected search '{raw_input}' while '{self._state.query}' is running")
            raise SearchInProgressError()

        try:
            query = normalize_query(raw_input)
        except EmptyInputError as e:
            self._state = SearchState(status=SearchStatus.IDLE, error=e.message)
            return self._state

        # 이전 결과와 오류는 네트워크 요청 전에 모두 비움
        self._state = SearchState(query=query, status=SearchStatus.SEARCHING, loading=True)
        logging.debug(f"Searching recipes for '{query}'")

        try:
            self._state = await self._run(query)
        finally:
            if self._state.loading:
                logging.error(f"Search for '{query}' was interrupted")
                self._state = SearchState(query=query, status=SearchStatus.FAILED, error=NETWORK_ERROR_MESSAGE)

        logging.info(f"Search for '{query}' finished: {self._state.status.value} ({len(self._state.results)} results)")
        return self._state

    async def _run(self, query: str) -> SearchState:
        try:
            candidates = await search_by_ingredient(self._client, query)
        except SearchNetworkError as e:
            return SearchState(query=query, status=SearchStatus.FAILED, error=e.message)

        if not candidates:
            return SearchState(query=query, status=SearchStatus.EMPTY, error=NO_RESULTS_MESSAGE)

        try:
            details = await fetch_details(self._client, candidates)
        except FetchError as e:
            return SearchState(query=query, status=SearchStatus.FAILED, error=e.message)

        results = [reduce_detail(detail) for detail in details]
        return SearchState(query=query, status=SearchStatus.SUCCESS, results=results)
