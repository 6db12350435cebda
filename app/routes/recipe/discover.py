import logging

from fastapi import APIRouter, Depends, HTTPException

from app.dependencies.search import get_search_controller
from app.exceptions import SearchInProgressError
from app.models.error_models import ErrorResponse
from app.models.recipe.discover_models import DiscoverRequest, SearchScreen, SearchStatus
from app.search_controller import SearchController
from app.utils.presentation_utils import build_screen

router = APIRouter()


@router.post("/recipe/discover", tags=["Recipe"], response_model=SearchScreen,
             responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}})
async def discover_recipes(request: DiscoverRequest, controller: SearchController = Depends(get_search_controller)):
    """
    입력한 재료로 TheMealDB 에서 레시피를 찾아 최대 10개의 카드로 반환합니다.
    결과가 없거나 요청에 실패한 경우에도 200 으로 응답하며, 화면의 error 에 안내 문구가 담깁니다.
    """
    try:
        state = await controller.search(request.ingredients)
    except SearchInProgressError as e:
        raise HTTPException(status_code=409, detail=e.message)

    # 빈 입력은 검색을 시작하지 않음
    if state.status == SearchStatus.IDLE:
        raise HTTPException(status_code=400, detail=state.error)

    return build_screen(state)


@router.get("/recipe/discover", tags=["Recipe"], response_model=SearchScreen)
async def get_discover_screen(controller: SearchController = Depends(get_search_controller)):
    """
    현재 검색 화면 상태를 반환합니다. 검색이 진행 중이면 로딩 상태가 반환됩니다.
    """
    state = controller.state
    logging.debug(f"Current search state: {state.status.value}")
    return build_screen(state)
