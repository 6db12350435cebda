import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from app.config import LOG_LEVEL, MEALDB_BASE_URL, REQUEST_TIMEOUT
from app.routes import ping
from app.routes.recipe import discover
from app.search_controller import SearchController

logging.basicConfig(level=LOG_LEVEL)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    TheMealDB 용 HTTP 클라이언트와 검색 컨트롤러를 만들고, 종료 시 클라이언트를 닫습니다.
    """
    async with httpx.AsyncClient(base_url=MEALDB_BASE_URL, timeout=REQUEST_TIMEOUT) as client:
        app.state.search_controller = SearchController(client)
        logging.info(f"Using recipe directory at {MEALDB_BASE_URL}")
        yield


app = FastAPI(
    title="MadRecipe API",
    description="Find delicious recipes instantly from the ingredients you have.",
    version="0.1.0",
    lifespan=lifespan,
)

# Public routes
app.include_router(ping.router)
app.include_router(discover.router)
