from fastapi import Request

from app.search_controller import SearchController


def get_search_controller(request: Request) -> SearchController:
    return request.app.state.search_controller
