EMPTY_INPUT_MESSAGE = "Please enter at least one ingredient"
NO_RESULTS_MESSAGE = "No recipes found for those ingredients. Try different words."
NETWORK_ERROR_MESSAGE = "An error occurred while fetching recipes. Check your network."
SEARCH_IN_PROGRESS_MESSAGE = "A search is already in progress. Please wait for it to finish."


class RecipeSearchError(Exception):
    """
    레시피 검색 파이프라인에서 발생하는 모든 오류의 기본 클래스입니다.
    message 는 사용자에게 그대로 보여줄 수 있는 문구입니다.
    """

    default_message = NETWORK_ERROR_MESSAGE

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class EmptyInputError(RecipeSearchError):
    default_message = EMPTY_INPUT_MESSAGE


class SearchNetworkError(RecipeSearchError):
    default_message = NETWORK_ERROR_MESSAGE


class FetchError(RecipeSearchError):
    default_message = NETWORK_ERROR_MESSAGE


class SearchInProgressError(RecipeSearchError):
    default_message = SEARCH_IN_PROGRESS_MESSAGE
