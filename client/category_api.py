from client.api_client import ApiClient, ApiError
from models.category import Category, CreateDraft, Draft, EditDraft
from utils.constants import CATEGORIES_PATH, category_path


class CategoryAPI:
    """REST access to the category collection resource."""

    def __init__(self, api: ApiClient):
        self._api = api

    def get_all(self) -> list[Category]:
        """Full collection in server order. Raises ApiError or ValueError."""
        data = self._api.get_json(CATEGORIES_PATH)
        if not isinstance(data, list):
            raise ApiError("GET", CATEGORIES_PATH, 200, detail="expected a JSON array")
        return [Category.from_json(item) for item in data]

    def create(self, draft: CreateDraft) -> None:
        self._api.request("POST", CATEGORIES_PATH, json=draft.body())

    def update(self, draft: EditDraft) -> None:
        self._api.request("PUT", category_path(draft.id), json=draft.body())

    def save(self, draft: Draft) -> None:
        if isinstance(draft, EditDraft):
            self.update(draft)
        else:
            self.create(draft)

    def delete(self, category_id) -> None:
        self._api.request("DELETE", category_path(category_id))
