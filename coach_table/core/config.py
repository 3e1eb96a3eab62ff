from pydantic import PositiveInt
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    DATATABLE_PAGE_SIZE: PositiveInt = 10
    DATATABLE_ROW_KEY: str = "id"
    DATATABLE_EMPTY_MESSAGE: str = "No data available"
    DATATABLE_SEARCH_PLACEHOLDER: str = "Search..."
    DATATABLE_PAGINATION_SIBLING_COUNT: int = 1
    DATATABLE_WARN_ON_ID_COLLISIONS: bool = True


settings = Settings()
