"""
Конфигурация приложения Ethereum Block Explorer
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Настройки приложения"""

    # Общие настройки
    PROJECT_NAME: str = "Ethereum Block Explorer"
    VERSION: str = "0.1.0"
    API_V1_STR: str = "/api"

    # Ethereum JSON-RPC настройки
    ETH_RPC_API_KEY: str = ""
    ETH_RPC_URL: str = ""
    ETH_RPC_TIMEOUT: int = 30

    # Начальная загрузка главной страницы
    RECENT_BLOCKS_COUNT: int = 20
    RECENT_TRANSACTIONS_COUNT: int = 20
    LOAD_ON_STARTUP: bool = True

    # API настройки
    MAX_BLOCKS_PER_PAGE: int = 50
    MAX_TRANSACTIONS_PER_PAGE: int = 100

    # CORS настройки
    BACKEND_CORS_ORIGINS: list[str] = ["http://localhost:8000"]

    # Debug режим
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = True

    @property
    def rpc_url(self) -> str:
        """URL узла: явный ETH_RPC_URL или Infura mainnet по ключу"""
        if self.ETH_RPC_URL:
            return self.ETH_RPC_URL
        return f"https://mainnet.infura.io/v3/{self.ETH_RPC_API_KEY}"


# Глобальный экземпляр настроек
settings = Settings()
