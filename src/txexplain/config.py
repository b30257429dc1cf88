import logging

from pydantic_settings import BaseSettings

from txexplain.domain.enums import LedgerFamily, ledger_family


class Settings(BaseSettings):
    chain: str = "arbitrum"
    evm_fallback_symbol: str = "tokens"
    evm_fallback_decimals: int = 18
    object_fallback_symbol: str = "coins"
    object_fallback_decimals: int = 9
    log_level: str = "INFO"
    debug: bool = False

    def fallback_symbol_for(self, chain: str) -> str:
        if ledger_family(chain) == LedgerFamily.OBJECT:
            return self.object_fallback_symbol
        return self.evm_fallback_symbol

    def fallback_decimals_for(self, chain: str) -> int:
        if ledger_family(chain) == LedgerFamily.OBJECT:
            return self.object_fallback_decimals
        return self.evm_fallback_decimals

    class Config:
        env_file = ".env"
        env_prefix = "TXEXPLAIN_"


def configure_logging(settings: Settings) -> None:
    level = logging.DEBUG if settings.debug else getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger("txexplain").setLevel(level)


settings = Settings()
