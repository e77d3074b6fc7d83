# siteprofit/core/config.py
# -----------------------------------------------------------------------------
# Global settings (pydantic-settings v2)
# - reads .env and OS environment variables into a Settings object
# - benchmark thresholds are exposed as an immutable BenchmarkDefinition
# -----------------------------------------------------------------------------
from pydantic_settings import BaseSettings, SettingsConfigDict

from siteprofit.schemas.benchmark import BenchmarkDefinition, PaybackBenchmark


class Settings(BaseSettings):
    # basics
    APP_NAME: str = "Restaurant Real Estate Profitability Calculator"
    ENV: str = "dev"

    # logging
    LOG_DIR: str = "./logs"
    LOG_LEVEL: str = "INFO"
    LOG_TO_FILE: bool = False

    # ROI is computed but hidden in the results panel by default
    SHOW_ROI: bool = False

    # unit-economics benchmarks
    BENCHMARK_SALES_TO_INVESTMENT_RATIO: float = 1.5
    BENCHMARK_PAYBACK_IDEAL: float = 5
    BENCHMARK_PAYBACK_MAX: float = 7
    BENCHMARK_ROI: float = 20
    BENCHMARK_RENT_FACTOR: float = 10

    model_config = SettingsConfigDict(
        env_file=".env", extra="ignore"  # ignore unrelated keys in .env
    )

    def benchmarks(self) -> BenchmarkDefinition:
        return BenchmarkDefinition(
            sales_to_investment_ratio=self.BENCHMARK_SALES_TO_INVESTMENT_RATIO,
            payback_period=PaybackBenchmark(
                ideal=self.BENCHMARK_PAYBACK_IDEAL, max=self.BENCHMARK_PAYBACK_MAX
            ),
            roi=self.BENCHMARK_ROI,
            rent_factor=self.BENCHMARK_RENT_FACTOR,
        )


settings = Settings()
