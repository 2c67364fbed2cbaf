from decimal import Decimal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # App
    debug: bool = False
    log_level: str = "INFO"

    # Scenario ladder (monthly payment tiers above the current plan)
    scenario_presets: list[Decimal] = [Decimal("2500"), Decimal("3000"), Decimal("4000")]

    # Used when a budget has no minimum loan payment configured
    default_minimum_payment: Decimal = Decimal("1200")

    # Payoff impact baseline = monthly interest + this cushion
    impact_baseline_cushion: Decimal = Decimal("50")

    # Quick amounts offered for a lump payment
    lump_payment_presets: list[Decimal] = [
        Decimal("500"),
        Decimal("1000"),
        Decimal("1500"),
        Decimal("2000"),
        Decimal("3000"),
        Decimal("5000"),
    ]


settings = Settings()
