from typing import List, Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "BOQ Estimator"
    COMPANY_NAME: str = "BOQ Estimator"
    CURRENCY_PREFIX: str = "Rs."

    # "degrade" returns the base result for an unrecognized variant,
    # "reject" raises UnknownVariantError
    UNKNOWN_VARIANT_POLICY: Literal["degrade", "reject"] = "degrade"

    FLOORING_WASTAGE_PCT: float = 0.10
    GST_RATE: float = 0.09      # charged once as SGST and once as CGST
    SQMT_RATE_FACTOR: float = 10.76

    CORS_ORIGINS: List[str] = ["*"]

    class Config:
        env_file = ".env"


settings = Settings()
