from pydantic import BaseModel, Field, field_validator

OPEN_PROPS_STYLESHEETS = [
    "https://unpkg.com/open-props",
    "https://unpkg.com/open-props/normalize.min.css",
]


class SiteInfo(BaseModel):
    title: str = "Praxis"
    description: str = "A prayer app for Orthodox Christians."
    lang: str = "en"


class MountConfig(BaseModel):
    element_id: str = "app"

    @field_validator("element_id")
    @classmethod
    def element_id_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("element_id must not be blank")
        return v.strip()


class LoggingConfig(BaseModel):
    level: str = "INFO"

    @field_validator("level")
    @classmethod
    def level_is_known(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {v}")
        return level


class SiteConfig(BaseModel):
    site: SiteInfo = Field(default_factory=SiteInfo)
    mount: MountConfig = Field(default_factory=MountConfig)
    stylesheets: list[str] = Field(default_factory=lambda: list(OPEN_PROPS_STYLESHEETS))
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
