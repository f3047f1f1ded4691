from pydantic import BaseModel, Field, field_validator

# Rules file layouts this build knows how to read
SUPPORTED_RULES_VERSIONS = ("1.0",)


class ProjectRules(BaseModel):
    slug: str
    rules_version: str

    @field_validator("rules_version")
    @classmethod
    def check_supported_version(cls, v: str) -> str:
        if v not in SUPPORTED_RULES_VERSIONS:
            raise ValueError(
                f"Unsupported rules_version {v!r}; expected one of {', '.join(SUPPORTED_RULES_VERSIONS)}"
            )
        return v

class InvoicesRules(BaseModel):
    listing_path: str = Field(default="/dashboard/invoices", pattern=r"^/")
    customer_id_max_length: int = Field(default=64, ge=1)

class OpsRules(BaseModel):
    data_dir_required: bool = True
    required_env: list[str] = Field(default_factory=list)

class Rules(BaseModel):
    project: ProjectRules
    invoices: InvoicesRules = Field(default_factory=InvoicesRules)
    ops: OpsRules = Field(default_factory=OpsRules)
