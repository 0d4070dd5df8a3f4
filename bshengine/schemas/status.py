from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

ServiceStatusType = Literal["OK", "WARNING", "ERROR"]
EngineStatusType = Literal["HEALTHY", "DEGRADED", "UNHEALTHY"]


class ServiceStatus(BaseModel):
    name: str
    status: ServiceStatusType
    message: str = ""
    details: dict[str, Any] | None = None


class EngineStatus(BaseModel):
    status: EngineStatusType
    version: str
    environment: str
    timestamp: dict[str, str] | str | None = None
    services: list[ServiceStatus] = Field(default_factory=list)


class HealthCheckData(BaseModel):
    status: EngineStatusType
    version: str
    timestamp: dict[str, str] | str | None = None


class CacheInfo(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    name: str
    estimated_size: int = Field(default=0, alias="estimatedSize")
    request_count: int = Field(default=0, alias="requestCount")
    hit_count: int = Field(default=0, alias="hitCount")
    hit_rate: float = Field(default=0.0, alias="hitRate")
    miss_count: int = Field(default=0, alias="missCount")
    miss_rate: float = Field(default=0.0, alias="missRate")
    eviction_count: int = Field(default=0, alias="evictionCount")


class ApiKeyForm(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str
    description: str | None = None
    duration: int
    type: Literal["PERSONAL", "MACHINE"] = "PERSONAL"
    # "EntityName:ACTION" pairs
    scopes: list[str] = Field(default_factory=list)
