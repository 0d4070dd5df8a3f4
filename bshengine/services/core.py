from __future__ import annotations

from enum import StrEnum

from bshengine.client.bsh_client import BshClient
from bshengine.services.entities import EntityService


class CoreEntities(StrEnum):
    BshEntities = "BshEntities"
    BshSchemas = "BshSchemas"
    BshDataSources = "BshDataSources"
    BshTypes = "BshTypes"
    BshUsers = "BshUsers"
    BshPolicies = "BshPolicies"
    BshRoles = "BshRoles"
    BshFiles = "BshFiles"
    BshConfigurations = "BshConfigurations"
    BshEmails = "BshEmails"
    BshEmailTemplates = "BshEmailTemplates"
    BshEventLogs = "BshEventLogs"
    BshTriggers = "BshTriggers"
    BshTriggerInstances = "BshTriggerInstances"
    BshApiKeys = "BshApiKeys"
    BshPlugins = "BshPlugins"


class CoreEntityServices:
    """Entity services for the engine's built-in entities, by attribute or by name."""

    def __init__(self, client: BshClient) -> None:
        self._client = client

    def __getattr__(self, name: str) -> EntityService:
        try:
            entity = CoreEntities(name)
        except ValueError:
            raise AttributeError(name) from None
        return EntityService(self._client, entity.value)

    def __getitem__(self, name: str | CoreEntities) -> EntityService:
        try:
            entity = CoreEntities(name)
        except ValueError:
            raise KeyError(name) from None
        return EntityService(self._client, entity.value)

    def __dir__(self) -> list[str]:
        return [entity.value for entity in CoreEntities]
