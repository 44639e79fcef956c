"""Store for the landlord's property portfolio."""

from leaseify.application.schemas.records import PropertyRecord
from leaseify.application.services.resource_api import PropertyApi
from leaseify.application.state.resource_store import OperationResult, ResourceStore


class PropertyStore(ResourceStore[PropertyRecord]):
    name = "properties"

    def __init__(self, api: PropertyApi):
        super().__init__(api)

    async def fetch_properties(
        self, page: int = 1, limit: int = 9
    ) -> OperationResult[list[PropertyRecord]]:
        return await self.fetch_all(page=page, limit=limit)
