import logging
from typing import Any, Dict, List, Optional

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import AsyncMongoClient

from formapi.config import GlobalConfig

logger = logging.getLogger(__name__)


def _object_id(record_id: str) -> Optional[ObjectId]:
    try:
        return ObjectId(record_id)
    except (InvalidId, TypeError):
        return None


def _to_record(document: Dict[str, Any]) -> Dict[str, Any]:
    record = {k: v for k, v in document.items() if k != "_id"}
    record["id"] = str(document["_id"])
    return record


class FormDataGateway:
    """Access to the single collection of form submissions.

    Documents are stored with their camelCase field names; the store's
    ``_id`` is exposed to callers as a string ``id``.
    """

    def __init__(self, collection, client=None):
        self.collection = collection
        # only set when the gateway created the client and must close it
        self._client = client

    async def ping(self) -> None:
        await self.collection.database.command("ping")

    async def insert(self, record: Dict[str, Any]) -> str:
        document = {k: v for k, v in record.items() if k not in ("id", "_id")}
        result = await self.collection.insert_one(document)
        return str(result.inserted_id)

    async def find_all(self) -> List[Dict[str, Any]]:
        documents = await self.collection.find({}).to_list(length=None)
        return [_to_record(d) for d in documents]

    async def find_by_id(self, record_id: str) -> Optional[Dict[str, Any]]:
        oid = _object_id(record_id)
        if oid is None:
            return None
        document = await self.collection.find_one({"_id": oid})
        return _to_record(document) if document else None

    async def update(self, record_id: str, record: Dict[str, Any]) -> bool:
        oid = _object_id(record_id)
        if oid is None:
            return False
        fields = {k: v for k, v in record.items() if k not in ("id", "_id")}
        result = await self.collection.update_one({"_id": oid}, {"$set": fields})
        return result.matched_count > 0

    async def delete(self, record_id: str) -> bool:
        oid = _object_id(record_id)
        if oid is None:
            return False
        result = await self.collection.delete_one({"_id": oid})
        return result.deleted_count > 0

    async def close(self) -> None:
        if self._client is not None:
            await self._client.close()
            self._client = None


def build_gateway(config: GlobalConfig) -> FormDataGateway:
    client = AsyncMongoClient(
        config.MONGODB_URL, serverSelectionTimeoutMS=config.MONGODB_TIMEOUT_MS
    )
    collection = client[config.MONGODB_DATABASE][config.MONGODB_COLLECTION]
    logger.info(
        f"Using MongoDB collection '{config.MONGODB_DATABASE}.{config.MONGODB_COLLECTION}'"
    )
    return FormDataGateway(collection, client=client)
