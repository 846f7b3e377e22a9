"""
GraphQL schema for automobiles.

Resolvers pull the AutomobileService out of the request context and pass
their arguments through unchanged. Each store call runs in the threadpool,
so the event loop never waits on the database. Store errors are left to
strawberry, which reports them in the response's errors array.
"""
from typing import List, Optional

import strawberry
from fastapi import Depends
from starlette.concurrency import run_in_threadpool
from strawberry.fastapi import GraphQLRouter
from strawberry.types import Info

from ..core.config import settings
from ..schemas import automobile_schema
from ..services.automobile_service import AutomobileService, get_automobile_service


@strawberry.type(name="Automobile")
class AutomobileType:
    id: strawberry.ID
    make: Optional[str] = None
    model: Optional[str] = None
    year: Optional[int] = None
    vin: Optional[str] = None

    @classmethod
    def from_record(cls, record: Optional[automobile_schema.Automobile]) -> Optional["AutomobileType"]:
        if record is None:
            return None
        return cls(
            id=strawberry.ID(str(record.id)),
            make=record.make,
            model=record.model,
            year=record.year,
            vin=record.vin,
        )


def _service(info: Info) -> AutomobileService:
    return info.context["service"]


@strawberry.type
class Query:
    @strawberry.field
    async def automobiles(self, info: Info) -> List[AutomobileType]:
        records = await run_in_threadpool(_service(info).list_all)
        return [AutomobileType.from_record(record) for record in records]

    @strawberry.field
    async def automobile(self, info: Info, id: strawberry.ID) -> Optional[AutomobileType]:
        record = await run_in_threadpool(_service(info).get_by_id, int(id))
        return AutomobileType.from_record(record)


@strawberry.type
class Mutation:
    @strawberry.mutation
    async def add_automobile(
        self,
        info: Info,
        make: Optional[str] = None,
        model: Optional[str] = None,
        year: Optional[int] = None,
        vin: Optional[str] = None,
    ) -> AutomobileType:
        record = await run_in_threadpool(_service(info).create, make, model, year, vin)
        return AutomobileType.from_record(record)

    @strawberry.mutation
    async def update_automobile(
        self,
        info: Info,
        id: strawberry.ID,
        make: Optional[str] = None,
        model: Optional[str] = None,
        year: Optional[int] = None,
        vin: Optional[str] = None,
    ) -> Optional[AutomobileType]:
        record = await run_in_threadpool(_service(info).update, int(id), make, model, year, vin)
        return AutomobileType.from_record(record)

    @strawberry.mutation
    async def delete_automobile(self, info: Info, id: strawberry.ID) -> str:
        return await run_in_threadpool(_service(info).delete_by_id, int(id))


schema = strawberry.Schema(query=Query, mutation=Mutation)


async def get_context(service: AutomobileService = Depends(get_automobile_service)):
    return {"service": service}


def create_graphql_router() -> GraphQLRouter:
    return GraphQLRouter(
        schema,
        context_getter=get_context,
        graphql_ide="graphiql" if settings.GRAPHIQL else None,
    )
