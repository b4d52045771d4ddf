from fastapi import FastAPI
from contextlib import asynccontextmanager
from account_service.core.logger import configure_logging
from account_service.api.errors import register_exception_handlers
from account_service.api.v1 import accounts as accounts_router
from account_service.core.db import engine, Base

API_PREFIX = "/api/v1"


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    try:
        yield
    finally:
        await engine.dispose()


app = FastAPI(title="Account service", lifespan=lifespan)

register_exception_handlers(app)
app.include_router(accounts_router.router, prefix=API_PREFIX)


def serve() -> None:
    import uvicorn

    uvicorn.run("account_service.main:app", host="0.0.0.0", port=8000)
