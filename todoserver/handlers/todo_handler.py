import asyncio

from mangum import Mangum

from todoserver.config import Settings
from todoserver.logging_config import configure_logging
from todoserver.main import create_app
from todoserver.repositories.factory import build_store

settings = Settings.from_env()
configure_logging(settings.log_level)

store = build_store(settings)


async def _prepare_store():
    await store.create_schema()
    # pooled connections belong to this loop, not the invocation loop
    await store.close()

# once per cold start instead of around every invocation
asyncio.run(_prepare_store())

app = create_app(store=store, settings=settings)

handler = Mangum(app, lifespan="off")
