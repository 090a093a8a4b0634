import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from groupledger.core.config import settings
from groupledger.core.logging import setup_logging
from groupledger.db.session import Base, engine
from groupledger.models import user, group, participant, expense, expense_split  # noqa: F401  register tables
from groupledger.api.v1.routes.system import router as system_router
from groupledger.api.v1.routes.user import router as user_router
from groupledger.api.v1.routes.group import router as group_router
from groupledger.api.v1.routes.participant import router as participant_router
from groupledger.api.v1.routes.expense import router as expense_router
from groupledger.api.v1.routes.balances import router as balance_router

setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database ready at %s", engine.url.render_as_string(hide_password=True))
    yield
    await engine.dispose()

app = FastAPI(title="Group Ledger Backend", lifespan=lifespan)

@app.get("/")
async def root():
    return {"message": "Group Ledger Backend is live"}

app.include_router(system_router, prefix="/api/v1/system")
app.include_router(user_router, prefix="/api/v1/users")
app.include_router(group_router, prefix="/api/v1/groups")
app.include_router(participant_router, prefix="/api/v1/participants")
app.include_router(expense_router, prefix="/api/v1/expense")
app.include_router(balance_router, prefix="/api/v1/balance")
