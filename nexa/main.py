# nexa/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from nexa.core.config import get_settings
from nexa.core.database import Base, Store, engine, get_store
from nexa.core.logs import configure_logging
from nexa.ticket import models  # noqa: F401  registers the tickets table
from nexa.ticket.routes import router as ticket_router

settings = get_settings()
configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    try:
        Base.metadata.create_all(bind=engine)
        logger.info("Conectado ao banco de dados")
    except SQLAlchemyError:
        logger.exception("Erro ao conectar ao banco de dados")
    yield
    engine.dispose()


app = FastAPI(
    title=settings.APP_NAME,
    description=settings.APP_DESC,
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

origins = settings.cors_origins

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    # credentials cannot be combined with a wildcard origin
    allow_credentials=origins != ["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(ticket_router, prefix=settings.API_PREFIX)

@app.get("/health", tags=["Health"])
def health():
    return {"status": "ok"}


@app.get("/ready", tags=["Health"])
def ready(store: Store = Depends(get_store)):
    try:
        store.ping()
    except SQLAlchemyError:
        logger.exception("Ready check failed")
        return JSONResponse(status_code=503, content={"status": "not ready", "database": "unreachable"})
    return {"status": "ready", "database": "connected"}
